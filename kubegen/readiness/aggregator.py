"""Ready-pod aggregation across ReplicationControllers.

A pod counts as ready when its Ready condition is "True" and it has been so
for at least ``min_ready_seconds``.  A Ready condition without a recorded
transition time satisfies the stability window trivially: such pods went
ready before any timestamp was kept, and tightening this would change
observable rollout timing.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime, timedelta

from kubegen.cluster.lister import Lister
from kubegen.errors import KubeGenError, ListingError
from kubegen.models.workloads import POD_READY, Pod, PodCondition, ReplicationController
from kubegen.observability.logging import get_logger
from kubegen.template.labels import selector_matches

_log = get_logger("readiness")

# minReadySeconds is an int32 in the API.
_MAX_MIN_READY_SECONDS = 2**31 - 1


def _is_zero(ts: datetime | None) -> bool:
    return ts is None or ts.replace(tzinfo=None) == datetime.min


def _as_utc(ts: datetime) -> datetime:
    return ts.replace(tzinfo=UTC) if ts.tzinfo is None else ts


def _ready_conditions(pod: Pod) -> list[PodCondition]:
    return [c for c in pod.conditions if c.type == POD_READY]


def is_pod_ready(pod: Pod) -> bool:
    """True when the pod has a Ready condition with status "True"."""
    return any(c.status == "True" for c in _ready_conditions(pod))


def _condition_stable(condition: PodCondition, min_ready_seconds: int, now: datetime) -> bool:
    ts = condition.last_transition_time
    if min_ready_seconds <= 0 or ts is None or _is_zero(ts):
        return True
    window = timedelta(seconds=min(min_ready_seconds, _MAX_MIN_READY_SECONDS))
    try:
        deadline = _as_utc(ts) + window
    except OverflowError:
        return False
    return deadline <= _as_utc(now)


def count_ready_pods(pods: Iterable[Pod], min_ready_seconds: int, now: datetime) -> int:
    """Count pods that are ready and past the stability window at *now*."""
    ready = 0
    for pod in pods:
        if not is_pod_ready(pod):
            continue
        if any(_condition_stable(c, min_ready_seconds, now) for c in _ready_conditions(pod)):
            ready += 1
    return ready


def total_replicas(controllers: Iterable[ReplicationController]) -> int:
    """Sum of the desired replica counts of *controllers*."""
    return sum(rc.replicas for rc in controllers)


async def _pods_for(lister: Lister, controller: ReplicationController) -> list[Pod]:
    try:
        pods = await lister.list_pods(controller.namespace, controller.selector)
    except KubeGenError:
        raise
    except Exception as exc:
        raise ListingError("pods", controller.namespace, exc) from exc
    return [
        pod
        for pod in pods
        if pod.namespace == controller.namespace and selector_matches(controller.selector, pod.labels)
    ]


async def ready_count(
    lister: Lister,
    controllers: Sequence[ReplicationController],
    min_ready_seconds: int,
    now: datetime | None = None,
) -> int:
    """Return the number of ready pods selected by *controllers*.

    Pods are listed once per controller, concurrently.  The first listing
    failure cancels the listings still in flight and aborts the aggregation;
    partial sums are discarded.

    Raises:
        ListingError: a pod listing failed.
    """
    if not controllers:
        return 0
    now = now or datetime.now(tz=UTC)
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_pods_for(lister, rc)) for rc in controllers]
    except ExceptionGroup as eg:
        raise eg.exceptions[0]
    pod_lists = [task.result() for task in tasks]
    total = sum(count_ready_pods(pods, min_ready_seconds, now) for pods in pod_lists)
    _log.debug(
        "ready_pods_counted",
        controllers=len(controllers),
        pods=sum(len(pods) for pods in pod_lists),
        ready=total,
        min_ready_seconds=min_ready_seconds,
    )
    return total
