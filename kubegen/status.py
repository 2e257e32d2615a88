"""Rollout status summary composed from the classifier, ledger and aggregator."""

from __future__ import annotations

from datetime import datetime

from kubegen.classifier import classify, find_new
from kubegen.cluster.lister import Lister
from kubegen.ledger import revision
from kubegen.models.results import GenerationSummary, RolloutStatus
from kubegen.models.workloads import Deployment, Scale
from kubegen.readiness import ready_count, total_replicas


def scale_from_deployment(deployment: Deployment) -> Scale:
    """Return the scale view of *deployment*."""
    return Scale(
        name=deployment.name,
        namespace=deployment.namespace,
        spec_replicas=deployment.replicas,
        status_replicas=deployment.status_replicas,
        selector=dict(deployment.selector),
        created_at=deployment.created_at,
    )


async def rollout_status(
    deployment: Deployment,
    lister: Lister,
    min_ready_seconds: int | None = None,
    now: datetime | None = None,
) -> RolloutStatus:
    """Summarise the generations of *deployment*.

    Desired replicas are summed over the new and every old controller; ready
    pods are counted over the new controller and the old ones still running
    pods.  *min_ready_seconds* defaults to the Deployment's own.

    Raises:
        ListingError: a listing call failed.
        MalformedRevisionError: a controller carries an unparseable revision.
    """
    if min_ready_seconds is None:
        min_ready_seconds = deployment.min_ready_seconds

    new_rc = await find_new(deployment, lister)
    classification = await classify(deployment, lister)

    live = list(classification.old_with_pods)
    every = list(classification.old_all)
    if new_rc is not None:
        live.append(new_rc)
        every.append(new_rc)

    with_pods = classification.old_with_pods_names
    old = [
        GenerationSummary(
            name=rc.name,
            revision=revision(rc),
            replicas=rc.replicas,
            has_pods=rc.name in with_pods,
        )
        for rc in classification.old_all
    ]
    old.sort(key=lambda g: (g.revision, g.name))

    return RolloutStatus(
        deployment=deployment.name,
        namespace=deployment.namespace,
        new=(
            GenerationSummary(name=new_rc.name, revision=revision(new_rc), replicas=new_rc.replicas)
            if new_rc is not None
            else None
        ),
        old=old,
        total_replicas=total_replicas(every),
        ready_replicas=await ready_count(lister, live, min_ready_seconds, now),
        min_ready_seconds=min_ready_seconds,
        scale=scale_from_deployment(deployment),
    )
