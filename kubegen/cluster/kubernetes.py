"""Lister backed by the kubernetes-asyncio client.

Also converts API objects into kubegen's model dataclasses.  Pod specs are
kept as the client's ``to_dict()`` form, so templates compared against each
other must both come through this module.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from kubegen.errors import ListingError
from kubegen.models.workloads import (
    DEFAULT_UNIQUE_LABEL_KEY,
    Deployment,
    Pod,
    PodCondition,
    PodTemplate,
    ReplicationController,
)
from kubegen.observability.logging import get_logger
from kubegen.template.labels import format_selector, selector_matches

_log = get_logger("cluster.kubernetes")


def _to_dict(obj: Any) -> dict[str, Any]:
    if obj is None:
        return {}
    if isinstance(obj, dict):
        return obj
    return obj.to_dict()


def template_from_api(template: Any) -> PodTemplate:
    """Convert a ``V1PodTemplateSpec`` into a PodTemplate."""
    if template is None:
        return PodTemplate()
    metadata = template.metadata
    return PodTemplate(
        labels=dict((metadata.labels if metadata else None) or {}),
        annotations=dict((metadata.annotations if metadata else None) or {}),
        spec=_to_dict(template.spec),
    )


def controller_from_api(obj: Any) -> ReplicationController:
    """Convert a ``V1ReplicationController`` into a ReplicationController."""
    metadata = obj.metadata
    spec = obj.spec
    return ReplicationController(
        name=metadata.name,
        namespace=metadata.namespace or "",
        selector=dict(spec.selector or {}),
        template=template_from_api(spec.template),
        replicas=spec.replicas or 0,
        labels=dict(metadata.labels or {}),
        annotations=dict(metadata.annotations or {}),
    )


def pod_from_api(obj: Any) -> Pod:
    """Convert a ``V1Pod`` into a Pod."""
    metadata = obj.metadata
    status = obj.status
    conditions = tuple(
        PodCondition(
            type=c.type,
            status=c.status,
            last_transition_time=c.last_transition_time,
        )
        for c in ((status.conditions if status else None) or [])
    )
    return Pod(
        name=metadata.name,
        namespace=metadata.namespace or "",
        labels=dict(metadata.labels or {}),
        conditions=conditions,
    )


def deployment_from_api(
    obj: Any,
    unique_label_key: str = DEFAULT_UNIQUE_LABEL_KEY,
) -> Deployment:
    """Convert an apps/v1 ``V1Deployment`` into a Deployment.

    Only ``spec.selector.match_labels`` is honoured; selector expressions are
    not supported.
    """
    metadata = obj.metadata
    spec = obj.spec
    status = obj.status
    selector = (spec.selector.match_labels if spec.selector else None) or {}
    created_at: datetime | None = metadata.creation_timestamp
    return Deployment(
        name=metadata.name,
        namespace=metadata.namespace or "",
        selector=dict(selector),
        template=template_from_api(spec.template),
        replicas=spec.replicas if spec.replicas is not None else 1,
        unique_label_key=unique_label_key,
        min_ready_seconds=spec.min_ready_seconds or 0,
        status_replicas=(status.replicas if status else None) or 0,
        created_at=created_at,
    )


class KubernetesLister:
    """Lister over ``CoreV1Api``.

    Args:
        core_v1:         A kubernetes_asyncio ``CoreV1Api``.
        request_timeout: Per-request timeout in seconds passed to the client.
    """

    def __init__(self, core_v1: Any, request_timeout: float = 30.0) -> None:
        self._core_v1 = core_v1
        self._request_timeout = request_timeout

    async def list_pods(self, namespace: str, selector: Mapping[str, str]) -> Sequence[Pod]:
        try:
            result = await self._core_v1.list_namespaced_pod(
                namespace,
                label_selector=format_selector(selector),
                _request_timeout=self._request_timeout,
            )
        except Exception as exc:
            _log.warning("pod_list_failed", namespace=namespace, error=str(exc))
            raise ListingError("pods", namespace, exc) from exc
        pods = [pod_from_api(item) for item in result.items or []]
        return [pod for pod in pods if selector_matches(selector, pod.labels)]

    async def list_controllers(
        self, namespace: str, selector: Mapping[str, str]
    ) -> Sequence[ReplicationController]:
        # No server-side join from a pod selector to controllers: list the
        # namespace and filter on the controller's own labels.
        try:
            result = await self._core_v1.list_namespaced_replication_controller(
                namespace,
                _request_timeout=self._request_timeout,
            )
        except Exception as exc:
            _log.warning("controller_list_failed", namespace=namespace, error=str(exc))
            raise ListingError("replicationcontrollers", namespace, exc) from exc
        controllers = [controller_from_api(item) for item in result.items or []]
        return [rc for rc in controllers if selector_matches(selector, rc.labels)]
