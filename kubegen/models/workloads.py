"""Workload data structures: Deployments, ReplicationControllers and Pods.

All types are frozen.  kubegen never mutates an input object; helpers that
"change" a value return a new one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Label under which the template fingerprint is stamped when a Deployment
# does not name its own key.
DEFAULT_UNIQUE_LABEL_KEY = "deployment.kubernetes.io/podTemplateHash"

POD_READY = "Ready"


@dataclass(frozen=True)
class PodTemplate:
    """Pod template: metadata labels/annotations plus the pod spec.

    ``spec`` is the pod spec as a JSON-shaped mapping.  Templates converted by
    ``kubegen.cluster.kubernetes`` carry the client's ``to_dict()`` form
    (snake_case attribute names, e.g. ``empty_dir``); templates compared with
    each other must share one key style.
    """

    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    spec: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Deployment:
    """Declarative desired rollout.  Read-only input."""

    name: str
    namespace: str
    selector: dict[str, str]
    template: PodTemplate
    replicas: int = 1
    unique_label_key: str = DEFAULT_UNIQUE_LABEL_KEY
    min_ready_seconds: int = 0
    status_replicas: int = 0
    created_at: datetime | None = None


@dataclass(frozen=True)
class ReplicationController:
    """One pod generation.  ``name`` is the identity key within a namespace."""

    name: str
    namespace: str
    selector: dict[str, str]
    template: PodTemplate
    replicas: int = 0
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class PodCondition:
    """A pod status condition.

    ``status`` is the Kubernetes tri-state string: "True", "False" or "Unknown".
    ``last_transition_time`` is None when the API did not record one.
    """

    type: str
    status: str
    last_transition_time: datetime | None = None


@dataclass(frozen=True)
class Pod:
    """A pod as seen through a label-selected listing."""

    name: str
    namespace: str
    labels: dict[str, str] = field(default_factory=dict)
    conditions: tuple[PodCondition, ...] = ()


@dataclass(frozen=True)
class Scale:
    """Scale view of a Deployment."""

    name: str
    namespace: str
    spec_replicas: int
    status_replicas: int
    selector: dict[str, str] = field(default_factory=dict)
    created_at: datetime | None = None
