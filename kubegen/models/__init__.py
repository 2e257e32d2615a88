"""Core data structures for kubegen."""

from kubegen.models.config import KubeGenConfig
from kubegen.models.results import Classification, GenerationSummary, RolloutStatus
from kubegen.models.workloads import (
    DEFAULT_UNIQUE_LABEL_KEY,
    POD_READY,
    Deployment,
    Pod,
    PodCondition,
    PodTemplate,
    ReplicationController,
    Scale,
)

__all__ = [
    "Classification",
    "DEFAULT_UNIQUE_LABEL_KEY",
    "Deployment",
    "GenerationSummary",
    "KubeGenConfig",
    "POD_READY",
    "Pod",
    "PodCondition",
    "PodTemplate",
    "ReplicationController",
    "RolloutStatus",
    "Scale",
]
