"""Result data structures returned to the rollout orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubegen.models.workloads import ReplicationController, Scale


@dataclass(frozen=True)
class Classification:
    """Old generations of a Deployment.

    ``old_all`` holds every old controller found; ``old_with_pods`` is the
    subset whose selector still matches at least one live pod.  Both are
    deduplicated by controller name and sorted by name.
    """

    old_with_pods: tuple[ReplicationController, ...] = ()
    old_all: tuple[ReplicationController, ...] = ()

    @property
    def old_with_pods_names(self) -> set[str]:
        return {rc.name for rc in self.old_with_pods}

    @property
    def old_all_names(self) -> set[str]:
        return {rc.name for rc in self.old_all}


@dataclass(frozen=True)
class GenerationSummary:
    """One controller as reported in a rollout status."""

    name: str
    revision: int
    replicas: int
    has_pods: bool = True


@dataclass
class RolloutStatus:
    """Point-in-time view of a Deployment's generations."""

    deployment: str
    namespace: str
    new: GenerationSummary | None
    old: list[GenerationSummary] = field(default_factory=list)
    total_replicas: int = 0
    ready_replicas: int = 0
    min_ready_seconds: int = 0
    scale: Scale | None = None
