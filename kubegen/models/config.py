"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubegen.models.workloads import DEFAULT_UNIQUE_LABEL_KEY


@dataclass
class ClusterConfig:
    """Kubernetes API access configuration."""

    namespace: str = "default"
    kube_context: str = ""
    in_cluster: bool = False
    request_timeout: int = 30


@dataclass
class RolloutConfig:
    """Defaults applied to Deployments converted from the API."""

    unique_label_key: str = DEFAULT_UNIQUE_LABEL_KEY
    min_ready_seconds: int = 0


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class KubeGenConfig:
    """Top-level kubegen configuration."""

    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    rollout: RolloutConfig = field(default_factory=RolloutConfig)
    log: LogConfig = field(default_factory=LogConfig)
