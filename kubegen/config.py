"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re

from kubegen.models.config import ClusterConfig, KubeGenConfig, LogConfig, RolloutConfig
from kubegen.models.workloads import DEFAULT_UNIQUE_LABEL_KEY

# Optional DNS-subdomain prefix, then a name segment of at most 63 chars.
_LABEL_KEY_RE = re.compile(
    r"^([a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*/)?"
    r"[A-Za-z0-9]([-A-Za-z0-9_.]{0,61}[A-Za-z0-9])?$"
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEGEN_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_label_key(value: str) -> str:
    prefix, _, _ = value.rpartition("/")
    if len(prefix) > 253 or not _LABEL_KEY_RE.match(value):
        raise ValueError(f"Invalid label key: {value}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def load_config() -> KubeGenConfig:
    """Load configuration from KUBEGEN_* environment variables."""
    return KubeGenConfig(
        cluster=ClusterConfig(
            namespace=_env("NAMESPACE", "default"),
            kube_context=_env("KUBE_CONTEXT", ""),
            in_cluster=_env_bool("IN_CLUSTER", False),
            request_timeout=_env_int("REQUEST_TIMEOUT", 30, min_val=1, max_val=300),
        ),
        rollout=RolloutConfig(
            unique_label_key=_validate_label_key(_env("UNIQUE_LABEL_KEY", DEFAULT_UNIQUE_LABEL_KEY)),
            min_ready_seconds=_env_int("MIN_READY_SECONDS", 0, min_val=0),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
