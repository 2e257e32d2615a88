"""Tests for KUBEGEN_* environment configuration."""

from __future__ import annotations

import pytest

from kubegen.config import load_config
from kubegen.models.workloads import DEFAULT_UNIQUE_LABEL_KEY


class TestLoadConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in (
            "NAMESPACE",
            "KUBE_CONTEXT",
            "IN_CLUSTER",
            "REQUEST_TIMEOUT",
            "UNIQUE_LABEL_KEY",
            "MIN_READY_SECONDS",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(f"KUBEGEN_{key}", raising=False)
        config = load_config()
        assert config.cluster.namespace == "default"
        assert config.cluster.in_cluster is False
        assert config.cluster.request_timeout == 30
        assert config.rollout.unique_label_key == DEFAULT_UNIQUE_LABEL_KEY
        assert config.rollout.min_ready_seconds == 0
        assert config.log.level == "info"

    def test_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEGEN_NAMESPACE", "prod")
        monkeypatch.setenv("KUBEGEN_IN_CLUSTER", "yes")
        monkeypatch.setenv("KUBEGEN_UNIQUE_LABEL_KEY", "pod-template-hash")
        monkeypatch.setenv("KUBEGEN_MIN_READY_SECONDS", "15")
        monkeypatch.setenv("KUBEGEN_LOG_LEVEL", "DEBUG")
        config = load_config()
        assert config.cluster.namespace == "prod"
        assert config.cluster.in_cluster is True
        assert config.rollout.unique_label_key == "pod-template-hash"
        assert config.rollout.min_ready_seconds == 15
        assert config.log.level == "debug"

    @pytest.mark.parametrize(("raw", "expected"), [("0", 1), ("1000", 300), ("45", 45)])
    def test_request_timeout_clamped(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
        monkeypatch.setenv("KUBEGEN_REQUEST_TIMEOUT", raw)
        assert load_config().cluster.request_timeout == expected

    def test_negative_min_ready_clamped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEGEN_MIN_READY_SECONDS", "-10")
        assert load_config().rollout.min_ready_seconds == 0

    @pytest.mark.parametrize("key", ["", "has space", "Upper.Prefix/name", "trailing-/"])
    def test_invalid_label_key(self, monkeypatch: pytest.MonkeyPatch, key: str) -> None:
        monkeypatch.setenv("KUBEGEN_UNIQUE_LABEL_KEY", key)
        with pytest.raises(ValueError, match="Invalid label key"):
            load_config()

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KUBEGEN_LOG_LEVEL", "verbose")
        with pytest.raises(ValueError, match="Invalid log level"):
            load_config()
