"""Tests for kubegen's logging setup."""

from __future__ import annotations

import json
import logging
from unittest.mock import AsyncMock

import pytest

from kubegen.classifier import classify
from kubegen.cluster.kubernetes import KubernetesLister
from kubegen.errors import ListingError
from kubegen.models.workloads import Deployment, PodTemplate, ReplicationController
from kubegen.observability.logging import ROOT_LOGGER, get_logger, setup_logging


def _make_deployment() -> Deployment:
    return Deployment(
        name="web",
        namespace="default",
        selector={"app": "web"},
        template=PodTemplate(labels={"app": "web"}, spec={"containers": [{"name": "web", "image": "nginx"}]}),
    )


class TestLibraryUse:
    async def test_classify_writes_nothing_without_setup(self, capsys: pytest.CaptureFixture[str]) -> None:
        old = ReplicationController(
            name="web-1",
            namespace="default",
            selector={"app": "web"},
            template=PodTemplate(labels={"app": "web"}),
            labels={"app": "web"},
        )
        lister = AsyncMock()
        lister.list_pods.return_value = []
        lister.list_controllers.return_value = [old]
        result = await classify(_make_deployment(), lister)
        assert result.old_all_names == {"web-1"}
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    async def test_warnings_go_through_stdlib_logging(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        get_logger("test").warning("listing_slow", namespace="default")
        assert capsys.readouterr().out == ""
        assert [r.name for r in caplog.records] == [f"{ROOT_LOGGER}.test"]
        assert json.loads(caplog.records[0].getMessage())["event"] == "listing_slow"

    def test_library_has_null_handler(self) -> None:
        handlers = logging.getLogger(ROOT_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestSetupLogging:
    def test_json_lines_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("debug")
        get_logger("test").debug("controllers_classified", old=2)
        captured = capsys.readouterr()
        assert captured.out == ""
        line = json.loads(captured.err.strip())
        assert line["event"] == "controllers_classified"
        assert line["component"] == "test"
        assert line["level"] == "debug"
        assert line["old"] == 2
        assert "ts" in line

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("warning")
        log = get_logger("test")
        log.info("ignored")
        log.warning("kept")
        lines = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        assert [line["event"] for line in lines] == ["kept"]

    def test_repeated_setup_does_not_duplicate(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        setup_logging("info")
        get_logger("test").info("once")
        assert len(capsys.readouterr().err.splitlines()) == 1

    async def test_listing_failure_logged_once_configured(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging("info")
        core_v1 = AsyncMock()
        core_v1.list_namespaced_pod.side_effect = ConnectionError("reset")
        with pytest.raises(ListingError):
            await KubernetesLister(core_v1).list_pods("prod", {"app": "web"})
        line = json.loads(capsys.readouterr().err.strip())
        assert line["event"] == "pod_list_failed"
        assert line["namespace"] == "prod"
