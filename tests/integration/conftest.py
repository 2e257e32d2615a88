"""Shared fixtures for kubegen integration tests.

Provides a fixture-backed Lister and factories for a Deployment with several
generations, so the classifier, ledger and aggregator can be exercised
together without a Kubernetes cluster.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta

import pytest

from kubegen.classifier import new_template
from kubegen.ledger import REVISION_ANNOTATION
from kubegen.models.workloads import Deployment, Pod, PodCondition, PodTemplate, ReplicationController
from kubegen.template import selector_matches, stamp_fingerprint

HASH_KEY = "deployment.kubernetes.io/podTemplateHash"
NOW = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)


class FixtureLister:
    """Lister over fixed pods and controllers; records every call."""

    def __init__(self, pods: list[Pod], controllers: list[ReplicationController]) -> None:
        self.pods = pods
        self.controllers = controllers
        self.pod_calls: list[tuple[str, dict[str, str]]] = []
        self.controller_calls: list[tuple[str, dict[str, str]]] = []

    async def list_pods(self, namespace: str, selector: Mapping[str, str]) -> list[Pod]:
        self.pod_calls.append((namespace, dict(selector)))
        return [p for p in self.pods if p.namespace == namespace and selector_matches(selector, p.labels)]

    async def list_controllers(self, namespace: str, selector: Mapping[str, str]) -> list[ReplicationController]:
        self.controller_calls.append((namespace, dict(selector)))
        return [rc for rc in self.controllers if rc.namespace == namespace and selector_matches(selector, rc.labels)]


def make_template(image: str, app: str = "x") -> PodTemplate:
    return PodTemplate(
        labels={"app": app},
        spec={"containers": [{"name": app, "image": image, "ports": [{"containerPort": 8080}]}]},
    )


def make_deployment(image: str = "registry.local/x:2", replicas: int = 3, min_ready_seconds: int = 0) -> Deployment:
    return Deployment(
        name="x",
        namespace="default",
        selector={"app": "x"},
        template=make_template(image),
        replicas=replicas,
        unique_label_key=HASH_KEY,
        min_ready_seconds=min_ready_seconds,
        status_replicas=replicas,
        created_at=NOW - timedelta(days=3),
    )


def make_controller(name: str, template: PodTemplate, replicas: int, rev: int | None = None) -> ReplicationController:
    """A controller whose selector is its (already stamped) template labels."""
    return ReplicationController(
        name=name,
        namespace="default",
        selector=dict(template.labels),
        template=template,
        replicas=replicas,
        labels={"app": template.labels["app"]},
        annotations={REVISION_ANNOTATION: str(rev)} if rev is not None else {},
    )


def make_pods(controller: ReplicationController, count: int, transition: datetime | None = None) -> list[Pod]:
    return [
        Pod(
            name=f"{controller.name}-{i}",
            namespace="default",
            labels=dict(controller.template.labels),
            conditions=(PodCondition(type="Ready", status="True", last_transition_time=transition),),
        )
        for i in range(count)
    ]


@pytest.fixture
def deployment() -> Deployment:
    return make_deployment()


@pytest.fixture
def rollout(deployment: Deployment) -> tuple[FixtureLister, ReplicationController, ReplicationController]:
    """rc-old (2 replicas, previous image) and rc-new (3 replicas, desired template)."""
    rc_old = make_controller("rc-old", stamp_fingerprint(make_template("registry.local/x:1"), HASH_KEY), 2, rev=1)
    rc_new = make_controller("rc-new", new_template(deployment), 3, rev=2)
    pods = make_pods(rc_old, 2) + make_pods(rc_new, 3)
    return FixtureLister(pods, [rc_old, rc_new]), rc_old, rc_new
