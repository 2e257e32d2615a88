"""``kubegen`` command-line interface.

Usage::

    kubegen status my-app -n prod
    kubegen history my-app -n prod

Output is JSON on stdout; structured logs go to stderr.
"""

from __future__ import annotations

import asyncio
import dataclasses
import json
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import click

from kubegen.cluster.kubernetes import KubernetesLister, deployment_from_api
from kubegen.config import load_config
from kubegen.errors import KubeGenError
from kubegen.ledger import revision, sort_by_revision
from kubegen.models.config import KubeGenConfig
from kubegen.models.workloads import Deployment
from kubegen.observability.logging import get_logger, setup_logging
from kubegen.status import rollout_status


@dataclasses.dataclass
class _Cluster:
    lister: KubernetesLister
    apps_v1: Any
    config: KubeGenConfig

    async def read_deployment(self, name: str, namespace: str) -> Deployment:
        try:
            obj = await self.apps_v1.read_namespaced_deployment(
                name,
                namespace,
                _request_timeout=self.config.cluster.request_timeout,
            )
        except Exception as exc:
            raise click.ClickException(f"cannot read deployment {namespace}/{name}: {exc}") from exc
        return deployment_from_api(obj, unique_label_key=self.config.rollout.unique_label_key)


@asynccontextmanager
async def _connect(config: KubeGenConfig) -> AsyncIterator[_Cluster]:
    """Load in-cluster config (or kubeconfig) and yield API handles."""
    # kubernetes-asyncio attempts cluster auto-detection on import in some versions.
    from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
    from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]

    log = get_logger("cli")
    try:
        if config.cluster.in_cluster:
            k8s_config.load_incluster_config()
            log.debug("k8s client configured from in-cluster service account")
        else:
            await k8s_config.load_kube_config(context=config.cluster.kube_context or None)
            log.debug("k8s client configured from kubeconfig", context=config.cluster.kube_context)
    except k8s_config.ConfigException as exc:
        raise click.ClickException(f"cannot configure kubernetes client: {exc}") from exc

    async with k8s_client.ApiClient() as api_client:
        yield _Cluster(
            lister=KubernetesLister(
                k8s_client.CoreV1Api(api_client),
                request_timeout=config.cluster.request_timeout,
            ),
            apps_v1=k8s_client.AppsV1Api(api_client),
            config=config,
        )


def _emit(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def _run(coro: Any) -> Any:
    try:
        return asyncio.run(coro)
    except KubeGenError as exc:
        _emit({"error": type(exc).__name__, "detail": str(exc)})
        raise SystemExit(1) from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override KUBEGEN_LOG_LEVEL.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Inspect Deployment generations and their readiness."""
    config = load_config()
    if log_level:
        config.log.level = log_level.lower()
    setup_logging(config.log.level)
    ctx.obj = config


@cli.command()
@click.argument("deployment")
@click.option("-n", "--namespace", default=None, help="Namespace (default: KUBEGEN_NAMESPACE).")
@click.option("--min-ready-seconds", type=int, default=None, help="Override the stability window.")
@click.pass_obj
def status(config: KubeGenConfig, deployment: str, namespace: str | None, min_ready_seconds: int | None) -> None:
    """Show the new and old controllers of DEPLOYMENT and its ready pods."""
    namespace = namespace or config.cluster.namespace

    async def _status() -> dict[str, Any]:
        async with _connect(config) as cluster:
            dep = await cluster.read_deployment(deployment, namespace)
            window = min_ready_seconds
            if window is None and dep.min_ready_seconds == 0:
                window = config.rollout.min_ready_seconds
            result = await rollout_status(dep, cluster.lister, min_ready_seconds=window)
            return dataclasses.asdict(result)

    _emit(_run(_status()))


@cli.command()
@click.argument("deployment")
@click.option("-n", "--namespace", default=None, help="Namespace (default: KUBEGEN_NAMESPACE).")
@click.pass_obj
def history(config: KubeGenConfig, deployment: str, namespace: str | None) -> None:
    """List the controllers of DEPLOYMENT in rollout order."""
    namespace = namespace or config.cluster.namespace

    async def _history() -> list[dict[str, Any]]:
        async with _connect(config) as cluster:
            dep = await cluster.read_deployment(deployment, namespace)
            controllers = await cluster.lister.list_controllers(dep.namespace, dep.selector)
            return [
                {"name": rc.name, "revision": revision(rc), "replicas": rc.replicas}
                for rc in sort_by_revision(controllers)
            ]

    _emit(_run(_history()))
