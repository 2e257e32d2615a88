"""Cluster access for kubegen.

Exposes:
    Lister           -- protocol the classifier and aggregator list through.
    KubernetesLister -- production Lister over kubernetes-asyncio CoreV1Api.
"""

from kubegen.cluster.kubernetes import (
    KubernetesLister,
    controller_from_api,
    deployment_from_api,
    pod_from_api,
    template_from_api,
)
from kubegen.cluster.lister import Lister

__all__ = [
    "KubernetesLister",
    "Lister",
    "controller_from_api",
    "deployment_from_api",
    "pod_from_api",
    "template_from_api",
]
