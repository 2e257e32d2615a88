"""Read-only access to a namespace's pods and ReplicationControllers.

The classifier and the readiness aggregator reach the cluster only through
this protocol.  Production code backs it with ``KubernetesLister``; tests
back it with fixed fixtures.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from kubegen.models.workloads import Pod, ReplicationController


class Lister(Protocol):
    """Listing interface with exact label-set match semantics.

    Implementations return the complete result (no pagination contract) and
    raise ``kubegen.errors.ListingError`` on failure.
    """

    async def list_pods(self, namespace: str, selector: Mapping[str, str]) -> Sequence[Pod]: ...

    async def list_controllers(
        self, namespace: str, selector: Mapping[str, str]
    ) -> Sequence[ReplicationController]: ...
