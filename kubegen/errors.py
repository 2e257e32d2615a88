"""Error types raised by kubegen."""

from __future__ import annotations


class KubeGenError(Exception):
    """Base class for every error kubegen raises."""


class ListingError(KubeGenError):
    """An injected pod or controller listing call failed.

    The underlying client exception is chained as ``__cause__``.  kubegen
    never retries; retry policy belongs to the caller's reconcile loop.
    """

    def __init__(self, kind: str, namespace: str, cause: Exception) -> None:
        super().__init__(f"error listing {kind} in namespace '{namespace}': {cause}")
        self.kind = kind
        self.namespace = namespace
        self.cause = cause


class MalformedRevisionError(KubeGenError, ValueError):
    """The revision annotation is present but not a base-10 64-bit integer."""

    def __init__(self, controller: str, value: str) -> None:
        super().__init__(f"controller '{controller}' has malformed revision annotation: {value!r}")
        self.controller = controller
        self.value = value
