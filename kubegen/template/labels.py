"""Label-map helpers.  Every function returns a new dict."""

from __future__ import annotations

from collections.abc import Mapping


def clone_and_add_label(labels: Mapping[str, str] | None, key: str, value: str) -> dict[str, str]:
    """Return a copy of *labels* with ``key=value`` set.

    An empty *key* returns an unchanged copy.  An existing value under *key*
    is overwritten.
    """
    cloned = dict(labels or {})
    if key:
        cloned[key] = value
    return cloned


def clone_and_remove_label(labels: Mapping[str, str] | None, key: str) -> dict[str, str]:
    """Return a copy of *labels* without *key*.  Removing an absent key is a no-op."""
    cloned = dict(labels or {})
    cloned.pop(key, None)
    return cloned


def selector_matches(selector: Mapping[str, str] | None, labels: Mapping[str, str] | None) -> bool:
    """Exact label-set match: every selector pair must be present and equal.

    An empty selector matches everything.
    """
    labels = labels or {}
    return all(key in labels and labels[key] == value for key, value in (selector or {}).items())


def format_selector(selector: Mapping[str, str] | None) -> str:
    """Render *selector* as an API ``labelSelector`` string (``k=v,k2=v2``, sorted)."""
    return ",".join(f"{key}={value}" for key, value in sorted((selector or {}).items()))
