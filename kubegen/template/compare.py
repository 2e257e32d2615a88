"""Structural comparison of pod templates.

Two templates are the same generation definition iff their normalized forms
are equal.  Normalization is versioned so that a change in what counts as
"equal" is explicit; bump TEMPLATE_COMPARISON_VERSION when the rules change.

Version 2 rules:
    - label and annotation maps are order-insensitive;
    - a missing map, ``None`` and ``{}`` are the same;
    - inside the pod spec, ``None`` values and empty lists are dropped,
      matching the API's omitempty serialization;
    - empty maps inside the pod spec are kept: ``emptyDir: {}`` and
      ``downwardAPI: {}`` select different volume types;
    - everything else is compared by value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kubegen.models.workloads import PodTemplate

TEMPLATE_COMPARISON_VERSION = 2


def _prune(value: Any) -> Any:
    if isinstance(value, Mapping):
        pruned = {str(k): _prune(v) for k, v in value.items()}
        return {k: v for k, v in pruned.items() if not _is_empty(v)}
    if isinstance(value, (list, tuple)):
        return [_prune(v) for v in value]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, list) and not value)


def normalize_template(template: PodTemplate) -> dict[str, Any]:
    """Return the canonical JSON-shaped value of *template*."""
    return {
        "labels": dict(template.labels or {}),
        "annotations": dict(template.annotations or {}),
        "spec": _prune(template.spec or {}),
    }


def templates_equal(a: PodTemplate, b: PodTemplate) -> bool:
    """Deep structural equality of two templates (all fields, not just the hash label)."""
    return normalize_template(a) == normalize_template(b)
