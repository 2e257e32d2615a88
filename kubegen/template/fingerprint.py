"""Deterministic content hash of a pod template."""

from __future__ import annotations

import dataclasses
import hashlib
import json

from kubegen.models.workloads import PodTemplate
from kubegen.template.compare import normalize_template
from kubegen.template.labels import clone_and_add_label, clone_and_remove_label

# Label values are limited to 63 characters.
_FINGERPRINT_LENGTH = 32


def fingerprint(template: PodTemplate) -> str:
    """Return the hex content hash of *template*.

    Computed over the normalized template, so label order does not matter but
    any content difference (including unrelated labels) does.
    """
    canonical = json.dumps(
        normalize_template(template),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()[:_FINGERPRINT_LENGTH]


def stamp_fingerprint(template: PodTemplate, key: str) -> PodTemplate:
    """Return a copy of *template* with its fingerprint written under label *key*.

    The hash is taken over *template* as given, before stamping.
    """
    return dataclasses.replace(
        template,
        labels=clone_and_add_label(template.labels, key, fingerprint(template)),
    )


def strip_fingerprint(template: PodTemplate, key: str) -> PodTemplate:
    """Return a copy of *template* without label *key*.  Idempotent."""
    return dataclasses.replace(template, labels=clone_and_remove_label(template.labels, key))
