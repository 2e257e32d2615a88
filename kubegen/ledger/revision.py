"""Revision ordinals recorded on ReplicationControllers.

The rollout orchestrator writes a decimal integer under REVISION_ANNOTATION
on each controller it creates.  This module only reads it, and must tolerate
controllers written by older or foreign tooling: a missing annotation means
revision 0 (unknown/legacy), a malformed one is reported as an error.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable

from kubegen.errors import MalformedRevisionError
from kubegen.models.workloads import Deployment, PodTemplate, ReplicationController
from kubegen.template.fingerprint import strip_fingerprint

REVISION_ANNOTATION = "deployment.kubernetes.io/revision"

# Event reasons emitted by a rollback.
ROLLBACK_REVISION_NOT_FOUND = "DeploymentRollbackRevisionNotFound"
ROLLBACK_TEMPLATE_UNCHANGED = "DeploymentRollbackTemplateUnchanged"
ROLLBACK_DONE = "DeploymentRollback"

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def revision(controller: ReplicationController) -> int:
    """Return the revision of *controller*.

    Raises:
        MalformedRevisionError: the annotation is present but is not a
            base-10 integer in signed 64-bit range.
    """
    value = (controller.annotations or {}).get(REVISION_ANNOTATION)
    if value is None:
        return 0
    if not _DECIMAL_RE.fullmatch(value):
        raise MalformedRevisionError(controller.name, value)
    parsed = int(value)
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        raise MalformedRevisionError(controller.name, value)
    return parsed


def max_revision(controllers: Iterable[ReplicationController]) -> int:
    """Return the largest revision among *controllers*, or 0 if there are none."""
    return max((revision(rc) for rc in controllers), default=0)


def sort_by_revision(controllers: Iterable[ReplicationController]) -> list[ReplicationController]:
    """Order *controllers* by rollout sequence (revision, then name)."""
    return sorted(controllers, key=lambda rc: (revision(rc), rc.name))


def find_revision(controllers: Iterable[ReplicationController], rev: int) -> ReplicationController | None:
    """Return the controller recorded at revision *rev*, or None."""
    for rc in controllers:
        if revision(rc) == rev:
            return rc
    return None


def set_from_template(deployment: Deployment, template: PodTemplate) -> Deployment:
    """Adopt *template* as the Deployment's working template.

    The fingerprint label is stripped so the Deployment's declared intent does
    not carry a stale generation marker.  Returns a new Deployment.
    """
    return dataclasses.replace(
        deployment,
        template=strip_fingerprint(template, deployment.unique_label_key),
    )
