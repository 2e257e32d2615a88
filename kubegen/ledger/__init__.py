"""Revision ledger accessor.

Reads the rollout-sequence annotation of ReplicationControllers and adopts
controller templates back onto a Deployment during rollback.
"""

from kubegen.ledger.revision import (
    REVISION_ANNOTATION,
    ROLLBACK_DONE,
    ROLLBACK_REVISION_NOT_FOUND,
    ROLLBACK_TEMPLATE_UNCHANGED,
    find_revision,
    max_revision,
    revision,
    set_from_template,
    sort_by_revision,
)

__all__ = [
    "REVISION_ANNOTATION",
    "ROLLBACK_DONE",
    "ROLLBACK_REVISION_NOT_FOUND",
    "ROLLBACK_TEMPLATE_UNCHANGED",
    "find_revision",
    "max_revision",
    "revision",
    "set_from_template",
    "sort_by_revision",
]
