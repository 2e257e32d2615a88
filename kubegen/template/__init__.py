"""Pod template identity: label helpers, structural comparison and fingerprints."""

from kubegen.template.compare import TEMPLATE_COMPARISON_VERSION, normalize_template, templates_equal
from kubegen.template.fingerprint import fingerprint, stamp_fingerprint, strip_fingerprint
from kubegen.template.labels import (
    clone_and_add_label,
    clone_and_remove_label,
    format_selector,
    selector_matches,
)

__all__ = [
    "TEMPLATE_COMPARISON_VERSION",
    "clone_and_add_label",
    "clone_and_remove_label",
    "fingerprint",
    "format_selector",
    "normalize_template",
    "selector_matches",
    "stamp_fingerprint",
    "strip_fingerprint",
    "templates_equal",
]
