"""Generation classifier -- new vs old ReplicationControllers of a Deployment."""

from kubegen.classifier.generations import classify, find_new, is_new, new_template

__all__ = ["classify", "find_new", "is_new", "new_template"]
