"""Observability helpers for kubegen."""
