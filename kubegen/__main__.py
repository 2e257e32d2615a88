"""Entry point for `python -m kubegen`.

Usage:
    python -m kubegen status my-app -n prod
    uv run python -m kubegen history my-app
"""

from __future__ import annotations

from kubegen.cli import cli

cli()
