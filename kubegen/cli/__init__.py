"""kubegen command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``kubegen`` script).
"""

from kubegen.cli.main import cli

__all__ = ["cli"]
