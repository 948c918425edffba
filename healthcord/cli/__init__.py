"""healthcord command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``healthcord`` script).
"""

from healthcord.cli.main import cli

__all__ = ["cli"]
