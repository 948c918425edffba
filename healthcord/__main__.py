"""Entry point for `python -m healthcord`.

Usage:
    python -m healthcord validate --config healthcord.yaml
    python -m healthcord send-test --name api --group core
"""

from __future__ import annotations

from healthcord.cli import cli

cli()
