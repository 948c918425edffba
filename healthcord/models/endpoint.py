"""Endpoint and health-check result data structures.

Produced upstream by the monitoring engine; healthcord only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConditionResult:
    """Outcome of evaluating a single condition (e.g. ``[STATUS] == 200``)."""

    condition: str
    success: bool


@dataclass(frozen=True)
class Result:
    """Outcome of one health check against an endpoint."""

    success: bool = True
    condition_results: list[ConditionResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Endpoint:
    """A monitored endpoint."""

    name: str
    group: str = ""
    url: str = ""

    def display_name(self) -> str:
        """Return ``group/name`` when the endpoint belongs to a group, else ``name``."""
        if self.group:
            return f"{self.group}/{self.name}"
        return self.name
