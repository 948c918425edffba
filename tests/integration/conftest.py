"""Shared helpers for healthcord dispatch tests.

Deliveries go through a real ``httpx.Client`` backed by ``httpx.MockTransport``
so every request is captured without touching the network.
"""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx

from healthcord.models.alerts import Alert
from healthcord.models.config import DiscordConfig, DiscordOverride
from healthcord.models.endpoint import ConditionResult, Endpoint, Result
from healthcord.notifications.discord import DiscordAlertProvider

DEFAULT_WEBHOOK = "https://discord.example/api/webhooks/default"
CORE_WEBHOOK = "https://discord.example/api/webhooks/core"

# ---------------------------------------------------------------------------
# Transport helpers
# ---------------------------------------------------------------------------


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, status_code: int = 204, text: str = "") -> None:
        self.requests: list[httpx.Request] = []
        self._status_code = status_code
        self._text = text
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, text=self._text)


def failing_transport(exc_factory: Callable[[httpx.Request], Exception]) -> httpx.MockTransport:
    """MockTransport that raises the exception built by *exc_factory*."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exc_factory(request)

    return httpx.MockTransport(handler)


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------


def make_provider(
    transport: httpx.BaseTransport,
    webhook_url: str = DEFAULT_WEBHOOK,
    overrides: tuple[DiscordOverride, ...] = (DiscordOverride(group="core", webhook_url=CORE_WEBHOOK),),
    title: str = "",
    log: MagicMock | None = None,
) -> DiscordAlertProvider:
    """Create a DiscordAlertProvider whose client talks to *transport*."""
    return DiscordAlertProvider(
        config=DiscordConfig(webhook_url=webhook_url, overrides=overrides, title=title),
        client=httpx.Client(transport=transport),
        log=log or MagicMock(),
    )


def make_endpoint(name: str = "api", group: str = "") -> Endpoint:
    return Endpoint(name=name, group=group, url="https://api.example/health")


def make_alert(**kwargs) -> Alert:
    defaults = {"failure_threshold": 3, "success_threshold": 2, "description": "healthcheck failed"}
    defaults.update(kwargs)
    return Alert(**defaults)


def make_result(*conditions: tuple[str, bool]) -> Result:
    condition_results = [ConditionResult(condition=c, success=ok) for c, ok in conditions]
    return Result(success=all(ok for _, ok in conditions), condition_results=condition_results)
