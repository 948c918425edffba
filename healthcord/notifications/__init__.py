"""Notification providers for healthcord.

Exports:
    AlertProvider        -- Abstract base for all provider implementations.
    AlertDeliveryError   -- Remote endpoint rejected a notification.
    DiscordAlertProvider -- Discord webhook embed provider.
    SecretRef            -- Memoised ``$ENV_VAR`` indirect reference.
    build_alert_provider -- Factory used by the CLI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from healthcord.config import ConfigError
from healthcord.notifications.discord import DiscordAlertProvider
from healthcord.notifications.provider import AlertDeliveryError, AlertProvider
from healthcord.notifications.secrets import SecretRef

if TYPE_CHECKING:
    import httpx

    from healthcord.models.config import HealthcordConfig

_log = structlog.get_logger(component="notifications")

__all__ = [
    "AlertDeliveryError",
    "AlertProvider",
    "DiscordAlertProvider",
    "SecretRef",
    "build_alert_provider",
]


def build_alert_provider(
    config: HealthcordConfig,
    client: httpx.Client | None = None,
) -> AlertProvider | None:
    """Build the configured alert provider, or None when nothing is configured.

    The configuration is expected to have passed validation in
    :func:`healthcord.config.load_config`; an invalid one is refused.

    Raises:
        ConfigError: the Discord section fails validation.
    """
    if config.discord is None:
        _log.info("no_alert_provider_configured")
        return None
    if not config.discord.is_valid():
        raise ConfigError("Invalid discord alerting configuration")

    provider = DiscordAlertProvider(config=config.discord, client=client)
    _log.info(
        "alert_provider_enabled",
        provider=provider.provider_name,
        overrides=len(config.discord.overrides),
        default_alert=config.discord.default_alert is not None,
    )
    return provider
