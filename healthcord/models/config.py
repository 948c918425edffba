"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from healthcord.models.alerts import Alert


@dataclass(frozen=True)
class DiscordOverride:
    """Routes notifications for one endpoint group to an alternate webhook."""

    group: str
    webhook_url: str


@dataclass(frozen=True)
class DiscordConfig:
    """Discord alerting provider configuration.

    ``webhook_url`` is either a direct URL or a ``$ENV_VAR`` indirect
    reference; resolution of the latter happens in the provider, never here.
    """

    webhook_url: str
    overrides: tuple[DiscordOverride, ...] = ()
    title: str = ""
    default_alert: Alert | None = None

    def is_valid(self) -> bool:
        """Return whether the configuration can be used to send alerts.

        Every override needs a non-empty, unique group and a non-empty
        webhook URL, and the default webhook URL must be non-empty.
        """
        registered: set[str] = set()
        for override in self.overrides:
            if not override.group or override.group in registered or not override.webhook_url:
                return False
            registered.add(override.group)
        return len(self.webhook_url) > 0


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class HealthcordConfig:
    """Top-level healthcord configuration."""

    discord: DiscordConfig | None = None
    log: LogConfig = field(default_factory=LogConfig)
