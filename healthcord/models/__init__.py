"""Core data structures for healthcord."""

from healthcord.models.alerts import Alert, AlertType
from healthcord.models.config import DiscordConfig, DiscordOverride, HealthcordConfig, LogConfig
from healthcord.models.endpoint import ConditionResult, Endpoint, Result

__all__ = [
    "Alert",
    "AlertType",
    "ConditionResult",
    "DiscordConfig",
    "DiscordOverride",
    "Endpoint",
    "HealthcordConfig",
    "LogConfig",
    "Result",
]
