"""Configuration loading from a YAML file and environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from healthcord.models.alerts import Alert, AlertType
from healthcord.models.config import DiscordConfig, DiscordOverride, HealthcordConfig, LogConfig


class ConfigError(ValueError):
    """Raised when configuration cannot be read or fails validation."""


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"HEALTHCORD_{key}", default)


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ConfigError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        raw = yaml.safe_load(path.read_text()) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")
    return raw


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got: {value!r}")
    return value


def _optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be a boolean, got: {value!r}")
    return value


def parse_alert(data: Mapping[str, Any], alert_type: AlertType = AlertType.DISCORD) -> Alert:
    """Build an :class:`Alert` from its YAML mapping (``default-alert`` shape)."""
    if not isinstance(data, Mapping):
        raise ConfigError(f"Alert configuration must be a mapping, got: {data!r}")
    description = data.get("description")
    return Alert(
        type=alert_type,
        enabled=_optional_bool(data, "enabled"),
        failure_threshold=_optional_int(data, "failure-threshold"),
        success_threshold=_optional_int(data, "success-threshold"),
        description=None if description is None else str(description),
        send_on_resolved=_optional_bool(data, "send-on-resolved"),
    )


def parse_discord_config(data: Mapping[str, Any]) -> DiscordConfig:
    """Build a :class:`DiscordConfig` from the ``alerting.discord`` mapping.

    Raises:
        ConfigError: on malformed input, or when the resulting configuration
            fails :meth:`DiscordConfig.is_valid`.
    """
    if not isinstance(data, Mapping):
        raise ConfigError("'alerting.discord' must be a mapping")

    raw_overrides = data.get("overrides") or []
    if not isinstance(raw_overrides, list):
        raise ConfigError("'alerting.discord.overrides' must be a list")
    overrides = []
    for entry in raw_overrides:
        if not isinstance(entry, Mapping):
            raise ConfigError(f"Override must be a mapping, got: {entry!r}")
        overrides.append(
            DiscordOverride(
                group=str(entry.get("group") or ""),
                webhook_url=str(entry.get("webhook-url") or ""),
            )
        )

    default_alert = data.get("default-alert")
    config = DiscordConfig(
        webhook_url=str(data.get("webhook-url") or ""),
        overrides=tuple(overrides),
        title=str(data.get("title") or ""),
        default_alert=parse_alert(default_alert) if default_alert is not None else None,
    )
    if not config.is_valid():
        raise ConfigError(
            "Invalid discord alerting configuration: webhook-url must be set and every "
            "override needs a unique, non-empty group and a non-empty webhook-url"
        )
    return config


def load_config(path: str | Path | None = None) -> HealthcordConfig:
    """Load configuration from a YAML file and HEALTHCORD_* environment variables.

    The file path is *path*, else ``HEALTHCORD_CONFIG``; with neither, only
    the environment is used.  ``HEALTHCORD_DISCORD_WEBHOOK_URL`` and
    ``HEALTHCORD_DISCORD_TITLE`` take precedence over the file.
    """
    config_path = path or _env("CONFIG")
    raw = _read_yaml(Path(config_path)) if config_path else {}

    alerting = raw.get("alerting") or {}
    if not isinstance(alerting, Mapping):
        raise ConfigError("'alerting' must be a mapping")
    # A missing or null "discord" key means no provider; any mapping, even
    # an empty one, is a declared provider and must validate.
    discord_section = alerting.get("discord")
    if discord_section is not None and not isinstance(discord_section, Mapping):
        raise ConfigError("'alerting.discord' must be a mapping")
    discord_raw = dict(discord_section) if discord_section is not None else {}

    env_webhook = _env("DISCORD_WEBHOOK_URL")
    if env_webhook:
        discord_raw["webhook-url"] = env_webhook
    env_title = _env("DISCORD_TITLE")
    if env_title:
        discord_raw["title"] = env_title

    discord_declared = discord_section is not None or bool(discord_raw)
    return HealthcordConfig(
        discord=parse_discord_config(discord_raw) if discord_declared else None,
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", str(raw.get("log-level") or "info"))),
        ),
    )
