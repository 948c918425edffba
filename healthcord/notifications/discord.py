"""Discord notification provider for healthcord.

Posts endpoint health transitions to a Discord webhook as a single embed.
Notifications for a group listed in ``overrides`` go to that group's
webhook; everything else goes to the default webhook, which may be a
``$ENV_VAR`` indirect reference resolved once per provider instance.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from healthcord.models.alerts import Alert
from healthcord.models.config import DiscordConfig
from healthcord.models.endpoint import Endpoint, Result
from healthcord.notifications.provider import AlertDeliveryError, AlertProvider
from healthcord.notifications.secrets import SecretRef

_log = structlog.get_logger(component="notifications.discord")

DEFAULT_TITLE = ":helmet_with_white_cross: Gatus"

_COLOR_RESOLVED = 3066993
_COLOR_TRIGGERED = 15158332

_ICON_SUCCESS = ":white_check_mark:"
_ICON_FAILURE = ":x:"


class DiscordAlertProvider(AlertProvider):
    """Delivers alerts as Discord webhook embeds.

    Args:
        config:  Validated Discord provider configuration.
        client:  HTTP client used for delivery. When omitted, a short-lived
                 client is opened per send.
        timeout: Request timeout for the short-lived client. Ignored when
                 *client* is supplied; its own timeout policy applies.
        log:     Logger for delivery and secret-lookup diagnostics.
    """

    def __init__(
        self,
        config: DiscordConfig,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
        log: Any | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._timeout = timeout
        self._log = log or _log
        self._default_webhook = SecretRef(config.webhook_url, log=self._log)

    @property
    def provider_name(self) -> str:
        return "discord"

    @property
    def config(self) -> DiscordConfig:
        return self._config

    def is_valid(self) -> bool:
        return self._config.is_valid()

    def get_default_alert(self) -> Alert | None:
        return self._config.default_alert

    def send(self, endpoint: Endpoint, alert: Alert, result: Result, resolved: bool) -> None:
        """POST a notification for *endpoint*'s alert transition.

        Single attempt, no retry.

        Raises:
            AlertDeliveryError: Discord answered with status >= 400.
            httpx.HTTPError:    the request could not be sent.
        """
        url = self.get_webhook_url_for_group(endpoint.group)
        payload = self.build_request_body(endpoint, alert, result, resolved)
        headers = {"Content-Type": "application/json"}

        if self._client is not None:
            response = self._client.post(url, json=payload, headers=headers)
        else:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(url, json=payload, headers=headers)

        if response.status_code >= 400:
            self._log.warning(
                "discord_non_success_response",
                provider=self.provider_name,
                status_code=response.status_code,
                endpoint=endpoint.display_name(),
                resolved=resolved,
            )
            raise AlertDeliveryError(response.status_code, response.text)

        self._log.info(
            "discord_notification_sent",
            provider=self.provider_name,
            status_code=response.status_code,
            endpoint=endpoint.display_name(),
            resolved=resolved,
        )

    def build_request_body(
        self,
        endpoint: Endpoint,
        alert: Alert,
        result: Result,
        resolved: bool,
    ) -> dict[str, object]:
        """Render the Discord webhook payload for one alert transition."""
        if resolved:
            message = (
                f"An alert for **{endpoint.display_name()}** has been resolved after passing successfully "
                f"{alert.get_success_threshold()} time(s) in a row"
            )
            color = _COLOR_RESOLVED
        else:
            message = (
                f"An alert for **{endpoint.display_name()}** has been triggered due to having failed "
                f"{alert.get_failure_threshold()} time(s) in a row"
            )
            color = _COLOR_TRIGGERED

        description = alert.get_description()
        if description:
            message += ":\n> " + description

        embed: dict[str, object] = {
            "title": self._config.title or DEFAULT_TITLE,
            "description": message,
            "color": color,
        }
        condition_results = _format_condition_results(result)
        if condition_results:
            embed["fields"] = [
                {"name": "Condition results", "value": condition_results, "inline": False},
            ]
        return {"content": "", "embeds": [embed]}

    def get_webhook_url_for_group(self, group: str) -> str:
        """Return the webhook URL notifications for *group* should go to.

        The first override whose group matches wins; otherwise the default
        webhook is used, resolving an indirect reference on first use.  An
        empty string means the default reference pointed at an unset
        environment variable.
        """
        for override in self._config.overrides:
            if override.group == group:
                return override.webhook_url
        return self._default_webhook.resolve()


def _format_condition_results(result: Result) -> str:
    lines = []
    for condition_result in result.condition_results:
        icon = _ICON_SUCCESS if condition_result.success else _ICON_FAILURE
        lines.append(f"{icon} - `{condition_result.condition}`\n")
    return "".join(lines)
