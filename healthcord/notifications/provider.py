"""Alerting provider interface.

AlertProvider     -- ABC every provider must implement.
AlertDeliveryError -- Raised when the remote endpoint rejects a notification.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from healthcord.models.alerts import Alert
from healthcord.models.endpoint import Endpoint, Result


class AlertDeliveryError(Exception):
    """Raised when a provider answers a notification with HTTP status >= 400.

    Args:
        status_code: HTTP status returned by the provider.
        body:        Response body text, kept for operator diagnosis.
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"call to provider alert returned status code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class AlertProvider(ABC):
    """Abstract base class for all alerting providers.

    ``send`` performs exactly one delivery attempt and raises on failure;
    retry policy belongs to the caller.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider identifier used in logs."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return whether the provider's configuration is usable."""

    @abstractmethod
    def get_default_alert(self) -> Alert | None:
        """Return the alert defaults applied to endpoints using this provider."""

    @abstractmethod
    def send(self, endpoint: Endpoint, alert: Alert, result: Result, resolved: bool) -> None:
        """Deliver one notification for *endpoint*'s alert transition.

        Raises:
            AlertDeliveryError: the remote endpoint answered with status >= 400.
            httpx.HTTPError:    the request could not be sent.
        """
