"""Alert data structures."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

DEFAULT_FAILURE_THRESHOLD = 3
DEFAULT_SUCCESS_THRESHOLD = 2


class AlertType(StrEnum):
    """Alerting provider an alert is routed to."""

    DISCORD = "discord"


@dataclass(frozen=True)
class Alert:
    """Alert configured on an endpoint.

    Optional fields left as ``None`` are unset and may be filled from the
    provider's ``default-alert`` via :meth:`with_defaults`.  The getters
    apply the built-in defaults for anything still unset.

    ``triggered`` is state owned by the monitoring engine (set once the
    failure threshold is reached, cleared on resolution) and is never taken
    from defaults.
    """

    type: AlertType = AlertType.DISCORD
    enabled: bool | None = None
    failure_threshold: int | None = None
    success_threshold: int | None = None
    description: str | None = None
    send_on_resolved: bool | None = None
    triggered: bool = False

    def with_defaults(self, default: Alert | None) -> Alert:
        """Return a copy whose unset fields are taken from *default*."""
        if default is None:
            return self
        return replace(
            self,
            enabled=self.enabled if self.enabled is not None else default.enabled,
            failure_threshold=(
                self.failure_threshold if self.failure_threshold is not None else default.failure_threshold
            ),
            success_threshold=(
                self.success_threshold if self.success_threshold is not None else default.success_threshold
            ),
            description=self.description if self.description is not None else default.description,
            send_on_resolved=(
                self.send_on_resolved if self.send_on_resolved is not None else default.send_on_resolved
            ),
        )

    def is_enabled(self) -> bool:
        return True if self.enabled is None else self.enabled

    def is_sending_on_resolved(self) -> bool:
        return bool(self.send_on_resolved)

    def get_failure_threshold(self) -> int:
        return DEFAULT_FAILURE_THRESHOLD if self.failure_threshold is None else self.failure_threshold

    def get_success_threshold(self) -> int:
        return DEFAULT_SUCCESS_THRESHOLD if self.success_threshold is None else self.success_threshold

    def get_description(self) -> str:
        return self.description or ""
