"""Click commands for validating configuration and sending test alerts."""

from __future__ import annotations

import click
import httpx

from healthcord.config import ConfigError, load_config
from healthcord.models.alerts import Alert
from healthcord.models.endpoint import ConditionResult, Endpoint, Result
from healthcord.notifications import AlertDeliveryError, build_alert_provider
from healthcord.observability.logging import get_logger, setup_logging

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to the YAML configuration file (defaults to $HEALTHCORD_CONFIG).",
)


def _parse_condition(value: str) -> ConditionResult:
    """Parse ``TEXT:ok`` / ``TEXT:fail`` into a ConditionResult."""
    condition, sep, outcome = value.rpartition(":")
    if not sep or outcome not in ("ok", "fail") or not condition:
        raise click.BadParameter(f"expected CONDITION:ok or CONDITION:fail, got {value!r}")
    return ConditionResult(condition=condition, success=outcome == "ok")


@click.group()
@click.version_option(package_name="healthcord")
def cli() -> None:
    """Discord notifications for endpoint health transitions."""


@cli.command()
@_config_option
def validate(config_path: str | None) -> None:
    """Load the configuration and report whether it is valid."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if config.discord is None:
        click.echo("configuration is valid (no alert provider configured)")
        return
    click.echo(f"configuration is valid (discord, {len(config.discord.overrides)} override(s))")


@cli.command("send-test")
@_config_option
@click.option("--name", required=True, help="Endpoint name shown in the message.")
@click.option("--group", default="", help="Endpoint group used for webhook routing.")
@click.option(
    "--resolved",
    is_flag=True,
    help="Send a resolved notification (requires send-on-resolved in default-alert).",
)
@click.option(
    "--condition",
    "conditions",
    multiple=True,
    help="Condition result as CONDITION:ok or CONDITION:fail. Repeatable.",
)
def send_test(
    config_path: str | None,
    name: str,
    group: str,
    resolved: bool,
    conditions: tuple[str, ...],
) -> None:
    """Send a single test notification through the configured provider."""
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    setup_logging(config.log.level, json_output=False)
    log = get_logger("cli")

    provider = build_alert_provider(config)
    if provider is None:
        raise click.ClickException("no alert provider configured")

    condition_results = [_parse_condition(c) for c in conditions]
    endpoint = Endpoint(name=name, group=group)
    alert = Alert(description="healthcord test alert").with_defaults(provider.get_default_alert())
    if not alert.is_enabled():
        click.echo("alert is disabled by default-alert; nothing sent")
        return
    if resolved and not alert.is_sending_on_resolved():
        click.echo("send-on-resolved is not enabled; resolved notification not sent")
        return

    result = Result(
        success=all(c.success for c in condition_results),
        condition_results=condition_results,
    )

    try:
        provider.send(endpoint, alert, result, resolved)
    except AlertDeliveryError as exc:
        log.error("test_alert_rejected", status_code=exc.status_code)
        raise click.ClickException(str(exc)) from exc
    except httpx.HTTPError as exc:
        log.error("test_alert_transport_error", error=str(exc))
        raise click.ClickException(f"could not deliver test alert: {exc}") from exc

    click.echo(f"test alert sent for {endpoint.display_name()}")
