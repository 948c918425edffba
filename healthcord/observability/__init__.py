"""Logging setup for healthcord."""

from healthcord.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
