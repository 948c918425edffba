"""Indirect (environment-sourced) secret references.

A configured value of the form ``$NAME`` names an environment variable that
holds the real secret.  :class:`SecretRef` resolves it once and memoises the
result so later lookups never touch the environment again.
"""

from __future__ import annotations

import os
import threading
from typing import Any

import structlog

SECRET_REF_PREFIX = "$"

_log = structlog.get_logger(component="notifications.secrets")


def is_secret_ref(value: str) -> bool:
    """Return True if *value* is a ``$NAME`` indirect reference."""
    return value.startswith(SECRET_REF_PREFIX)


class SecretRef:
    """Lazily resolved, memoised configuration value.

    Direct values are returned untouched.  An indirect reference is looked
    up in the environment on first :meth:`resolve`; a missing variable
    resolves to ``""`` and is reported through the logger rather than raised.
    The first resolution is serialised by a lock, so concurrent callers all
    observe the same value.

    Args:
        raw: The configured value, direct or ``$NAME``.
        log: Logger receiving lookup diagnostics. Only the variable name and
             the lookup outcome are ever logged, never the value.
    """

    def __init__(self, raw: str, log: Any | None = None) -> None:
        self._raw = raw
        self._log = log or _log
        self._lock = threading.Lock()
        self._value: str | None = None

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def is_resolved(self) -> bool:
        return self._value is not None

    def resolve(self) -> str:
        """Return the concrete value, reading the environment at most once."""
        value = self._value
        if value is not None:
            return value
        with self._lock:
            if self._value is None:
                self._value = self._lookup()
            return self._value

    def _lookup(self) -> str:
        if not is_secret_ref(self._raw):
            return self._raw
        name = self._raw[len(SECRET_REF_PREFIX) :]
        value = os.environ.get(name)
        if value is None:
            self._log.warning("secret_ref_env_var_missing", env_var=name)
            return ""
        self._log.debug("secret_ref_resolved", env_var=name)
        return value
