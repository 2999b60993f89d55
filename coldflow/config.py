"""
coldflow Configuration
======================

Runtime settings for the stream core.

The active configuration is read when values flow, not when chains are
composed, so changing it affects subscriptions that are already running.

Environment variables (read by ``FlowConfig.from_env()`` at import time):

- ``COLDFLOW_ERROR_POLICY`` - ``propagate`` (default) or ``log``
- ``COLDFLOW_DAEMON_TIMERS`` - ``0``/``false``/``no`` runs interval timers as
  non-daemon threads

Example:
    ```python
    from coldflow import ErrorPolicy, configure, override

    configure(error_policy="log")

    with override(error_policy=ErrorPolicy.PROPAGATE):
        ...  # failures raise OperatorError inside this block
    ```
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Iterator, Union


class ErrorPolicy(Enum):
    """What an operator does when its per-value policy raises."""

    PROPAGATE = "propagate"
    LOG = "log"

    @classmethod
    def coerce(cls, value: Union["ErrorPolicy", str]) -> "ErrorPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(policy.value for policy in cls)
            raise ValueError(
                f"Unknown error policy {value!r}, expected one of: {choices}"
            ) from None


_FALSE_STRINGS = {"0", "false", "no", "off"}


# ============================================================================
# Configuration
# ============================================================================


@dataclass(frozen=True)
class FlowConfig:
    """Stream core configuration parameters."""

    error_policy: ErrorPolicy = ErrorPolicy.PROPAGATE
    daemon_timers: bool = True

    @classmethod
    def from_env(cls) -> "FlowConfig":
        """Build a configuration from ``COLDFLOW_*`` environment variables."""
        config = cls()
        policy = os.environ.get("COLDFLOW_ERROR_POLICY")
        if policy:
            config = replace(config, error_policy=ErrorPolicy.coerce(policy))
        daemon = os.environ.get("COLDFLOW_DAEMON_TIMERS")
        if daemon:
            config = replace(
                config, daemon_timers=daemon.strip().lower() not in _FALSE_STRINGS
            )
        return config


CONFIG = FlowConfig.from_env()


def get_config() -> FlowConfig:
    """Return the active configuration."""
    return CONFIG


def configure(**changes) -> FlowConfig:
    """
    Replace fields of the active configuration.

    Unknown field names raise TypeError. ``error_policy`` accepts either an
    ``ErrorPolicy`` member or its string value.

    Returns:
        The new active configuration
    """
    global CONFIG

    known = {f.name for f in fields(FlowConfig)}
    unknown = set(changes) - known
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")

    if "error_policy" in changes:
        changes["error_policy"] = ErrorPolicy.coerce(changes["error_policy"])

    CONFIG = replace(CONFIG, **changes)
    return CONFIG


def reset_config() -> FlowConfig:
    """Restore the configuration derived from the environment."""
    global CONFIG

    CONFIG = FlowConfig.from_env()
    return CONFIG


@contextmanager
def override(**changes) -> Iterator[FlowConfig]:
    """Temporarily change the configuration, restoring it on exit."""
    global CONFIG

    previous = CONFIG
    try:
        yield configure(**changes)
    finally:
        CONFIG = previous
