"""Workflow service configuration.

Environment-driven settings for logging, notification delivery and
demo data. Invalid values in the environment fall back to the defaults;
invalid values passed directly raise ValueError.

Environment Variables:
- PRINTFLOW_ENVIRONMENT: "production" (JSON logs) or "development" (default: production)
- LOG_LEVEL: Log level name (default: INFO)
- PRINTFLOW_DELIVERY_ENABLED: Hand notifications to the delivery channel (default: true)
- PRINTFLOW_DELIVERY_TIMEOUT_SECONDS: Per-delivery timeout (default: 5.0)
- PRINTFLOW_SEED_DEMO_DATA: Preload demo print jobs at startup (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitive. Anything
    else yields the default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class WorkflowConfig:
    """Configuration for the workflow service.

    Attributes:
        environment: "production" for JSON logs, "development" for console logs.
        log_level: Log level name.
        delivery_enabled: Whether stored notifications go to the delivery channel.
        delivery_timeout_seconds: Upper bound on one delivery attempt.
        seed_demo_data: Whether the in-memory store starts with demo jobs.
    """

    environment: str = "production"
    log_level: str = "INFO"
    delivery_enabled: bool = True
    delivery_timeout_seconds: float = 5.0
    seed_demo_data: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(ENVIRONMENTS)}, got {self.environment!r}"
            )
        if self.delivery_timeout_seconds <= 0:
            raise ValueError(
                "delivery_timeout_seconds must be positive, "
                f"got {self.delivery_timeout_seconds}"
            )

    @classmethod
    def from_environment(cls) -> WorkflowConfig:
        """Create config from environment variables with defaults.

        Returns:
            WorkflowConfig with values from environment or defaults.
        """
        environment = _get_str_env("PRINTFLOW_ENVIRONMENT", "production").lower()
        if environment not in ENVIRONMENTS:
            environment = "production"

        timeout = _get_float_env("PRINTFLOW_DELIVERY_TIMEOUT_SECONDS", 5.0)
        if timeout <= 0:
            timeout = 5.0

        return cls(
            environment=environment,
            log_level=_get_str_env("LOG_LEVEL", "INFO").upper(),
            delivery_enabled=_get_bool_env("PRINTFLOW_DELIVERY_ENABLED", True),
            delivery_timeout_seconds=timeout,
            seed_demo_data=_get_bool_env("PRINTFLOW_SEED_DEMO_DATA", False),
        )


# Default production config
DEFAULT_WORKFLOW_CONFIG = WorkflowConfig()

# Development config: console logs, demo jobs preloaded
DEVELOPMENT_WORKFLOW_CONFIG = WorkflowConfig(
    environment="development",
    log_level="DEBUG",
    seed_demo_data=True,
)
