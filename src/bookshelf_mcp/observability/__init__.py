"""Logfire observability for the Bookshelf MCP Server."""

import logging

import logfire

from .config import ObservabilityConfig

logger = logging.getLogger(__name__)


class _State:
    config: ObservabilityConfig | None = None
    configured: bool = False


def initialize_observability(config: ObservabilityConfig | None = None) -> bool:
    """Configure Logfire. Returns True when tracing is active."""
    _State.config = config or ObservabilityConfig()

    if not _State.config.enabled:
        logger.debug("Observability disabled via configuration")
        _State.configured = False
        return False

    logfire.configure(
        token=_State.config.token or None,
        service_name=_State.config.service_name,
        environment=_State.config.environment,
        send_to_logfire=_State.config.send_to_logfire,
        console=None if _State.config.console_output else False,
    )
    _State.configured = True
    logger.info("Logfire configured (environment=%s)", _State.config.environment)
    return True


def is_enabled() -> bool:
    return _State.configured


def reset_observability() -> None:
    """Forget the current configuration (useful for testing)."""
    _State.config = None
    _State.configured = False


__all__ = [
    "ObservabilityConfig",
    "initialize_observability",
    "is_enabled",
    "logfire",
    "reset_observability",
]
