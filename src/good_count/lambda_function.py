"""Lambda entry point for the good count service."""

from __future__ import annotations

import logging
from typing import Any

from good_count.config import get_config
from good_count.errors import ConfigurationError
from good_count.gateway import GatewayAdapter
from good_count.helpers import load_provider
from good_count.use_case import GoodCountUseCase

logger = logging.getLogger(__name__)

# Built on first invocation and reused while the container stays warm
_adapter: GatewayAdapter | None = None


def get_handler() -> GatewayAdapter:
    """Get the process-wide adapter, building it from config if needed."""
    global _adapter
    if _adapter is None:
        config = get_config()
        if not config.provider:
            raise ConfigurationError("GOOD_COUNT_PROVIDER is not set")
        use_case = GoodCountUseCase(
            load_provider(config.provider),
            propagate_provider_errors=config.propagate_provider_errors,
        )
        _adapter = GatewayAdapter(use_case)
        logger.info("Registered handler with provider %s", config.provider)
    return _adapter


def reset_handler() -> None:
    """Drop the cached adapter (for testing)."""
    global _adapter
    _adapter = None


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    return get_handler().handle(event, context)
