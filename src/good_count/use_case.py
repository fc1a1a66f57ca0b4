"""Core good count lookup, independent of how it is invoked."""

from __future__ import annotations

import logging
from typing import Callable

from good_count.errors import ProviderError, SerializationError
from good_count.models import build_success_envelope, encode_envelope

logger = logging.getLogger(__name__)

CountProvider = Callable[[str], int]


class GoodCountUseCase:
    """Look up an article's good count and render it as a JSON body.

    Args:
        provider: Returns the good count for an article ID, raising on failure.
        propagate_provider_errors: Raise ProviderError when the provider fails.
            When off, the failure is logged and an empty body is returned,
            which callers report as a successful response.
    """

    def __init__(self, provider: CountProvider, propagate_provider_errors: bool = False):
        self.provider = provider
        self.propagate_provider_errors = propagate_provider_errors

    def execute(self, article_id: str) -> str:
        """Return the serialized success envelope for article_id.

        The ID is not validated here; callers guarantee it is non-empty.

        Raises:
            ProviderError: If the provider fails and propagation is enabled.
            SerializationError: If the count cannot be wrapped or encoded.
        """
        try:
            count = self.provider(article_id)
        except Exception as exc:
            if self.propagate_provider_errors:
                raise ProviderError(article_id, exc) from exc
            # FIXME: the failure is reported to callers as an empty 200 body.
            logger.warning(
                "Count provider failed for article %s; returning empty body",
                article_id,
                exc_info=True,
            )
            return ""

        envelope = build_success_envelope(count)
        try:
            body = encode_envelope(envelope)
        except ValueError as exc:
            raise SerializationError(f"failed to encode good count: {exc}") from exc

        logger.debug("Article %s has %d good reactions", article_id, count)
        return body
