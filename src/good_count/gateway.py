"""API Gateway adapter for the good count use case."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from good_count.errors import ClientError, FallbackEncodingError, GoodCountError
from good_count.models import ErrorCategory, ErrorEnvelope, encode_envelope
from good_count.use_case import GoodCountUseCase

logger = logging.getLogger(__name__)

ARTICLE_ID_PARAM = "article_id"

RESPONSE_HEADERS: Mapping[str, str] = MappingProxyType({
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Allow-Headers": "Content-Type",
})


def _response(status_code: int, body: str) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": body,
    }


def _error_response(category: ErrorCategory, error: Exception, status_code: int) -> dict[str, Any]:
    envelope = ErrorEnvelope(error=category, message=str(error))
    try:
        body = encode_envelope(envelope)
    except ValueError as exc:
        fallback = FallbackEncodingError(str(exc))
        logger.error("Failed to encode %s response: %s", category.value, fallback)
        return _response(500, str(fallback))
    return _response(status_code, body)


def response_success(body: str) -> dict[str, Any]:
    """Build a 200 response carrying an already serialized body."""
    return _response(200, body)


def response_bad_request(error: Exception) -> dict[str, Any]:
    """Build a 400 response for invalid client input."""
    return _error_response(ErrorCategory.BAD_REQUEST, error, 400)


def response_internal_server_error(error: Exception) -> dict[str, Any]:
    """Build a 500 response for a server-side failure."""
    return _error_response(ErrorCategory.INTERNAL_SERVER_ERROR, error, 500)


def get_article_id(event: Any) -> str:
    """Extract the article ID path parameter from a proxy event.

    Accepts the raw event dict or any object exposing ``pathParameters``.
    Returns an empty string when the parameter is missing.
    """
    if isinstance(event, Mapping):
        params = event.get("pathParameters")
    else:
        params = getattr(event, "pathParameters", None)
    if not params:
        return ""
    return params.get(ARTICLE_ID_PARAM) or ""


class GatewayAdapter:
    """Maps API Gateway proxy events onto the good count use case.

    Instances are callable with the Lambda ``(event, context)`` signature so
    they can be registered directly as a handler.
    """

    def __init__(self, use_case: GoodCountUseCase):
        self.use_case = use_case

    def handle(self, event: Any, context: Any = None) -> dict[str, Any]:
        article_id = get_article_id(event)
        if not article_id:
            return response_bad_request(ClientError(f"{ARTICLE_ID_PARAM} is empty"))

        try:
            body = self.use_case.execute(article_id)
        except GoodCountError as exc:
            logger.error("Lookup failed for article %s: %s", article_id, exc)
            return response_internal_server_error(exc)

        return response_success(body)

    __call__ = handle
