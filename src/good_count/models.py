"""Data models for the good count service."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from good_count.errors import SerializationError


class ErrorCategory(str, Enum):
    """Error classes exposed in the "error" field of an error body."""

    BAD_REQUEST = "bad request"
    INTERNAL_SERVER_ERROR = "internal server error"


class SuccessEnvelope(BaseModel):
    """Body returned when the provider produced a count."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    good_count: int = Field(alias="goodCount", ge=0, strict=True)


class ErrorEnvelope(BaseModel):
    """Body returned for any failed request."""

    model_config = ConfigDict(frozen=True)

    error: ErrorCategory
    message: str


def build_success_envelope(count: int) -> SuccessEnvelope:
    """Wrap a provider count, rejecting anything that is not a non-negative int."""
    try:
        return SuccessEnvelope(good_count=count)
    except ValidationError as exc:
        raise SerializationError(f"invalid good count {count!r}: {exc}") from exc


def encode_envelope(envelope: SuccessEnvelope | ErrorEnvelope) -> str:
    """Serialize an envelope to compact JSON using its wire field names."""
    return envelope.model_dump_json(by_alias=True)


@dataclass(frozen=True)
class LocalMode:
    """Run a single lookup for article_id and exit."""
    article_id: str


@dataclass(frozen=True)
class ServiceMode:
    """Hand a request handler over to the gateway runtime."""


ExecutionMode = Union[LocalMode, ServiceMode]
