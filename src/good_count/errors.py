"""Error taxonomy for the good count service.

Client-caused failures (ClientError) map to 400 responses; everything the
server is responsible for maps to 500. ConfigurationError is raised before
any request is served and never reaches the gateway.
"""


class GoodCountError(Exception):
    """Base class for all good count errors."""


class ConfigurationError(GoodCountError):
    """Startup misconfiguration, fatal to the process."""


class ClientError(GoodCountError):
    """Malformed or missing request input."""


class ProviderError(GoodCountError):
    """The count provider failed."""

    def __init__(self, article_id: str, cause: BaseException):
        self.article_id = article_id
        self.cause = cause
        super().__init__(f"count provider failed for article {article_id}: {cause}")


class SerializationError(GoodCountError):
    """A response envelope could not be built or encoded."""


class FallbackEncodingError(SerializationError):
    """The error envelope itself could not be encoded."""
