"""
Error taxonomy for intent routing.

InputError is the only error the resolution service lets out; the others are
raised by the generative path and demoted to keyword matching by the resolver.
"""


class IntentRoutingError(Exception):
    """Base class for every intent routing failure."""

    pass


class InputError(IntentRoutingError):
    """User text is empty or not a string."""

    pass


class ConfigError(IntentRoutingError):
    """Required configuration (the Gemini API key) is missing."""

    pass


class TransportError(IntentRoutingError):
    """
    Network or HTTP failure reaching the generative service.

    Attributes:
        message: Error message
        status_code: HTTP status returned by the provider (None for network errors)
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self):
        if self.status_code is not None:
            return f"{self.message} (status={self.status_code})"
        return self.message


class ParseError(IntentRoutingError):
    """Provider reply is not parseable JSON or contains no JSON object."""

    pass


class SchemaError(IntentRoutingError):
    """Parsed reply is missing required fields."""

    pass
