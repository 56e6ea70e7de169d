from typing import Optional

# Prefix identifying this layer in every wrapped error message
ERROR_PREFIX = "[apertium-translator-api]"


class ApertiumError(Exception):
    """Base error for the Apertium client. Carries the message and, when known, the HTTP status."""

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class ConfigurationError(ApertiumError):
    """Missing or malformed API key. The caller must fix the config before retrying."""


class TransportError(ApertiumError):
    """The connection to the service could not be made."""


class ServiceError(ApertiumError):
    """The service answered with a status other than 200; detail is the response body."""


class MalformedResponseError(ApertiumError):
    """The response is not JSON of the shape the decoder expects."""


class ReadError(ApertiumError):
    """Reading the response body failed."""
