"""Client modules for communication with the Apertium API."""
from .errors import (
    ApertiumError,
    ConfigurationError,
    MalformedResponseError,
    ReadError,
    ServiceError,
    TransportError,
)
from .transport import fetch, normalize
from .api_client import ApertiumAPIClient, build_string_array_param, validate_service_state

__all__ = [
    'ApertiumAPIClient',
    'ApertiumError',
    'ConfigurationError',
    'MalformedResponseError',
    'ReadError',
    'ServiceError',
    'TransportError',
    'build_string_array_param',
    'fetch',
    'normalize',
    'validate_service_state',
]
