"""Python client for the Apertium machine-translation API."""
from .models import ApertiumConfig, Language, LanguagePair
from .clients import (
    ApertiumAPIClient,
    ApertiumError,
    ConfigurationError,
    MalformedResponseError,
    ReadError,
    ServiceError,
    TransportError,
)
from .services import Translate

__all__ = [
    'ApertiumAPIClient',
    'ApertiumConfig',
    'ApertiumError',
    'ConfigurationError',
    'Language',
    'LanguagePair',
    'MalformedResponseError',
    'ReadError',
    'ServiceError',
    'Translate',
    'TransportError',
]
