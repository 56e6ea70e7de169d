"""Endpoint services built on top of the Apertium API client."""
from .translation_service import Translate

__all__ = ['Translate']
