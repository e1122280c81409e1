"""
Domain models and value objects.

Contains the EncodedNumeral value model.
"""

from src.core.domain.numeral import DEFAULT_SCHEMA_VERSION, EncodedNumeral

__all__ = [
    "DEFAULT_SCHEMA_VERSION",
    "EncodedNumeral",
]
