"""
Domain слой домена Parsing.

Содержит исключения домена Parsing.
"""

from .exceptions import (
    ParsingError,
    ParsingConfigurationError,
    UnknownImageTypeError,
)

__all__ = [
    "ParsingError",
    "ParsingConfigurationError",
    "UnknownImageTypeError",
]
