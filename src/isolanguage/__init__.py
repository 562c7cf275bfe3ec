"""Typed ISO 639-1 language codes."""

from .language_code import (
    FAMILIES,
    LanguageCode,
    UnrecognizedCode,
    codes,
    families,
    from_code,
    to_code,
)

__all__ = [
    "FAMILIES",
    "LanguageCode",
    "UnrecognizedCode",
    "codes",
    "families",
    "from_code",
    "to_code",
]
