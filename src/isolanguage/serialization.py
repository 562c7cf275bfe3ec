"""Pydantic support for LanguageCode.

Requires the ``serde`` extra. A language serializes to its two-letter code and
is validated with ``from_code``, so an unknown code becomes a
``pydantic.ValidationError`` carrying the ``UnrecognizedCode`` message.

Example:
    >>> class Profile(BaseModel):
    ...     language: LanguageCodeField
    >>> Profile(language="en").model_dump()
    {'language': 'en'}
"""

import logging
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, TypeAdapter

from .language_code import LanguageCode, UnrecognizedCode, from_code, to_code

logger = logging.getLogger(__name__)


def _validate_language_code(value: Any) -> LanguageCode:
    try:
        return from_code(value)
    except UnrecognizedCode:
        logger.debug("Rejected language code", extra={"code": repr(value)})
        raise


LanguageCodeField = Annotated[
    LanguageCode,
    PlainValidator(_validate_language_code),
    PlainSerializer(to_code, return_type=str),
]

language_code_adapter: TypeAdapter[LanguageCode] = TypeAdapter(LanguageCodeField)


def dump_language_code(language: LanguageCode) -> str:
    """Serialize a language to its two-letter code."""
    return language_code_adapter.dump_python(language)


def dump_language_code_json(language: LanguageCode) -> str:
    """Serialize a language to a JSON string literal, e.g. ``'"en"'``."""
    return language_code_adapter.dump_json(language).decode("utf-8")


def load_language_code(value: Any) -> LanguageCode:
    """Validate a python value (normally a two-letter string) into a language.

    Raises:
        pydantic.ValidationError: If the value is not a registered code
    """
    return language_code_adapter.validate_python(value)


def load_language_code_json(data: str | bytes) -> LanguageCode:
    """Validate a JSON document holding a two-letter code string."""
    return language_code_adapter.validate_json(data)
