"""Unit tests for pydantic serialization of LanguageCode."""

import json
from typing import List, Optional

import pytest
from pydantic import BaseModel, ValidationError

from isolanguage import LanguageCode
from isolanguage.serialization import (
    LanguageCodeField,
    dump_language_code,
    dump_language_code_json,
    load_language_code,
    load_language_code_json,
)


class Profile(BaseModel):
    """Sample model using LanguageCodeField."""

    native: LanguageCodeField
    learning: List[LanguageCodeField] = []
    preferred: Optional[LanguageCodeField] = None


class TestModelFields:
    """Test LanguageCodeField inside pydantic models."""

    def test_validate_from_string(self):
        profile = Profile(native="en", learning=["fr", "zh"])
        assert profile.native is LanguageCode.EN
        assert profile.learning == [LanguageCode.FR, LanguageCode.ZH]
        assert profile.preferred is None

    def test_validate_from_member(self):
        profile = Profile(native=LanguageCode.JA)
        assert profile.native is LanguageCode.JA

    def test_dump_python_emits_codes(self):
        profile = Profile(native=LanguageCode.EN, preferred=LanguageCode.DE)
        dumped = profile.model_dump()
        assert dumped == {"native": "en", "learning": [], "preferred": "de"}
        assert type(dumped["native"]) is str

    def test_json_round_trip(self):
        profile = Profile(native=LanguageCode.EN, learning=[LanguageCode.FR])
        data = profile.model_dump_json()
        assert json.loads(data) == {"native": "en", "learning": ["fr"], "preferred": None}
        assert Profile.model_validate_json(data) == profile

    def test_unknown_code_is_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Profile(native="zz")
        message = str(exc_info.value)
        assert "native" in message
        assert "'zz' is not a valid ISO 639-1 2 letter language code" in message

    @pytest.mark.parametrize("value", ["EN", "eng", "", 1])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(ValidationError):
            Profile(native=value)

    def test_invalid_item_in_list(self):
        with pytest.raises(ValidationError) as exc_info:
            Profile(native="en", learning=["fr", "French"])
        assert "learning.1" in str(exc_info.value)


class TestAdapterHelpers:
    """Test standalone serialization helpers."""

    def test_english_round_trip(self):
        dumped = dump_language_code(LanguageCode.EN)
        assert dumped == "en"
        assert load_language_code(dumped) is LanguageCode.EN

    def test_json_round_trip(self):
        data = dump_language_code_json(LanguageCode.EN)
        assert data == '"en"'
        assert load_language_code_json(data) is LanguageCode.EN

    def test_load_rejects_uppercase(self):
        with pytest.raises(ValidationError):
            load_language_code("EN")

    def test_load_json_rejects_unknown(self):
        with pytest.raises(ValidationError):
            load_language_code_json('"xx"')

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level("DEBUG", logger="isolanguage.serialization"):
            with pytest.raises(ValidationError):
                load_language_code("zz")
        assert "Rejected language code" in caplog.text
