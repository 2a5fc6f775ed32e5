"""Tests for phone number normalization (E.164 and dialable form)."""

import pytest

from dialer.application import InvalidPhoneNumber
from dialer.infrastructure.phone import (
    national_key,
    normalize_dialable,
    normalize_phone,
    number_key,
    numbers_match,
)


def test_normalize_with_country_code_returns_e164():
    assert normalize_phone("+39 312 345 6789", default_region=None) == "+393123456789"
    assert normalize_phone("+1 202 555 1234", default_region=None) == "+12025551234"


def test_normalize_without_country_code_uses_default_region():
    assert normalize_phone("202 555 1234", default_region="US") == "+12025551234"
    assert normalize_phone("312 345 6789", default_region="IT") == "+393123456789"


def test_normalize_invalid_returns_none():
    assert normalize_phone("", default_region=None) is None
    assert normalize_phone("   ", default_region=None) is None
    assert normalize_phone("abc", default_region=None) is None
    assert normalize_phone("+1", default_region=None) is None
    assert normalize_phone("123", default_region="US") is None  # too short


def test_dialable_strips_separators():
    assert normalize_dialable("555-0100") == "5550100"
    assert normalize_dialable("(202) 555.1234") == "2025551234"


def test_dialable_keeps_plus_written_before_digits():
    assert normalize_dialable("  +1 202 555 1234 ") == "+12025551234"
    assert normalize_dialable("(+1) 555-0100") == "+15550100"
    assert normalize_dialable("1+2") == "12"


def test_dialable_maps_keypad_letters():
    assert normalize_dialable("1-800-FLOWERS") == "18003569377"


@pytest.mark.parametrize("raw", [None, "", "   ", "--", "+"])
def test_dialable_rejects_input_without_digits(raw):
    with pytest.raises(InvalidPhoneNumber):
        normalize_dialable(raw)


def test_number_key_prefers_e164_then_dialable():
    assert number_key("+1 (202) 555-1234") == "+12025551234"
    assert number_key("202 555 1234", default_region="US") == "+12025551234"
    assert number_key("555-0100") == "5550100"
    assert number_key("--") is None


def test_national_key():
    assert national_key("+1 202-555-1234") == "2025551234"
    assert national_key("2025551234") == "2025551234"
    assert national_key("--") is None


def test_numbers_match_national_format_without_region():
    assert numbers_match("2025551234", "+12025551234")
    assert numbers_match("+1 (202) 555-1234", "+12025551234")
    assert numbers_match("555-0100", "5550100")
    assert not numbers_match("2025559999", "+12025551234")
    assert not numbers_match("+44 20 7946 0000", "+12025551234")
