"""Phone number normalization: E.164 for matching, dialable form for navigation."""

import phonenumbers

from dialer.application.errors import InvalidPhoneNumber


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """Parse and return E.164 form of the number, or None if invalid.

    Use default_region when the input has no leading + (e.g. "202 555 1234"
    with default_region "US"). If the number already includes a country code,
    default_region is ignored.
    """
    if not raw or not str(raw).strip():
        return None
    raw = str(raw).strip()
    try:
        parsed = phonenumbers.parse(raw, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(parsed):
        return None
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


def normalize_dialable(raw: str | None) -> str:
    """Strip separators and map keypad letters, keeping a + written before any digit.

    "555-0100" -> "5550100", "(+1) 555-0100" -> "+15550100",
    "1-800-FLOWERS" -> "18003569377".
    Raises InvalidPhoneNumber when nothing dialable is left.
    """
    text = phonenumbers.convert_alpha_characters_in_number((raw or "").strip())
    digits = phonenumbers.normalize_digits_only(text)
    if not digits:
        raise InvalidPhoneNumber(raw)
    before_digits = next(
        text[:i] for i, ch in enumerate(text) if phonenumbers.normalize_digits_only(ch)
    )
    return ("+" if "+" in before_digits else "") + digits


def number_key(raw: str, default_region: str | None = None) -> str | None:
    """Comparison key for a number: E.164 when parseable, dialable form otherwise."""
    e164 = normalize_phone(raw, default_region=default_region)
    if e164:
        return e164
    try:
        return normalize_dialable(raw)
    except InvalidPhoneNumber:
        return None


def national_key(raw: str, default_region: str | None = None) -> str | None:
    """National significant number, e.g. "2025551234" for "+1 202-555-1234".

    Numbers that do not parse fall back to their dialable digits without +.
    """
    text = (raw or "").strip()
    try:
        parsed = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        try:
            return normalize_dialable(text).lstrip("+")
        except InvalidPhoneNumber:
            return None
    return phonenumbers.national_significant_number(parsed) or None


_LOOSE_MATCHES = (
    phonenumbers.MatchType.EXACT_MATCH,
    phonenumbers.MatchType.NSN_MATCH,
    phonenumbers.MatchType.SHORT_NSN_MATCH,
)


def numbers_match(a: str, b: str, default_region: str | None = None) -> bool:
    """Loose equality for caller lookup: same key, or same national number.

    "2025551234" matches "+12025551234" even without a default region.
    """
    key = number_key(a, default_region)
    if key is not None and key == number_key(b, default_region):
        return True
    return phonenumbers.is_number_match(a, b) in _LOOSE_MATCHES
