"""Phone number normalization for WhatsApp gateways.

Reshapes free-form numbers into international form. Nothing here validates a
number; malformed input still yields a best-effort string.

    >>> normalize_digits("0812-3456-7890")
    '6281234567890'
    >>> to_plus_format("0812 3456 7890")
    '+6281234567890'
"""

import re

DEFAULT_COUNTRY_CODE = "62"

_NON_DIGITS = re.compile(r"\D")


def normalize_digits(raw: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Return the country-code-prefixed digits of ``raw``.

    A single leading zero (trunk prefix) is replaced by the country code;
    the country code is prepended when it is still missing.
    """
    digits = _NON_DIGITS.sub("", raw or "")

    if digits.startswith("0"):
        digits = country_code + digits[1:]

    if not digits.startswith(country_code):
        digits = country_code + digits

    return digits


def to_plus_format(raw: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """E.164-style ``+<digits>`` form (Twilio)."""
    return "+" + normalize_digits(raw, country_code)


def to_digits_format(raw: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Bare digits form (notif.my.id)."""
    return normalize_digits(raw, country_code)


def has_dialable_digits(raw: str) -> bool:
    """True when the raw input contains at least one digit."""
    return bool(_NON_DIGITS.sub("", raw or ""))
