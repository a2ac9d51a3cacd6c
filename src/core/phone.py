"""Phone number normalization and carrier detection.

Single source of truth for Cameroonian mobile numbers, used by contact
validation, sender-name resolution and the SMS gateway client.

Numbering plan:
    - Country code 237, stripped once from the front
    - Mobile numbers are 9 digits starting with 6
    - Carrier ownership is decided by 3-digit prefixes or 2-digit blocks

Usage:
    from src.core.phone import classify, is_mtn, normalize_number

    normalize_number("+237 650 12 34 56")  # "650123456"
    classify("655123456")                  # Carrier.ORANGE
"""

import re
from enum import Enum

COUNTRY_CODE = "237"

_NON_DIGITS = re.compile(r"[^0-9]")
_MOBILE_PATTERN = re.compile(r"6[0-9]{8}")

# Carrier A
ORANGE_PREFIXES: frozenset[str] = frozenset(
    {"655", "656", "657", "658", "659", "686", "687", "688", "689", "640"}
)
ORANGE_BLOCKS: tuple[str, ...] = ("69",)

# Carrier B
MTN_PREFIXES: frozenset[str] = frozenset(
    {"650", "651", "652", "653", "654", "680", "681", "682", "683"}
)
MTN_BLOCKS: tuple[str, ...] = ("67",)


class Carrier(str, Enum):
    """Mobile network operator owning a number."""

    ORANGE = "orange"
    MTN = "mtn"
    UNKNOWN = "unknown"


def normalize_number(phone: str) -> str:
    """Normalize phone to local Cameroonian digits.

    Strips non-digits, then removes a single leading '237' country code.
    No length check is done here.

    Args:
        phone: Phone number in any format

    Returns:
        Digit string, possibly empty

    Examples:
        >>> normalize_number("237 650 12 34 56")
        '650123456'
        >>> normalize_number("+237-655-000-111")
        '655000111'
        >>> normalize_number("")
        ''
    """
    digits = _NON_DIGITS.sub("", phone)
    if digits.startswith(COUNTRY_CODE):
        digits = digits[len(COUNTRY_CODE) :]
    return digits


def is_valid_mobile(phone: str) -> bool:
    """Check phone is a 9-digit mobile number starting with 6."""
    return bool(_MOBILE_PATTERN.fullmatch(normalize_number(phone)))


def _matches(phone: str, prefixes: frozenset[str], blocks: tuple[str, ...]) -> bool:
    normalized = normalize_number(phone)
    if not _MOBILE_PATTERN.fullmatch(normalized):
        return False
    return normalized[:3] in prefixes or normalized[:2] in blocks


def is_orange(phone: str) -> bool:
    """Check phone belongs to Orange Cameroon.

    Args:
        phone: Phone number in any format

    Returns:
        True if valid and in an Orange prefix or the 69 block
    """
    return _matches(phone, ORANGE_PREFIXES, ORANGE_BLOCKS)


def is_mtn(phone: str) -> bool:
    """Check phone belongs to MTN Cameroon.

    Args:
        phone: Phone number in any format

    Returns:
        True if valid and in an MTN prefix or the 67 block
    """
    return _matches(phone, MTN_PREFIXES, MTN_BLOCKS)


is_carrier_a = is_orange
is_carrier_b = is_mtn


def classify(phone: str) -> Carrier:
    """Classify phone by carrier.

    Invalid numbers and valid numbers outside both tables are UNKNOWN.
    """
    if is_orange(phone):
        return Carrier.ORANGE
    if is_mtn(phone):
        return Carrier.MTN
    return Carrier.UNKNOWN


def format_international(phone: str) -> str:
    """Format a valid mobile number as +237XXXXXXXXX, or '' if invalid."""
    normalized = normalize_number(phone)
    if not _MOBILE_PATTERN.fullmatch(normalized):
        return ""
    return f"+{COUNTRY_CODE}{normalized}"
