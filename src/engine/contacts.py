"""Contact validation for forms and bulk imports.

Contacts are validated before persistence: email is required, optional
fields are length-capped, and a phone number, when given, must be a valid
Cameroonian mobile. Phones are stored normalized.

Usage:
    from src.engine.contacts import validate_contact, validate_contacts

    contact = validate_contact({"email": "a@b.cm", "phone": "+237 650 12 34 56"})
    result = validate_contacts(rows)
    print(result.failed, result.errors)
"""

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from src.core.exceptions import ValidationError
from src.core.logging import get_logger
from src.core.phone import is_valid_mobile, normalize_number

logger = get_logger(__name__)

MAX_NAME_LENGTH = 50
MAX_ADDRESS_LENGTH = 200
MIN_SENDER_NAME_LENGTH = 2
MAX_SENDER_NAME_LENGTH = 10

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PHONE_CHARS_PATTERN = re.compile(r"^[+]?[\d\s\-()]+$")


@dataclass
class Contact:
    """Validated contact ready for persistence.

    Attributes:
        email: Email address
        first_name: First name
        last_name: Last name
        phone: Normalized 9-digit mobile number, or empty
        address: Postal address
    """

    email: str
    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    address: str = ""


@dataclass
class ImportResult:
    """Outcome of validating a batch of contacts."""

    valid: list[Contact] = field(default_factory=list)
    failed: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)

    @property
    def success(self) -> int:
        return len(self.valid)


def _field(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return str(value).strip()


def validate_phone(phone: str) -> str:
    """Validate a contact phone and return it normalized.

    Raises:
        ValidationError: If characters are not phone-like or the number
            is not a Cameroonian mobile
    """
    if not _PHONE_CHARS_PATTERN.match(phone):
        raise ValidationError(f"Invalid phone number format: {phone}")
    if not is_valid_mobile(phone):
        raise ValidationError(f"Not a valid Cameroonian mobile number: {phone}")
    return normalize_number(phone)


def validate_contact(data: Mapping[str, Any]) -> Contact:
    """Validate one contact form submission.

    Args:
        data: Raw form fields (first_name, last_name, email, phone, address)

    Returns:
        Validated Contact

    Raises:
        ValidationError: On the first invalid field
    """
    email = _field(data, "email")
    if not email:
        raise ValidationError("Email is required")
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError(f"Invalid email address: {email}")

    first_name = _field(data, "first_name")
    last_name = _field(data, "last_name")
    for label, value in (("First name", first_name), ("Last name", last_name)):
        if len(value) > MAX_NAME_LENGTH:
            raise ValidationError(f"{label} must be at most {MAX_NAME_LENGTH} characters")

    address = _field(data, "address")
    if len(address) > MAX_ADDRESS_LENGTH:
        raise ValidationError(f"Address must be at most {MAX_ADDRESS_LENGTH} characters")

    phone = _field(data, "phone")
    if phone:
        phone = validate_phone(phone)

    return Contact(
        email=email,
        first_name=first_name,
        last_name=last_name,
        phone=phone,
        address=address,
    )


def validate_contacts(rows: Iterable[Mapping[str, Any]]) -> ImportResult:
    """Validate a batch of contacts without stopping on bad rows.

    Args:
        rows: Raw contact rows, e.g. from a CSV import

    Returns:
        ImportResult with valid contacts and (email, error) pairs for failures
    """
    result = ImportResult()

    for row in rows:
        try:
            result.valid.append(validate_contact(row))
        except ValidationError as e:
            result.failed += 1
            result.errors.append((_field(row, "email") or "Unknown", str(e)))

    logger.info(
        "Contacts validated",
        extra={"context": {"valid": result.success, "failed": result.failed}},
    )
    return result


def validate_sender_name(name: str) -> str:
    """Validate a project sender name.

    Raises:
        ValidationError: If not 2-10 characters after stripping
    """
    name = name.strip()
    if not MIN_SENDER_NAME_LENGTH <= len(name) <= MAX_SENDER_NAME_LENGTH:
        raise ValidationError(
            f"Sender name must be {MIN_SENDER_NAME_LENGTH}-{MAX_SENDER_NAME_LENGTH} characters"
        )
    return name
