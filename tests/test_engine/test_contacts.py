"""Tests for contact validation (src/engine/contacts.py).

Covers:
    - validate_contact: required email, length limits, phone checks
    - validate_contacts: batch collection of failures
    - validate_sender_name: project sender name bounds
"""

import pytest

from src.core.exceptions import ValidationError
from src.engine.contacts import (
    Contact,
    validate_contact,
    validate_contacts,
    validate_phone,
    validate_sender_name,
)

# ===========================================================================
# validate_contact
# ===========================================================================


class TestValidateContact:
    """Single contact form."""

    def test_minimal_contact(self):
        assert validate_contact({"email": "awa@example.cm"}) == Contact(email="awa@example.cm")

    def test_phone_is_normalized(self):
        contact = validate_contact({"email": "a@b.cm", "phone": "+237 650 12 34 56"})
        assert contact.phone == "650123456"

    def test_fields_are_stripped(self):
        contact = validate_contact(
            {"email": " a@b.cm ", "first_name": " Awa ", "last_name": None, "address": " Douala "}
        )
        assert contact.email == "a@b.cm"
        assert contact.first_name == "Awa"
        assert contact.last_name == ""
        assert contact.address == "Douala"

    def test_blank_phone_allowed(self):
        assert validate_contact({"email": "a@b.cm", "phone": "  "}).phone == ""

    def test_missing_email(self):
        with pytest.raises(ValidationError, match="Email is required"):
            validate_contact({"phone": "650123456"})

    def test_invalid_email(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            validate_contact({"email": "not-an-email"})

    def test_name_too_long(self):
        with pytest.raises(ValidationError, match="First name"):
            validate_contact({"email": "a@b.cm", "first_name": "x" * 51})

    def test_address_too_long(self):
        with pytest.raises(ValidationError, match="Address"):
            validate_contact({"email": "a@b.cm", "address": "x" * 201})

    def test_phone_with_letters_rejected(self):
        with pytest.raises(ValidationError, match="Invalid phone number format"):
            validate_contact({"email": "a@b.cm", "phone": "650-ABC-456"})

    def test_non_mobile_phone_rejected(self):
        with pytest.raises(ValidationError, match="Cameroonian mobile"):
            validate_contact({"email": "a@b.cm", "phone": "222 12 34 56"})


class TestValidatePhone:
    """Phone helper."""

    def test_returns_normalized(self):
        assert validate_phone("(237) 699-000-111") == "699000111"

    def test_too_short(self):
        with pytest.raises(ValidationError):
            validate_phone("65012345")


# ===========================================================================
# validate_contacts
# ===========================================================================


class TestValidateContacts:
    """Batch import."""

    def test_collects_valid_and_failed(self):
        rows = [
            {"email": "ok@b.cm", "phone": "650123456"},
            {"email": "bad@b.cm", "phone": "123"},
            {"first_name": "NoEmail"},
        ]
        result = validate_contacts(rows)

        assert result.success == 1
        assert result.failed == 2
        assert result.valid[0].email == "ok@b.cm"
        assert result.errors[0][0] == "bad@b.cm"
        assert result.errors[1] == ("Unknown", "Email is required")

    def test_empty_batch(self):
        result = validate_contacts([])
        assert result.success == 0
        assert result.failed == 0
        assert result.errors == []


# ===========================================================================
# validate_sender_name
# ===========================================================================


class TestValidateSenderName:
    """Project sender name."""

    def test_valid(self):
        assert validate_sender_name(" MyShop ") == "MyShop"

    @pytest.mark.parametrize("name", ["X", "", "ElevenChars"])
    def test_out_of_bounds(self, name):
        with pytest.raises(ValidationError, match="2-10"):
            validate_sender_name(name)
