"""Send an SMS to a single contact.

Validates the recipient, resolves the sender name for the recipient's
carrier, and submits through the gateway client. Gateway failures are
returned as a failed SendResult rather than raised.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import ConfigurationError, IntegrationError
from src.core.logging import get_logger
from src.core.phone import Carrier, classify, is_valid_mobile, normalize_number
from src.engine.sender import resolve_sender_name
from src.integrations.mboa_sms import MboaSMSClient

logger = get_logger(__name__)


@dataclass
class SendResult:
    """Outcome of one send attempt.

    Attributes:
        success: True if the gateway accepted the message
        message: Gateway message or failure reason
        sender_name: Sender name actually used
        carrier: Recipient carrier
    """

    success: bool
    message: str = ""
    sender_name: str = ""
    carrier: Carrier = Carrier.UNKNOWN


def send_sms_to_contact(
    phone: Optional[str],
    message: str,
    sender: str,
    client: Optional[MboaSMSClient] = None,
) -> SendResult:
    """Send one SMS to a contact phone.

    Args:
        phone: Recipient phone number in any format
        message: Message body
        sender: Project sender name
        client: Gateway client. Defaults to a new MboaSMSClient; new
            clients share the module-wide gateway rate limiter, so loops
            that omit client are still throttled

    Returns:
        SendResult
    """
    if not phone or not phone.strip():
        return SendResult(success=False, message="Missing phone number")

    if not is_valid_mobile(phone):
        logger.warning(
            "Skipping invalid recipient",
            extra={"context": {"phone": normalize_number(phone)}},
        )
        return SendResult(success=False, message=f"Invalid mobile number: {phone}")

    carrier = classify(phone)
    sender_name = resolve_sender_name(sender, phone)
    client = client or MboaSMSClient()

    try:
        response = client.send_sms(sender_name, message, phone)
    except (ConfigurationError, IntegrationError) as e:
        logger.error(
            f"SMS send failed: {e}",
            extra={"context": {"carrier": carrier.value, "sender": sender_name}},
        )
        return SendResult(
            success=False, message=str(e), sender_name=sender_name, carrier=carrier
        )

    if client.is_success(response):
        return SendResult(
            success=True,
            message=str(response.get("message", "")),
            sender_name=sender_name,
            carrier=carrier,
        )

    return SendResult(
        success=False,
        message=str(response.get("message") or "SMS delivery failed"),
        sender_name=sender_name,
        carrier=carrier,
    )
