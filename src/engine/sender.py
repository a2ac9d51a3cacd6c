"""Sender name resolution.

The gateway accepts alphanumeric sender IDs of at most 11 characters.
MTN Cameroon rejects custom sender IDs, so MTN recipients always get
the configured fallback sender.
"""

from typing import Optional

from src.core.config import MAX_SENDER_LENGTH, get_config
from src.core.logging import get_logger
from src.core.phone import is_mtn

logger = get_logger(__name__)


def resolve_sender_name(sender: str, phone: str, fallback: Optional[str] = None) -> str:
    """Pick the sender name to use for one recipient.

    Args:
        sender: Project sender name
        phone: Recipient phone number in any format
        fallback: Override for MTN recipients. Defaults to config.fallback_sender

    Returns:
        Sender name, at most 11 characters

    Examples:
        >>> resolve_sender_name("MyLongSenderName", "655123456")
        'MyLongSende'
    """
    if is_mtn(phone):
        override = fallback if fallback is not None else get_config().fallback_sender
        logger.debug(
            "MTN recipient, using fallback sender",
            extra={"context": {"sender": sender, "fallback": override}},
        )
        return override[:MAX_SENDER_LENGTH]

    return sender[:MAX_SENDER_LENGTH]
