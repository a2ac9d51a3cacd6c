"""MBOA SMS gateway integration.

Sends single SMS messages through the MBOA deals HTTP API.

Usage:
    from src.integrations.mboa_sms import MboaSMSClient

    client = MboaSMSClient()
    response = client.send_sms("MyShop", "Promo -20%", "650123456")
    if client.is_success(response):
        ...
"""

from typing import Any, Optional

import requests  # type: ignore[import-untyped]

from src.core.config import get_config
from src.core.exceptions import ConfigurationError, GatewayError
from src.core.logging import get_logger
from src.core.phone import classify, normalize_number
from src.integrations.base import IntegrationBase, RateLimiter

logger = get_logger(__name__)

SEND_ENDPOINT = "/sms/sendsms"

# One gateway account per process, so every client shares the same budget.
gateway_rate_limiter = RateLimiter(calls_per_minute=120)


class MboaSMSClient(IntegrationBase):
    """MBOA SMS gateway client.

    Credentials come from MBOA_SMS_USERID and MBOA_SMS_API_PASSWORD.
    In dry-run mode nothing leaves the process. All instances throttle
    through gateway_rate_limiter unless given their own limiter.
    """

    def __init__(self, rate_limiter: Optional[RateLimiter] = None) -> None:
        self._config = get_config()
        self._rate_limiter = rate_limiter if rate_limiter is not None else gateway_rate_limiter

    @property
    def _base_url(self) -> str:
        return self._config.mboa_api_url.rstrip("/")

    def is_configured(self) -> bool:
        """Check if gateway credentials are configured."""
        return bool(self._config.mboa_user_id and self._config.mboa_password)

    def health_check(self) -> bool:
        """Check if the gateway host answers HTTP.

        The gateway has no status endpoint and sending is billed, so a
        HEAD on the base URL is the only free probe. Any HTTP answer,
        whatever its status, means the host is up.
        """
        if not self.is_configured():
            return False

        try:
            requests.head(self._base_url, timeout=10)
        except requests.RequestException as e:
            logger.warning(f"MBOA SMS gateway unreachable: {e}")
            return False
        return True

    def send_sms(self, sender: str, message: str, phone: str) -> dict[str, Any]:
        """Send one SMS.

        Args:
            sender: Sender name shown to the recipient (already resolved)
            message: Message body
            phone: Recipient phone number

        Returns:
            Decoded gateway response body

        Raises:
            ConfigurationError: If credentials are missing
            GatewayError: If the gateway answers with an error status or
                a body that is not a JSON object
            IntegrationError: If the request fails after retries
        """
        context = {
            "phone": normalize_number(phone),
            "carrier": classify(phone).value,
            "sender": sender,
        }

        if self._config.dry_run:
            logger.info("DRY RUN: SMS not sent", extra={"context": context})
            return {"success": True, "message": "DRY_RUN"}

        if not self.is_configured():
            raise ConfigurationError("MBOA SMS gateway not configured")

        payload = {
            "user_id": self._config.mboa_user_id,
            "password": self._config.mboa_password,
            "message": message,
            "phone_str": phone,
            "sender_name": sender,
        }

        self._rate_limiter.wait_if_needed()
        response = self._api_request(SEND_ENDPOINT, payload)

        if not response.ok:
            raise GatewayError(
                f"MBOA SMS error ({response.status_code}): {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise GatewayError(f"MBOA SMS returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise GatewayError(f"MBOA SMS returned unexpected body: {data!r}"[:300])

        logger.info(
            "SMS submitted",
            extra={"context": {**context, "gateway_message": data.get("message")}},
        )
        return data

    @staticmethod
    def is_success(response: Optional[dict[str, Any]]) -> bool:
        """Check a gateway response body for success."""
        if not isinstance(response, dict):
            return False
        return response.get("success") is True or response.get("message") == "SUCCESS"

    def _api_request(self, endpoint: str, json_data: dict[str, Any]) -> requests.Response:
        """POST JSON to the gateway, retrying network failures."""
        url = f"{self._base_url}{endpoint}"
        headers = {"Content-Type": "application/json", "Accept": "application/json"}

        return self.with_retry(
            lambda: requests.post(url, headers=headers, json=json_data, timeout=30),
            max_retries=2,
            exceptions=(requests.RequestException,),
        )
