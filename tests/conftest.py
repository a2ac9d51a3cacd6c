"""Shared pytest fixtures for MboaSMS tests.

Fixtures:
    - mock_config: Test configuration with fake gateway credentials
    - configured_client: MboaSMSClient built from mock_config
    - orange_phone / mtn_phone / unknown_phone: Sample recipients
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from src.core.config import Config, reset_config
from src.integrations.mboa_sms import MboaSMSClient


@pytest.fixture(autouse=True)
def _reset_config_singleton():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def mock_config(tmp_path: Path) -> Config:
    """Configuration with fake credentials and no dry run."""
    return Config(
        log_path=tmp_path / "logs",
        mboa_user_id="test-user",
        mboa_password="test-password",
        mboa_api_url="https://sms.example.test/api/v1/",
    )


@pytest.fixture
def configured_client(mock_config: Config) -> MboaSMSClient:
    """Gateway client that reads mock_config."""
    with patch("src.integrations.mboa_sms.get_config", return_value=mock_config):
        return MboaSMSClient()


@pytest.fixture
def orange_phone() -> str:
    return "+237 655 12 34 56"


@pytest.fixture
def mtn_phone() -> str:
    return "670 12 34 56"


@pytest.fixture
def unknown_phone() -> str:
    return "620123456"
