"""Configuration management for MboaSMS.

Loads configuration from environment variables and .env file.
Provides validation and sensible defaults.

Usage:
    from src.core.config import get_config, validate_config

    config = get_config()
    issues = validate_config(config)
    if issues:
        for issue in issues:
            print(f"Config issue: {issue}")
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = Path.home() / ".mboasms" / "logs"
DEFAULT_MBOA_API_URL = "https://mboadeals.net/api/v1"
DEFAULT_FALLBACK_SENDER = "infos"

# Gateway limit on alphanumeric sender IDs
MAX_SENDER_LENGTH = 11


@dataclass
class Config:
    """Application configuration.

    Attributes:
        log_path: Directory for log files
        mboa_user_id: MBOA SMS gateway user ID
        mboa_password: MBOA SMS gateway API password
        mboa_api_url: MBOA SMS gateway base URL
        fallback_sender: Sender name forced for MTN recipients
        debug: Enable debug mode
        dry_run: Log but don't send SMS
    """

    log_path: Path = field(default_factory=lambda: DEFAULT_LOG_PATH)

    # MBOA SMS gateway
    mboa_user_id: Optional[str] = None
    mboa_password: Optional[str] = None
    mboa_api_url: str = DEFAULT_MBOA_API_URL

    fallback_sender: str = DEFAULT_FALLBACK_SENDER

    # Feature flags
    debug: bool = False
    dry_run: bool = False


def load_env_file(path: Path) -> dict[str, str]:
    """Parse .env file.

    Handles:
        - KEY=VALUE format
        - Comments (lines starting with #)
        - Blank lines
        - Quoted values

    Args:
        path: Path to .env file

    Returns:
        Dictionary of environment variables
    """
    env_vars: dict[str, str] = {}

    if not path.exists():
        return env_vars

    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()

            if not line or line.startswith("#"):
                continue

            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()

                if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
                    value = value[1:-1]

                if key:
                    env_vars[key] = value

    return env_vars


def _get_path(key: str, default: Path, env_vars: dict[str, str]) -> Path:
    """Get path from environment, expanding ~ and resolving."""
    value = os.environ.get(key) or env_vars.get(key)
    if value:
        return Path(value).expanduser().resolve()
    return default


def _get_str(key: str, env_vars: dict[str, str]) -> Optional[str]:
    return os.environ.get(key) or env_vars.get(key) or None


def _get_bool(key: str, default: bool, env_vars: dict[str, str]) -> bool:
    value = os.environ.get(key) or env_vars.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[Path] = None) -> Config:
    """Load configuration from environment and .env file.

    Priority:
        1. Environment variables (highest)
        2. .env file
        3. Default values (lowest)

    Args:
        env_file: Path to .env file. Defaults to .env in current directory.

    Returns:
        Loaded configuration
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"

    env_vars = load_env_file(env_file)

    return Config(
        log_path=_get_path("MBOASMS_LOG_PATH", DEFAULT_LOG_PATH, env_vars),
        mboa_user_id=_get_str("MBOA_SMS_USERID", env_vars),
        mboa_password=_get_str("MBOA_SMS_API_PASSWORD", env_vars),
        mboa_api_url=_get_str("MBOA_SMS_API_URL", env_vars) or DEFAULT_MBOA_API_URL,
        fallback_sender=_get_str("MBOASMS_FALLBACK_SENDER", env_vars) or DEFAULT_FALLBACK_SENDER,
        debug=_get_bool("MBOASMS_DEBUG", False, env_vars),
        dry_run=_get_bool("MBOASMS_DRY_RUN", False, env_vars),
    )


def validate_config(config: Config) -> list[str]:
    """Validate configuration.

    Checks:
        - Log directory exists or can be created
        - Gateway credentials are complete
        - Fallback sender fits the gateway limit

    Args:
        config: Configuration to validate

    Returns:
        List of issues (empty if valid)
    """
    issues: list[str] = []

    try:
        config.log_path.mkdir(parents=True, exist_ok=True)
        if not os.access(config.log_path, os.W_OK):
            issues.append(f"Log directory not writable: {config.log_path}")
    except OSError as e:
        issues.append(f"Cannot create log directory {config.log_path}: {e}")

    # Gateway credentials - all or none
    mboa_creds = {
        "MBOA_SMS_USERID": config.mboa_user_id,
        "MBOA_SMS_API_PASSWORD": config.mboa_password,
    }
    present = [k for k, v in mboa_creds.items() if v]
    missing = [k for k, v in mboa_creds.items() if not v]

    if present and missing:
        issues.append(
            f"CRITICAL: Partial MBOA SMS credentials will cause send failures. "
            f"Have: {', '.join(present)}. Missing: {', '.join(missing)}."
        )
    elif not present and not config.dry_run:
        issues.append("MBOA SMS credentials not set; sending is disabled.")

    if not config.fallback_sender or len(config.fallback_sender) > MAX_SENDER_LENGTH:
        issues.append(
            f"Fallback sender must be 1-{MAX_SENDER_LENGTH} characters: "
            f"{config.fallback_sender!r}"
        )

    return issues


# Singleton config
_config: Optional[Config] = None


def get_config() -> Config:
    """Return cached configuration singleton.

    Loads configuration on first call, returns cached version thereafter.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset cached configuration.

    Used primarily for testing.
    """
    global _config
    _config = None
