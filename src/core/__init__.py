"""Core package - Phone classification, configuration, logging, exceptions.

This package provides foundational infrastructure used by all other layers.

Modules:
    - phone: Cameroonian number normalization and carrier detection
    - config: Environment and configuration management
    - logging: Structured JSON logging
    - exceptions: Custom exception hierarchy
"""

from src.core.exceptions import (
    ConfigurationError,
    GatewayError,
    IntegrationError,
    MboaSMSError,
    ValidationError,
)

__all__ = [
    "MboaSMSError",
    "ConfigurationError",
    "ValidationError",
    "IntegrationError",
    "GatewayError",
]
