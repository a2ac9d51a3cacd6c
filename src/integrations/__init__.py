"""Integrations package - External service connections.

Modules:
    - base: Abstract base class for integrations
    - mboa_sms: MBOA SMS gateway client
"""

from src.integrations.base import IntegrationBase

__all__ = [
    "IntegrationBase",
]
