"""
brokerauth Client Module

Broker client settings mutated by the authentication resolver.
"""

from brokerauth.client.settings import (
    ConnectionSettings,
    GSSAPISettings,
    SASLSettings,
    TLSSettings,
)

__all__ = [
    "ConnectionSettings",
    "GSSAPISettings",
    "SASLSettings",
    "TLSSettings",
]
