"""
brokerauth Core Module

Provides foundational types and exceptions used across the package.

Components:
- types: Mechanism enums and the resolved TLS context
- exceptions: Custom exception types
"""

from brokerauth.core.types import (
    AuthMechanism,
    SASLMechanism,
    KerberosAuthType,
    SecurityProtocol,
    TLSContext,
)
from brokerauth.core.exceptions import (
    BrokerAuthError,
    ConfigurationError,
    TLSConfigurationError,
    UnsupportedSASLMechanism,
    UnknownAuthenticationMethod,
)

__all__ = [
    # Types
    "AuthMechanism",
    "SASLMechanism",
    "KerberosAuthType",
    "SecurityProtocol",
    "TLSContext",
    # Exceptions
    "BrokerAuthError",
    "ConfigurationError",
    "TLSConfigurationError",
    "UnsupportedSASLMechanism",
    "UnknownAuthenticationMethod",
]
