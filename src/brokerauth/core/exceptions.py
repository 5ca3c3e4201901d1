"""
brokerauth Exception Types

Custom exceptions for broker client authentication configuration errors.
"""

from typing import Optional


class BrokerAuthError(Exception):
    """Base exception for all brokerauth errors."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class ConfigurationError(BrokerAuthError):
    """
    Invalid authentication configuration.

    Raised when a configuration value cannot be interpreted, e.g. a
    boolean flag holding "maybe".
    """

    pass


class TLSConfigurationError(ConfigurationError):
    """
    TLS client context could not be built.

    Covers unreadable or unparseable CA bundles, mismatched client key
    pairs and invalid protocol version bounds. Fatal to resolution.
    """

    pass


class UnsupportedSASLMechanism(ConfigurationError):
    """
    SASL mechanism identifier is not accepted by the plaintext setter.
    """

    def __init__(self, mechanism: str, supported: tuple = ()) -> None:
        self.mechanism = mechanism
        self.supported = tuple(supported)
        choices = " or ".join(f"'{name}'" for name in self.supported)
        message = f"config plaintext.mechanism error: {mechanism!r}"
        if choices:
            message += f", only support {choices}"
        super().__init__(message)


class UnknownAuthenticationMethod(ConfigurationError):
    """
    Authentication selector names no known mechanism.

    Carries the selector exactly as configured (before normalization).
    """

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(
            f"Unknown/Unsupported authentication method {method} to kafka cluster"
        )
