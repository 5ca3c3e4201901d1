"""
brokerauth Core Types

Enumerations and small value types shared by the configuration,
TLS and resolver layers.

Design Principles:
- Enums carry their wire/config spelling as value
- Immutable: value types use frozen attrs
"""

from __future__ import annotations

import ssl
from enum import Enum
from typing import Optional

import attrs
from attrs import field, validators


# =============================================================================
# ENUMS
# =============================================================================


class AuthMechanism(str, Enum):
    """Authentication method selected for a broker client connection."""

    NONE = "none"
    KERBEROS = "kerberos"
    TLS = "tls"
    PLAINTEXT = "plaintext"

    @staticmethod
    def normalize(selector: Optional[str]) -> str:
        """
        Normalize a configured selector for comparison.

        Whitespace is trimmed and case folded to lower; an empty or
        all-whitespace selector means "none".

        Examples:
            " KERBEROS " -> "kerberos"
            ""           -> "none"
        """
        normalized = (selector or "").strip().lower()
        return normalized or AuthMechanism.NONE.value

    @classmethod
    def parse(cls, selector: Optional[str]) -> Optional[AuthMechanism]:
        """Return the mechanism for a selector, or None if unknown."""
        try:
            return cls(cls.normalize(selector))
        except ValueError:
            return None


class SASLMechanism(str, Enum):
    """SASL mechanisms a broker client can be configured with."""

    PLAIN = "PLAIN"
    SCRAM_SHA_256 = "SCRAM-SHA-256"
    SCRAM_SHA_512 = "SCRAM-SHA-512"
    GSSAPI = "GSSAPI"

    @classmethod
    def plaintext_mechanisms(cls) -> tuple:
        """Mechanisms that carry a username/password exchange."""
        return (cls.SCRAM_SHA_256, cls.SCRAM_SHA_512, cls.PLAIN)


class KerberosAuthType(Enum):
    """How the GSSAPI layer acquires its initial ticket."""

    USER = 1  # username + password
    KEYTAB = 2  # pre-shared key material from a keytab file


class SecurityProtocol(str, Enum):
    """Kafka security.protocol values."""

    PLAINTEXT = "PLAINTEXT"
    SSL = "SSL"
    SASL_PLAINTEXT = "SASL_PLAINTEXT"
    SASL_SSL = "SASL_SSL"

    @classmethod
    def select(cls, tls: bool, sasl: bool) -> SecurityProtocol:
        """Pick the protocol for a transport/authentication combination."""
        if sasl:
            return cls.SASL_SSL if tls else cls.SASL_PLAINTEXT
        return cls.SSL if tls else cls.PLAINTEXT


# =============================================================================
# TLS CONTEXT
# =============================================================================


@attrs.define(frozen=True, slots=True)
class TLSContext:
    """
    Resolved TLS client material.

    Wraps the ssl.SSLContext together with the server name override,
    which the stdlib context cannot carry itself (SNI is chosen per
    connection in wrap_socket).
    """

    ssl_context: ssl.SSLContext = field(
        validator=validators.instance_of(ssl.SSLContext), repr=False
    )
    server_name: Optional[str] = None

    @property
    def verifies_peer(self) -> bool:
        """Return True if the server certificate is verified."""
        return self.ssl_context.verify_mode != ssl.CERT_NONE
