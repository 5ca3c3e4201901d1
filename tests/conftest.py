"""
Pytest configuration and shared fixtures for brokerauth tests.
"""

import ssl
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from brokerauth.client.settings import ConnectionSettings
from brokerauth.config.options import (
    AuthenticationConfig,
    KerberosConfig,
    PlainTextConfig,
    TLSOptions,
)
from brokerauth.core.exceptions import TLSConfigurationError
from brokerauth.core.types import TLSContext


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def make_private_key() -> ec.EllipticCurvePrivateKey:
    """Helper to create an EC P-256 private key."""
    return ec.generate_private_key(ec.SECP256R1())


def make_certificate(
    key: ec.EllipticCurvePrivateKey, common_name: str, ca: bool = False
) -> x509.Certificate:
    """Helper to create a self-signed certificate."""
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(timezone.utc)
    return (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=1))
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
        .sign(key, hashes.SHA256())
    )


def write_certificate(path: Path, certificate: x509.Certificate) -> str:
    path.write_bytes(certificate.public_bytes(serialization.Encoding.PEM))
    return str(path)


def write_private_key(path: Path, key: ec.EllipticCurvePrivateKey) -> str:
    path.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        )
    )
    return str(path)


class RecordingTLSBuilder:
    """TLS builder double that records the options it was called with."""

    def __init__(self, error: Optional[TLSConfigurationError] = None) -> None:
        self.calls: List[TLSOptions] = []
        self.error = error

    def __call__(self, options: TLSOptions) -> TLSContext:
        self.calls.append(options)
        if self.error is not None:
            raise self.error
        return TLSContext(
            ssl_context=ssl.create_default_context(),
            server_name=options.server_name or None,
        )


# =============================================================================
# PEM FIXTURES
# =============================================================================


@pytest.fixture
def ca_file(tmp_path: Path) -> str:
    """PEM bundle holding one self-signed CA certificate."""
    key = make_private_key()
    return write_certificate(tmp_path / "ca.pem", make_certificate(key, "broker-ca", ca=True))


@pytest.fixture
def client_key_pair(tmp_path: Path) -> tuple:
    """(cert_path, key_path) for a matching client certificate and key."""
    key = make_private_key()
    cert_path = write_certificate(tmp_path / "client.pem", make_certificate(key, "client"))
    key_path = write_private_key(tmp_path / "client-key.pem", key)
    return cert_path, key_path


@pytest.fixture
def mismatched_key_file(tmp_path: Path) -> str:
    """Private key that belongs to no certificate."""
    return write_private_key(tmp_path / "other-key.pem", make_private_key())


@pytest.fixture
def garbage_file(tmp_path: Path) -> str:
    """File with no PEM content."""
    path = tmp_path / "garbage.pem"
    path.write_text("this is not a certificate\n")
    return str(path)


# =============================================================================
# CONFIGURATION FIXTURES
# =============================================================================


@pytest.fixture
def settings() -> ConnectionSettings:
    """Fresh connection settings."""
    return ConnectionSettings()


@pytest.fixture
def recording_builder() -> RecordingTLSBuilder:
    """TLS builder that always succeeds."""
    return RecordingTLSBuilder()


@pytest.fixture
def failing_builder() -> RecordingTLSBuilder:
    """TLS builder that always fails."""
    return RecordingTLSBuilder(error=TLSConfigurationError("failed to load CA /missing.pem"))


@pytest.fixture
def kerberos_config() -> AuthenticationConfig:
    """Kerberos configuration without TLS."""
    return AuthenticationConfig(
        authentication="Kerberos",
        tls=TLSOptions(enabled=False),
        kerberos=KerberosConfig(service_name="kafka", realm="EXAMPLE.COM"),
    )


@pytest.fixture
def plaintext_config() -> AuthenticationConfig:
    """SCRAM-SHA-256 configuration without TLS."""
    return AuthenticationConfig(
        authentication="plaintext",
        plaintext=PlainTextConfig(username="u", password="p", mechanism="SCRAM-SHA-256"),
    )


# =============================================================================
# PYTEST MARKERS
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests requiring a real Kafka broker"
    )
