"""
brokerauth TLS Context Builder

Builds the TLS client context a broker connection runs over.

PEM material is parsed with the cryptography library before it reaches
the ssl module, so that a bad CA bundle or a certificate/key mismatch is
reported as a TLSConfigurationError naming the offending file instead of
an opaque OpenSSL error.

Trust:
- ca_path empty: system trust store
- ca_path set: only the certificates in that bundle
"""

from __future__ import annotations

import ssl
from typing import Callable, Dict, List

import structlog
from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization

from brokerauth.config.options import TLSOptions
from brokerauth.core.exceptions import TLSConfigurationError
from brokerauth.core.types import TLSContext

logger = structlog.get_logger()

TLSContextBuilder = Callable[[TLSOptions], TLSContext]

TLS_VERSIONS: Dict[str, ssl.TLSVersion] = {
    "1.0": ssl.TLSVersion.TLSv1,
    "1.1": ssl.TLSVersion.TLSv1_1,
    "1.2": ssl.TLSVersion.TLSv1_2,
    "1.3": ssl.TLSVersion.TLSv1_3,
}


# =============================================================================
# PEM LOADING
# =============================================================================


def _read_file(path: str, what: str) -> bytes:
    try:
        with open(path, "rb") as handle:
            return handle.read()
    except OSError as e:
        raise TLSConfigurationError(f"failed to load {what} {path}: {e}") from e


def load_ca_certificates(path: str) -> List[x509.Certificate]:
    """
    Load every PEM certificate from a CA bundle.

    Raises:
        TLSConfigurationError: file unreadable or holds no certificate
    """
    data = _read_file(path, "CA")
    try:
        certificates = x509.load_pem_x509_certificates(data)
    except ValueError as e:
        raise TLSConfigurationError(f"failed to parse CA {path}: {e}") from e
    return certificates


def verify_key_pair(cert_path: str, key_path: str) -> None:
    """
    Check that a client certificate and private key belong together.

    Raises:
        TLSConfigurationError: unparseable material or public key mismatch
    """
    cert_data = _read_file(cert_path, "client certificate")
    key_data = _read_file(key_path, "client key")

    try:
        certificate = x509.load_pem_x509_certificate(cert_data)
    except ValueError as e:
        raise TLSConfigurationError(
            f"failed to parse client certificate {cert_path}: {e}"
        ) from e

    try:
        private_key = serialization.load_pem_private_key(key_data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise TLSConfigurationError(f"failed to parse client key {key_path}: {e}") from e

    spki = serialization.PublicFormat.SubjectPublicKeyInfo
    der = serialization.Encoding.DER
    if certificate.public_key().public_bytes(der, spki) != private_key.public_key().public_bytes(der, spki):
        raise TLSConfigurationError(
            f"client certificate {cert_path} does not match key {key_path}"
        )


# =============================================================================
# CONTEXT
# =============================================================================


def _tls_version(value: str, bound: str) -> ssl.TLSVersion:
    try:
        return TLS_VERSIONS[value.strip()]
    except KeyError:
        raise TLSConfigurationError(
            f"unsupported TLS {bound} version {value!r}, "
            f"expected one of {', '.join(TLS_VERSIONS)}"
        ) from None


def build_tls_context(options: TLSOptions) -> TLSContext:
    """
    Build a TLS client context from options.

    The `enabled` flag is not consulted; callers decide whether TLS is
    wanted and this function only builds it.

    Args:
        options: TLS client options

    Returns:
        TLSContext holding the ssl.SSLContext and server name override

    Raises:
        TLSConfigurationError: any certificate, key, version or cipher problem
    """
    if options.ca_path:
        certificates = load_ca_certificates(options.ca_path)
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
        cadata = "".join(
            cert.public_bytes(serialization.Encoding.PEM).decode("ascii")
            for cert in certificates
        )
        try:
            context.load_verify_locations(cadata=cadata)
        except ssl.SSLError as e:
            raise TLSConfigurationError(f"failed to load CA {options.ca_path}: {e}") from e
        logger.debug("tls_ca_loaded", path=options.ca_path, certificates=len(certificates))
    else:
        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)

    if bool(options.cert_path) != bool(options.key_path):
        raise TLSConfigurationError(
            "for client auth via TLS, either both client certificate "
            "and key must be supplied, or neither"
        )
    if options.cert_path:
        verify_key_pair(options.cert_path, options.key_path)
        try:
            context.load_cert_chain(options.cert_path, options.key_path)
        except (ssl.SSLError, OSError) as e:
            raise TLSConfigurationError(
                f"failed to load client key pair {options.cert_path}: {e}"
            ) from e

    if options.skip_host_verify:
        # check_hostname must be cleared before verify_mode can drop to CERT_NONE
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        logger.warning("tls_verification_disabled", server_name=options.server_name or None)

    minimum = _tls_version(options.min_version, "min") if options.min_version else None
    maximum = _tls_version(options.max_version, "max") if options.max_version else None
    if minimum is not None and maximum is not None and minimum.value > maximum.value:
        raise TLSConfigurationError(
            f"minimum TLS version {options.min_version} is greater than "
            f"maximum TLS version {options.max_version}"
        )
    try:
        if minimum is not None:
            context.minimum_version = minimum
        if maximum is not None:
            context.maximum_version = maximum
    except ValueError as e:
        raise TLSConfigurationError(f"unsupported TLS version bound: {e}") from e

    if options.cipher_suites:
        try:
            context.set_ciphers(":".join(options.cipher_suites))
        except ssl.SSLError as e:
            raise TLSConfigurationError(
                f"no usable cipher in {list(options.cipher_suites)}: {e}"
            ) from e

    return TLSContext(ssl_context=context, server_name=options.server_name or None)
