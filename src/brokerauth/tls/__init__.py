"""
brokerauth TLS Module

Builds TLS client contexts from TLSOptions.
"""

from brokerauth.tls.context import (
    TLS_VERSIONS,
    TLSContextBuilder,
    build_tls_context,
    load_ca_certificates,
    verify_key_pair,
)

__all__ = [
    "TLS_VERSIONS",
    "TLSContextBuilder",
    "build_tls_context",
    "load_ca_certificates",
    "verify_key_pair",
]
