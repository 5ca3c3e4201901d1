"""
brokerauth Authentication Module

Resolves an AuthenticationConfig into broker ConnectionSettings.

Components:
- resolver: AuthResolver, the mechanism dispatch
- tls: TLS context installation
- kerberos: SASL/GSSAPI population
- plaintext: SASL PLAIN/SCRAM population
"""

from brokerauth.auth.resolver import (
    AuthResolver,
    KerberosSetter,
    PlainTextSetter,
    resolve_authentication,
)
from brokerauth.auth.kerberos import set_kerberos_configuration
from brokerauth.auth.plaintext import set_plaintext_configuration
from brokerauth.auth.tls import set_tls_configuration

__all__ = [
    "AuthResolver",
    "KerberosSetter",
    "PlainTextSetter",
    "resolve_authentication",
    "set_kerberos_configuration",
    "set_plaintext_configuration",
    "set_tls_configuration",
]
