"""
brokerauth - Authentication Settings for Kafka Broker Clients

Resolves a declarative authentication configuration (none, TLS, Kerberos
or SASL plaintext) into client connection settings ready for the broker
transport layer.

Example Usage:
    from brokerauth import AuthenticationConfig, ConnectionSettings

    config = AuthenticationConfig.from_mapping("kafka.producer", {
        "kafka.producer.auth.type": "plaintext",
        "kafka.producer.auth.plaintext.username": "svc",
        "kafka.producer.auth.plaintext.password": "secret",
        "kafka.producer.auth.plaintext.mechanism": "SCRAM-SHA-512",
        "kafka.producer.auth.tls.enabled": "true",
    })
    settings = ConnectionSettings()
    config.set_configuration(settings)

    producer = AIOKafkaProducer(
        bootstrap_servers="broker:9093",
        **settings.to_client_kwargs(),
    )
"""

from brokerauth.core.types import AuthMechanism, SASLMechanism, TLSContext
from brokerauth.core.exceptions import (
    BrokerAuthError,
    ConfigurationError,
    TLSConfigurationError,
    UnsupportedSASLMechanism,
    UnknownAuthenticationMethod,
)
from brokerauth.config.options import (
    AuthenticationConfig,
    KerberosConfig,
    PlainTextConfig,
    TLSOptions,
)
from brokerauth.client.settings import ConnectionSettings
from brokerauth.auth.resolver import AuthResolver, resolve_authentication

__version__ = "0.1.0"

__all__ = [
    # Main API
    "AuthResolver",
    "resolve_authentication",
    "AuthenticationConfig",
    "ConnectionSettings",
    # Configuration
    "KerberosConfig",
    "PlainTextConfig",
    "TLSOptions",
    # Types
    "AuthMechanism",
    "SASLMechanism",
    "TLSContext",
    # Exceptions
    "BrokerAuthError",
    "ConfigurationError",
    "TLSConfigurationError",
    "UnsupportedSASLMechanism",
    "UnknownAuthenticationMethod",
    # Metadata
    "__version__",
]
