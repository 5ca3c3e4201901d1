#!/usr/bin/env python3
"""
Broker Client Authentication Example

Demonstrates how to resolve a Kafka client's authentication settings
from flat configuration keys.

Features:
1. Binding AuthenticationConfig from <prefix>.auth.* keys
2. SASL/SCRAM over TLS
3. Kerberos without TLS
4. Handling resolution failures
"""

from returns.result import Failure

from brokerauth import (
    AuthResolver,
    AuthenticationConfig,
    ConnectionSettings,
    UnknownAuthenticationMethod,
)


def main():
    """Demonstrate authentication resolution."""

    print("=" * 70)
    print("brokerauth - Broker Client Authentication")
    print("=" * 70)
    print()

    # ==========================================================================
    # EXAMPLE 1: SCRAM over TLS
    # ==========================================================================
    print("1. SASL/SCRAM-SHA-512 over TLS")
    print("-" * 40)

    config = AuthenticationConfig.from_mapping("kafka.producer", {
        "kafka.producer.auth.type": "plaintext",
        "kafka.producer.auth.plaintext.username": "producer",
        "kafka.producer.auth.plaintext.password": "changeit",
        "kafka.producer.auth.plaintext.mechanism": "SCRAM-SHA-512",
        "kafka.producer.auth.tls.enabled": "true",
    })
    settings = config.set_configuration(ConnectionSettings(client_id="producer-1"))
    kwargs = settings.to_client_kwargs()
    print(f"   security_protocol: {kwargs['security_protocol']}")
    print(f"   sasl_mechanism:    {kwargs['sasl_mechanism']}")
    print()

    # ==========================================================================
    # EXAMPLE 2: Kerberos
    # ==========================================================================
    print("2. Kerberos with keytab")
    print("-" * 40)

    config = AuthenticationConfig.from_mapping("kafka.consumer", {
        "kafka.consumer.auth.type": " Kerberos ",
        "kafka.consumer.auth.kerberos.realm": "EXAMPLE.COM",
        "kafka.consumer.auth.kerberos.use-keytab": "true",
        "kafka.consumer.auth.kerberos.username": "consumer",
    })
    settings = config.set_configuration(ConnectionSettings())
    print(f"   auth type:   {settings.sasl.gssapi.auth_type.name}")
    print(f"   keytab:      {settings.sasl.gssapi.keytab_path}")
    print(f"   client args: {settings.to_client_kwargs()}")
    print()

    # ==========================================================================
    # EXAMPLE 3: Failure handling
    # ==========================================================================
    print("3. Unknown mechanism")
    print("-" * 40)

    config = AuthenticationConfig(authentication="OAuth")
    result = AuthResolver().resolve(config, ConnectionSettings())
    if isinstance(result, Failure):
        error = result.failure()
        assert isinstance(error, UnknownAuthenticationMethod)
        print(f"   refused: {error.message}")
    print()


if __name__ == "__main__":
    main()
