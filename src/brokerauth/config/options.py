"""
brokerauth Configuration Types

Declarative description of how a broker client authenticates.

AuthenticationConfig carries one parameter group per mechanism; all groups
always exist and the `authentication` selector decides which one is used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Optional, Tuple, Union

import attrs
from attrs import field
from returns.result import Failure

from brokerauth.core.types import AuthMechanism

if TYPE_CHECKING:
    from brokerauth.client.settings import ConnectionSettings


DEFAULT_KERBEROS_SERVICE_NAME = "kafka"
DEFAULT_KERBEROS_CONFIG_PATH = "/etc/krb5.conf"
DEFAULT_KERBEROS_KEYTAB_PATH = "/etc/security/kafka.keytab"


@attrs.define(frozen=True)
class KerberosConfig:
    """
    Kerberos (SASL/GSSAPI) parameters.

    No cross-field validation happens here; missing values are left for
    the Kerberos library to reject at handshake time.

    Attributes:
        service_name: Broker service principal name (e.g., "kafka")
        realm: Kerberos realm (e.g., "EXAMPLE.COM")
        use_keytab: Acquire tickets from keytab_path instead of a password
        username: Client principal name
        password: Client password (ignored when use_keytab is set)
        config_path: Path to krb5.conf
        keytab_path: Path to the keytab file
    """

    service_name: str = ""
    realm: str = ""
    use_keytab: bool = False
    username: str = ""
    password: str = field(default="", repr=False)
    config_path: str = ""
    keytab_path: str = ""


@attrs.define(frozen=True)
class TLSOptions:
    """
    TLS client options.

    Attributes:
        enabled: Run the connection over TLS
        ca_path: CA bundle used to verify the broker (system store if empty)
        cert_path: Client certificate for mutual TLS
        key_path: Client private key for mutual TLS
        server_name: Override for SNI and hostname verification
        skip_host_verify: Disable certificate and hostname verification
        min_version: Lowest TLS version ("1.0" .. "1.3"), library default if empty
        max_version: Highest TLS version, library default if empty
        cipher_suites: OpenSSL cipher names, library default if empty
    """

    enabled: bool = False
    ca_path: str = ""
    cert_path: str = ""
    key_path: str = ""
    server_name: str = ""
    skip_host_verify: bool = False
    min_version: str = ""
    max_version: str = ""
    cipher_suites: Tuple[str, ...] = field(factory=tuple, converter=tuple)


@attrs.define(frozen=True)
class PlainTextConfig:
    """
    SASL username/password parameters.

    `mechanism` has no default: PLAIN, SCRAM-SHA-256 and SCRAM-SHA-512 are
    accepted by the plaintext setter, anything else (including "") is
    rejected there.
    """

    username: str = ""
    password: str = field(default="", repr=False)
    mechanism: str = ""


ActiveParams = Union[KerberosConfig, TLSOptions, PlainTextConfig, None]


@attrs.define
class AuthenticationConfig:
    """
    Authentication configuration for a broker client.

    Example:
        config = AuthenticationConfig(
            authentication="plaintext",
            plaintext=PlainTextConfig(
                username="svc", password="secret", mechanism="SCRAM-SHA-512"
            ),
        )
        settings = ConnectionSettings()
        config.set_configuration(settings)
    """

    authentication: str = ""
    kerberos: KerberosConfig = attrs.Factory(KerberosConfig)
    tls: TLSOptions = attrs.Factory(TLSOptions)
    plaintext: PlainTextConfig = attrs.Factory(PlainTextConfig)

    @property
    def mechanism(self) -> Optional[AuthMechanism]:
        """Normalized mechanism, or None if the selector is unknown."""
        return AuthMechanism.parse(self.authentication)

    @property
    def tls_requested(self) -> bool:
        """
        Return True if a TLS context must be built.

        Transport security and authentication identity are independent:
        the TLS mechanism or the enabled flag alone is enough.
        """
        return self.mechanism is AuthMechanism.TLS or self.tls.enabled

    @property
    def active_params(self) -> ActiveParams:
        """Parameter group selected by the mechanism (None for none/unknown)."""
        return {
            AuthMechanism.KERBEROS: self.kerberos,
            AuthMechanism.TLS: self.tls,
            AuthMechanism.PLAINTEXT: self.plaintext,
        }.get(self.mechanism)

    def set_configuration(self, settings: ConnectionSettings) -> ConnectionSettings:
        """
        Configure authentication into broker client settings.

        Raises:
            TLSConfigurationError: TLS context could not be built
            UnsupportedSASLMechanism: plaintext mechanism not accepted
            UnknownAuthenticationMethod: selector names no mechanism
        """
        from brokerauth.auth.resolver import AuthResolver

        result = AuthResolver().resolve(self, settings)
        if isinstance(result, Failure):
            raise result.failure()
        return result.unwrap()

    @classmethod
    def from_mapping(
        cls, prefix: str, values: Mapping[str, object]
    ) -> AuthenticationConfig:
        """Bind configuration from flat `<prefix>.auth.*` keys."""
        from brokerauth.config.binding import bind_from_mapping

        return bind_from_mapping(prefix, values)

    @classmethod
    def from_env(
        cls, prefix: str, environ: Optional[Mapping[str, str]] = None
    ) -> AuthenticationConfig:
        """Bind configuration from environment variables (KAFKA_AUTH_TYPE, ...)."""
        from brokerauth.config.binding import bind_from_env

        return bind_from_env(prefix, environ)
