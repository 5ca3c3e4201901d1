"""
brokerauth Authentication Resolver

Turns an AuthenticationConfig into populated broker ConnectionSettings.

Resolution order:
1. Normalize the selector (trim, lowercase, empty -> "none")
2. TLS: if the mechanism is "tls" or tls.enabled is set, build and install
   a TLS context. A failure here aborts before any credential is touched.
3. Dispatch on the mechanism:
   - none, tls: nothing further
   - kerberos: install GSSAPI settings (cannot fail)
   - plaintext: install SASL credentials (may reject the SASL mechanism)
   - anything else: UnknownAuthenticationMethod

TLS and authentication are independent predicates: any mechanism may run
over a TLS transport. When resolution succeeds the TLS context is already
installed before mechanism-specific credentials are.

Failures propagate immediately. Fields set before a failure stay set.
"""

from __future__ import annotations

from typing import Any, Callable

import attrs
import structlog
from returns.result import Failure, Result, Success

from brokerauth.auth.kerberos import set_kerberos_configuration
from brokerauth.auth.plaintext import set_plaintext_configuration
from brokerauth.auth.tls import set_tls_configuration
from brokerauth.client.settings import ConnectionSettings
from brokerauth.config.options import (
    AuthenticationConfig,
    KerberosConfig,
    PlainTextConfig,
)
from brokerauth.core.exceptions import BrokerAuthError, UnknownAuthenticationMethod
from brokerauth.core.types import AuthMechanism
from brokerauth.tls.context import TLSContextBuilder, build_tls_context

logger = structlog.get_logger()

KerberosSetter = Callable[[KerberosConfig, ConnectionSettings], None]
PlainTextSetter = Callable[
    [PlainTextConfig, ConnectionSettings], Result[None, BrokerAuthError]
]


@attrs.define
class AuthResolver:
    """
    Authentication mode resolver.

    Holds no state between calls; the collaborators are injectable so a
    caller can substitute its own TLS loader.

    Example:
        settings = ConnectionSettings()
        result = AuthResolver().resolve(config, settings)
        if isinstance(result, Failure):
            raise result.failure()
    """

    tls_builder: TLSContextBuilder = build_tls_context
    kerberos_setter: KerberosSetter = set_kerberos_configuration
    plaintext_setter: PlainTextSetter = set_plaintext_configuration

    _logger: Any = attrs.Factory(lambda: structlog.get_logger())

    def resolve(
        self, config: AuthenticationConfig, settings: ConnectionSettings
    ) -> Result[ConnectionSettings, BrokerAuthError]:
        """
        Configure authentication into broker client settings.

        Args:
            config: Authentication configuration
            settings: Settings to mutate in place

        Returns:
            Success(settings), or Failure(TLSConfigurationError |
            UnsupportedSASLMechanism | UnknownAuthenticationMethod)
        """
        authentication = AuthMechanism.normalize(config.authentication)

        self._logger.info(
            "auth_resolve_start",
            authentication=authentication,
            tls_enabled=config.tls.enabled,
        )

        if config.tls_requested:
            result = set_tls_configuration(config.tls, settings, self.tls_builder)
            if isinstance(result, Failure):
                return self._fail(config, result.failure())
            self._logger.info(
                "tls_configured",
                server_name=config.tls.server_name or None,
                client_cert=bool(config.tls.cert_path),
            )

        if authentication in (AuthMechanism.NONE.value, AuthMechanism.TLS.value):
            return Success(settings)

        if authentication == AuthMechanism.KERBEROS.value:
            self.kerberos_setter(config.kerberos, settings)
            self._logger.info(
                "kerberos_configured",
                service_name=config.kerberos.service_name,
                realm=config.kerberos.realm,
                use_keytab=config.kerberos.use_keytab,
            )
            return Success(settings)

        if authentication == AuthMechanism.PLAINTEXT.value:
            result = self.plaintext_setter(config.plaintext, settings)
            if isinstance(result, Failure):
                return self._fail(config, result.failure())
            if not settings.tls.enable:
                self._logger.warning(
                    "sasl_plaintext_without_tls",
                    mechanism=config.plaintext.mechanism,
                )
            self._logger.info(
                "plaintext_configured",
                username=config.plaintext.username,
                mechanism=config.plaintext.mechanism,
            )
            return Success(settings)

        return self._fail(config, UnknownAuthenticationMethod(config.authentication))

    def _fail(
        self, config: AuthenticationConfig, error: BrokerAuthError
    ) -> Result[ConnectionSettings, BrokerAuthError]:
        self._logger.error(
            "auth_resolve_failed",
            authentication=config.authentication,
            error_type=type(error).__name__,
            error=str(error),
        )
        return Failure(error)


def resolve_authentication(
    config: AuthenticationConfig, settings: ConnectionSettings
) -> Result[ConnectionSettings, BrokerAuthError]:
    """Resolve with the default collaborators."""
    return AuthResolver().resolve(config, settings)
