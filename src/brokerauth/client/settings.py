"""
brokerauth Connection Settings

Mutable broker client settings populated by the authentication resolver
and handed to the transport layer.

Lifecycle:
1. Caller creates ConnectionSettings
2. AuthResolver mutates its tls/sasl sections in place
3. Caller passes to_client_kwargs() to the Kafka client constructor
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import attrs
from attrs import field

from brokerauth.core.types import (
    KerberosAuthType,
    SASLMechanism,
    SecurityProtocol,
    TLSContext,
)


@attrs.define
class TLSSettings:
    """Transport encryption section."""

    enable: bool = False
    context: Optional[TLSContext] = None


@attrs.define
class GSSAPISettings:
    """Kerberos section of the SASL settings."""

    auth_type: Optional[KerberosAuthType] = None
    keytab_path: str = ""
    kerberos_config_path: str = ""
    service_name: str = ""
    username: str = ""
    password: str = field(default="", repr=False)
    realm: str = ""


@attrs.define
class SASLSettings:
    """SASL authentication section."""

    enable: bool = False
    mechanism: Optional[SASLMechanism] = None
    user: str = ""
    password: str = field(default="", repr=False)
    gssapi: GSSAPISettings = attrs.Factory(GSSAPISettings)


@attrs.define
class ConnectionSettings:
    """
    Broker client network settings.

    Not safe for concurrent resolution; one resolution per instance,
    performed when the client is constructed.
    """

    client_id: str = ""
    tls: TLSSettings = attrs.Factory(TLSSettings)
    sasl: SASLSettings = attrs.Factory(SASLSettings)

    @property
    def security_protocol(self) -> SecurityProtocol:
        """Kafka security.protocol implied by the tls/sasl sections."""
        return SecurityProtocol.select(tls=self.tls.enable, sasl=self.sasl.enable)

    def to_client_kwargs(self) -> Dict[str, Any]:
        """
        Render settings as Kafka client keyword arguments.

        Uses the aiokafka / kafka-python argument names, e.g.
        AIOKafkaProducer(bootstrap_servers=..., **settings.to_client_kwargs()).

        The TLS server name override is not rendered: neither client accepts
        an SNI argument, they pass each bootstrap host as server_hostname.
        It stays available on tls.context.server_name for transports that
        wrap sockets themselves.
        """
        kwargs: Dict[str, Any] = {"security_protocol": self.security_protocol.value}
        if self.client_id:
            kwargs["client_id"] = self.client_id

        if self.tls.enable and self.tls.context is not None:
            kwargs["ssl_context"] = self.tls.context.ssl_context

        if not self.sasl.enable or self.sasl.mechanism is None:
            return kwargs

        kwargs["sasl_mechanism"] = self.sasl.mechanism.value
        if self.sasl.mechanism is SASLMechanism.GSSAPI:
            kwargs["sasl_kerberos_service_name"] = self.sasl.gssapi.service_name
            if self.sasl.gssapi.realm:
                kwargs["sasl_kerberos_domain_name"] = self.sasl.gssapi.realm
        else:
            kwargs["sasl_plain_username"] = self.sasl.user
            kwargs["sasl_plain_password"] = self.sasl.password
        return kwargs
