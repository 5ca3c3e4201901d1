"""Kerberos (SASL/GSSAPI) settings population."""

from __future__ import annotations

from brokerauth.client.settings import ConnectionSettings
from brokerauth.config.options import KerberosConfig
from brokerauth.core.types import KerberosAuthType, SASLMechanism


def set_kerberos_configuration(
    config: KerberosConfig, settings: ConnectionSettings
) -> None:
    """
    Copy Kerberos parameters into SASL/GSSAPI settings.

    Infallible: required sub-fields are not checked here.
    With use_keytab the password is not installed.
    """
    settings.sasl.mechanism = SASLMechanism.GSSAPI
    settings.sasl.enable = True

    gssapi = settings.sasl.gssapi
    if config.use_keytab:
        gssapi.keytab_path = config.keytab_path
        gssapi.auth_type = KerberosAuthType.KEYTAB
    else:
        gssapi.auth_type = KerberosAuthType.USER
        gssapi.password = config.password
    gssapi.kerberos_config_path = config.config_path
    gssapi.username = config.username
    gssapi.realm = config.realm
    gssapi.service_name = config.service_name
