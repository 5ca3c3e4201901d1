"""
brokerauth Configuration Binding

Maps a flat key/value source onto AuthenticationConfig.

Key layout (prefix "kafka.producer" shown):

    kafka.producer.auth.type
    kafka.producer.auth.kerberos.{service-name,realm,use-keytab,username,
                                  password,config-file,keytab-file}
    kafka.producer.auth.tls.{enabled,ca,cert,key,server-name,
                             skip-host-verify,min-version,max-version,
                             cipher-suites}
    kafka.producer.auth.plaintext.{username,password,mechanism}

The environment form upper-cases the key and replaces "." and "-" with
"_" (KAFKA_PRODUCER_AUTH_TYPE).
"""

from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, Tuple

import attrs
import structlog

from brokerauth.config.options import (
    AuthenticationConfig,
    DEFAULT_KERBEROS_CONFIG_PATH,
    DEFAULT_KERBEROS_KEYTAB_PATH,
    DEFAULT_KERBEROS_SERVICE_NAME,
    KerberosConfig,
    PlainTextConfig,
    TLSOptions,
)
from brokerauth.core.exceptions import ConfigurationError
from brokerauth.core.types import AuthMechanism

logger = structlog.get_logger()


# =============================================================================
# KEYS
# =============================================================================

SUFFIX_AUTHENTICATION = ".auth.type"

KERBEROS_PREFIX = ".auth.kerberos"
SUFFIX_KERBEROS_SERVICE_NAME = ".service-name"
SUFFIX_KERBEROS_REALM = ".realm"
SUFFIX_KERBEROS_USE_KEYTAB = ".use-keytab"
SUFFIX_KERBEROS_USERNAME = ".username"
SUFFIX_KERBEROS_PASSWORD = ".password"
SUFFIX_KERBEROS_CONFIG = ".config-file"
SUFFIX_KERBEROS_KEYTAB = ".keytab-file"

TLS_PREFIX = ".auth.tls"
SUFFIX_TLS_ENABLED = ".enabled"
SUFFIX_TLS_CA = ".ca"
SUFFIX_TLS_CERT = ".cert"
SUFFIX_TLS_KEY = ".key"
SUFFIX_TLS_SERVER_NAME = ".server-name"
SUFFIX_TLS_SKIP_HOST_VERIFY = ".skip-host-verify"
SUFFIX_TLS_MIN_VERSION = ".min-version"
SUFFIX_TLS_MAX_VERSION = ".max-version"
SUFFIX_TLS_CIPHER_SUITES = ".cipher-suites"

PLAINTEXT_PREFIX = ".auth.plaintext"
SUFFIX_PLAINTEXT_USERNAME = ".username"
SUFFIX_PLAINTEXT_PASSWORD = ".password"
SUFFIX_PLAINTEXT_MECHANISM = ".mechanism"

_TRUE = frozenset({"true", "1", "yes", "on"})
_FALSE = frozenset({"false", "0", "no", "off", ""})


def config_keys(prefix: str) -> Tuple[str, ...]:
    """Return every key read for a prefix."""
    kerberos = prefix + KERBEROS_PREFIX
    tls = prefix + TLS_PREFIX
    plaintext = prefix + PLAINTEXT_PREFIX
    return (
        prefix + SUFFIX_AUTHENTICATION,
        kerberos + SUFFIX_KERBEROS_SERVICE_NAME,
        kerberos + SUFFIX_KERBEROS_REALM,
        kerberos + SUFFIX_KERBEROS_USE_KEYTAB,
        kerberos + SUFFIX_KERBEROS_USERNAME,
        kerberos + SUFFIX_KERBEROS_PASSWORD,
        kerberos + SUFFIX_KERBEROS_CONFIG,
        kerberos + SUFFIX_KERBEROS_KEYTAB,
        tls + SUFFIX_TLS_ENABLED,
        tls + SUFFIX_TLS_CA,
        tls + SUFFIX_TLS_CERT,
        tls + SUFFIX_TLS_KEY,
        tls + SUFFIX_TLS_SERVER_NAME,
        tls + SUFFIX_TLS_SKIP_HOST_VERIFY,
        tls + SUFFIX_TLS_MIN_VERSION,
        tls + SUFFIX_TLS_MAX_VERSION,
        tls + SUFFIX_TLS_CIPHER_SUITES,
        plaintext + SUFFIX_PLAINTEXT_USERNAME,
        plaintext + SUFFIX_PLAINTEXT_PASSWORD,
        plaintext + SUFFIX_PLAINTEXT_MECHANISM,
    )


def env_key(key: str) -> str:
    """Translate a dotted key to its environment variable name."""
    return key.replace(".", "_").replace("-", "_").upper()


# =============================================================================
# VALUE COERCION
# =============================================================================


@attrs.define(frozen=True)
class _Reader:
    """Typed access to a flat mapping."""

    values: Mapping[str, object]

    def string(self, key: str, default: str = "") -> str:
        value = self.values.get(key)
        if value is None:
            return default
        return str(value)

    def boolean(self, key: str, default: bool = False) -> bool:
        value = self.values.get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        text = str(value).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise ConfigurationError(f"invalid boolean value {value!r} for {key}")

    def string_list(self, key: str) -> Tuple[str, ...]:
        value = self.values.get(key)
        if value is None:
            return ()
        if isinstance(value, (list, tuple)):
            items = [str(item) for item in value]
        else:
            items = str(value).split(",")
        return tuple(item.strip() for item in items if item.strip())


# =============================================================================
# BINDING
# =============================================================================


def bind_from_mapping(prefix: str, values: Mapping[str, object]) -> AuthenticationConfig:
    """
    Load authentication configuration from flat keys.

    Args:
        prefix: Key prefix (e.g., "kafka.consumer")
        values: Flat mapping of dotted keys to values

    Returns:
        AuthenticationConfig; TLS is marked enabled when the selector is "tls"

    Raises:
        ConfigurationError: a boolean key holds an unrecognized value
    """
    read = _Reader(values)
    authentication = read.string(prefix + SUFFIX_AUTHENTICATION)

    kerberos = prefix + KERBEROS_PREFIX
    kerberos_config = KerberosConfig(
        service_name=read.string(
            kerberos + SUFFIX_KERBEROS_SERVICE_NAME, DEFAULT_KERBEROS_SERVICE_NAME
        ),
        realm=read.string(kerberos + SUFFIX_KERBEROS_REALM),
        use_keytab=read.boolean(kerberos + SUFFIX_KERBEROS_USE_KEYTAB),
        username=read.string(kerberos + SUFFIX_KERBEROS_USERNAME),
        password=read.string(kerberos + SUFFIX_KERBEROS_PASSWORD),
        config_path=read.string(
            kerberos + SUFFIX_KERBEROS_CONFIG, DEFAULT_KERBEROS_CONFIG_PATH
        ),
        keytab_path=read.string(
            kerberos + SUFFIX_KERBEROS_KEYTAB, DEFAULT_KERBEROS_KEYTAB_PATH
        ),
    )

    tls = prefix + TLS_PREFIX
    tls_options = TLSOptions(
        enabled=read.boolean(tls + SUFFIX_TLS_ENABLED),
        ca_path=read.string(tls + SUFFIX_TLS_CA),
        cert_path=read.string(tls + SUFFIX_TLS_CERT),
        key_path=read.string(tls + SUFFIX_TLS_KEY),
        server_name=read.string(tls + SUFFIX_TLS_SERVER_NAME),
        skip_host_verify=read.boolean(tls + SUFFIX_TLS_SKIP_HOST_VERIFY),
        min_version=read.string(tls + SUFFIX_TLS_MIN_VERSION),
        max_version=read.string(tls + SUFFIX_TLS_MAX_VERSION),
        cipher_suites=read.string_list(tls + SUFFIX_TLS_CIPHER_SUITES),
    )
    if AuthMechanism.parse(authentication) is AuthMechanism.TLS:
        tls_options = attrs.evolve(tls_options, enabled=True)

    plaintext = prefix + PLAINTEXT_PREFIX
    plaintext_config = PlainTextConfig(
        username=read.string(plaintext + SUFFIX_PLAINTEXT_USERNAME),
        password=read.string(plaintext + SUFFIX_PLAINTEXT_PASSWORD),
        mechanism=read.string(plaintext + SUFFIX_PLAINTEXT_MECHANISM),
    )

    logger.debug(
        "auth_config_bound",
        prefix=prefix,
        authentication=authentication,
        tls_enabled=tls_options.enabled,
    )

    return AuthenticationConfig(
        authentication=authentication,
        kerberos=kerberos_config,
        tls=tls_options,
        plaintext=plaintext_config,
    )


def bind_from_env(
    prefix: str, environ: Optional[Mapping[str, str]] = None
) -> AuthenticationConfig:
    """
    Load authentication configuration from environment variables.

    Args:
        prefix: Dotted key prefix (e.g., "kafka.producer")
        environ: Variables to read (os.environ if not given)
    """
    if environ is None:
        environ = os.environ
    values: Dict[str, object] = {}
    for key in config_keys(prefix):
        name = env_key(key)
        if name in environ:
            values[key] = environ[name]
    return bind_from_mapping(prefix, values)
