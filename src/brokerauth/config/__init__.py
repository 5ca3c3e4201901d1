"""
brokerauth Configuration Module

Components:
- options: AuthenticationConfig and per-mechanism parameter groups
- binding: flat key/value and environment loaders
"""

from brokerauth.config.options import (
    AuthenticationConfig,
    KerberosConfig,
    PlainTextConfig,
    TLSOptions,
)
from brokerauth.config.binding import (
    bind_from_env,
    bind_from_mapping,
    config_keys,
    env_key,
)

__all__ = [
    "AuthenticationConfig",
    "KerberosConfig",
    "PlainTextConfig",
    "TLSOptions",
    "bind_from_env",
    "bind_from_mapping",
    "config_keys",
    "env_key",
]
