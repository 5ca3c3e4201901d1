"""TLS transport settings population."""

from __future__ import annotations

import attrs
from returns.result import Failure, Result, Success

from brokerauth.client.settings import ConnectionSettings
from brokerauth.config.options import TLSOptions
from brokerauth.core.exceptions import TLSConfigurationError
from brokerauth.tls.context import TLSContextBuilder, build_tls_context


def set_tls_configuration(
    options: TLSOptions,
    settings: ConnectionSettings,
    builder: TLSContextBuilder = build_tls_context,
) -> Result[None, TLSConfigurationError]:
    """
    Build a TLS context and install it on the settings.

    Options are passed to the builder with enabled forced on. Settings are
    left untouched when the builder fails.
    """
    if not options.enabled:
        options = attrs.evolve(options, enabled=True)
    try:
        context = builder(options)
    except TLSConfigurationError as e:
        return Failure(e)

    settings.tls.enable = True
    settings.tls.context = context
    return Success(None)
