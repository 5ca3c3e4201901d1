"""SASL username/password settings population."""

from __future__ import annotations

from returns.result import Failure, Result, Success

from brokerauth.client.settings import ConnectionSettings
from brokerauth.config.options import PlainTextConfig
from brokerauth.core.exceptions import UnsupportedSASLMechanism
from brokerauth.core.types import SASLMechanism

_SUPPORTED = {mechanism.value: mechanism for mechanism in SASLMechanism.plaintext_mechanisms()}


def set_plaintext_configuration(
    config: PlainTextConfig, settings: ConnectionSettings
) -> Result[None, UnsupportedSASLMechanism]:
    """
    Install SASL credentials and select the mechanism.

    The mechanism name is matched case-insensitively. Credentials are
    installed before the mechanism is checked and stay set on failure.

    Returns:
        Success(None), or Failure(UnsupportedSASLMechanism) for anything
        other than PLAIN, SCRAM-SHA-256 or SCRAM-SHA-512
    """
    settings.sasl.enable = True
    settings.sasl.user = config.username
    settings.sasl.password = config.password

    mechanism = _SUPPORTED.get(config.mechanism.strip().upper())
    if mechanism is None:
        return Failure(UnsupportedSASLMechanism(config.mechanism, supported=tuple(_SUPPORTED)))

    settings.sasl.mechanism = mechanism
    return Success(None)
