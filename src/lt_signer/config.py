"""LT-Signer Configuration Module

Configuration loaded from environment variables with defaults.
- Environment variables override defaults
- Configuration is immutable after initialization
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from lt_signer.constants import (
    DEFAULT_SECRET, ENV_LOG_LEVEL, ENV_SECRET, LOG_LEVEL, SIGNATURE_HEADER
)


def resolve_secret(environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve the HMAC key from the environment.

    An unset or empty ``HMAC_SECRET`` falls back to the built-in default.

    Args:
        environ: Mapping to read from (defaults to ``os.environ``)

    Returns:
        Secret string used as the HMAC key
    """
    if environ is None:
        environ = os.environ
    return environ.get(ENV_SECRET) or DEFAULT_SECRET


@dataclass(frozen=True)
class SignerConfig:
    """Signer configuration."""
    secret: str
    header_name: str
    log_level: str

    @property
    def uses_default_secret(self) -> bool:
        return self.secret == DEFAULT_SECRET

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'SignerConfig':
        """Load configuration from environment variables with defaults.

        Returns:
            SignerConfig instance with values from environment or defaults
        """
        if environ is None:
            environ = os.environ
        return cls(
            secret=resolve_secret(environ),
            header_name=SIGNATURE_HEADER,
            log_level=(environ.get(ENV_LOG_LEVEL) or LOG_LEVEL).upper()
        )

    def to_dict(self) -> dict:
        """Convert configuration to dictionary for serialization.

        The default secret is public, anything else is redacted.
        """
        return {
            'secret': self.secret if self.uses_default_secret else '***REDACTED***',
            'header_name': self.header_name,
            'log_level': self.log_level
        }

