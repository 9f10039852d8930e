"""Exception hierarchy for stratagem.

Composition itself defines no errors: exceptions raised by a strategy while
building its transformer reach the caller unchanged. These types cover the
surrounding configuration layer.
"""

from __future__ import annotations


class StratagemError(Exception):
    """Base class for errors raised by stratagem itself."""


class ConfigError(StratagemError):
    """A ``stratagem.toml`` file could not be read or validated."""
