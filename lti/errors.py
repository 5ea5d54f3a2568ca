"""Exception types raised by the signal library and the analysis runner."""

from __future__ import annotations


class SignalError(ValueError):
    """Base class for invalid signal input."""


class EmptySignalError(SignalError):
    """An operation that divides by (or indexes modulo) the length got n == 0."""


class SignalDomainError(SignalError):
    """Samples that cannot be represented in the requested numeric domain."""


class DomainMismatchError(SignalError, TypeError):
    """Two signals from different numeric domains were combined."""


class ConfigError(ValueError):
    """Invalid analysis-runner configuration."""
