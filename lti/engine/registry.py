"""Operation registry: maps operation names to analysis functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from lti.decomposition import (
    even_odd_decomposition,
    impulse_decomposition,
    step_decomposition,
)
from lti.errors import ConfigError
from lti.signals import Signal
from lti.spectral import real_dft

if TYPE_CHECKING:
    from lti.engine.config import AnalysisConfig

# Each operation returns its output signals keyed by component name.
Operation = Callable[[Signal, "AnalysisConfig"], dict[str, Signal]]

_REGISTRY: dict[str, Operation] = {}


def register(name: str, operation: Operation) -> None:
    """Register an operation under the given name."""
    _REGISTRY[name] = operation


def get_operation(name: str) -> Operation:
    if name not in _REGISTRY:
        raise ConfigError(
            f"Unknown operation '{name}'. Registered: {available_operations()}"
        )
    return _REGISTRY[name]


def available_operations() -> list[str]:
    return sorted(_REGISTRY)


def _impulse(signal: Signal, cfg: AnalysisConfig) -> dict[str, Signal]:
    return {f"impulse_{i}": c for i, c in enumerate(impulse_decomposition(signal))}


def _step(signal: Signal, cfg: AnalysisConfig) -> dict[str, Signal]:
    return {f"step_{i}": c for i, c in enumerate(step_decomposition(signal))}


def _even_odd(signal: Signal, cfg: AnalysisConfig) -> dict[str, Signal]:
    parts = even_odd_decomposition(signal)
    return {"even": parts.even, "odd": parts.odd}


def _fold(signal: Signal, cfg: AnalysisConfig) -> dict[str, Signal]:
    kernel = cfg.load_kernel()
    if kernel is None:
        raise ConfigError("operation 'fold' requires a 'kernel'")
    return {"fold": signal.fold(kernel)}


def _dft(signal: Signal, cfg: AnalysisConfig) -> dict[str, Signal]:
    return real_dft(signal).components()


register("impulse", _impulse)
register("step", _step)
register("even_odd", _even_odd)
register("fold", _fold)
register("dft", _dft)
