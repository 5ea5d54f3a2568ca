"""Numeric domains injected into signals: integer and real samples."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import ArrayLike

from lti.errors import SignalDomainError

from .interfaces import NumericDomain

# Sample kinds accepted by either domain: bool, signed/unsigned int, float.
_NUMERIC_KINDS = "biuf"

_INT64_MAX = np.iinfo(np.int64).max
# Floats in [-2**63, 2**63) convert to int64 exactly.
_INT64_FLOAT_BOUND = 2.0 ** 63


def _as_samples(values: ArrayLike, domain_name: str) -> np.ndarray:
    """Return *values* as a 1-D numeric array, or raise ``SignalDomainError``."""
    arr = np.asarray(values)
    if arr.ndim != 1:
        raise SignalDomainError(
            f"{domain_name} samples must be one-dimensional, got shape {arr.shape}"
        )
    if np.iscomplexobj(arr):
        raise SignalDomainError("complex samples are not supported")
    if arr.size == 0:
        return arr.astype(np.float64)
    if arr.dtype.kind not in _NUMERIC_KINDS:
        raise SignalDomainError(
            f"{domain_name} samples must be numeric, got dtype '{arr.dtype}'"
        )
    return arr


@dataclass(frozen=True)
class IntegerDomain:
    """Samples are ``int64``; halving truncates toward zero."""

    name: str = "integer"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.int64)

    @property
    def zero(self) -> int:
        return 0

    def coerce(self, values: ArrayLike) -> np.ndarray:
        arr = np.asarray(values)
        if arr.dtype.kind == "O":
            # Python ints beyond 64 bits land in object arrays
            if not all(isinstance(v, (int, np.integer)) for v in arr.ravel()):
                raise SignalDomainError(
                    f"{self.name} samples must be numeric, got dtype 'object'"
                )
            try:
                arr = np.array(arr, dtype=self.dtype)
            except OverflowError as exc:
                raise SignalDomainError("integer samples exceed the int64 range") from exc
        arr = _as_samples(arr, self.name)
        if arr.size == 0:
            return arr.astype(self.dtype)
        if arr.dtype.kind == "u" and arr.max() > _INT64_MAX:
            raise SignalDomainError("integer samples exceed the int64 range")
        if arr.dtype.kind == "f":
            if not np.all(np.isfinite(arr)):
                raise SignalDomainError("integer samples must be finite")
            if not np.all(arr == np.trunc(arr)):
                raise SignalDomainError(
                    "integer domain requires integral samples; use the real domain"
                )
            if arr.max() >= _INT64_FLOAT_BOUND or arr.min() < -_INT64_FLOAT_BOUND:
                raise SignalDomainError("integer samples exceed the int64 range")
        return arr.astype(self.dtype)

    def halve(self, values: np.ndarray) -> np.ndarray:
        # numpy's // floors; -3 // 2 == -2 but the integer domain wants -1
        return np.sign(values) * (np.abs(values) // 2)

    def scalar(self, value) -> int:
        return int(value)


@dataclass(frozen=True)
class RealDomain:
    """Samples are ``float64``; halving is exact division."""

    name: str = "real"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(np.float64)

    @property
    def zero(self) -> float:
        return 0.0

    def coerce(self, values: ArrayLike) -> np.ndarray:
        return _as_samples(values, self.name).astype(self.dtype)

    def halve(self, values: np.ndarray) -> np.ndarray:
        return values / 2.0

    def scalar(self, value) -> float:
        return float(value)


INTEGER = IntegerDomain()
REAL = RealDomain()

_ALIASES: dict[str, NumericDomain] = {
    "integer": INTEGER,
    "int": INTEGER,
    "real": REAL,
    "float": REAL,
}


def domain_for(domain: Union[str, NumericDomain]) -> NumericDomain:
    """Resolve a domain name (``"integer"``, ``"real"``, ...) to its instance."""
    if isinstance(domain, NumericDomain):
        return domain
    key = str(domain).strip().lower()
    if key not in _ALIASES:
        raise SignalDomainError(
            f"Unknown numeric domain '{domain}'. Known: {sorted(_ALIASES)}"
        )
    return _ALIASES[key]
