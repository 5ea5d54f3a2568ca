from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from ..core.domain import INTEGER, REAL, domain_for
from ..core.interfaces import NumericDomain, Sample, Signal, require_same_domain


@dataclass(frozen=True, eq=False, repr=False)
class AperiodicSignal(Signal):
    """
    Finite signal, zero everywhere outside ``0..len-1``.

    Samples are copied into a read-only numpy array of the domain's dtype on
    construction, so an instance never changes after it is built.

    Attributes:
        values: Stored samples.
        domain: Numeric domain (``INTEGER`` or ``REAL``, or a name
            accepted by ``domain_for``).
        name: Optional label used by reporting; ignored by equality.
    """

    values: np.ndarray
    domain: Union[NumericDomain, str] = REAL
    name: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        domain = domain_for(self.domain)
        object.__setattr__(self, "domain", domain)
        samples = np.array(domain.coerce(self.values), copy=True)
        samples.setflags(write=False)
        object.__setattr__(self, "values", samples)

    @classmethod
    def integer(cls, values: ArrayLike, name: Optional[str] = None) -> AperiodicSignal:
        return cls(values, domain=INTEGER, name=name)

    @classmethod
    def real(cls, values: ArrayLike, name: Optional[str] = None) -> AperiodicSignal:
        return cls(values, domain=REAL, name=name)

    def new(self, values: ArrayLike) -> AperiodicSignal:
        return type(self)(values, domain=self.domain)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Sample:
        # operator.index rejects slices and floats with a TypeError
        i = operator.index(index)
        if 0 <= i < len(self.values):
            return self.domain.scalar(self.values[i])
        return self.domain.zero

    def __iter__(self) -> Iterator[Sample]:
        for value in self.values:
            yield self.domain.scalar(value)

    def __add__(self, other: object) -> AperiodicSignal:
        if not isinstance(other, Signal):
            return NotImplemented
        require_same_domain(self, other, "add")
        length = max(len(self), len(other))
        return self.new([self[i] + other[i] for i in range(length)])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return len(self) == len(other) and np.array_equal(
            self.values, np.asarray(other.values)
        )

    def __hash__(self) -> int:
        return hash(tuple(self.values.tolist()))

    def __repr__(self) -> str:
        return f"AperiodicSignal({self.values.tolist()!r}, domain={self.domain.name})"

    def to_series(self) -> pd.Series:
        """Samples as a ``pandas.Series`` indexed by sample number ``n``."""
        return pd.Series(
            self.values.copy(),
            index=pd.RangeIndex(len(self), name="n"),
            name=self.name or "value",
        )
