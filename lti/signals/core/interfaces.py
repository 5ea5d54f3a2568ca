from __future__ import annotations

from typing import Iterator, Protocol, Union, runtime_checkable

import numpy as np
from numpy.typing import ArrayLike

from lti.errors import DomainMismatchError, EmptySignalError

Sample = Union[int, float]


@runtime_checkable
class NumericDomain(Protocol):
    """Arithmetic a signal delegates to: storage dtype, zero, halving."""

    @property
    def name(self) -> str: ...

    @property
    def dtype(self) -> np.dtype: ...

    @property
    def zero(self) -> Sample: ...

    def coerce(self, values: ArrayLike) -> np.ndarray:
        """
        Converts raw samples into this domain's storage array.

        Raises:
            SignalDomainError: If the samples cannot be represented exactly.
        """
        ...

    def halve(self, values: np.ndarray) -> np.ndarray:
        """
        Divides every element by two. Integer domains truncate toward zero.
        """
        ...

    def scalar(self, value) -> Sample:
        """Converts one stored element into a plain Python number."""
        ...


@runtime_checkable
class Signal(Protocol):
    """
    A finite, ordered sequence of samples with an implicit zero outside its bounds.

    Implementations must make ``signal[i]`` total over all integers: indices
    in ``0..len(signal)-1`` return the stored sample, every other index returns
    ``domain.zero``. The algorithms in this package rely on that read instead
    of bounds checks.
    """

    domain: NumericDomain
    values: np.ndarray

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Sample: ...

    def __iter__(self) -> Iterator[Sample]: ...

    def new(self, values: ArrayLike) -> Signal:
        """
        Builds a signal of the same concrete type and domain from *values*.
        """
        ...

    def fold(self, kernel: Signal) -> Signal:
        """
        Convolves this signal with *kernel*.

        ``out[i] = sum(kernel[j] * self[i - j] for j in range(len(kernel)))``
        for ``i`` in ``0..n+m-2``; ``self[i - j]`` goes through the zero-padded
        read, so no index arithmetic is clamped here.

        Args:
            kernel: Finite impulse response, same domain as ``self``.

        Returns:
            A new signal of length ``len(self) + len(kernel) - 1``.
        """
        require_same_domain(self, kernel, "fold")
        n = len(self)
        m = len(kernel)
        if n == 0 or m == 0:
            raise EmptySignalError(
                f"fold requires non-empty operands, got lengths {n} and {m}"
            )

        output = []
        for i in range(n + m - 1):
            acc = self.domain.zero
            for j in range(m):
                acc += kernel[j] * self[i - j]
            output.append(acc)
        return self.new(output)


def require_same_domain(left: Signal, right: Signal, operation: str) -> None:
    """
    Raises ``DomainMismatchError`` unless both signals share a numeric domain.
    """
    if left.domain != right.domain:
        raise DomainMismatchError(
            f"Cannot {operation} a {left.domain.name} signal with a "
            f"{right.domain.name} signal"
        )


def fold(signal: Signal, kernel: Signal) -> Signal:
    """Function form of :meth:`Signal.fold`."""
    return signal.fold(kernel)
