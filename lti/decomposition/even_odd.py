"""Even/odd split under the ``i -> n - i`` reflection."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from lti.errors import EmptySignalError
from lti.signals import Signal


class EvenOddParts(NamedTuple):
    even: Signal
    odd: Signal


def even_odd_decomposition(signal: Signal) -> EvenOddParts:
    """Split *signal* into symmetric and antisymmetric parts.

    Indices wrap modulo ``n`` (the signal is not required to be periodic).
    ``even[0] = signal[0]`` and ``odd[0] = 0``; for ``i >= 1``::

        even[i] = (signal[i] + signal[n - i]) / 2
        odd[i]  = (signal[i] - signal[n - i]) / 2

    Halving is delegated to the signal's domain: exact for real samples,
    truncated toward zero for integer samples, in which case
    ``even + odd`` only reconstructs the input when every sum and
    difference is even.

    Raises
    ------
    EmptySignalError
        If *signal* has no samples.
    """
    n = len(signal)
    if n == 0:
        raise EmptySignalError("even/odd decomposition requires at least one sample")

    domain = signal.domain
    samples = np.asarray(signal.values)
    i = np.arange(1, n)
    front = samples[i % n]
    back = samples[(n - i) % n]

    even = np.empty(n, dtype=domain.dtype)
    odd = np.empty(n, dtype=domain.dtype)
    even[0] = signal[0]
    odd[0] = domain.zero
    even[1:] = domain.halve(front + back)
    odd[1:] = domain.halve(front - back)

    return EvenOddParts(signal.new(even), signal.new(odd))
