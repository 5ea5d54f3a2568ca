from __future__ import annotations

import numpy as np

from lti.signals import Signal


def impulse_decomposition(signal: Signal) -> list[Signal]:
    """
    Splits *signal* into one single-sample component per index.

    Component ``i`` has length ``len(signal)``, holds ``signal[i]`` at
    position ``i`` and zero elsewhere; summing all components gives back
    *signal*. An empty signal yields an empty list.
    """
    n = len(signal)
    output = []
    for i in range(n):
        values = np.zeros(n, dtype=signal.domain.dtype)
        values[i] = signal[i]
        output.append(signal.new(values))
    return output
