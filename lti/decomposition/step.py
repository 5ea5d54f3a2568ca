from __future__ import annotations

import numpy as np

from lti.errors import EmptySignalError
from lti.signals import Signal


def step_decomposition(signal: Signal) -> list[Signal]:
    """
    Represents *signal* as scaled, delayed unit steps.

    Component 0 is all zeros. Component ``i >= 1`` is a right-sided step of
    height ``signal[i] - signal[i - 1]`` starting at index ``i``. The initial
    level ``signal[0]`` is not carried by any component.

    Raises:
        EmptySignalError: If *signal* has no samples.
    """
    n = len(signal)
    if n == 0:
        raise EmptySignalError("step decomposition requires at least one sample")

    dtype = signal.domain.dtype
    output = [signal.new(np.zeros(n, dtype=dtype))]
    for i in range(1, n):
        values = np.zeros(n, dtype=dtype)
        values[i:] = signal[i] - signal[i - 1]
        output.append(signal.new(values))
    return output
