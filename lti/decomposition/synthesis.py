from __future__ import annotations

import operator
from functools import reduce
from typing import Sequence

from lti.errors import EmptySignalError
from lti.signals import Signal


def synthesize(components: Sequence[Signal]) -> Signal:
    """
    Sums *components* element-wise, zero-extending shorter ones.

    Raises:
        EmptySignalError: If *components* is empty.
        DomainMismatchError: If the components mix numeric domains.
    """
    if len(components) == 0:
        raise EmptySignalError("synthesize requires at least one component")
    return reduce(operator.add, components)
