"""
lti: discrete-time signal analysis under Linear-Time-Invariant system theory.

Signals are finite sample sequences that read as zero outside their bounds.
On top of that contract the package provides impulse, step and even/odd
decompositions, convolution (``fold``) and a direct real DFT::

    from lti import AperiodicSignal, real_dft

    s = AperiodicSignal.real([4, 1, -5, -4])
    spectrum = real_dft(s)
    spectrum.cos_amplitude().values   # ≈ [-4.0, 9.0, 2.0]
"""

from .errors import (
    ConfigError,
    DomainMismatchError,
    EmptySignalError,
    SignalDomainError,
    SignalError,
)
from .signals import (
    INTEGER,
    REAL,
    AperiodicSignal,
    NumericDomain,
    Signal,
    domain_for,
    fold,
)
from .decomposition import (
    EvenOddParts,
    even_odd_decomposition,
    impulse_decomposition,
    step_decomposition,
    synthesize,
)
from .spectral import RealDFT, real_dft

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "DomainMismatchError",
    "EmptySignalError",
    "SignalDomainError",
    "SignalError",
    "INTEGER",
    "REAL",
    "AperiodicSignal",
    "NumericDomain",
    "Signal",
    "domain_for",
    "fold",
    "EvenOddParts",
    "even_odd_decomposition",
    "impulse_decomposition",
    "step_decomposition",
    "synthesize",
    "RealDFT",
    "real_dft",
]
