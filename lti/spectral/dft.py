"""Direct real-valued DFT: cosine and sine amplitude spectra."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from lti.errors import EmptySignalError
from lti.signals import AperiodicSignal, Signal


@dataclass(frozen=True)
class RealDFT:
    """Cosine/sine amplitude spectra of an ``n``-sample signal.

    Both spectra are real-domain signals of length ``n // 2 + 1``; bin ``k``
    corresponds to ``k`` cycles per ``n`` samples.
    """

    cos_part: AperiodicSignal
    sin_part: AperiodicSignal
    n_samples: int

    @classmethod
    def compute(cls, signal: Signal) -> RealDFT:
        """Evaluate the spectra by direct O(n²) summation.

        For each bin ``k``::

            cos[k] = sum(signal[t] * cos(2*pi*k*t/n) for t in 0..n)
            sin[k] = sum(signal[t] * sin(2*pi*k*t/n) for t in 0..n)

        The range includes ``t = n``; that read falls past the last sample
        and contributes zero.

        Raises
        ------
        EmptySignalError
            If *signal* has no samples.
        """
        n = len(signal)
        if n == 0:
            raise EmptySignalError("real DFT requires at least one sample")

        t = np.arange(n + 1)
        samples = np.fromiter(
            (signal[j] for j in range(n + 1)), dtype=np.float64, count=n + 1
        )

        bins = n // 2 + 1
        cos_amp = np.empty(bins, dtype=np.float64)
        sin_amp = np.empty(bins, dtype=np.float64)
        for k in range(bins):
            angle = 2.0 * np.pi * k * t / n
            cos_amp[k] = np.sum(samples * np.cos(angle))
            sin_amp[k] = np.sum(samples * np.sin(angle))

        return cls(
            cos_part=AperiodicSignal.real(cos_amp, name="cos_amplitude"),
            sin_part=AperiodicSignal.real(sin_amp, name="sin_amplitude"),
            n_samples=n,
        )

    def cos_amplitude(self) -> AperiodicSignal:
        return self.cos_part

    def sin_amplitude(self) -> AperiodicSignal:
        return self.sin_part

    def frequencies(self, sample_rate: Optional[float] = None) -> np.ndarray:
        """Bin centre frequencies ``k * sample_rate / n``.

        Without *sample_rate* the result is in cycles per sample.
        """
        rate = 1.0 if sample_rate is None else float(sample_rate)
        if rate <= 0:
            raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
        return np.arange(len(self.cos_part)) * rate / self.n_samples

    def components(self) -> dict[str, AperiodicSignal]:
        return {"cos_amplitude": self.cos_part, "sin_amplitude": self.sin_part}

    def to_frame(self, sample_rate: Optional[float] = None) -> pd.DataFrame:
        """One row per bin: ``k``, ``frequency``, ``cos_amplitude``, ``sin_amplitude``."""
        return pd.DataFrame({
            "k": np.arange(len(self.cos_part)),
            "frequency": self.frequencies(sample_rate),
            "cos_amplitude": self.cos_part.values,
            "sin_amplitude": self.sin_part.values,
        })


def real_dft(signal: Signal) -> RealDFT:
    """Shorthand for :meth:`RealDFT.compute`."""
    return RealDFT.compute(signal)
