"""Plotting utilities for signal components and amplitude spectra."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from lti.signals import Signal  # noqa: E402
from lti.spectral import RealDFT  # noqa: E402

log = logging.getLogger(__name__)

# Above this many components the legend covers the axes.
_MAX_LEGEND_ENTRIES = 10


def plot_components(
    components: Mapping[str, Signal],
    out_path: str | Path,
    title: str = "",
) -> None:
    """Overlay one or more signals against sample index and save as PNG.

    Parameters
    ----------
    components : Mapping[str, Signal]
        Label → signal. Signals may differ in length.
    out_path : str | Path
        Destination file path (e.g. ``plots/step.png``).
    title : str
        Axes title.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(12, 4))
    for label, signal in components.items():
        ax.plot(
            np.arange(len(signal)),
            signal.values,
            marker="o",
            markersize=3,
            linewidth=0.8,
            label=label,
        )
    ax.axhline(0.0, color="#888888", linewidth=0.5)
    ax.set_title(title)
    ax.set_xlabel("Sample n")
    ax.set_ylabel("Amplitude")
    ax.grid(True, alpha=0.3)
    if 0 < len(components) <= _MAX_LEGEND_ENTRIES:
        ax.legend(loc="best", fontsize="small")
    fig.tight_layout()
    fig.savefig(out_path, dpi=100)
    plt.close(fig)

    log.info("Saved component plot → %s", out_path)


def plot_spectrum(
    dft: RealDFT,
    out_path: str | Path,
    sample_rate: Optional[float] = None,
) -> None:
    """Stem plots of the cosine and sine amplitude spectra, saved as PNG.

    The x axis is :meth:`RealDFT.frequencies`: cycles per sample, or the
    unit of *sample_rate* when given.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    x = dft.frequencies(sample_rate)

    fig, (ax_cos, ax_sin) = plt.subplots(2, 1, figsize=(12, 6), sharex=True)
    ax_cos.stem(x, dft.cos_amplitude().values)
    ax_cos.set_ylabel("Cosine amplitude")
    ax_cos.grid(True, alpha=0.3)
    ax_sin.stem(x, dft.sin_amplitude().values)
    ax_sin.set_ylabel("Sine amplitude")
    ax_sin.set_xlabel("Cycles per sample" if sample_rate is None else "Frequency")
    ax_sin.grid(True, alpha=0.3)
    fig.suptitle("Real DFT")
    fig.tight_layout()
    fig.savefig(out_path, dpi=100)
    plt.close(fig)

    log.info("Saved spectrum plot → %s", out_path)
