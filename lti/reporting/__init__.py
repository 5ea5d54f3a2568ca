"""Reporting package: PNG export of components and spectra."""

from .plots import plot_components, plot_spectrum

__all__ = ["plot_components", "plot_spectrum"]
