"""Immutable configuration for a single analysis run."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
import yaml

from lti.errors import ConfigError, SignalDomainError
from lti.signals import AperiodicSignal, NumericDomain, domain_for

log = logging.getLogger(__name__)

DEFAULT_OPERATIONS: tuple[str, ...] = ("impulse", "step", "even_odd", "dft")

_KNOWN_KEYS = {
    "name",
    "domain",
    "samples",
    "samples_csv",
    "column",
    "kernel",
    "operations",
    "sample_rate",
    "output_dir",
    "plots",
}


@dataclass(frozen=True)
class AnalysisConfig:
    """Immutable bag of settings for a single analysis run.

    Exactly one of ``samples`` (inline list) and ``samples_csv`` (path to a
    CSV file, read with pandas, using ``column``) provides the input signal.
    """

    name: str = "signal"
    domain: str = "real"
    samples: Optional[tuple] = None
    samples_csv: Optional[Path] = None
    column: str = "value"
    kernel: Optional[tuple] = None
    operations: tuple[str, ...] = DEFAULT_OPERATIONS
    sample_rate: Optional[float] = None
    output_dir: Path = Path("runs")
    plots: bool = True

    @classmethod
    def from_yaml(cls, path: str | Path) -> AnalysisConfig:
        """Load a config file; relative paths inside it resolve against its directory."""
        cfg_path = Path(path)
        with open(cfg_path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {cfg_path} must contain a mapping")
        return cls.from_dict(raw, base_dir=cfg_path.resolve().parent)

    @classmethod
    def from_dict(cls, raw: dict, base_dir: Optional[Path] = None) -> AnalysisConfig:
        from lti.engine.registry import available_operations

        unknown = set(raw) - _KNOWN_KEYS
        if unknown:
            raise ConfigError(f"Unknown config keys: {sorted(unknown)}")

        has_inline = raw.get("samples") is not None
        has_csv = raw.get("samples_csv") is not None
        if has_inline == has_csv:
            raise ConfigError("config must set exactly one of 'samples' or 'samples_csv'")

        domain = str(raw.get("domain", "real"))
        try:
            domain_for(domain)
        except SignalDomainError as exc:
            raise ConfigError(str(exc)) from exc

        kernel = raw.get("kernel")
        if kernel is not None:
            kernel = tuple(kernel)
            if not kernel:
                raise ConfigError("'kernel' must contain at least one sample")

        operations = raw.get("operations")
        if operations is None:
            operations = DEFAULT_OPERATIONS + (("fold",) if kernel is not None else ())
        if not isinstance(operations, (list, tuple)):
            raise ConfigError("'operations' must be a list of operation names")
        operations = tuple(str(op) for op in operations)
        registered = available_operations()
        for op in operations:
            if op not in registered:
                raise ConfigError(f"Unknown operation '{op}'. Registered: {registered}")
        if "fold" in operations and kernel is None:
            raise ConfigError("operation 'fold' requires a 'kernel'")

        sample_rate = raw.get("sample_rate")
        if sample_rate is not None:
            sample_rate = float(sample_rate)
            if sample_rate <= 0:
                raise ConfigError(f"sample_rate must be > 0, got {sample_rate}")

        plots = raw.get("plots", True)
        if not isinstance(plots, bool):
            raise ConfigError(f"'plots' must be true or false, got {plots!r}")

        base = base_dir if base_dir is not None else Path.cwd()
        samples_csv = _resolve(base, raw["samples_csv"]) if has_csv else None

        return cls(
            name=str(raw.get("name", "signal")),
            domain=domain,
            samples=tuple(raw["samples"]) if has_inline else None,
            samples_csv=samples_csv,
            column=str(raw.get("column", "value")),
            kernel=kernel,
            operations=operations,
            sample_rate=sample_rate,
            output_dir=_resolve(base, raw.get("output_dir", "runs")),
            plots=plots,
        )

    @property
    def numeric_domain(self) -> NumericDomain:
        return domain_for(self.domain)

    def load_signal(self) -> AperiodicSignal:
        """Build the input signal from inline samples or the CSV column."""
        if self.samples is not None:
            return AperiodicSignal(self.samples, domain=self.numeric_domain, name=self.name)

        df = pd.read_csv(self.samples_csv)
        if self.column not in df.columns:
            raise ConfigError(
                f"Column '{self.column}' not found in {self.samples_csv}. "
                f"Available: {list(df.columns)}"
            )
        series = df[self.column]
        if series.isna().any():
            n = int(series.isna().sum())
            raise ConfigError(f"NaN values in column '{self.column}': {n} rows")

        log.info("Loaded %s  (%s samples)", self.samples_csv.name, f"{len(series):,}")
        return AperiodicSignal(series.to_numpy(), domain=self.numeric_domain, name=self.name)

    def load_kernel(self) -> Optional[AperiodicSignal]:
        if self.kernel is None:
            return None
        return AperiodicSignal(self.kernel, domain=self.numeric_domain, name="kernel")


def _resolve(base: Path, value: str | Path) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base / path
