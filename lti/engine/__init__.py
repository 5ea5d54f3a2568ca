"""Engine package — YAML-configured analysis runs on top of the signal library."""

from .config import AnalysisConfig
from .registry import available_operations, get_operation, register
from .runner import run_analysis

__all__ = [
    "AnalysisConfig",
    "available_operations",
    "get_operation",
    "register",
    "run_analysis",
]
