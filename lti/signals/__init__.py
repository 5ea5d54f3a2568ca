from .core.interfaces import NumericDomain, Signal, fold, require_same_domain
from .core.domain import INTEGER, REAL, IntegerDomain, RealDomain, domain_for
from .impl.aperiodic import AperiodicSignal

__all__ = [
    "NumericDomain",
    "Signal",
    "fold",
    "require_same_domain",
    "INTEGER",
    "REAL",
    "IntegerDomain",
    "RealDomain",
    "domain_for",
    "AperiodicSignal",
]
