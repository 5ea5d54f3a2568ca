from .impulse import impulse_decomposition
from .step import step_decomposition
from .even_odd import EvenOddParts, even_odd_decomposition
from .synthesis import synthesize

__all__ = [
    "impulse_decomposition",
    "step_decomposition",
    "even_odd_decomposition",
    "EvenOddParts",
    "synthesize",
]
