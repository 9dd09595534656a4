"""Pattern matching strategies."""
from .matching import MatchStrategy, RegexMatchStrategy, SimpleMatchStrategy

__all__ = [
    "MatchStrategy",
    "RegexMatchStrategy",
    "SimpleMatchStrategy",
]
