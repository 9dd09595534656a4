import re
from abc import ABC, abstractmethod


class MatchStrategy(ABC):
    """Base class for pattern matching strategies."""

    def __init__(self, pattern: str):
        """Initialize strategy.

        Args:
            pattern: Pattern to match values against.
        """
        self._pattern = pattern
        self._compiled = self._compile(pattern)

    @property
    def pattern(self) -> str:
        return self._pattern

    @abstractmethod
    def _compile(self, pattern: str) -> re.Pattern:
        """Compile pattern to a regex."""
        ...

    def matches(self, value: str) -> bool:
        """Check that the whole value satisfies the pattern."""
        return self._compiled.fullmatch(value) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pattern!r})"


class SimpleMatchStrategy(MatchStrategy):
    """Glob with `*` as the only wildcard."""

    def _compile(self, pattern: str) -> re.Pattern:
        parts = [re.escape(part) for part in pattern.split("*")]
        return re.compile(".*".join(parts), re.DOTALL)


class RegexMatchStrategy(MatchStrategy):
    """Full regular expression, anchored at both ends."""

    def _compile(self, pattern: str) -> re.Pattern:
        return re.compile(pattern)
