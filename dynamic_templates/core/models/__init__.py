"""Domain models."""
from .template import DynamicTemplate, MatchType, UNKNOWN_DYNAMIC_TYPE

__all__ = [
    "DynamicTemplate",
    "MatchType",
    "UNKNOWN_DYNAMIC_TYPE",
]
