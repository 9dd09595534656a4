"""Error hierarchy for template parsing and resolution."""
from typing import Any, Optional


class MappingTemplateError(Exception):
    """Base class for all dynamic template errors."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        """Initialize error.

        Args:
            message: Error description.
            context: Extra details about the failing template.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | Context: {self.context}"
        return self.message


class TemplateParsingError(MappingTemplateError):
    """Template configuration is structurally invalid."""


class InvalidMatchTypeError(MappingTemplateError, ValueError):
    """Unknown match_pattern selector."""


class InvalidPatternError(TemplateParsingError):
    """Regex pattern failed to compile."""


class TemplateResolutionError(MappingTemplateError):
    """Mapping tree could not be resolved for a field."""


class TemplateSourceError(MappingTemplateError):
    """Template configuration file could not be read."""
