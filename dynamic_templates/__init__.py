"""Dynamic field-mapping templates."""
from .core.errors import (
    InvalidMatchTypeError,
    InvalidPatternError,
    MappingTemplateError,
    TemplateParsingError,
    TemplateResolutionError,
    TemplateSourceError,
)
from .core.models.template import DynamicTemplate, MatchType
from .core.services.template_service import TemplateService

__all__ = [
    "DynamicTemplate",
    "MatchType",
    "TemplateService",
    "MappingTemplateError",
    "TemplateParsingError",
    "InvalidMatchTypeError",
    "InvalidPatternError",
    "TemplateResolutionError",
    "TemplateSourceError",
]
