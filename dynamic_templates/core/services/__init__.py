"""Core business services."""
from .template_service import TemplateService, parse_templates

__all__ = [
    "TemplateService",
    "parse_templates",
]
