"""Protocol interfaces for dependency injection."""
from .template_loader import TemplateLoaderProtocol

__all__ = [
    "TemplateLoaderProtocol",
]
