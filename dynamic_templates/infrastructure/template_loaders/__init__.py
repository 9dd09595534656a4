"""Template config loader implementations."""
from .json_loader import JsonTemplateLoader
from .yaml_loader import YamlTemplateLoader
from .composite_loader import CompositeLoader

__all__ = ["JsonTemplateLoader", "YamlTemplateLoader", "CompositeLoader"]
