import json
import logging
from pathlib import Path
from typing import Any

import yaml

from ...core.errors import TemplateSourceError
from .json_loader import JsonTemplateLoader
from .yaml_loader import YamlTemplateLoader

logger = logging.getLogger(__name__)


class CompositeLoader:

    def __init__(self):
        self._loaders = [
            JsonTemplateLoader(),
            YamlTemplateLoader(),
        ]

    def supports(self, file_path: Path) -> bool:
        return any(loader.supports(file_path) for loader in self._loaders)

    def load(self, file_path: Path) -> Any:
        for loader in self._loaders:
            if loader.supports(file_path):
                try:
                    return loader.load(file_path)
                except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load {file_path}: {e}")
                    raise TemplateSourceError(
                        f"Failed to load template config: {e}",
                        context={"path": str(file_path)},
                    ) from e
        raise TemplateSourceError(
            f"Unsupported template config format: {file_path.suffix or file_path.name}",
            context={"path": str(file_path)},
        )
