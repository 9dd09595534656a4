from pathlib import Path
from typing import Any

import yaml


class YamlTemplateLoader:

    EXTENSIONS = {".yaml", ".yml"}

    def supports(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in self.EXTENSIONS

    def load(self, file_path: Path) -> Any:
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
