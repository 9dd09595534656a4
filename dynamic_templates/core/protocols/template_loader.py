"""Template loader protocol for dependency injection."""
from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateLoaderProtocol(Protocol):
    """Protocol for reading raw template configuration."""

    def supports(self, file_path: Path) -> bool:
        """Check if the loader can read this file."""
        ...

    def load(self, file_path: Path) -> Any:
        """Read a config file into a tree of dicts, lists and scalars.

        Args:
            file_path: Path to the config file.

        Returns:
            Parsed configuration document.
        """
        ...
