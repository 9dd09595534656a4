"""Template service - ordered dynamic templates with first-match lookup."""

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any, Optional

from ..errors import TemplateParsingError
from ..models.template import UNKNOWN_DYNAMIC_TYPE, DynamicTemplate
from ..protocols.template_loader import TemplateLoaderProtocol

logger = logging.getLogger(__name__)

TEMPLATES_KEY = "dynamic_templates"


class TemplateService:
    """Ordered collection of dynamic templates."""

    def __init__(
        self,
        templates: Optional[Iterable[DynamicTemplate]] = None,
        unknown_type: str = UNKNOWN_DYNAMIC_TYPE,
    ):
        """Initialize service.

        Args:
            templates: Templates in match order.
            unknown_type: Substituted for type placeholders when a field
                has no inferred type.
        """
        self._templates: tuple[DynamicTemplate, ...] = tuple(templates or ())
        self._unknown_type = unknown_type

    @classmethod
    def from_config(
        cls, raw: Any, unknown_type: str = UNKNOWN_DYNAMIC_TYPE
    ) -> "TemplateService":
        """Parse templates from raw configuration.

        Accepts a list of single-entry `{name: conf}` mappings, a mapping
        holding such a list under `dynamic_templates`, or a plain
        `{name: conf}` mapping.
        """
        return cls(parse_templates(raw), unknown_type=unknown_type)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        loader: TemplateLoaderProtocol,
        unknown_type: str = UNKNOWN_DYNAMIC_TYPE,
    ) -> "TemplateService":
        config_path = Path(path)
        if not config_path.exists():
            logger.warning(f"Templates config not found: {config_path}")
            return cls(unknown_type=unknown_type)

        service = cls.from_config(loader.load(config_path), unknown_type=unknown_type)
        logger.info(f"Loaded {len(service)} templates from {config_path}")
        return service

    @property
    def templates(self) -> tuple[DynamicTemplate, ...]:
        return self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[DynamicTemplate]:
        return iter(self._templates)

    def add(self, template: DynamicTemplate) -> None:
        """Add template, replacing any with the same matching criteria."""
        replaced = False
        updated = []
        for existing in self._templates:
            if existing == template:
                updated.append(template)
                replaced = True
            else:
                updated.append(existing)
        if replaced:
            logger.debug(f"Replaced template with same matcher by '{template.name}'")
        else:
            updated.append(template)
        self._templates = tuple(updated)

    def merge(self, templates: Iterable[DynamicTemplate]) -> None:
        for template in templates:
            self.add(template)

    def replace_all(self, templates: Iterable[DynamicTemplate]) -> None:
        """Swap in a new ordered set of templates."""
        self._templates = tuple(templates)
        logger.info(f"Template set replaced ({len(self._templates)} templates)")

    def find_template(
        self, field_name: str, dynamic_type: Optional[str]
    ) -> Optional[DynamicTemplate]:
        """Return the first template matching the field.

        Args:
            field_name: Name of the newly seen field.
            dynamic_type: Inferred type, None if unknown.

        Returns:
            Matching template or None.
        """
        for template in self._templates:
            if template.matches(field_name, dynamic_type):
                logger.debug(
                    f"Field '{field_name}' ({dynamic_type}) matched template "
                    f"'{template.name}'"
                )
                return template
        logger.debug(f"No template for field '{field_name}' ({dynamic_type})")
        return None

    def mapping_for_field(
        self, field_name: str, dynamic_type: Optional[str]
    ) -> Optional[dict[str, Any]]:
        template = self.find_template(field_name, dynamic_type)
        if template is None:
            return None
        return template.resolve(field_name, dynamic_type, unknown_type=self._unknown_type)

    def mapping_type_for_field(
        self, field_name: str, dynamic_type: Optional[str]
    ) -> Optional[str]:
        """Declared type for a field, inferred type if no template applies."""
        template = self.find_template(field_name, dynamic_type)
        if template is None:
            return dynamic_type
        return template.mapping_type(dynamic_type)

    def to_config(self) -> list[dict[str, Any]]:
        """Serialize templates back to `[{name: conf}, ...]`."""
        return [{template.name: template.conf} for template in self._templates]


def parse_templates(raw: Any) -> list[DynamicTemplate]:
    """Parse raw template configuration into templates, in order."""
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        if TEMPLATES_KEY in raw:
            return parse_templates(raw[TEMPLATES_KEY])
        return [DynamicTemplate.parse(name, conf) for name, conf in raw.items()]
    if not isinstance(raw, list):
        raise TemplateParsingError(
            f"{TEMPLATES_KEY} must be a list of templates",
            context={"type": type(raw).__name__},
        )

    templates = []
    for index, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise TemplateParsingError(
                "template entry must be a mapping of name to config",
                context={"index": index},
            )
        for name, conf in entry.items():
            templates.append(DynamicTemplate.parse(str(name), conf))
    return templates
