import json
import logging
import sys

from dynamic_templates.config.settings import settings
from dynamic_templates.container import configure_container, container
from dynamic_templates.core.errors import MappingTemplateError
from dynamic_templates.core.services.template_service import TemplateService

logger = logging.getLogger(__name__)

USAGE = """Usage: python -m dynamic_templates.presentation.cli <command> [args]
Commands:
  list                    List configured templates in match order
  match <field> [type]    Show the first template matching a field
  resolve <field> [type]  Print the resolved mapping for a field"""


def cmd_list(service: TemplateService) -> int:
    """List command - template names in match order."""
    for template in service:
        print(template.name)
    return 0


def cmd_match(service: TemplateService, field_name: str, dynamic_type: str | None) -> int:
    """Match command - first matching template name."""
    template = service.find_template(field_name, dynamic_type)
    if template is None:
        print(f"No template matches '{field_name}'")
        return 1
    print(template.name)
    return 0


def cmd_resolve(service: TemplateService, field_name: str, dynamic_type: str | None) -> int:
    """Resolve command - mapping for a field as JSON."""
    mapping = service.mapping_for_field(field_name, dynamic_type)
    if mapping is None:
        print(f"No template matches '{field_name}'")
        return 1
    print(json.dumps(mapping, indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    if not args:
        print(USAGE)
        return 1

    command, params = args[0], args[1:]

    try:
        configure_container(settings)
        service = container.resolve(TemplateService)
    except MappingTemplateError as e:
        logger.error(f"Failed to load templates: {e}")
        return 1

    if command == "list":
        return cmd_list(service)
    if command in ("match", "resolve") and 1 <= len(params) <= 2:
        field_name = params[0]
        dynamic_type = params[1] if len(params) > 1 else None
        if command == "match":
            return cmd_match(service, field_name, dynamic_type)
        return cmd_resolve(service, field_name, dynamic_type)

    print(f"Unknown command: {' '.join(args)}")
    print(USAGE)
    return 1


if __name__ == "__main__":
    sys.exit(main())
