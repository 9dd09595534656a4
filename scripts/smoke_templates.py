#!/usr/bin/env python3
"""
Smoke test for dynamic template resolution against a config file.

Run:
  python scripts/smoke_templates.py

Options:
  --config           Template config path (default: dynamic_templates.json)
  --print-mappings   Print resolved mappings in full
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dynamic_templates.core.services.template_service import TemplateService
from dynamic_templates.infrastructure.template_loaders import CompositeLoader


DEFAULT_CONFIG = "dynamic_templates.json"

TESTS = [
    {
        "field": "title_text",
        "type": "string",
        "expect_template": "text_fields",
        "expect_any": ["title_text_analyzer"],
        "expect_none": ["{name}", "{dynamic_type}"],
    },
    {
        "field": "title_raw",
        "type": "string",
        "expect_template": "raw_strings",
        "expect_any": ["not_analyzed"],
        "expect_none": ["{name}"],
    },
    {
        "field": "created_ts",
        "type": "string",
        "expect_template": "timestamps",
        "expect_any": ["dateOptionalTime"],
        "expect_none": [],
    },
    {
        "field": "updated_tsx",
        "type": "string",
        "expect_template": "strings_as_keywords",
        "expect_any": ["string"],
        "expect_none": ["date"],
    },
    {
        "field": "views_num",
        "type": "long",
        "expect_template": "counters",
        "expect_any": ["long"],
        "expect_none": [],
    },
    {
        "field": "tmp_views_num",
        "type": "long",
        "expect_template": None,
        "expect_any": [],
        "expect_none": [],
    },
    {
        "field": "views_num",
        "type": None,
        "expect_template": None,
        "expect_any": [],
        "expect_none": [],
    },
]


def run_case(service: TemplateService, case: dict, print_mappings: bool) -> bool:
    field_name = case["field"]
    dynamic_type = case["type"]

    template = service.find_template(field_name, dynamic_type)
    name = template.name if template else None
    if name != case["expect_template"]:
        print(f"FAIL {field_name} ({dynamic_type}): template {name!r}, "
              f"expected {case['expect_template']!r}")
        return False

    if template is None:
        print(f"OK   {field_name} ({dynamic_type}): no template")
        return True

    mapping = template.resolve(field_name, dynamic_type)
    text = json.dumps(mapping, ensure_ascii=False)

    if case["expect_any"] and not any(s in text for s in case["expect_any"]):
        print(f"FAIL {field_name}: none of {case['expect_any']} in {text}")
        return False
    found = [s for s in case["expect_none"] if s in text]
    if found:
        print(f"FAIL {field_name}: unexpected {found} in {text}")
        return False

    print(f"OK   {field_name} ({dynamic_type}): {name}")
    if print_mappings:
        print(json.dumps(mapping, indent=2, ensure_ascii=False))
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default=DEFAULT_CONFIG)
    parser.add_argument("--print-mappings", action="store_true")
    args = parser.parse_args()

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Config not found: {config_path}")
        return 1

    service = TemplateService.from_file(config_path, loader=CompositeLoader())
    print(f"Loaded {len(service)} templates from {config_path}")

    failures = sum(
        0 if run_case(service, case, args.print_mappings) else 1 for case in TESTS
    )
    print(f"\n{len(TESTS) - failures}/{len(TESTS)} passed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
