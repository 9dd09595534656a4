import pytest

from dynamic_templates.core.models.template import DynamicTemplate


@pytest.fixture
def text_conf():
    return {
        "match": "*_text",
        "mapping": {"type": "string", "analyzer": "{name}_analyzer"},
    }


@pytest.fixture
def text_template(text_conf):
    return DynamicTemplate.parse("text_fields", text_conf)


@pytest.fixture
def regex_long_template():
    return DynamicTemplate.parse(
        "longs",
        {
            "match": ".*",
            "match_pattern": "regex",
            "match_mapping_type": "long",
            "mapping": {"type": "{dynamic_type}"},
        },
    )


@pytest.fixture
def templates_config():
    return [
        {"raw": {"match": "*_raw", "mapping": {"type": "string", "index": "not_analyzed"}}},
        {"text": {"match": "*_text", "mapping": {"type": "string", "analyzer": "{name}"}}},
        {
            "longs": {
                "match": "*",
                "match_mapping_type": "long",
                "mapping": {"type": "{dynamic_type}", "store": "yes"},
            }
        },
    ]
