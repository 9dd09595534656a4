"""Templates compare by matching criteria only."""
from dynamic_templates.core.models.template import DynamicTemplate


BASE = {
    "match": "*_text",
    "unmatch": "*_raw",
    "match_mapping_type": "string",
    "mapping": {"type": "string"},
}


def make(name="t", **overrides):
    return DynamicTemplate.parse(name, {**BASE, **overrides})


class TestEquality:

    def test_different_mapping_and_name_are_equal(self):
        first = make("first", mapping={"type": "string"})
        second = make("second", mapping={"type": "text", "analyzer": "standard"})
        assert first == second
        assert hash(first) == hash(second)

    def test_set_deduplicates_by_matcher(self):
        assert len({make("a"), make("b", mapping={"index": "no"})}) == 1

    def test_different_match_not_equal(self):
        assert make(match="*_text") != make(match="*_body")

    def test_different_unmatch_not_equal(self):
        assert make(unmatch="*_raw") != make(unmatch="*_tmp")
        assert make() != DynamicTemplate.parse(
            "t", {k: v for k, v in BASE.items() if k != "unmatch"}
        )

    def test_different_type_pattern_not_equal(self):
        assert make(match_mapping_type="string") != make(match_mapping_type="long")

    def test_different_semantics_not_equal(self):
        patterns = {"match": "title", "unmatch": "raw"}
        assert make(match_pattern="simple", **patterns) != make(
            match_pattern="regex", **patterns
        )

    def test_explicit_simple_equals_default(self):
        assert make(match_pattern="simple") == make()

    def test_not_equal_to_other_types(self):
        assert make() != BASE
