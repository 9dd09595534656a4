"""Template applicability rules and pattern strategies."""
import pytest

from dynamic_templates.core.models.template import DynamicTemplate
from dynamic_templates.core.strategies.matching import (
    RegexMatchStrategy,
    SimpleMatchStrategy,
)


def make(**conf):
    conf.setdefault("mapping", {"type": "string"})
    return DynamicTemplate.parse("t", conf)


class TestMatches:

    def test_simple_suffix_match(self, text_template):
        assert text_template.matches("title_text", "string")

    def test_simple_non_match(self, text_template):
        assert not text_template.matches("title_other", "string")

    def test_match_failure_wins_regardless_of_type(self, text_template):
        for dynamic_type in ("string", "long", None):
            assert not text_template.matches("title_other", dynamic_type)

    def test_unmatch_vetoes(self):
        without_unmatch = make(match="title_*")
        with_unmatch = make(match="title_*", unmatch="*_raw")
        assert without_unmatch.matches("title_raw", "string")
        assert not with_unmatch.matches("title_raw", "string")
        assert with_unmatch.matches("title_text", "string")

    def test_type_gate_requires_type(self, regex_long_template):
        for field_name in ("a", "any_field", ""):
            assert not regex_long_template.matches(field_name, None)

    def test_no_type_pattern_ignores_type(self, text_template):
        assert text_template.matches("title_text", None)
        assert text_template.matches("title_text", "long")

    def test_regex_type_pattern(self, regex_long_template):
        assert regex_long_template.matches("any_field", "long")
        assert not regex_long_template.matches("any_field", "string")

    def test_simple_type_pattern(self):
        template = make(match="*", match_mapping_type="*")
        assert template.matches("x", "long")
        assert not template.matches("x", None)

    def test_regex_is_anchored(self):
        template = make(match="field", match_pattern="regex")
        assert template.matches("field", None)
        assert not template.matches("my_field", None)
        assert not template.matches("fields", None)

    def test_regex_type_is_anchored(self):
        template = make(match=".*", match_pattern="regex", match_mapping_type="lon")
        assert not template.matches("x", "long")

    def test_semantics_apply_to_unmatch(self):
        template = make(match=".*", unmatch="tmp_.*", match_pattern="regex")
        assert not template.matches("tmp_value", None)
        assert template.matches("value", None)
        # `.*` is literal under simple semantics
        simple = make(match="*", unmatch="tmp_.*")
        assert simple.matches("tmp_value", None)
        assert not simple.matches("tmp_.*", None)


class TestSimpleMatchStrategy:

    @pytest.mark.parametrize(
        "pattern,value",
        [
            ("*", ""),
            ("*", "anything"),
            ("abc", "abc"),
            ("*_text", "_text"),
            ("title_*", "title_"),
            ("a*c", "abbbc"),
            ("*b*", "abc"),
            ("a**c", "ac"),
            ("*.raw", "name.raw"),
            ("line*", "line\nbreak"),
        ],
    )
    def test_matches(self, pattern, value):
        assert SimpleMatchStrategy(pattern).matches(value)

    @pytest.mark.parametrize(
        "pattern,value",
        [
            ("abc", "abcd"),
            ("abc", "xabc"),
            ("*_text", "title_texts"),
            ("a*c", "abcd"),
            ("a?c", "abc"),
            ("[ab]", "a"),
            ("*.raw", "name_raw"),
            ("", "a"),
        ],
    )
    def test_does_not_match(self, pattern, value):
        assert not SimpleMatchStrategy(pattern).matches(value)

    def test_empty_pattern_matches_empty_value(self):
        assert SimpleMatchStrategy("").matches("")


class TestRegexMatchStrategy:

    def test_full_match_only(self):
        strategy = RegexMatchStrategy("a+")
        assert strategy.matches("aaa")
        assert not strategy.matches("aab")
        assert not strategy.matches("baa")

    def test_alternation_is_anchored_as_a_whole(self):
        strategy = RegexMatchStrategy("foo|bar")
        assert strategy.matches("bar")
        assert not strategy.matches("foobar")

    def test_repr(self):
        assert repr(RegexMatchStrategy("a.*")) == "RegexMatchStrategy('a.*')"
        assert RegexMatchStrategy("a.*").pattern == "a.*"
