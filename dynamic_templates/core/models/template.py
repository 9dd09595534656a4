"""Dynamic template domain models."""
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..errors import (
    InvalidMatchTypeError,
    InvalidPatternError,
    TemplateParsingError,
    TemplateResolutionError,
)
from ..strategies.matching import MatchStrategy, RegexMatchStrategy, SimpleMatchStrategy

logger = logging.getLogger(__name__)

NAME_PLACEHOLDER = "{name}"
TYPE_PLACEHOLDERS = ("{dynamic_type}", "{dynamicType}")

# Substituted for type placeholders when the caller has no inferred type.
UNKNOWN_DYNAMIC_TYPE = "unknown"


class MatchType(Enum):
    """How a template's patterns are interpreted."""
    SIMPLE = "simple"  # `*` glob
    REGEX = "regex"

    @classmethod
    def parse(cls, value: str) -> Optional["MatchType"]:
        """Look up a member by its config token, None if unknown."""
        for member in cls:
            if member.value == value:
                return member
        return None

    @property
    def strategy(self) -> type[MatchStrategy]:
        return RegexMatchStrategy if self is MatchType.REGEX else SimpleMatchStrategy


def _to_str(value: Any) -> str:
    # JSON spelling, so `match: true` stays "true"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_str(conf: Mapping[str, Any], key: str) -> Optional[str]:
    value = conf.get(key)
    return None if value is None else _to_str(value)


@dataclass(frozen=True)
class DynamicTemplate:
    """Template that maps newly seen fields to a mapping definition.

    Equality and hashing only look at the matching criteria, so a template
    with the same matcher but a different mapping replaces the old one.
    """
    name: str = field(compare=False)
    conf: Mapping[str, Any] = field(compare=False, repr=False)
    match: str
    unmatch: Optional[str]
    match_mapping_type: Optional[str]
    match_type: MatchType
    mapping: Mapping[str, Any] = field(compare=False, repr=False)

    _match: MatchStrategy = field(init=False, compare=False, repr=False)
    _unmatch: Optional[MatchStrategy] = field(init=False, compare=False, repr=False)
    _match_mapping_type: Optional[MatchStrategy] = field(
        init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "_match", self._compile(self.match))
        object.__setattr__(self, "_unmatch", self._compile(self.unmatch))
        object.__setattr__(
            self, "_match_mapping_type", self._compile(self.match_mapping_type)
        )

    def _compile(self, pattern: Optional[str]) -> Optional[MatchStrategy]:
        if pattern is None:
            return None
        try:
            return self.match_type.strategy(pattern)
        except re.error as e:
            raise InvalidPatternError(
                f"Invalid {self.match_type.value} pattern [{pattern}]: {e}",
                context={"template": self.name},
            ) from e

    @classmethod
    def parse(cls, name: str, conf: Mapping[str, Any]) -> "DynamicTemplate":
        """Build a template from its raw configuration.

        Args:
            name: Template name.
            conf: Raw config with `match`, `mapping` and optional
                `unmatch`, `match_mapping_type`, `match_pattern` keys.

        Returns:
            Parsed template.

        Raises:
            TemplateParsingError: `match` or `mapping` is missing or malformed.
            InvalidMatchTypeError: `match_pattern` is not `simple` or `regex`.
            InvalidPatternError: A regex pattern does not compile.
        """
        if not isinstance(conf, Mapping):
            raise TemplateParsingError(
                "template must be a mapping", context={"template": name}
            )
        if conf.get("match") is None:
            raise TemplateParsingError(
                "template must have match set", context={"template": name}
            )
        if conf.get("mapping") is None:
            raise TemplateParsingError(
                "template must have mapping set", context={"template": name}
            )

        mapping = conf["mapping"]
        if not isinstance(mapping, Mapping):
            raise TemplateParsingError(
                "template mapping must be a mapping", context={"template": name}
            )
        if "type" in mapping and mapping["type"] is None:
            raise TemplateParsingError(
                "template mapping type must not be null", context={"template": name}
            )

        token = _optional_str(conf, "match_pattern")
        if token is None:
            token = MatchType.SIMPLE.value
        match_type = MatchType.parse(token)
        if match_type is None:
            raise InvalidMatchTypeError(
                f"No matching pattern matched on [{token}]",
                context={"template": name},
            )

        return cls(
            name=name,
            conf=conf,
            match=_to_str(conf["match"]),
            unmatch=_optional_str(conf, "unmatch"),
            match_mapping_type=_optional_str(conf, "match_mapping_type"),
            match_type=match_type,
            mapping=mapping,
        )

    def matches(self, field_name: str, dynamic_type: Optional[str]) -> bool:
        """Check whether this template applies to a field.

        Args:
            field_name: Name of the newly seen field.
            dynamic_type: Inferred type of the field, None if unknown.

        Returns:
            True if the template applies.
        """
        if not self._match.matches(field_name):
            return False
        if self._unmatch is not None and self._unmatch.matches(field_name):
            return False
        if self._match_mapping_type is not None:
            if dynamic_type is None:
                return False
            if not self._match_mapping_type.matches(dynamic_type):
                return False
        return True

    def has_type(self) -> bool:
        """Check if the mapping declares an explicit `type`."""
        return "type" in self.mapping

    def mapping_type(self, dynamic_type: Optional[str]) -> Optional[str]:
        """Explicit mapping type as configured, falling back to the inferred one."""
        if not self.has_type():
            return dynamic_type
        return _to_str(self.mapping["type"])

    def resolve(
        self,
        field_name: str,
        dynamic_type: Optional[str],
        unknown_type: str = UNKNOWN_DYNAMIC_TYPE,
    ) -> dict[str, Any]:
        """Build the mapping for a field from the template.

        Args:
            field_name: Substituted for `{name}`.
            dynamic_type: Substituted for `{dynamic_type}` and `{dynamicType}`.
            unknown_type: Substituted for type placeholders when
                `dynamic_type` is None.

        Returns:
            A new mapping tree sharing no containers with the template.

        Raises:
            TemplateResolutionError: The mapping tree contains a cycle.
        """
        renderer = _MappingRenderer(
            field_name,
            dynamic_type if dynamic_type is not None else unknown_type,
            type_missing=dynamic_type is None,
            template_name=self.name,
        )
        resolved = renderer.render(self.mapping)
        if renderer.unknown_type_used:
            logger.warning(
                f"Template '{self.name}' resolved type placeholder for "
                f"'{field_name}' without a dynamic type, using '{unknown_type}'"
            )
        return resolved


class _MappingRenderer:
    """Recursive placeholder substitution over a mapping tree."""

    def __init__(
        self,
        field_name: str,
        dynamic_type: str,
        type_missing: bool = False,
        template_name: str = "",
    ):
        self._field_name = field_name
        self._dynamic_type = dynamic_type
        self._type_missing = type_missing
        self._template_name = template_name
        self._active: set[int] = set()
        self.unknown_type_used = False

    def _substitute(self, text: str) -> str:
        text = text.replace(NAME_PLACEHOLDER, self._field_name)
        for placeholder in TYPE_PLACEHOLDERS:
            if placeholder in text:
                if self._type_missing:
                    self.unknown_type_used = True
                text = text.replace(placeholder, self._dynamic_type)
        return text

    def render(self, value: Any) -> Any:
        if isinstance(value, str):
            return self._substitute(value)
        if not isinstance(value, (Mapping, list, tuple)):
            return value

        # Config trees are acyclic unless built by hand.
        node_id = id(value)
        if node_id in self._active:
            raise TemplateResolutionError(
                "mapping template contains a cycle",
                context={"template": self._template_name, "field": self._field_name},
            )
        self._active.add(node_id)
        try:
            if isinstance(value, Mapping):
                return {
                    self._substitute(k) if isinstance(k, str) else k: self.render(v)
                    for k, v in value.items()
                }
            return [self.render(item) for item in value]
        finally:
            self._active.discard(node_id)
