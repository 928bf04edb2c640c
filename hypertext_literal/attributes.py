"""Canonical attribute serialization."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .constants import (
    BOOLEAN_ATTRIBUTES,
    BOOLEAN_KEYWORD_ATTRIBUTES,
    CLASS_ATTRIBUTE,
    DEFAULT_ATTRIBUTE_SEPARATOR,
    INVALID_ATTRIBUTE_NAME_CHARACTERS,
    NESTED_ATTRIBUTE_GROUPS,
    STYLE_ATTRIBUTE,
)
from .escaping import escape, stringify
from .protocols import (
    HypertextAttributesInterpolatable,
    HypertextAttributeValueInterpolatable,
    is_sequence,
)

logger = logging.getLogger("hypertext_literal.attributes")


def render_style(declarations: Mapping[object, object]) -> str:
    """Render a mapping of CSS properties as a ``style`` attribute value.

    Declarations are sorted by their rendered ``"key: value;"`` text so the
    output does not depend on mapping order.

    Examples:
        render_style({"font-weight": "bold", "background": "yellow"})
        # "background: yellow; font-weight: bold;"
    """
    rendered = [f"{key}: {stringify(value)};" for key, value in declarations.items()]
    return " ".join(sorted(rendered))


def is_valid_attribute_name(name: str) -> bool:
    """Whether `name` can be written into a start tag as a single attribute name.

    Empty names and names holding whitespace, control characters, quotes,
    `<`, `>`, `/` or `=` are rejected.

    Examples:
        is_valid_attribute_name("data-index")  # True
        is_valid_attribute_name('x" onclick="')  # False
    """
    if not name:
        return False
    return not any(
        character in INVALID_ATTRIBUTE_NAME_CHARACTERS
        or character.isspace()
        or not character.isprintable()
        for character in name
    )


def _render_boolean(attribute: str, value: bool) -> str | None:
    if attribute in BOOLEAN_ATTRIBUTES:
        return attribute if value else None
    keywords = BOOLEAN_KEYWORD_ATTRIBUTES.get(attribute)
    if keywords is not None:
        return keywords[0] if value else keywords[1]
    return "true" if value else "false"


def serialize_attribute_value(attribute: str, value: object, element: str = "") -> str | None:
    """Render a value for a single attribute.

    Args:
        attribute: Attribute name the value is assigned to.
        value: Value to render.
        element: Name of the element carrying the attribute.

    Returns:
        str | None: Rendered (unescaped) value, or None when the attribute
            should be omitted entirely.

    Examples:
        serialize_attribute_value("disabled", True)  # "disabled"
        serialize_attribute_value("disabled", False)  # None
        serialize_attribute_value("autocomplete", True)  # "on"
        serialize_attribute_value("class", ["a", "b"])  # "a b"
    """
    if isinstance(value, HypertextAttributeValueInterpolatable):
        rendered = value.__html_attr_value__(attribute, element)
        return None if rendered is None else str(rendered)
    if isinstance(value, bool):
        return _render_boolean(attribute, value)
    if (
        attribute == CLASS_ATTRIBUTE
        and is_sequence(value)
        and all(isinstance(item, str) for item in value)
    ):
        return " ".join(value)
    if attribute == STYLE_ATTRIBUTE and isinstance(value, Mapping):
        return render_style(value)
    return stringify(value)


def _iter_entries(entries: Mapping[object, object] | Iterable[tuple[object, object]]):
    if isinstance(entries, Mapping):
        return entries.items()
    return entries


def serialize_attributes(
    entries: Mapping[object, object] | Iterable[tuple[object, object]],
    element: str = "",
    groups: Iterable[str] = NESTED_ATTRIBUTE_GROUPS,
) -> str:
    """Serialize attributes into a canonical, deterministic attribute string.

    Mapping values under a group key (``aria``, ``data``) expand one level into
    ``"<key>-<nested key>"`` pairs. Duplicate names keep the last value seen.
    Pairs are sorted by name and values are entity-escaped inside double
    quotes. Pairs whose value has no representation are left out, and so are
    pairs whose name could end the start tag or start another attribute.

    Args:
        entries: Mapping or iterable of ``(name, value)`` pairs.
        element: Name of the element the attributes are rendered for.
        groups: Attribute keys whose mapping values are expanded.

    Returns:
        str: Space-separated ``name="value"`` pairs without trailing space.

    Examples:
        serialize_attributes({"data": {"index": 1, "count": 3}})
        # 'data-count="3" data-index="1"'
    """
    group_names = frozenset(groups)
    collected: dict[str, str] = {}

    def collect(name: str, value: object) -> None:
        if not is_valid_attribute_name(name):
            logger.debug("Dropping attribute with invalid name %r", name)
            return
        rendered = serialize_attribute_value(name, value, element)
        if rendered is None:
            collected.pop(name, None)
            return
        collected[name] = rendered

    for key, value in _iter_entries(entries):
        name = str(key)
        if name in group_names and isinstance(value, Mapping):
            for nested_key, nested_value in value.items():
                collect(f"{name}-{nested_key}", nested_value)
            continue
        collect(name, value)

    return " ".join(f'{name}="{escape(collected[name])}"' for name in sorted(collected))


def attributes_of(
    value: object,
    element: str,
    separator: str = DEFAULT_ATTRIBUTE_SEPARATOR,
    groups: Iterable[str] = NESTED_ATTRIBUTE_GROUPS,
) -> str | None:
    """Return the attribute string `value` provides for `element`, or None.

    Mappings serialize through `serialize_attributes`; lists and tuples whose
    items all provide attributes join them with `separator`, so an empty list
    contributes nothing.
    """
    if isinstance(value, HypertextAttributesInterpolatable):
        return str(value.__html_attrs__(element))
    if isinstance(value, Mapping):
        return serialize_attributes(value, element, groups)
    if is_sequence(value) and all(_provides_attributes(item) for item in value):
        return separator.join(attributes_of(item, element, separator, groups) or "" for item in value)
    return None


def _provides_attributes(value: object) -> bool:
    return isinstance(value, (HypertextAttributesInterpolatable, Mapping))
