"""Capability protocols consumed by the interpolation dispatcher.

A value can customise how it is rendered by implementing one or more of these
methods. The dispatcher checks them in this order for each disposition:

* text: `__html__` (trusted markup), otherwise the escaped text form;
* element: `__html_attrs__`, otherwise the escaped text form;
* attribute: `__html_attr_value__`, otherwise the plain text form;
* comment: the text form, stripped of comment delimiters.

Built-in containers get default behaviour from `markup_of` here and from
`hypertext_literal.attributes.attributes_of`; booleans, ``class`` sequences
and ``style`` mappings are handled by
`hypertext_literal.attributes.serialize_attribute_value`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .constants import DEFAULT_MARKUP_SEPARATOR


@runtime_checkable
class HypertextLiteralConvertible(Protocol):
    """A value that supplies its own trusted markup."""

    def __html__(self) -> str: ...


@runtime_checkable
class HypertextAttributesInterpolatable(Protocol):
    """A value that provides attributes for an element."""

    def __html_attrs__(self, element: str) -> str: ...


@runtime_checkable
class HypertextAttributeValueInterpolatable(Protocol):
    """A value that customises its representation in an attribute value.

    Returning None means the value has no representation for that attribute.
    """

    def __html_attr_value__(self, attribute: str, element: str) -> str | None: ...


def is_sequence(value: object) -> bool:
    """Return True for lists and tuples, the containers treated as sequences."""
    return isinstance(value, (list, tuple))


def markup_of(value: object, separator: str = DEFAULT_MARKUP_SEPARATOR) -> str | None:
    """Return the trusted markup for `value`, or None when it has none.

    Lists and tuples whose items are all markup-capable join their items with
    `separator`.

    Examples:
        markup_of(HTML("<b>x</b>"))  # "<b>x</b>"
        markup_of([HTML("<li>a</li>"), HTML("<li>b</li>")])  # "<li>a</li>\\n<li>b</li>"
        markup_of("<b>")  # None
    """
    if isinstance(value, HypertextLiteralConvertible):
        return str(value.__html__())
    if is_sequence(value) and all(isinstance(item, HypertextLiteralConvertible) for item in value):
        return separator.join(str(item.__html__()) for item in value)
    return None
