"""Data models for hypertext-literal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ParserState(Enum):
    """Parser states used while scanning markup fragments.

    Attributes:
        TEXT: Free text between tags.
        TAG_OPEN: Just after ``<``.
        ELEMENT_NAME: Inside the element name of a start tag.
        AFTER_ELEMENT_NAME: Whitespace after the element name or an attribute.
        ATTRIBUTE_NAME: Inside an attribute name.
        AFTER_ATTRIBUTE_NAME: Whitespace after an attribute name.
        BEFORE_ATTRIBUTE_VALUE: After ``=``, before the value starts.
        ATTRIBUTE_VALUE: Inside an attribute value; the quote is kept on the
            context.
        AFTER_ATTRIBUTE_VALUE: Just after a closed attribute value.
        SELF_CLOSING_TAG: After ``/`` inside a tag.
        BEFORE_COMMENT: After ``<!--``, before comment content.
        COMMENT: Inside a comment.
        UNSUPPORTED_CONSTRUCT: Doctypes, processing instructions and other
            ``<!``/``<?`` constructs, skipped up to the next ``>``.
    """

    TEXT = auto()
    TAG_OPEN = auto()
    ELEMENT_NAME = auto()
    AFTER_ELEMENT_NAME = auto()
    ATTRIBUTE_NAME = auto()
    AFTER_ATTRIBUTE_NAME = auto()
    BEFORE_ATTRIBUTE_VALUE = auto()
    ATTRIBUTE_VALUE = auto()
    AFTER_ATTRIBUTE_VALUE = auto()
    SELF_CLOSING_TAG = auto()
    BEFORE_COMMENT = auto()
    COMMENT = auto()
    UNSUPPORTED_CONSTRUCT = auto()


class Quote(Enum):
    """Quotation mark that opened an attribute value."""

    SINGLE = "'"
    DOUBLE = '"'


class DispositionKind(Enum):
    """Markup context an interpolated value lands in."""

    TEXT = auto()
    ELEMENT = auto()
    ATTRIBUTE = auto()
    COMMENT = auto()


@dataclass(frozen=True)
class Disposition:
    """Externally visible parsing context at an interpolation site.

    Attributes:
        kind: Which markup context is in effect.
        element: Element name for element and attribute dispositions.
        attribute: Attribute name for attribute dispositions.
        quote: Quote that opened the attribute value, or None when the value
            is unquoted or has not started yet.

    Examples:
        Disposition.for_attribute("a", "href", Quote.DOUBLE)
    """

    kind: DispositionKind = DispositionKind.TEXT
    element: str | None = None
    attribute: str | None = None
    quote: Quote | None = None

    @classmethod
    def text(cls) -> Disposition:
        return cls(DispositionKind.TEXT)

    @classmethod
    def for_element(cls, element: str) -> Disposition:
        return cls(DispositionKind.ELEMENT, element=element)

    @classmethod
    def for_attribute(
        cls, element: str, attribute: str, quote: Quote | None = None
    ) -> Disposition:
        return cls(DispositionKind.ATTRIBUTE, element=element, attribute=attribute, quote=quote)

    @classmethod
    def comment(cls) -> Disposition:
        return cls(DispositionKind.COMMENT)

    def __str__(self) -> str:
        name = self.kind.name.lower()
        if self.kind is DispositionKind.ELEMENT:
            return f"{name}({self.element})"
        if self.kind is DispositionKind.ATTRIBUTE:
            quote = self.quote.name.lower() if self.quote else "unquoted"
            return f"{name}({self.element}, {self.attribute}, {quote})"
        return name


@dataclass
class ParserContext:
    """Encapsulate parser state while walking markup fragments.

    Attributes:
        state: Current parser state.
        quote: Quote that opened the current attribute value, if any.
        element_name: Characters of the current element name seen so far.
        attribute_name: Characters of the current attribute name seen so far.
    """

    state: ParserState = ParserState.TEXT
    quote: Quote | None = None
    element_name: str = ""
    attribute_name: str = ""
