"""Incremental markup context parser.

Tracks just enough of the markup grammar to tell which context the next
interpolated value lands in. Fragments are consumed in order, one character
at a time, with lookahead limited to the fragment being fed. The parser never
raises: malformed or truncated markup degrades to the closest disposition,
which for anything outside a tag is text, the fully-escaping context.
"""

from __future__ import annotations

import logging
import string
from collections.abc import Callable

from .constants import COMMENT_CLOSE
from .models import Disposition, ParserContext, ParserState, Quote

logger = logging.getLogger("hypertext_literal.parser")

_NAME_START = frozenset(string.ascii_letters + "-")
_QUOTES = {quote.value: quote for quote in Quote}

# A handler returns the number of characters it consumed; 0 re-dispatches the
# same character against the new state.
StateHandler = Callable[[ParserContext, str, int], int]

REDISPATCH = 0

# Upper bound on handler calls per character. The longest re-dispatch chain is
# shorter than the number of states.
MAX_REENTRIES = len(ParserState)


def _lookahead(fragment: str, index: int, expected: str) -> bool:
    """Check whether `expected` follows the character at `index`.

    Examples:
        _lookahead("<!--", 1, "--")  # True
    """
    return fragment.startswith(expected, index + 1)


def _on_text(ctx: ParserContext, fragment: str, index: int) -> int:
    if fragment[index] == "<":
        ctx.state = ParserState.TAG_OPEN
    return 1


def _on_tag_open(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character == "!":
        if _lookahead(fragment, index, "--"):
            ctx.state = ParserState.BEFORE_COMMENT
            return 3
        ctx.state = ParserState.UNSUPPORTED_CONSTRUCT
        return 1
    if character == "/" and _lookahead(fragment, index, ">"):
        ctx.state = ParserState.TEXT
        return 2
    if character in _NAME_START:
        ctx.state = ParserState.ELEMENT_NAME
        ctx.element_name = ""
        ctx.attribute_name = ""
        return REDISPATCH
    if character == "?":
        ctx.state = ParserState.UNSUPPORTED_CONSTRUCT
        return REDISPATCH
    ctx.state = ParserState.TEXT
    return REDISPATCH


def _close_tag(ctx: ParserContext) -> None:
    ctx.state = ParserState.TEXT
    ctx.quote = None
    ctx.element_name = ""
    ctx.attribute_name = ""


def _on_element_name(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character.isspace():
        ctx.state = ParserState.AFTER_ELEMENT_NAME
    elif character == "/":
        ctx.state = ParserState.SELF_CLOSING_TAG
    elif character == ">":
        _close_tag(ctx)
    else:
        ctx.element_name += character
    return 1


def _on_after_element_name(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character.isspace():
        return 1
    if character in "/>":
        ctx.state = ParserState.AFTER_ATTRIBUTE_NAME
        return REDISPATCH
    if character == "=":
        ctx.state = ParserState.BEFORE_ATTRIBUTE_VALUE
        return 1
    ctx.state = ParserState.ATTRIBUTE_NAME
    ctx.attribute_name = ""
    return REDISPATCH


def _on_attribute_name(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character in "/>" or character.isspace():
        ctx.state = ParserState.AFTER_ATTRIBUTE_NAME
        return REDISPATCH
    if character == "=":
        ctx.state = ParserState.BEFORE_ATTRIBUTE_VALUE
        return 1
    ctx.attribute_name += character
    return 1


def _on_after_attribute_name(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character.isspace():
        return 1
    if character == "/":
        ctx.state = ParserState.SELF_CLOSING_TAG
    elif character == "=":
        ctx.state = ParserState.BEFORE_ATTRIBUTE_VALUE
    elif character == ">":
        _close_tag(ctx)
    else:
        ctx.state = ParserState.ATTRIBUTE_NAME
        ctx.attribute_name = ""
        return REDISPATCH
    return 1


def _on_before_attribute_value(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character.isspace():
        return 1
    if character == ">":
        _close_tag(ctx)
        return 1
    ctx.state = ParserState.ATTRIBUTE_VALUE
    ctx.quote = _QUOTES.get(character)
    if ctx.quote is None:
        # Unquoted value: the character is part of the value.
        return REDISPATCH
    return 1


def _on_attribute_value(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if ctx.quote is not None:
        if character == ctx.quote.value:
            ctx.state = ParserState.AFTER_ATTRIBUTE_VALUE
            ctx.quote = None
            ctx.attribute_name = ""
        return 1
    if character.isspace():
        ctx.state = ParserState.AFTER_ATTRIBUTE_VALUE
        ctx.attribute_name = ""
    elif character == ">":
        _close_tag(ctx)
    return 1


def _on_after_attribute_value(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character.isspace():
        ctx.state = ParserState.AFTER_ELEMENT_NAME
    elif character == "/":
        ctx.state = ParserState.SELF_CLOSING_TAG
    elif character == ">":
        _close_tag(ctx)
    else:
        ctx.state = ParserState.AFTER_ELEMENT_NAME
        return REDISPATCH
    return 1


def _on_self_closing_tag(ctx: ParserContext, fragment: str, index: int) -> int:
    if fragment[index] == ">":
        _close_tag(ctx)
        return 1
    ctx.state = ParserState.AFTER_ELEMENT_NAME
    return REDISPATCH


def _on_unsupported_construct(ctx: ParserContext, fragment: str, index: int) -> int:
    if fragment[index] == ">":
        ctx.state = ParserState.TEXT
    return 1


def _on_before_comment(ctx: ParserContext, fragment: str, index: int) -> int:
    character = fragment[index]
    if character == "-":
        return 1
    if character == ">":
        ctx.state = ParserState.TEXT
        return 1
    ctx.state = ParserState.COMMENT
    return REDISPATCH


def _on_comment(ctx: ParserContext, fragment: str, index: int) -> int:
    if fragment.startswith(COMMENT_CLOSE, index):
        ctx.state = ParserState.TEXT
        return len(COMMENT_CLOSE)
    return 1


_HANDLERS: dict[ParserState, StateHandler] = {
    ParserState.TEXT: _on_text,
    ParserState.TAG_OPEN: _on_tag_open,
    ParserState.ELEMENT_NAME: _on_element_name,
    ParserState.AFTER_ELEMENT_NAME: _on_after_element_name,
    ParserState.ATTRIBUTE_NAME: _on_attribute_name,
    ParserState.AFTER_ATTRIBUTE_NAME: _on_after_attribute_name,
    ParserState.BEFORE_ATTRIBUTE_VALUE: _on_before_attribute_value,
    ParserState.ATTRIBUTE_VALUE: _on_attribute_value,
    ParserState.AFTER_ATTRIBUTE_VALUE: _on_after_attribute_value,
    ParserState.SELF_CLOSING_TAG: _on_self_closing_tag,
    ParserState.UNSUPPORTED_CONSTRUCT: _on_unsupported_construct,
    ParserState.BEFORE_COMMENT: _on_before_comment,
    ParserState.COMMENT: _on_comment,
}


def _step(ctx: ParserContext, fragment: str, index: int) -> int:
    """Advance the context by the character at `index`.

    Returns:
        int: Number of characters consumed (at least one).
    """
    for _ in range(MAX_REENTRIES):
        consumed = _HANDLERS[ctx.state](ctx, fragment, index)
        if consumed:
            return consumed
    logger.warning(
        "Re-dispatch limit reached at %r (state %s); consuming character",
        fragment[index],
        ctx.state.name,
    )
    return 1


def disposition_for(ctx: ParserContext) -> Disposition:
    """Project the parser context onto the disposition seen by the dispatcher.

    Examples:
        disposition_for(ParserContext(state=ParserState.COMMENT))  # Disposition.comment()
    """
    state = ctx.state
    if state is ParserState.AFTER_ELEMENT_NAME:
        return Disposition.for_element(ctx.element_name)
    if state is ParserState.ATTRIBUTE_VALUE:
        return Disposition.for_attribute(ctx.element_name, ctx.attribute_name, ctx.quote)
    if state in (ParserState.BEFORE_ATTRIBUTE_VALUE, ParserState.AFTER_ATTRIBUTE_VALUE):
        return Disposition.for_attribute(ctx.element_name, ctx.attribute_name)
    if state in (ParserState.COMMENT, ParserState.BEFORE_COMMENT):
        return Disposition.comment()
    return Disposition.text()


def feed(ctx: ParserContext, fragment: str) -> Disposition:
    """Consume a literal fragment and report the disposition that follows it.

    Args:
        ctx: Parser context carried across fragments of one document.
        fragment: Literal markup to consume.

    Returns:
        Disposition: Context in effect immediately after the fragment.

    Examples:
        ctx = ParserContext()
        feed(ctx, '<a href="')  # Disposition.for_attribute("a", "href", Quote.DOUBLE)
    """
    index = 0
    length = len(fragment)
    while index < length:
        index += _step(ctx, fragment, index)
    return disposition_for(ctx)


class ContextParser:
    """Stateful parser for one document build.

    Not thread-safe; create one instance per document.

    Examples:
        parser = ContextParser()
        parser.feed("<input ")  # Disposition.for_element("input")
    """

    def __init__(self) -> None:
        self._ctx = ParserContext()
        self._disposition = Disposition.text()

    @property
    def state(self) -> ParserState:
        return self._ctx.state

    @property
    def disposition(self) -> Disposition:
        return self._disposition

    def feed(self, fragment: str) -> Disposition:
        self._disposition = feed(self._ctx, fragment)
        return self._disposition
