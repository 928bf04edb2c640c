"""Interpolation dispatch and document building.

Literal fragments are appended verbatim and fed to a `ContextParser`. Each
interpolated value is rendered for the disposition that follows the preceding
literal, and the rendered text is fed back to the parser as if it were
literal, so later fragments see the right context.

Values are escaped by default. The only way to append text without escaping
is `HTMLBuilder.append_unsafe` (or an `Unescaped` value), and that text is
still fed to the parser.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .attributes import attributes_of, serialize_attribute_value
from .config import HypertextConfig, normalize_config, validate_config
from .constants import COMMENT_FORMAT_SPEC, UNSAFE_FORMAT_SPEC
from .escaping import escape, escape_attribute_quotes, strip_comment_delimiters, stringify
from .markup import HTML
from .models import Disposition, DispositionKind
from .parser import ContextParser
from .protocols import markup_of

logger = logging.getLogger("hypertext_literal.builder")

_CONVERSIONS = {"r": repr, "s": str, "a": ascii}


@dataclass(frozen=True)
class Unescaped:
    """Raw text the caller vouches for; appended without any escaping."""

    text: str


@dataclass(frozen=True)
class CommentText:
    """Text to insert as a comment, or as comment content inside one."""

    text: str


def unsafe_unescaped(text: str) -> Unescaped:
    """Mark `text` for insertion without escaping.

    Examples:
        render_parts(["<span>", "</span>"], [unsafe_unescaped("<b>&amp;</b>")])
    """
    return Unescaped(text)


def comment(text: object) -> CommentText:
    """Mark `text` for insertion as a comment.

    Examples:
        render_parts(["", ""], [comment("note")])  # HTML("<!-- note -->")
    """
    return CommentText(stringify(text))


def render_comment(text: str, disposition: Disposition) -> str:
    """Render comment text for the given disposition.

    Nested comment delimiters are removed and surrounding whitespace trimmed.
    Inside an open comment the text is inserted bare; elsewhere it is wrapped
    in ``<!-- ... -->``.

    Examples:
        render_comment("<!-- zzZ -->", Disposition.comment())  # "zzZ"
        render_comment("note", Disposition.text())  # "<!-- note -->"
    """
    text = strip_comment_delimiters(text)
    if disposition.kind is DispositionKind.COMMENT:
        return text
    return f"<!-- {text} -->"


def render_interpolation(
    value: object, disposition: Disposition, config: HypertextConfig | None = None
) -> str:
    """Render an interpolated value for the given disposition.

    Args:
        value: The interpolated value.
        disposition: Context in effect at the interpolation site.
        config: Rendering configuration; defaults to `HypertextConfig()`.

    Returns:
        str: Text to append to the document.

    Examples:
        render_interpolation("<world>", Disposition.text())  # "&lt;world&gt;"
        render_interpolation({"id": "x"}, Disposition.for_element("div"))  # 'id="x"'
    """
    config = config or HypertextConfig()
    kind = disposition.kind

    if kind is DispositionKind.TEXT:
        markup = markup_of(value, config.markup_separator)
        if markup is not None:
            return markup
        return escape(stringify(value))

    if kind is DispositionKind.ELEMENT:
        element = disposition.element or ""
        attributes = attributes_of(
            value, element, config.attribute_separator, config.nested_attribute_groups
        )
        if attributes is not None:
            return attributes
        return escape(stringify(value))

    if kind is DispositionKind.ATTRIBUTE:
        rendered = serialize_attribute_value(
            disposition.attribute or "", value, disposition.element or ""
        )
        if rendered is None:
            rendered = stringify(value)
        return escape_attribute_quotes(rendered, disposition.quote)

    return render_comment(stringify(value), disposition)


class HTMLBuilder:
    """Accumulate a document from literal fragments and interpolated values.

    One builder builds one document; it is not thread-safe.

    Args:
        config: Rendering configuration; defaults to `HypertextConfig()`.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        builder = HTMLBuilder()
        builder.append_literal("<h1>Hello, ")
        builder.append_value("<world>")
        builder.append_literal("!</h1>")
        builder.build()  # HTML("<h1>Hello, &lt;world&gt;!</h1>")
    """

    def __init__(self, config: HypertextConfig | None = None) -> None:
        self.config = normalize_config(config or HypertextConfig())
        validate_config(self.config)
        self._parser = ContextParser()
        self._parts: list[str] = []

    @property
    def disposition(self) -> Disposition:
        """Disposition the next interpolated value will be rendered for."""
        return self._parser.disposition

    def append_literal(self, literal: str) -> None:
        self._parser.feed(literal)
        self._parts.append(literal)

    def append_value(self, value: object) -> None:
        """Render `value` for the current disposition and append it."""
        if isinstance(value, Unescaped):
            self.append_unsafe(value.text)
            return
        if isinstance(value, CommentText):
            self.append_comment(value.text)
            return
        disposition = self.disposition
        logger.debug("Interpolating %s in %s", type(value).__name__, disposition)
        self.append_literal(render_interpolation(value, disposition, self.config))

    def append_unsafe(self, text: str) -> None:
        """Append `text` verbatim; the caller is responsible for its safety."""
        logger.debug("Appending %d unescaped characters in %s", len(text), self.disposition)
        self.append_literal(text)

    def append_comment(self, text: str) -> None:
        self.append_literal(render_comment(text, self.disposition))

    def append_field(
        self, value: object, conversion: str | None = None, format_spec: str = ""
    ) -> None:
        """Append a replacement field the way `str.format` and t-strings spell it.

        The ``r``, ``s`` and ``a`` conversions apply first. A format spec of
        ``unsafe`` appends the value unescaped, ``comment`` inserts it as a
        comment, and any other spec is applied with `format` before the
        result is dispatched as text.

        Raises:
            ValueError: If `conversion` is not one of ``r``, ``s`` or ``a``.
        """
        if conversion:
            convert = _CONVERSIONS.get(conversion)
            if convert is None:
                raise ValueError(f"Unknown conversion specifier {conversion!r}")
            value = convert(value)
        if format_spec == UNSAFE_FORMAT_SPEC:
            self.append_unsafe(stringify(value))
        elif format_spec == COMMENT_FORMAT_SPEC:
            self.append_comment(stringify(value))
        elif format_spec:
            self.append_value(format(value, format_spec))
        else:
            self.append_value(value)

    def build(self) -> HTML:
        return HTML("".join(self._parts))


def render_parts(
    strings: Sequence[str], values: Sequence[object], config: HypertextConfig | None = None
) -> HTML:
    """Build a document from alternating literal fragments and values.

    Args:
        strings: Literal fragments; one more than `values`.
        values: Interpolated values, rendered between consecutive fragments.
        config: Rendering configuration; defaults to `HypertextConfig()`.

    Returns:
        HTML: The built document.

    Raises:
        ValueError: If `strings` does not hold exactly one more item than
            `values`.
        ConfigError: If the configuration fails validation.

    Examples:
        render_parts(["<", ">hi</", ">"], ["h1", "h1"])  # HTML("<h1>hi</h1>")
    """
    if len(strings) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} literal fragments for {len(values)} values, "
            f"got {len(strings)}"
        )

    builder = HTMLBuilder(config)
    for literal, value in zip(strings, values):
        builder.append_literal(literal)
        builder.append_value(value)
    builder.append_literal(strings[-1])
    return builder.build()
