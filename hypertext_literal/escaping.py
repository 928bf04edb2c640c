"""Escaping helpers for interpolated text.

None of these functions raise on markup content: anything that cannot be
classified is escaped rather than passed through.
"""

from __future__ import annotations

from collections.abc import Mapping

from .constants import COMMENT_DELIMITERS, ENTITIES
from .models import Quote

_DEFAULT_TABLE = str.maketrans(dict(ENTITIES))


def escape(text: str, entities: Mapping[str, str] | None = None) -> str:
    """Replace markup-significant characters with entity references.

    Args:
        text: Raw text to make safe for a text context.
        entities: Optional replacement table mapping single characters to
            entity references. Defaults to `ENTITIES`.

    Returns:
        str: Escaped text.

    Examples:
        escape("<world>")  # "&lt;world&gt;"
        escape("Tom & Jerry's")  # "Tom &amp; Jerry&apos;s"
    """
    table = _DEFAULT_TABLE if entities is None else str.maketrans(dict(entities))
    return text.translate(table)


def stringify(value: object) -> str:
    """Generic textual conversion for interpolated values.

    Booleans render as ``"true"``/``"false"``; everything else uses `str`.

    Examples:
        stringify(True)  # "true"
        stringify(12.0)  # "12.0"
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def strip_comment_delimiters(text: str) -> str:
    """Remove comment open/close sequences and surrounding whitespace.

    Removal repeats until no delimiter is left, since dropping one can join
    its neighbours into another (``"---->>"`` would otherwise become ``"-->"``).

    Examples:
        strip_comment_delimiters("<!-- zzZ -->")  # "zzZ"
        strip_comment_delimiters("---->>")  # ""
    """
    while any(delimiter in text for delimiter in COMMENT_DELIMITERS):
        for delimiter in COMMENT_DELIMITERS:
            text = text.replace(delimiter, "")
    return text.strip()


def escape_attribute_quotes(text: str, quote: Quote | None) -> str:
    """Prepare text for an attribute value site.

    Double quotes are backslash-escaped unless the value was opened with a
    single quote. Unquoted sites are wrapped in double quotes.

    Args:
        text: Rendered attribute value.
        quote: Quote that opened the value, or None for an unquoted site.

    Returns:
        str: Text ready to append at the attribute value site.

    Examples:
        escape_attribute_quotes('say "hi"', None)  # '"say \\"hi\\""'
        escape_attribute_quotes('say "hi"', Quote.SINGLE)  # 'say "hi"'
    """
    if quote is not Quote.SINGLE:
        text = text.replace('"', '\\"')
    if quote is None:
        text = f'"{text}"'
    return text
