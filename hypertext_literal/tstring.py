"""Template string support (PEP 750).

Provides the `html` tag for Python 3.14+ t-strings::

    name = "<world>"
    html(t"<h1>Hello, {name}!</h1>")  # HTML("<h1>Hello, &lt;world&gt;!</h1>")

Interpolation format specs select explicit modes: ``{value:unsafe}`` appends
the value without escaping and ``{value:comment}`` inserts it as a comment.
Any other format spec is applied with `format` before dispatch.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .builder import HTMLBuilder
from .config import HypertextConfig
from .exceptions import TemplateTypeError
from .markup import HTML


@runtime_checkable
class TemplateProtocol(Protocol):
    strings: tuple[str, ...]
    interpolations: tuple[Any, ...]


def html(template: TemplateProtocol, config: HypertextConfig | None = None) -> HTML:
    """Build markup from a template string, escaping by context.

    Args:
        template: A `string.templatelib.Template`, or any object with
            `strings` and `interpolations` (each exposing `value` and,
            optionally, `conversion` and `format_spec`).
        config: Rendering configuration; defaults to `HypertextConfig()`.

    Returns:
        HTML: The built document.

    Raises:
        TemplateTypeError: If `template` is not a template.
        ConfigError: If the configuration fails validation.

    Examples:
        >>> tag = "h1"
        >>> html(t"<{tag}>Hello</{tag}>")
        HTML(content='<h1>Hello</h1>')
    """
    # Accept any object that structurally matches the template protocol, so
    # callers on older interpreters can pass compatible objects.
    if not isinstance(template, TemplateProtocol):
        raise TemplateTypeError(template)

    strings = template.strings
    interpolations = template.interpolations
    builder = HTMLBuilder(config)

    for index, literal in enumerate(strings):
        builder.append_literal(literal)
        if index < len(interpolations):
            interpolation = interpolations[index]
            builder.append_field(
                interpolation.value,
                getattr(interpolation, "conversion", None),
                getattr(interpolation, "format_spec", "") or "",
            )

    return builder.build()
