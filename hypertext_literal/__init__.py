"""
hypertext-literal: context-aware HTML building from literals and values.

Interpolated values are escaped according to where they land in the markup:
text, a start tag, an attribute value, or a comment.

Library Usage (Python 3.14+ t-strings):
    from hypertext_literal import html

    attributes = {"class": ["alert", "warning"], "hidden": False}
    message = "<script>"
    page = html(t"<p {attributes}>{message}</p>")
    # <p class="alert warning">&lt;script&gt;</p>

Library Usage (any supported Python):
    from hypertext_literal import render_parts

    render_parts(["<a href=", ">", "</a>"], ["/docs", "Docs"])
    # <a href="/docs">Docs</a>

CLI Usage:
    hypertext-literal context "<input " "type="
"""

from .attributes import serialize_attribute_value, serialize_attributes
from .builder import (
    CommentText,
    HTMLBuilder,
    Unescaped,
    comment,
    render_interpolation,
    render_parts,
    unsafe_unescaped,
)
from .config import ConfigError, HypertextConfig
from .escaping import escape
from .exceptions import HypertextError, TemplateTypeError
from .markup import HTML
from .models import Disposition, DispositionKind, Quote
from .parser import ContextParser
from .protocols import (
    HypertextAttributesInterpolatable,
    HypertextAttributeValueInterpolatable,
    HypertextLiteralConvertible,
)
from .tstring import html

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "html",
    "render_parts",
    "HTMLBuilder",
    "render_interpolation",
    "ContextParser",
    # Explicit insertion modes
    "unsafe_unescaped",
    "comment",
    "Unescaped",
    "CommentText",
    # Data models
    "HTML",
    "Disposition",
    "DispositionKind",
    "Quote",
    # Capability protocols
    "HypertextLiteralConvertible",
    "HypertextAttributesInterpolatable",
    "HypertextAttributeValueInterpolatable",
    # Utilities
    "escape",
    "serialize_attributes",
    "serialize_attribute_value",
    # Configuration
    "HypertextConfig",
    # Exceptions
    "ConfigError",
    "HypertextError",
    "TemplateTypeError",
    # Version
    "__version__",
]
