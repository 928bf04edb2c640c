"""Constants used across the hypertext-literal package."""

from __future__ import annotations

from types import MappingProxyType

# Text-context entity references
ENTITIES = MappingProxyType(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        "'": "&apos;",
        '"': "&quot;",
    }
)

# Comment delimiters
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
# Browsers also end a comment at "--!>"
COMMENT_CLOSE_BANG = "--!>"
COMMENT_DELIMITERS = (COMMENT_OPEN, COMMENT_CLOSE, COMMENT_CLOSE_BANG)

# Characters that may not appear in an attribute name
INVALID_ATTRIBUTE_NAME_CHARACTERS = frozenset("\"'<>/=")

# Attributes whose boolean value toggles presence: True renders the attribute
# name, False omits the attribute.
BOOLEAN_ATTRIBUTES = frozenset(
    {
        # Global attributes
        "contenteditable",
        "hidden",
        "spellcheck",
        # Media attributes
        "autoplay",
        "controls",
        "loop",
        "muted",
        "preload",
        # Input attributes
        "autofocus",
        "disabled",
        "multiple",
        "readonly",
        "required",
        "selected",
        "wrap",
        # Script attributes
        "async",
        "defer",
    }
)

# Attributes with dedicated (true, false) keywords
BOOLEAN_KEYWORD_ATTRIBUTES = MappingProxyType(
    {
        "translate": ("yes", "no"),
        "autocomplete": ("on", "off"),
    }
)

CLASS_ATTRIBUTE = "class"
STYLE_ATTRIBUTE = "style"

# Attribute keys whose mapping values expand to "<key>-<nested key>" pairs
NESTED_ATTRIBUTE_GROUPS = ("aria", "data")

DEFAULT_MARKUP_SEPARATOR = "\n"
DEFAULT_ATTRIBUTE_SEPARATOR = " "

# Format specs recognised on template interpolations
UNSAFE_FORMAT_SPEC = "unsafe"
COMMENT_FORMAT_SPEC = "comment"
