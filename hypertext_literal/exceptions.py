"""Package-specific exception types.

Markup content never raises: the parser and dispatcher degrade to escaping
instead. These exceptions cover API misuse only.
"""

from __future__ import annotations


class HypertextError(Exception):
    """Base class for hypertext-literal errors."""


class TemplateTypeError(HypertextError, TypeError):
    """Raised when `html()` receives something that is not a template.

    Args:
        received: The object that was passed instead of a template.
    """

    def __init__(self, received: object):
        self.received = received
        super().__init__(
            "html() expects a string.templatelib.Template or compatible object, "
            f"got {type(received).__name__}"
        )
