"""The trusted markup value."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class HTML:
    """Markup that is already safe to concatenate into a document.

    Instances are produced by the builder or created explicitly from a
    trusted string. No escaping is ever applied to `content` again.

    Attributes:
        content: The raw markup.

    Examples:
        HTML("<h1>Hello, world!</h1>")
        str(HTML("<br>"))  # "<br>"
    """

    content: str = ""

    def __str__(self) -> str:
        return self.content

    def __html__(self) -> str:
        return self.content

    def to_json(self) -> str:
        """Encode the markup as a single JSON string."""
        return json.dumps(self.content)

    @classmethod
    def from_json(cls, data: str | bytes) -> HTML:
        """Decode markup persisted with `to_json`.

        Raises:
            ValueError: If `data` is not valid JSON or does not hold a string.
        """
        decoded = json.loads(data)
        if not isinstance(decoded, str):
            raise ValueError(f"Expected a JSON string, got {type(decoded).__name__}")
        return cls(decoded)

    @classmethod
    def join(cls, separator: str, items: Iterable[object]) -> HTML:
        """Join markup-capable items with a trusted separator."""
        return cls(separator.join(item.__html__() for item in items))
