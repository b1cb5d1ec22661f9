"""EditorConfig: rendering options for node text and serialized documents.

EditorConfig is a frozen (immutable) dataclass. It governs how values are
turned into text only; the cache size used by NormalizedTextCache and
NodeEditSession is an infrastructure parameter passed to those directly.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

__all__ = ["EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable rendering configuration.

    Attributes:
        indent: Indentation width for pretty-printed container text and for
            the serialized document (>= 0).  Default 2.
        ensure_ascii: When True, non-ASCII characters are escaped as
            ``\\uXXXX``.  Default False.
        quote_leaf_strings: When True, a string leaf renders as a JSON string
            literal (``"hello"``) so the editable text parses back to the same
            value.  When False it renders bare (``hello``) and must be quoted
            by the user before it will parse.  Default True.
    """

    indent: int = 2
    ensure_ascii: bool = False
    quote_leaf_strings: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)

    def dumps(self, value: Any) -> str:
        """Serialize ``value`` as pretty-printed JSON using this config."""
        return json.dumps(
            value, indent=self.indent, ensure_ascii=self.ensure_ascii, allow_nan=False
        )
