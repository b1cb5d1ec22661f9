"""EditResult dataclass for the outcome of one edit cycle.

This module provides the result type returned by NodeEditSession.save().
"""

from __future__ import annotations

from dataclasses import dataclass

from json_node_edit.path import Path
from json_node_edit.tree.nodes import Node

__all__ = ["EditResult"]


@dataclass(frozen=True, slots=True)
class EditResult:
    """Outcome of a NodeEditSession.save() call.

    Attributes:
        saved: True when the document was replaced.
        document_text: The document text in the store after the call. Equal
            to the previous text when ``saved`` is False.
        path: Path of the edited node (the root path when no node was
            selected).
        selected: The node re-found at ``path`` after the rebuild, or None
            when nothing lives there any more or the save failed.
        error: Parse error message when ``saved`` is False, else None.
    """

    saved: bool
    document_text: str
    path: Path
    selected: Node | None = None
    error: str | None = None
