"""Collaborator protocols consumed by NodeEditSession.

Defines the structural interfaces of the two stores an edit cycle talks to.
Any object with conformant members passes ``isinstance`` checks; no base
class is required.

Example::

    from json_node_edit.protocols import DocumentStore

    class FileBackedStore:
        def __init__(self, path):
            self._path = path

        def get(self) -> str:
            return self._path.read_text(encoding="utf-8")

        def set(self, text: str) -> None:
            self._path.write_text(text, encoding="utf-8")

    assert isinstance(FileBackedStore(p), DocumentStore)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_node_edit.tree.nodes import Node

__all__ = ["DocumentStore", "NodeStore"]


@runtime_checkable
class DocumentStore(Protocol):
    """Holds the serialized document.

    ``set`` must complete the swap (and anything it triggers, such as a graph
    rebuild) before returning.
    """

    def get(self) -> str: ...

    def set(self, text: str) -> None: ...


@runtime_checkable
class NodeStore(Protocol):
    """Holds the current node set and the selected node."""

    @property
    def current_selection(self) -> Node | None: ...

    @property
    def all_nodes(self) -> Sequence[Node]: ...

    def select(self, node: Node) -> None: ...
