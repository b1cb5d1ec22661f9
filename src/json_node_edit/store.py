"""In-memory document and node stores.

``JsonDocumentStore`` holds the serialized document and swaps it atomically
on ``set``. Subscribers are called synchronously after the swap, so a
``GraphNodeStore`` attached to it has finished rebuilding by the time
``set`` returns. Re-selection after an edit therefore always sees the
complete new node set.

Example::

    documents = JsonDocumentStore('{"a": {"b": 1}}')
    nodes = GraphNodeStore()
    nodes.attach(documents)

    documents.set('{"a": {"b": 2}}')   # nodes rebuilt before this returns
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from json_node_edit.mutator import InvalidJSONError, parse_json_text
from json_node_edit.tree.builder import Graph, GraphBuilder
from json_node_edit.tree.nodes import Edge, Node

__all__ = ["GraphNodeStore", "JsonDocumentStore"]

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """Holder of the serialized document with subscriber notification.

    Satisfies the ``DocumentStore`` Protocol structurally.

    Args:
        text: Initial document text. Defaults to ``"{}"``.
    """

    def __init__(self, text: str = "{}") -> None:
        self._text = text
        self._subscribers: list[Callable[[str], None]] = []

    def get(self) -> str:
        return self._text

    def set(self, text: str) -> None:
        """Replace the document text, then notify subscribers in order."""
        self._text = text
        for callback in list(self._subscribers):
            callback(text)

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register ``callback(text)`` for every ``set``; returns an unsubscriber."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class GraphNodeStore:
    """Holder of the current node set and selection.

    Satisfies the ``NodeStore`` Protocol structurally. Every rebuild replaces
    all nodes and clears the selection; callers re-find the node they care
    about by path.

    Args:
        builder: Graph builder to use. Defaults to ``GraphBuilder()``.
    """

    def __init__(self, builder: GraphBuilder | None = None) -> None:
        self._builder = builder if builder is not None else GraphBuilder()
        self._graph = Graph()
        self._selected: Node | None = None

    # ------------------------------------------------------------------
    # NodeStore Protocol surface
    # ------------------------------------------------------------------

    @property
    def current_selection(self) -> Node | None:
        return self._selected

    @property
    def all_nodes(self) -> tuple[Node, ...]:
        return self._graph.nodes

    def select(self, node: Node) -> None:
        self._selected = node

    # ------------------------------------------------------------------
    # Graph maintenance
    # ------------------------------------------------------------------

    @property
    def edges(self) -> tuple[Edge, ...]:
        return self._graph.edges

    def clear_selection(self) -> None:
        self._selected = None

    def rebuild(self, document: Any) -> None:
        """Replace the node set with the projection of ``document``."""
        self._graph = self._builder.build(document)
        self._selected = None

    def rebuild_from_text(self, text: str) -> None:
        """Parse ``text`` and rebuild; unparseable text yields no nodes."""
        try:
            document = parse_json_text(text)
        except InvalidJSONError as exc:
            logger.warning("Document text is not valid JSON, graph cleared: %s", exc)
            self._graph = Graph()
            self._selected = None
            return
        self.rebuild(document)

    def attach(self, documents: JsonDocumentStore) -> Callable[[], None]:
        """Build from ``documents`` now and rebuild on each of its ``set`` calls."""
        self.rebuild_from_text(documents.get())
        return documents.subscribe(self.rebuild_from_text)
