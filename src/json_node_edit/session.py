"""NodeEditSession: one view/edit/save cycle for the selected node.

Wires the Normalizer, Mutator and Re-locator to a document store and a node
store. The session owns only transient edit state (edit mode, draft text and
the last error); the document itself always lives in the document store.

Edit cycle:

- ``begin_edit()`` seeds the draft with the node's normalized text.
- ``save()`` parses the draft, folds it into a freshly parsed copy of the
  stored document, writes the serialized result back, and then, strictly
  after the store has swapped and rebuilt, re-selects the node by path.
- A draft that is not valid JSON leaves the store untouched; the message is
  kept in ``error`` and the session stays in edit mode so the user can fix
  the text and save again.

Example::

    documents = JsonDocumentStore('{"a": {"b": 1, "c": [1]}}')
    nodes = GraphNodeStore()
    nodes.attach(documents)
    nodes.select(find_node_by_path(nodes.all_nodes, ["a"]))

    session = NodeEditSession(documents, nodes)
    session.begin_edit()              # draft: '{\\n  "b": 1\\n}'
    session.update_draft('{"b": 5}')
    session.save()                    # store: {"a": {"b": 5, "c": [1]}}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from json_node_edit.cache import NormalizedTextCache
from json_node_edit.config import EditorConfig
from json_node_edit.mutator import InvalidJSONError, apply_edit, parse_json_text
from json_node_edit.path import format_path
from json_node_edit.relocator import find_node_by_path
from json_node_edit.result import EditResult

if TYPE_CHECKING:
    from json_node_edit.protocols import DocumentStore, NodeStore
    from json_node_edit.tree.nodes import Node

__all__ = ["NodeEditSession"]

logger = logging.getLogger(__name__)

_UNPARSEABLE = object()


class NodeEditSession:
    """Edit controller for the node currently selected in a NodeStore.

    Args:
        document_store: Holder of the serialized document.
        node_store:     Holder of the node set and the current selection.
        config:         Rendering options. Defaults to ``EditorConfig()``.
        max_cache_size: Size of the per-session LRU cache of rendered node
            text. This is an infrastructure parameter, not part of
            ``EditorConfig``. Defaults to 256.
    """

    def __init__(
        self,
        document_store: DocumentStore,
        node_store: NodeStore,
        config: EditorConfig | None = None,
        max_cache_size: int = 256,
    ) -> None:
        self._documents = document_store
        self._nodes = node_store
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._texts = NormalizedTextCache(self._config, max_size=max_cache_size)
        self._editing = False
        self._error: str | None = None
        self._node_id: str | None = None
        self._draft = "{}"
        self.sync()

    # ------------------------------------------------------------------
    # View state
    # ------------------------------------------------------------------

    @property
    def node(self) -> Node | None:
        return self._nodes.current_selection

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def draft(self) -> str:
        return self._draft

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def content(self) -> str:
        """Read-only text of the selected node."""
        return self._texts.text_for(self.node)

    @property
    def path_label(self) -> str:
        node = self.node
        return format_path(node.path if node is not None else ())

    def sync(self) -> None:
        """Reset edit state when the selection moved to another node."""
        node = self.node
        node_id = node.id if node is not None else None
        if node_id == self._node_id:
            return
        self._node_id = node_id
        self._reset()

    # ------------------------------------------------------------------
    # Edit cycle
    # ------------------------------------------------------------------

    def begin_edit(self) -> None:
        self._draft = self.content
        self._editing = True
        self._error = None

    def update_draft(self, text: str) -> None:
        self._draft = text

    def cancel(self) -> None:
        self._reset()

    def save(self) -> EditResult:
        """Apply the draft to the stored document and re-select the node.

        Returns:
            An ``EditResult``. On a parse failure ``saved`` is False, ``error``
            holds the message and the document store is unchanged.
        """
        node = self.node
        path = node.path if node is not None else ()

        try:
            value = parse_json_text(self._draft)
        except InvalidJSONError as exc:
            self._error = str(exc)
            logger.debug("Rejected edit at %s: %s", format_path(path), exc)
            return EditResult(
                saved=False,
                document_text=self._documents.get(),
                path=path,
                error=self._error,
            )

        document = self._load_document()
        if document is _UNPARSEABLE or node is None:
            updated = value
        else:
            updated = apply_edit(document, path, value, node.is_leaf)

        text = self._config.dumps(updated)
        self._documents.set(text)

        # the store has swapped and rebuilt by now
        found = find_node_by_path(self._nodes.all_nodes, path)
        if found is not None:
            self._nodes.select(found)
        self._node_id = found.id if found is not None else None

        self._reset()
        return EditResult(saved=True, document_text=text, path=path, selected=found)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._editing = False
        self._error = None
        self._draft = self.content

    def _load_document(self) -> Any:
        try:
            return parse_json_text(self._documents.get())
        except InvalidJSONError:
            logger.warning("Stored document is not valid JSON; edit replaces it")
            return _UNPARSEABLE
