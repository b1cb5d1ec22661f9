"""Public API functions for json-node-edit.

Thin, stateless entry points for callers that hold the document as a Python
value rather than in stores: build the node graph, then edit one node of it.
"""

from __future__ import annotations

import copy
from typing import Any

from json_node_edit.mutator import mutate
from json_node_edit.tree.builder import Graph, GraphBuilder
from json_node_edit.tree.nodes import Node

__all__ = ["build_graph", "edit_node"]


def build_graph(document: Any) -> Graph:
    """Return the node/edge projection of ``document``.

    Creates a fresh ``GraphBuilder`` per call.
    """
    return GraphBuilder().build(document)


def edit_node(document: Any, node: Node, edited_text: str) -> Any:
    """Apply ``edited_text`` to ``node`` and return the updated document.

    Replace or merge is chosen from the node's own content: a leaf node is
    replaced, a container node is merged. ``document`` is deep-copied first,
    so the caller's value is never modified.

    Args:
        document:    The full document the node was built from.
        node:        The node being edited.
        edited_text: The user's edited text for the node.

    Returns:
        A new document value.

    Raises:
        InvalidJSONError: If ``edited_text`` is not valid JSON.
    """
    return mutate(copy.deepcopy(document), node.path, edited_text, node.is_leaf)
