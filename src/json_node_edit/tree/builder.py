"""GraphBuilder: converts a JSON document into the node/edge graph projection.

Uses recursive dispatch over dicts, lists and scalars, the same way a tree
view walks a document:

- An object becomes one node whose rows are all of its entries in key order.
  Scalar entries carry their value; nested containers carry their child
  count and type ``object``/``array`` and are visited with the object node
  as parent.
- An array nested in a container has no node of its own. Each element is
  visited with the enclosing node as parent: scalar elements become leaf
  nodes (one unkeyed row), object elements become object nodes.
- A root array becomes a node with an empty row-list that parents its
  elements. A root scalar becomes a single leaf node.

Node ids are ``"1"``, ``"2"``, ... in visit order and are only meaningful
within one build. Paths, not ids, identify a node across builds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from json_node_edit.path import Path
from json_node_edit.tree.nodes import Edge, Node, NodeRow, RowType

__all__ = ["Graph", "GraphBuilder"]


@dataclass(frozen=True, slots=True)
class Graph:
    """Nodes and edges produced by one GraphBuilder.build() call."""

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()


@dataclass(slots=True)
class _BuildState:
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def add(self, path: Path, rows: tuple[NodeRow, ...], parent_id: str | None) -> Node:
        node = Node(id=str(len(self.nodes) + 1), path=path, text=rows)
        self.nodes.append(node)
        if parent_id is not None:
            self.edges.append(
                Edge(id=f"e{parent_id}-{node.id}", source=parent_id, target=node.id)
            )
        return node


def _row_for(key: str | None, value: Any) -> NodeRow:
    row_type = RowType.of(value)
    if row_type.is_container:
        return NodeRow(key=key, value=len(value), type=row_type)
    return NodeRow(key=key, value=value, type=row_type)


@dataclass
class GraphBuilder:
    """Converts any valid JSON value into a Graph of Nodes and Edges.

    Example::
        graph = GraphBuilder().build({"name": "Ada", "tags": ["x"]})
        # nodes: "1" object at () with rows name/tags, "2" leaf at ("tags", 0)
        # edges: e1-2
    """

    def build(self, document: Any) -> Graph:
        """Build the graph projection of ``document``.

        Raises:
            TypeError: If the document contains a value that is not a JSON type.
        """
        state = _BuildState()
        self._visit(document, (), None, state)
        return Graph(nodes=tuple(state.nodes), edges=tuple(state.edges))

    def _visit(
        self, value: Any, path: Path, parent_id: str | None, state: _BuildState
    ) -> None:
        if isinstance(value, dict):
            self._visit_object(value, path, parent_id, state)
        elif isinstance(value, list):
            self._visit_array(value, path, parent_id, state)
        else:
            state.add(path, (_row_for(None, value),), parent_id)

    def _visit_object(
        self, obj: dict[str, Any], path: Path, parent_id: str | None, state: _BuildState
    ) -> None:
        rows = tuple(_row_for(key, val) for key, val in obj.items())
        node = state.add(path, rows, parent_id)
        for key, val in obj.items():
            if isinstance(val, (dict, list)):
                self._visit(val, (*path, key), node.id, state)

    def _visit_array(
        self, arr: list[Any], path: Path, parent_id: str | None, state: _BuildState
    ) -> None:
        owner = parent_id
        if owner is None:
            owner = state.add(path, (), None).id
        for idx, item in enumerate(arr):
            self._visit(item, (*path, idx), owner, state)
