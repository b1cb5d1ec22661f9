"""Tree subpackage: the node/edge graph projection of a JSON document.

Re-exports the public API for the tree module:
- Node: one projected subtree with its path, row-list and Leaf/Container content
- NodeRow: one row of a node's row-list
- RowType: StrEnum of the six JSON value types a row can describe
- Leaf, Container: the tagged variant deciding replace vs merge on edit
- Edge: parent -> child link between nodes
- GraphBuilder, Graph: converts any valid JSON value into nodes and edges
"""

from json_node_edit.tree.builder import Graph, GraphBuilder
from json_node_edit.tree.nodes import (
    Container,
    Edge,
    Leaf,
    Node,
    NodeRow,
    RowType,
    classify_rows,
)

__all__ = [
    "Container",
    "Edge",
    "Graph",
    "GraphBuilder",
    "Leaf",
    "Node",
    "NodeRow",
    "RowType",
    "classify_rows",
]
