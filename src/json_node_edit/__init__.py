"""JSON node edit - path-addressed editing of single nodes in JSON documents."""

from __future__ import annotations

from json_node_edit.api import build_graph, edit_node
from json_node_edit.config import EditorConfig
from json_node_edit.mutator import InvalidJSONError, mutate
from json_node_edit.normalizer import normalize_node_data
from json_node_edit.path import format_path
from json_node_edit.relocator import find_node_by_path
from json_node_edit.result import EditResult
from json_node_edit.session import NodeEditSession
from json_node_edit.store import GraphNodeStore, JsonDocumentStore
from json_node_edit.tree import Node, NodeRow, RowType

__version__: str = "0.1.0"
__all__: list[str] = [
    "EditResult",
    "EditorConfig",
    "GraphNodeStore",
    "InvalidJSONError",
    "JsonDocumentStore",
    "Node",
    "NodeEditSession",
    "NodeRow",
    "RowType",
    "build_graph",
    "edit_node",
    "find_node_by_path",
    "format_path",
    "mutate",
    "normalize_node_data",
]
