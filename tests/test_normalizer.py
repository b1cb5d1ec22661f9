"""Tests for normalize_node_data.

Covers:
- Empty row-lists render as {}
- Single unkeyed rows render as the bare JSON literal of the value
- Keyed rows render as a flat pretty-printed object in row order
- Nested container rows and stray unkeyed rows are excluded
- EditorConfig options (indent, ensure_ascii, quote_leaf_strings)
"""

from __future__ import annotations

import json

import pytest

from json_node_edit.config import EditorConfig
from json_node_edit.normalizer import normalize_node_data
from json_node_edit.tree.builder import GraphBuilder
from json_node_edit.tree.nodes import NodeRow, RowType


def _leaf(value: object) -> tuple[NodeRow, ...]:
    return (NodeRow(key=None, value=value, type=RowType.of(value)),)


class TestEmptyRows:
    def test_empty_tuple(self) -> None:
        assert normalize_node_data(()) == "{}"

    def test_none(self) -> None:
        assert normalize_node_data(None) == "{}"

    def test_parses_to_empty_object(self) -> None:
        assert json.loads(normalize_node_data([])) == {}


class TestLeafRows:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "42"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("hello", '"hello"'),
        ],
    )
    def test_renders_json_literal(self, value: object, expected: str) -> None:
        assert normalize_node_data(_leaf(value)) == expected

    @pytest.mark.parametrize(
        "value", [0, -7, 3.25, True, None, "", 'a "quoted" word']
    )
    def test_parses_back_to_value(self, value: object) -> None:
        assert json.loads(normalize_node_data(_leaf(value))) == value

    def test_bare_strings_when_quoting_disabled(self) -> None:
        config = EditorConfig(quote_leaf_strings=False)
        assert normalize_node_data(_leaf("hello"), config) == "hello"

    def test_quoting_flag_does_not_affect_numbers(self) -> None:
        config = EditorConfig(quote_leaf_strings=False)
        assert normalize_node_data(_leaf(5), config) == "5"

    def test_non_ascii_kept_by_default(self) -> None:
        assert normalize_node_data(_leaf("café")) == '"café"'

    def test_non_ascii_escaped_when_configured(self) -> None:
        config = EditorConfig(ensure_ascii=True)
        assert normalize_node_data(_leaf("café"), config) == '"caf\\u00e9"'


class TestKeyedRows:
    def test_flat_object_pretty_printed(self) -> None:
        rows = (
            NodeRow("name", "Ada", RowType.STRING),
            NodeRow("age", 36, RowType.NUMBER),
        )
        assert normalize_node_data(rows) == '{\n  "name": "Ada",\n  "age": 36\n}'

    def test_key_order_follows_rows(self) -> None:
        rows = (
            NodeRow("z", 1, RowType.NUMBER),
            NodeRow("a", 2, RowType.NUMBER),
            NodeRow("m", 3, RowType.NUMBER),
        )
        assert list(json.loads(normalize_node_data(rows))) == ["z", "a", "m"]

    def test_single_keyed_row_is_an_object(self) -> None:
        rows = (NodeRow("a", 1, RowType.NUMBER),)
        assert json.loads(normalize_node_data(rows)) == {"a": 1}

    def test_container_rows_excluded(self) -> None:
        rows = (
            NodeRow("name", "Ada", RowType.STRING),
            NodeRow("tags", 3, RowType.ARRAY),
            NodeRow("address", 2, RowType.OBJECT),
        )
        assert json.loads(normalize_node_data(rows)) == {"name": "Ada"}

    def test_only_container_rows_renders_empty_object(self) -> None:
        rows = (NodeRow("tags", 3, RowType.ARRAY), NodeRow("m", 1, RowType.OBJECT))
        assert normalize_node_data(rows) == "{}"

    def test_unkeyed_rows_in_multi_row_list_excluded(self) -> None:
        rows = (
            NodeRow(None, 1, RowType.NUMBER),
            NodeRow("a", 2, RowType.NUMBER),
        )
        assert json.loads(normalize_node_data(rows)) == {"a": 2}

    def test_custom_indent(self) -> None:
        rows = (NodeRow("a", 1, RowType.NUMBER),)
        assert normalize_node_data(rows, EditorConfig(indent=4)) == '{\n    "a": 1\n}'


class TestBuiltNodes:
    """Normalizer over rows produced by GraphBuilder."""

    def test_object_node_hides_nested_structure(self) -> None:
        graph = GraphBuilder().build(
            {"id": 7, "name": "x", "tags": [1, 2], "meta": {"k": "v"}}
        )
        assert json.loads(normalize_node_data(graph.nodes[0].text)) == {
            "id": 7,
            "name": "x",
        }

    def test_array_element_leaf(self) -> None:
        graph = GraphBuilder().build({"tags": ["red"]})
        leaf = next(node for node in graph.nodes if node.path == ("tags", 0))
        assert json.loads(normalize_node_data(leaf.text)) == "red"
