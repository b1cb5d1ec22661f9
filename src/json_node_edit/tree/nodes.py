"""Node, NodeRow and Edge dataclasses for the graph projection of a JSON document.

A node is a view-level projection of one document subtree. It carries the
structural path of that subtree and a flattened row-list (``text``) of its
immediate entries. Whether a node is a scalar leaf or a keyed container is
decided once, when the node is constructed, and exposed as the tagged
``content`` variant (``Leaf`` or ``Container``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_node_edit.path import Path, as_path


class RowType(StrEnum):
    """JSON type of the value described by a NodeRow.

    StrEnum values are the lowercased member names:
    - STRING   -> "string"
    - NUMBER   -> "number"
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"
    - ARRAY    -> "array"   : nested container, excluded from editable text
    - OBJECT   -> "object"  : nested container, excluded from editable text
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()

    @classmethod
    def of(cls, value: Any) -> RowType:
        """Classify a Python JSON value.

        Raises:
            TypeError: If value is not a valid JSON type.
        """
        # bool subclasses int, so it must be checked first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if value is None:
            return cls.NULL
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, dict):
            return cls.OBJECT
        if isinstance(value, list):
            return cls.ARRAY
        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    @property
    def is_container(self) -> bool:
        return self in (RowType.ARRAY, RowType.OBJECT)


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One entry of a node's row-list.

    Attributes:
        key:   Object key of the entry, or None for an unkeyed scalar leaf.
        value: The scalar value, or the child count for container rows.
        type:  JSON type of the described value.
    """

    key: str | None
    value: Any
    type: RowType


@dataclass(frozen=True, slots=True)
class Leaf:
    """A node holding a single scalar value."""

    value: Any


@dataclass(frozen=True, slots=True)
class Container:
    """A node holding the immediate entries of an object or array."""

    fields: tuple[NodeRow, ...] = ()

    def editable_fields(self) -> tuple[NodeRow, ...]:
        """Keyed, non-container rows in row order."""
        return tuple(
            row
            for row in self.fields
            if row.key is not None and not row.type.is_container
        )


NodeContent = Leaf | Container


def classify_rows(rows: tuple[NodeRow, ...]) -> NodeContent:
    """Decide whether a row-list describes a scalar leaf or a container.

    A row-list is a leaf iff it holds exactly one row and that row has no
    key. Every other shape, the empty row-list included, is a container.
    """
    if len(rows) == 1 and rows[0].key is None:
        return Leaf(rows[0].value)
    return Container(rows)


@dataclass(frozen=True, slots=True)
class Node:
    """A view-level projection of one document subtree.

    Attributes:
        id:       Identifier, stable only within one graph build.
        path:     Structural address of the subtree in the document.
        text:     Row-list describing the subtree's immediate entries.
        content:  ``Leaf`` or ``Container``, derived from ``text`` on
                  construction.
    """

    id: str
    path: Path
    text: tuple[NodeRow, ...] = ()
    content: NodeContent = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", as_path(self.path))
        object.__setattr__(self, "text", tuple(self.text))
        object.__setattr__(self, "content", classify_rows(self.text))

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.content, Leaf)


@dataclass(frozen=True, slots=True)
class Edge:
    """A parent -> child link between two nodes of the same build."""

    id: str
    source: str
    target: str
