"""Mutator: folds user-edited node text back into the full document.

``mutate(document, path, edited_text, is_leaf)`` is the single entry point:

1. Parse ``edited_text`` as strict JSON. On failure ``InvalidJSONError`` is
   raised before anything is touched.
2. An empty path replaces the whole document with the parsed value.
3. The path is walked with auto-vivification: a missing or mismatching
   intermediate container is replaced by an empty list (for an index
   segment) or an empty dict (for a key segment), so an edit still lands
   when the document has drifted from the node snapshot.
4. A leaf edit replaces the value at the path verbatim, whatever its shape.
   A container edit merges the parsed object's top-level keys into the
   existing object (add and overwrite, never delete). When the existing
   value is not an object the container edit falls back to a replace at
   that position. A non-object edit of an existing object leaves it as is.

The document is mutated in place and returned. Callers must treat the return
value as the new document; it may be a new object when the root changes.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_node_edit.path import MISSING, Path, PathSegment, as_path, child, lookup

__all__ = [
    "InvalidJSONError",
    "apply_edit",
    "mutate",
    "parse_json_text",
    "set_value_at_path",
]

logger = logging.getLogger(__name__)


class InvalidJSONError(ValueError):
    """Edited text failed to parse as JSON.

    Attributes:
        msg:    The parser's description of the problem.
        lineno: 1-based line of the failure (1 when unknown).
        colno:  1-based column of the failure (1 when unknown).
    """

    def __init__(self, msg: str, lineno: int = 1, colno: int = 1) -> None:
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        super().__init__(f"{msg} (line {lineno}, col {colno})")


def _reject_constant(name: str) -> Any:
    raise InvalidJSONError(f"Invalid JSON constant {name!r}")


def parse_json_text(text: str) -> Any:
    """Parse edited node text, or a stored document, as standard JSON.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected, as are comments and
    trailing commas.

    Raises:
        InvalidJSONError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise InvalidJSONError(exc.msg, exc.lineno, exc.colno) from exc


def _fit_container(value: Any, seg: PathSegment) -> Any:
    """Return ``value`` if ``seg`` can index it, else a fresh empty container."""
    if isinstance(seg, int):
        return value if isinstance(value, list) else []
    return value if isinstance(value, dict) else {}


def _put(container: dict[str, Any] | list[Any], seg: PathSegment, value: Any) -> None:
    if isinstance(container, list):
        if not isinstance(seg, int):
            raise TypeError(f"List index must be an int, got {seg!r}")
        if seg >= len(container):
            container.extend([None] * (seg + 1 - len(container)))
        container[seg] = value
    else:
        if not isinstance(seg, str):
            raise TypeError(f"Object key must be a str, got {seg!r}")
        container[seg] = value


def set_value_at_path(document: Any, path: Path, value: Any) -> Any:
    """Set ``value`` at ``path``, creating missing intermediate containers.

    Lists are padded with ``None`` when an index lies past their end.

    Returns:
        The root of the updated document. This is ``value`` itself for the
        empty path, and a fresh container when the old root could not be
        indexed by the first segment.
    """
    path = as_path(path)
    if not path:
        return value

    root = _fit_container(document, path[0])
    if root is not document:
        logger.debug("Replaced document root %r to reach %r", type(document), path)

    target = root
    for seg, next_seg in zip(path[:-1], path[1:], strict=True):
        current = child(target, seg)
        fitted = _fit_container(current, next_seg)
        if fitted is not current:
            logger.debug("Created %s at segment %r", type(fitted).__name__, seg)
            _put(target, seg, fitted)
        target = fitted

    _put(target, path[-1], value)
    return root


def apply_edit(document: Any, path: Path, value: Any, is_leaf: bool) -> Any:
    """Fold an already-parsed value into ``document`` at ``path``.

    Args:
        document: The full document; mutated in place.
        path:     Structural address of the edited node.
        value:    The parsed edited value.
        is_leaf:  True for a scalar leaf node (replace), False for a container
                  node (merge).

    Returns:
        The updated document.
    """
    path = as_path(path)
    if not path:
        return value

    if is_leaf:
        return set_value_at_path(document, path, value)

    existing = lookup(document, path)
    if isinstance(existing, dict):
        if isinstance(value, dict):
            existing.update(value)
        else:
            logger.debug(
                "Ignored %s edit of object at %r", type(value).__name__, path
            )
        return document

    logger.debug(
        "Merge at %r fell back to replace (existing=%s, edited=%s)",
        path,
        "missing" if existing is MISSING else type(existing).__name__,
        type(value).__name__,
    )
    return set_value_at_path(document, path, value)


def mutate(document: Any, path: Path, edited_text: str, is_leaf: bool) -> Any:
    """Parse ``edited_text`` and fold it into ``document`` at ``path``.

    Raises:
        InvalidJSONError: If ``edited_text`` is not valid JSON. ``document`` is
            left untouched in that case.
    """
    value = parse_json_text(edited_text)
    return apply_edit(document, path, value, is_leaf)
