"""Structural paths into a JSON document.

A path is a tuple of segments: ``int`` for an array index, ``str`` for an
object key. The empty tuple addresses the document root. Paths are
positional addresses, recomputed on every graph build, and are compared
segment by segment.

Example::

    format_path(("customer", 0, "name"))   # '$["customer"][0]["name"]'
    lookup({"a": [1, 2]}, ("a", 1))        # 2
    lookup({"a": [1, 2]}, ("a", 5))        # MISSING
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

__all__ = [
    "MISSING",
    "Path",
    "PathSegment",
    "as_path",
    "child",
    "format_path",
    "lookup",
]

PathSegment = int | str
Path = tuple[PathSegment, ...]


class _Missing:
    """Sentinel for a position that does not exist in the document."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def as_path(segments: Iterable[Any] | None) -> Path:
    """Validate a segment sequence and return it as a Path tuple.

    Args:
        segments: Any iterable of segments. None is treated as the root path.

    Returns:
        A tuple of ``int`` and ``str`` segments.

    Raises:
        TypeError:  If a segment is neither ``int`` nor ``str`` (``bool`` is
                    rejected even though it subclasses ``int``).
        ValueError: If an index segment is negative.
    """
    if segments is None:
        return ()
    path: list[PathSegment] = []
    for seg in segments:
        if isinstance(seg, bool) or not isinstance(seg, (int, str)):
            raise TypeError(f"Path segments must be int or str, got {type(seg)!r}")
        if isinstance(seg, int) and seg < 0:
            raise ValueError(f"Array index segments must be >= 0, got {seg}")
        path.append(seg)
    return tuple(path)


def format_path(path: Iterable[PathSegment] | None) -> str:
    """Render a path as a ``$[...]`` locator for display.

    String segments are double-quoted, index segments are bare, and the
    root renders as ``$``. The result is never parsed back.
    """
    segments = as_path(path)
    if not segments:
        return "$"
    parts = [str(seg) if isinstance(seg, int) else f'"{seg}"' for seg in segments]
    return "$[" + "][".join(parts) + "]"


def child(container: Any, seg: PathSegment) -> Any:
    """Return ``container[seg]``, or MISSING when there is no such position.

    An index segment only addresses a list and a key segment only addresses
    a dict; any other pairing is MISSING.
    """
    if isinstance(seg, int):
        if isinstance(container, list) and seg < len(container):
            return container[seg]
        return MISSING
    if isinstance(container, dict):
        return container.get(seg, MISSING)
    return MISSING


def lookup(document: Any, path: Iterable[PathSegment] | None) -> Any:
    """Follow ``path`` from the document root; MISSING if any step fails."""
    node = document
    for seg in as_path(path):
        node = child(node, seg)
        if node is MISSING:
            break
    return node
