"""Re-locator: finds the edited node again after the graph is rebuilt.

Node ids only live for one build, so the node is matched by structural path
equality (segment by segment) instead.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from json_node_edit.path import PathSegment, as_path
from json_node_edit.tree.nodes import Node

__all__ = ["find_node_by_path"]

logger = logging.getLogger(__name__)


def find_node_by_path(
    nodes: Iterable[Node], path: Iterable[PathSegment] | None
) -> Node | None:
    """Return the first node whose path equals ``path``, or None.

    Not finding the node is a normal outcome, e.g. when the edit removed the
    branch the node lived in.
    """
    target = as_path(path)
    for node in nodes:
        if node.path == target:
            return node
    logger.debug("No node at path %r after rebuild", target)
    return None
