"""NormalizedTextCache: LRU cache of rendered node text.

The view text of the selected node is rendered on every refresh, and nodes
are rebuilt from scratch after every document change. Keying the cache by a
node's row-list (not its id) lets a rebuilt node with unchanged rows reuse
the text rendered for its predecessor. LRU eviction is silent.

Each instance owns its ``LRUCache``; instances never share entries.
"""

from __future__ import annotations

from cachetools import LRUCache

from json_node_edit.config import EditorConfig
from json_node_edit.normalizer import normalize_node_data
from json_node_edit.tree.nodes import Node, NodeRow

__all__ = ["NormalizedTextCache"]

_Key = tuple[tuple[NodeRow, ...], tuple[str, ...]]


class NormalizedTextCache:
    """LRU-backed memo of ``normalize_node_data`` per row-list.

    Args:
        config:   Rendering options. Defaults to ``EditorConfig()`` when None.
        max_size: Maximum number of row-lists to hold. Defaults to 256.
    """

    def __init__(self, config: EditorConfig | None = None, max_size: int = 256) -> None:
        self._config = config if config is not None else EditorConfig()
        self._cache: LRUCache[_Key, str] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def text_for(self, node: Node | None) -> str:
        """Return the editable text for ``node``; None renders as ``{}``."""
        if node is None:
            return normalize_node_data((), self._config)
        # 1, 1.0 and True compare equal, as do 0.0 and -0.0, but render differently
        key = (node.text, tuple(repr(row.value) for row in node.text))
        try:
            return self._cache[key]
        except KeyError:
            pass
        except TypeError:
            # unhashable row values (only possible for hand-built nodes)
            return normalize_node_data(node.text, self._config)
        text = normalize_node_data(node.text, self._config)
        self._cache[key] = text
        return text

    def clear(self) -> None:
        self._cache.clear()
