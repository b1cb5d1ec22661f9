"""Normalizer: renders a node's row-list as the text shown to the user for editing.

The projection is intentionally asymmetric:

- An empty row-list renders as ``{}``.
- A scalar leaf (exactly one unkeyed row) renders as the bare value, its JSON
  literal (``42``, ``true``, ``null``, ``"text"``).
- Anything else renders as a flat, pretty-printed JSON object of the keyed
  scalar rows, in row order. Rows describing nested arrays and objects are
  never shown, so the editable text contains no nested structure.
"""

from __future__ import annotations

import json
from collections.abc import Iterable

from json_node_edit.config import EditorConfig
from json_node_edit.tree.nodes import Leaf, NodeRow, classify_rows

__all__ = ["normalize_node_data"]

_DEFAULT_CONFIG = EditorConfig()


def normalize_node_data(
    rows: Iterable[NodeRow] | None,
    config: EditorConfig | None = None,
) -> str:
    """Return the canonical editable text for a node's row-list.

    Args:
        rows:   The node's row-list (``Node.text``). None is treated as empty.
        config: Rendering options. Defaults to ``EditorConfig()`` when None.

    Returns:
        Text that parses as JSON to ``{}``, to the leaf value, or to an object
        of the keyed non-container rows. With
        ``config.quote_leaf_strings=False`` a string leaf is rendered without
        quotes and does not parse until the user quotes it.
    """
    cfg = config if config is not None else _DEFAULT_CONFIG
    content = classify_rows(tuple(rows or ()))

    if isinstance(content, Leaf):
        value = content.value
        if isinstance(value, str) and not cfg.quote_leaf_strings:
            return value
        return json.dumps(value, ensure_ascii=cfg.ensure_ascii)

    if not content.fields:
        return "{}"

    projected = {row.key: row.value for row in content.editable_fields()}
    return cfg.dumps(projected)
