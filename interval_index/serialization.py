"""
JSON persistence for interval trees.

Only the staging list is written; the tree is rebuilt on load. Payloads must
be JSON serializable.

File structure:
    {
      "updated": "<ISO timestamp>",
      "size": <number of intervals>,
      "intervals": [{"start": ..., "end": ..., "data": ...}, ...]
    }
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Union

from . import debug
from .interval_tree import IntervalTree


def _debug_print(msg: str) -> None:
    debug.debug_print("STORAGE", msg)


def save_tree(tree: IntervalTree, path: Union[str, Path]) -> None:
    """Write the tree's intervals to a JSON file, creating parent directories."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    data = tree.to_dict()
    data["updated"] = datetime.now().isoformat()

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    _debug_print(f"Saved {data['size']} intervals to {file_path}")


def load_tree(path: Union[str, Path]) -> IntervalTree:
    """Read a tree previously written by save_tree()."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Interval file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    tree = IntervalTree.from_dict(data)
    _debug_print(f"Loaded {tree.list_size()} intervals from {file_path}")
    return tree
