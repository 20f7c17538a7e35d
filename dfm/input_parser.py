"""Adapters turning whitespace-joined label lists into sequences."""
from __future__ import annotations

from typing import List, Sequence, Union


def split_labels(value: Union[str, Sequence[str]]) -> List[str]:
    """Split ``"a b  c"`` into ``["a", "b", "c"]``; sequences pass through as lists.

    Runs of whitespace never produce empty labels, so a blank string yields ``[]``.
    """
    if isinstance(value, str):
        return value.split()
    return list(value)

