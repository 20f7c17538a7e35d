"""File utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Union


def ensure_dir(path: Union[str, Path]) -> Path:
    """Ensure directory exists and return Path."""
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def ensure_parent_dir(path: Union[str, Path]) -> Path:
    """Ensure the directory holding ``path`` exists and return ``path`` as a Path."""
    p = Path(path)
    ensure_dir(p.parent)
    return p
