"""Errors raised while building or persisting a DFM diagram."""
from __future__ import annotations

from pathlib import Path
from typing import Union


class DfmError(Exception):
    pass


class BootstrapError(DfmError):
    """The graph backend could not be initialised from its bootstrap description."""


class DanglingReferenceError(DfmError, KeyError):
    def __init__(self, label: str):
        self.label = label
        super().__init__(label)

    def __str__(self) -> str:
        return f"Unknown node referenced: {self.label!r}"


class InvalidSpecError(DfmError, ValueError):
    pass


class PersistenceError(DfmError, OSError):
    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Unable to write diagram to {self.path}: {reason}")


class PlanError(DfmError, ValueError):
    pass
