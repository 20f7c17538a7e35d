"""Dimensional Fact Model diagrams rendered as Graphviz DOT."""
from dfm.errors import (
    BootstrapError,
    DanglingReferenceError,
    DfmError,
    InvalidSpecError,
    PersistenceError,
    PlanError,
)
from dfm.input_parser import split_labels
from dfm.models import Fact
from dfm.presets import AttributePreset, PresetCatalog
from dfm.schema import Schema, new_schema

__all__ = [
    "AttributePreset",
    "BootstrapError",
    "DanglingReferenceError",
    "DfmError",
    "Fact",
    "InvalidSpecError",
    "PersistenceError",
    "PlanError",
    "PresetCatalog",
    "Schema",
    "new_schema",
    "split_labels",
]
