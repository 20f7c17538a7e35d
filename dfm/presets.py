"""Attribute presets, one per DFM element kind.

A preset is a read-only template. Construction calls never write into it:
``derive`` hands back a fresh dict with the per-call overlay applied, so a node
or edge attached earlier keeps the attributes it was created with.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(frozen=True)
class AttributePreset:
    name: str
    defaults: Mapping[str, str]

    @classmethod
    def of(cls, name: str, **defaults: str) -> "AttributePreset":
        return cls(name, MappingProxyType(defaults))

    def derive(self, **overlay: str) -> Dict[str, str]:
        attrs = dict(self.defaults)
        attrs.update(overlay)
        return attrs


def _preset(name: str, **defaults: str):
    return field(default_factory=lambda: AttributePreset.of(name, **defaults))


@dataclass(frozen=True)
class PresetCatalog:
    """The styling catalog owned by a single Schema."""

    fact: AttributePreset = _preset("fact", shape="plain", root="true")
    node: AttributePreset = _preset("node", shape="circle", label="")
    edge: AttributePreset = _preset("edge", arrowhead="none", len="0.5")
    descriptive: AttributePreset = _preset("descriptive", shape="underline")
    optional: AttributePreset = _preset("optional", arrowhead="icurve")
    hierarchy: AttributePreset = _preset("hierarchy", arrowhead="none")
