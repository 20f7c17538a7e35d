"""Graph container for DFM diagrams and its DOT serialization.

Nodes and edges live in a ``networkx.MultiDiGraph`` so parallel edges between
the same pair of nodes survive; the DOT text is produced by ``graphviz``.
"""
from __future__ import annotations

import logging
from itertools import count
from typing import Dict, Mapping, Optional

import graphviz
import networkx as nx
from graphviz.quoting import attr_list, quote
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dfm.errors import BootstrapError, DanglingReferenceError

logger = logging.getLogger(__name__)

_ORDER_KEY = "_order"


class HtmlLabel(str):
    """Attribute value emitted as a raw HTML-like label; every other value is quoted as text."""


def _text(value: str) -> str:
    return value if isinstance(value, HtmlLabel) else graphviz.nohtml(value)


class GraphBootstrap(BaseModel):
    """Global rendering directives handed to the layout engine."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = "G"
    layout: str = "twopi"
    overlap: str = "prism"
    overlap_scaling: float = Field(default=4.5, gt=0)

    @field_validator("name", "layout", "overlap")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def graph_attr(self) -> Dict[str, str]:
        return {
            "layout": self.layout,
            "overlap": self.overlap,
            "overlap_scaling": f"{self.overlap_scaling:g}",
        }


class GraphBackend:
    def __init__(self, bootstrap: GraphBootstrap):
        self.bootstrap = bootstrap
        self.graph = nx.MultiDiGraph(name=bootstrap.name)
        self._edge_seq = count()

    @classmethod
    def from_description(cls, description: Mapping[str, object]) -> "GraphBackend":
        try:
            bootstrap = GraphBootstrap.model_validate(dict(description))
        except ValidationError as exc:
            raise BootstrapError(f"Invalid bootstrap description: {exc}") from exc
        return cls(bootstrap)

    def has_node(self, name: str) -> bool:
        return self.graph.has_node(name)

    def require(self, name: str) -> None:
        if not self.graph.has_node(name):
            raise DanglingReferenceError(name)

    def add_node(self, name: str, attrs: Optional[Mapping[str, str]] = None) -> None:
        """Add ``name`` or replace the attribute set of an existing node with the same key."""
        if self.graph.has_node(name):
            data = self.graph.nodes[name]
            data.clear()
            data.update(attrs or {})
            logger.debug("Replaced attributes of node %r", name)
            return
        self.graph.add_node(name, **dict(attrs or {}))

    def add_edge(self, tail: str, head: str, attrs: Optional[Mapping[str, str]] = None) -> None:
        for endpoint in (tail, head):
            self.require(endpoint)
        data = dict(attrs or {})
        data[_ORDER_KEY] = next(self._edge_seq)
        self.graph.add_edge(tail, head, **data)

    @property
    def node_count(self) -> int:
        return self.graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        return self.graph.number_of_edges()

    def to_digraph(self) -> graphviz.Digraph:
        dot = graphviz.Digraph(name=self.bootstrap.name, graph_attr=self.bootstrap.graph_attr())
        for name, data in self.graph.nodes(data=True):
            dot.node(_text(name), **{k: _text(v) for k, v in data.items()})
        edges = sorted(self.graph.edges(data=True), key=lambda e: e[2][_ORDER_KEY])
        for tail, head, data in edges:
            # Digraph.edge splits endpoints on ":" into node and port.
            attrs = {k: _text(v) for k, v in data.items() if k != _ORDER_KEY}
            dot.body.append(f"\t{quote(_text(tail))} -> {quote(_text(head))}{attr_list(kwargs=attrs)}\n")
        return dot

    def to_dot(self) -> str:
        return self.to_digraph().source
