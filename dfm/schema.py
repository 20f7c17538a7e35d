"""Build Dimensional Fact Model diagrams on top of a DOT graph backend.

Each construction call translates one DFM element (fact, dimension,
hierarchy, optional or descriptive attribute, convergence point) into graph
nodes and edges styled from the schema's ``PresetCatalog``. Calls mutate the
graph immediately; ``render_diagram`` writes the DOT text out.

Attach points are checked before anything is added, so a call that raises
leaves the graph as it was.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from dfm.backend import GraphBackend
from dfm.errors import InvalidSpecError, PersistenceError
from dfm.models import Fact
from dfm.presets import PresetCatalog
from dfm.utils.config import Settings, settings as default_settings
from dfm.utils.file_utils import ensure_parent_dir

logger = logging.getLogger(__name__)


def _check_label(value: str, what: str = "label") -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidSpecError(f"{what} must be a non-empty string, got {value!r}")
    return value


def _check_labels(values: Sequence[str], what: str = "labels", allow_empty: bool = False) -> List[str]:
    # A bare string would be iterated character by character.
    if isinstance(values, str):
        raise InvalidSpecError(f"{what} must be a sequence of strings; split {values!r} with split_labels first")
    labels = [_check_label(v, what) for v in values]
    if not labels and not allow_empty:
        raise InvalidSpecError(f"{what} must contain at least one entry")
    return labels


class Schema:
    """A DFM diagram under construction."""

    def __init__(self, settings: Optional[Settings] = None, presets: Optional[PresetCatalog] = None):
        self.settings = settings or default_settings
        self.presets = presets or PresetCatalog()
        self.backend = GraphBackend.from_description(
            {
                "name": self.settings.graph_name,
                "layout": self.settings.layout,
                "overlap": self.settings.overlap,
                "overlap_scaling": self.settings.overlap_scaling,
            }
        )

    # facts

    def create_fact(self, title: str, attributes: Sequence[str] = ()) -> Fact:
        """Create a fact with its ordered attributes and render it right away."""
        _check_label(title, "fact title")
        fact = Fact(name=title, attributes=tuple(_check_labels(attributes, "fact attributes", allow_empty=True)))
        self.render_fact(fact)
        return fact

    def render_fact(self, fact: Fact) -> None:
        attrs = self.presets.fact.derive(label=fact.html_label())
        self.backend.add_node(fact.name, attrs)
        logger.debug("Rendered fact %r with %d attributes", fact.name, len(fact.attributes))

    # dimensions

    def _dimension_node(self, label: str) -> None:
        self.backend.add_node(label, self.presets.node.derive(xlabel=label, fixedsize="true"))

    def add_dimension(self, label: str, attach: str) -> None:
        _check_label(label)
        self.backend.require(_check_label(attach, "attach label"))
        self._dimension_node(label)
        self.backend.add_edge(attach, label, self.presets.edge.derive())
        logger.debug("Added dimension %r -> %r", attach, label)

    def add_sequence_dimension(self, labels: Sequence[str], start_attach: str) -> None:
        """Chain dimensions: the first attaches to ``start_attach``, each next one to its predecessor."""
        labels = _check_labels(labels)
        self.backend.require(_check_label(start_attach, "attach label"))
        attach = start_attach
        for label in labels:
            self.add_dimension(label, attach)
            attach = label

    def add_convergence(self, label: str, attach: str) -> None:
        """Dimension node joined by a bare edge so converging paths merge visually."""
        _check_label(label)
        self.backend.require(_check_label(attach, "attach label"))
        self._dimension_node(label)
        self.backend.add_edge(attach, label)
        logger.debug("Added convergence %r -> %r", attach, label)

    def add_hierarchy(self, levels: Sequence[str], from_: str, to: str) -> None:
        """Create ``to`` and one parallel ``from_ -> to`` edge per level, labelled with the level name."""
        levels = _check_labels(levels, "hierarchy levels")
        _check_label(to, "hierarchy target")
        self.backend.require(_check_label(from_, "hierarchy source"))
        self.backend.add_node(to, self.presets.node.derive(label=to))
        for level in levels:
            self.backend.add_edge(from_, to, self.presets.hierarchy.derive(xlabel=level))
        logger.debug("Added hierarchy %r -> %r with levels %s", from_, to, levels)

    def add_optional(self, label: str, attach: str) -> None:
        _check_label(label)
        self.backend.require(_check_label(attach, "attach label"))
        self._dimension_node(label)
        self.backend.add_edge(attach, label, self.presets.optional.derive())
        logger.debug("Added optional %r -> %r", attach, label)

    # descriptive attributes

    def add_descriptive(self, label: str, to: str) -> None:
        _check_label(label)
        self.backend.require(_check_label(to, "attach label"))
        self.backend.add_node(label, self.presets.descriptive.derive())
        self.backend.add_edge(to, label, self.presets.edge.derive())
        logger.debug("Added descriptive %r -> %r", to, label)

    def add_sequence_descriptive(self, labels: Sequence[str], to: str) -> None:
        labels = _check_labels(labels)
        self.backend.require(_check_label(to, "attach label"))
        for label in labels:
            self.add_descriptive(label, to)

    # output

    def to_dot(self) -> str:
        return self.backend.to_dot()

    def render_diagram(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the DOT text to ``path`` (default ``settings.output_path``), overwriting it.

        On failure a ``PersistenceError`` is raised and the graph is kept, so
        the call can be retried with another destination.
        """
        target = Path(path) if path is not None else Path(self.settings.output_path)
        output = self.to_dot()
        try:
            ensure_parent_dir(target)
            with open(target, "w", encoding="utf-8") as fh:
                fh.write(output)
        except OSError as exc:
            logger.error("Failed to write diagram to %s: %s", target, exc)
            raise PersistenceError(target, str(exc)) from exc
        logger.info(
            "Rendered diagram to %s (%d nodes, %d edges)",
            target,
            self.backend.node_count,
            self.backend.edge_count,
        )
        return target


def new_schema(settings: Optional[Settings] = None) -> Schema:
    return Schema(settings=settings)
