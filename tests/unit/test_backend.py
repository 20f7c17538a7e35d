import pytest

from dfm.backend import GraphBackend, GraphBootstrap
from dfm.errors import BootstrapError, DanglingReferenceError
from dfm.schema import Schema
from dfm.utils.config import Settings


def _backend() -> GraphBackend:
    return GraphBackend(GraphBootstrap())


def test_bootstrap_graph_attributes():
    dot = _backend().to_dot()
    assert "graph [layout=twopi overlap=prism overlap_scaling=4.5]" in dot


@pytest.mark.parametrize(
    "description",
    [
        {"layout": ""},
        {"overlap_scaling": 0},
        {"overlap_scaling": "wide"},
        {"engine": "dot"},
    ],
)
def test_invalid_bootstrap_raises(description):
    with pytest.raises(BootstrapError):
        GraphBackend.from_description(description)


def test_schema_surfaces_bootstrap_failure():
    with pytest.raises(BootstrapError):
        Schema(settings=Settings(overlap=" "))


def test_add_node_replaces_attributes():
    backend = _backend()
    backend.add_node("a", {"shape": "circle", "xlabel": "a"})
    backend.add_node("a", {"shape": "underline"})
    assert backend.node_count == 1
    assert dict(backend.graph.nodes["a"]) == {"shape": "underline"}


def test_add_edge_requires_both_endpoints():
    backend = _backend()
    backend.add_node("a")
    with pytest.raises(DanglingReferenceError) as excinfo:
        backend.add_edge("a", "b")
    assert excinfo.value.label == "b"
    assert isinstance(excinfo.value, KeyError)
    assert backend.node_count == 1
    assert backend.edge_count == 0


def test_edges_emitted_in_insertion_order():
    backend = _backend()
    for name in ("a", "b", "c"):
        backend.add_node(name)
    backend.add_edge("b", "c", {"xlabel": "first"})
    backend.add_edge("a", "b", {"xlabel": "second"})
    backend.add_edge("b", "c", {"xlabel": "third"})
    edges = [line.strip() for line in backend.to_dot().splitlines() if "->" in line]
    assert edges == [
        "b -> c [xlabel=first]",
        "a -> b [xlabel=second]",
        "b -> c [xlabel=third]",
    ]
    assert "_order" not in backend.to_dot()
