"""Tests for the nauty bridge."""
import networkx as nx
import pytest

from grouptools.external.nauty import (
    _parse_grpsize,
    aut_size_dreadnaut,
    aut_size_g6,
    canon_g6,
    dreadnaut_available,
    dreadnaut_input,
    nauty_available,
)
from grouptools.io.graph6 import edges_to_g6, g6_to_edges, strip_graph6_header
from grouptools.refine.discrete import DiscretePartitionRefiner
from grouptools.refine.graph import AdjacencyGraph


# --- graph6 and dreadnaut text (always work, use networkx) ---

def test_edges_to_g6_round_trip():
    g6 = edges_to_g6([(0, 1), (1, 2), (0, 2)], 4)
    assert isinstance(g6, str)
    assert g6_to_edges(g6) == (4, [(0, 1), (0, 2), (1, 2)])


def test_edges_to_g6_empty():
    g6 = edges_to_g6([], 3)
    assert g6_to_edges(g6) == (3, [])


def test_adjacency_graph_from_g6():
    g6 = edges_to_g6([(0, 1), (1, 2), (2, 3), (3, 0)], 4)
    graph = AdjacencyGraph.from_g6(">>graph6<<" + g6)
    assert graph.vertex_count() == 4
    assert DiscretePartitionRefiner().get_automorphism_group(graph).order() == 8


def test_dreadnaut_input_carries_partition():
    graph = AdjacencyGraph(3, [(0, 1), (1, 2)], colors=["a", "b", "a"])
    text = dreadnaut_input(graph)
    assert text.startswith("n=3 g\n")
    assert "0 : 1;" in text
    assert "1 : 0 2;" in text
    assert "f=[0,2|1]" in text
    assert text.rstrip().endswith("q")


def test_graph6_header_and_edges():
    assert strip_graph6_header("  >>graph6<<Bw\n") == "Bw"
    assert g6_to_edges(">>graph6<<Bw") == (3, [(0, 1), (0, 2), (1, 2)])
    graph = AdjacencyGraph.from_g6("Bw")
    assert graph.edges() == [(0, 1), (0, 2), (1, 2)]


def test_missing_executables_raise(monkeypatch):
    import grouptools.external.nauty as nauty

    monkeypatch.setattr(nauty, "NAUTY_SHORTG", "no-such-shortg")
    monkeypatch.setattr(nauty, "NAUTY_DREADNAUT", "no-such-dreadnaut")
    with pytest.raises(RuntimeError):
        canon_g6("Bw")
    with pytest.raises(RuntimeError):
        aut_size_g6("Bw")


def test_parse_grpsize():
    assert _parse_grpsize("1 orbit; grpsize=120; 2 gens") == 120
    assert _parse_grpsize("grpsize=3.6288e6;") == 3628800
    assert _parse_grpsize("grpsize=1.5*10^3") == 1500
    with pytest.raises(RuntimeError):
        _parse_grpsize("no group size here")


# --- canon_g6 (requires nauty) ---

@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_canon_g6_triangle():
    g6_a = edges_to_g6([(0, 1), (1, 2), (0, 2)], 3)
    g6_b = edges_to_g6([(0, 2), (1, 2), (0, 1)], 3)
    assert canon_g6(g6_a) == canon_g6(g6_b)


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_canon_g6_different_graphs():
    p3 = edges_to_g6([(0, 1), (1, 2)], 3)
    k3 = edges_to_g6([(0, 1), (1, 2), (0, 2)], 3)
    assert canon_g6(p3) != canon_g6(k3)


# --- aut sizes (require dreadnaut) ---

@pytest.mark.skipif(not dreadnaut_available(), reason="dreadnaut not available")
def test_aut_size_g6_k4():
    edges = [(i, j) for i in range(4) for j in range(i + 1, 4)]
    assert aut_size_g6(edges_to_g6(edges, 4)) == 24


@pytest.mark.skipif(not dreadnaut_available(), reason="dreadnaut not available")
@pytest.mark.parametrize("seed", range(6))
def test_dreadnaut_agrees_with_refiner(seed):
    G = nx.gnp_random_graph(10, 0.3, seed=seed)
    colors = [v % 3 for v in range(10)]
    graph = AdjacencyGraph(10, list(G.edges), colors)
    ours = DiscretePartitionRefiner().get_automorphism_group(graph).order()
    assert aut_size_dreadnaut(graph) == ours
