"""Tests for grouptools.utils module."""
import networkx as nx
import pytest

from grouptools.refine.graph import AdjacencyGraph
from grouptools.utils.automorphisms import (
    aut_size,
    aut_size_bruteforce,
    aut_size_edges,
    automorphisms_bruteforce,
    orbit_size_under_Sn,
    vertex_orbits,
)
from grouptools.utils.canonical import canonical_form, canonical_graph_bruteforce


# --- automorphisms ---

def test_aut_size_triangle():
    edges = [(0, 1), (1, 2), (0, 2)]
    assert aut_size_edges(edges, 3) == 6


def test_aut_size_p3():
    edges = [(0, 1), (1, 2)]
    assert aut_size_edges(edges, 3) == 2


def test_orbit_size_k3():
    edges = [(0, 1), (1, 2), (0, 2)]
    # orbit = 3! / |Aut| = 6 / 6 = 1
    assert orbit_size_under_Sn(edges, 3) == 1


def test_orbit_size_p3():
    edges = [(0, 1), (1, 2)]
    # orbit = 3! / 2 = 3
    assert orbit_size_under_Sn(edges, 3) == 3


def test_bruteforce_respects_colors():
    graph = AdjacencyGraph(3, [(0, 1), (1, 2), (0, 2)], colors=[0, 0, 1])
    autos = list(automorphisms_bruteforce(graph))
    assert len(autos) == 2
    assert all(g[2] == 2 for g in autos)
    assert aut_size(graph) == 2


def test_vertex_orbits_path():
    graph = AdjacencyGraph(4, [(0, 1), (1, 2), (2, 3)])
    assert vertex_orbits(graph) == [(0, 3), (1, 2)]


def test_aut_size_matches_bruteforce_on_tree():
    graph = AdjacencyGraph.from_networkx(nx.balanced_tree(2, 2))
    assert aut_size(graph) == aut_size_bruteforce(graph) == 8


# --- canonical form ---

def test_canonical_bruteforce_triangle():
    c1 = canonical_graph_bruteforce(AdjacencyGraph(3, [(0, 1), (1, 2), (0, 2)]))
    c2 = canonical_graph_bruteforce(AdjacencyGraph(3, [(1, 2), (2, 0), (0, 1)]))
    assert c1 == c2


def test_canonical_bruteforce_different():
    c_p3 = canonical_graph_bruteforce(AdjacencyGraph(3, [(0, 1), (1, 2)]))
    c_k3 = canonical_graph_bruteforce(AdjacencyGraph(3, [(0, 1), (1, 2), (0, 2)]))
    assert c_p3 != c_k3


def test_canonical_bruteforce_too_large():
    with pytest.raises(ValueError):
        canonical_graph_bruteforce(AdjacencyGraph(11))


def test_canonical_form_agrees_with_bruteforce_on_isomorphism():
    # all pairs among a handful of 5-vertex graphs, two of them isomorphic
    graphs = [
        AdjacencyGraph(5, [(0, 1), (1, 2), (2, 3), (3, 4)]),
        AdjacencyGraph(5, [(3, 0), (0, 4), (4, 1), (1, 2)]),
        AdjacencyGraph(5, [(0, 1), (0, 2), (0, 3), (0, 4)]),
        AdjacencyGraph(5, [(0, 1), (1, 2), (2, 0), (3, 4)]),
        AdjacencyGraph(5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)]),
    ]
    for a in graphs:
        for b in graphs:
            same_brute = canonical_graph_bruteforce(a) == canonical_graph_bruteforce(b)
            same_refined = canonical_form(a) == canonical_form(b)
            assert same_brute == same_refined
    assert canonical_form(graphs[0]) == canonical_form(graphs[1])


def test_aut_size_edges_ignores_installed_dreadnaut(monkeypatch):
    import grouptools.external.nauty as nauty

    def _fail(*args, **kwargs):
        raise AssertionError("dreadnaut must not be called")

    monkeypatch.setattr(nauty, "dreadnaut_available", lambda: True)
    monkeypatch.setattr(nauty, "aut_size_dreadnaut", _fail)
    monkeypatch.setattr(nauty, "_run_dreadnaut", _fail)
    assert aut_size_edges([(0, 1), (1, 2), (2, 3), (3, 0)], 4) == 8
    assert orbit_size_under_Sn([(0, 1)], 4) == 6
