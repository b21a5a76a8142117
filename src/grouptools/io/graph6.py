from __future__ import annotations

from typing import List, Tuple
import networkx as nx

GRAPH6_HEADER = ">>graph6<<"


def strip_graph6_header(g6: str) -> str:
    """The bare graph6 body: surrounding blanks and the optional header removed."""
    body = g6.strip()
    if body.startswith(GRAPH6_HEADER):
        body = body[len(GRAPH6_HEADER):].lstrip()
    return body


def g6_to_nx(g6: str) -> nx.Graph:
    """Simple undirected graph on 0..n-1 from a graph6 line."""
    return nx.from_graph6_bytes(strip_graph6_header(g6).encode("ascii"))


def g6_to_edges(g6: str) -> Tuple[int, List[Tuple[int, int]]]:
    """(n, edges) of a graph6 line, edges as sorted (u, v) pairs with u < v."""
    G = g6_to_nx(g6)
    return G.number_of_nodes(), sorted(tuple(sorted(e)) for e in G.edges)


def edges_to_g6(edges: List[Tuple[int, int]], n: int) -> str:
    """graph6 line (no header) of the graph on {0..n-1} with the given edges."""
    G = nx.empty_graph(n)
    G.add_edges_from(edges)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").rstrip("\n")
