from __future__ import annotations

import math
from itertools import permutations
from typing import Iterator, List, Tuple

from grouptools.group.permutation import Permutation
from grouptools.refine.discrete import DiscretePartitionRefiner
from grouptools.refine.graph import AdjacencyGraph, Graph


def _color_index(graph: Graph) -> List[int]:
    """Cell index of every vertex in the graph's initial partition."""
    idx = [0] * graph.vertex_count()
    for ci, cell in enumerate(graph.initial_partition()):
        for v in cell:
            idx[v] = ci
    return idx


def automorphisms_bruteforce(graph: Graph) -> Iterator[Permutation]:
    """Yield every coloring- and connectivity-preserving permutation.

    Tries all of S_n, so only practical for very small n (n <= 8 or so).
    """
    n = graph.vertex_count()
    color = _color_index(graph)
    mat = [[graph.connectivity(u, v) for v in range(n)] for u in range(n)]
    for perm in permutations(range(n)):
        if any(color[perm[u]] != color[u] for u in range(n)):
            continue
        is_auto = True
        for u in range(n):
            row_u, row_pu = mat[u], mat[perm[u]]
            for v in range(u + 1, n):
                if row_u[v] != row_pu[perm[v]]:
                    is_auto = False
                    break
            if not is_auto:
                break
        if is_auto:
            yield Permutation(perm)


def aut_size_bruteforce(graph: Graph) -> int:
    return sum(1 for _ in automorphisms_bruteforce(graph))


def aut_size(graph: Graph) -> int:
    """|Aut| of a colored graph by partition refinement."""
    return DiscretePartitionRefiner().get_automorphism_group(graph).order()


def aut_size_edges(edges: list[tuple[int, int]], n: int) -> int:
    """Compute |Aut(G)| for an uncolored graph on vertices {0..n-1}.

    Always uses the partition refiner; see
    :func:`grouptools.external.nauty.aut_size_dreadnaut` for nauty's answer.
    """
    return aut_size(AdjacencyGraph(n, edges))


def orbit_size_under_Sn(edges: list[tuple[int, int]], n: int) -> int:
    """Orbit size of the labeled graph under the S_n action.

    Equals n! / |Aut(G)| where G is the graph on {0..n-1} with the
    given edges.  Automorphisms include permutation of isolated vertices.
    """
    aut = aut_size_edges(edges, n)
    return math.factorial(n) // aut


def vertex_orbits(graph: Graph) -> List[Tuple[int, ...]]:
    """Symmetry classes of vertices: orbits of the automorphism group."""
    group = DiscretePartitionRefiner().get_automorphism_group(graph)
    return [tuple(orb) for orb in group.orbits()]
