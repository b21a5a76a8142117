from __future__ import annotations

from itertools import permutations
from typing import Tuple

from grouptools.external.nauty import nauty_available, canon_g6
from grouptools.io.graph6 import edges_to_g6
from grouptools.refine.discrete import Certificate, DiscretePartitionRefiner, certificate
from grouptools.refine.graph import AdjacencyGraph, Graph

CanonicalForm = Tuple[Tuple[int, ...], Certificate]


def canonical_form(graph: Graph) -> CanonicalForm:
    """Canonical form via partition refinement.

    Returns (cell sizes of the initial coloring, certificate of the
    canonical leaf). Two colored graphs get equal forms iff they are
    isomorphic, provided their adapters order color cells the same way.
    """
    refiner = DiscretePartitionRefiner()
    refiner.refine(graph)
    sizes = tuple(len(c) for c in graph.initial_partition())
    return sizes, refiner.get_certificate()


def canonical_graph_bruteforce(graph: Graph) -> CanonicalForm:
    """Canonical form via min over all color-respecting vertex orderings.

    Only practical for small graphs (n <= 10).
    Raises ValueError for n > 10; use canonical_form instead.

    The value differs from canonical_form (which only looks at orderings
    the refinement produces) but separates isomorphism classes the same way.
    """
    n = graph.vertex_count()
    if n > 10:
        raise ValueError(
            f"Brute-force canonicalization is impractical for n={n}. "
            "Use canonical_form() instead."
        )

    cells = list(graph.initial_partition())
    block = []
    for ci, cell in enumerate(cells):
        block.extend([ci] * len(cell))
    color = [0] * n
    for ci, cell in enumerate(cells):
        for v in cell:
            color[v] = ci

    mat = [[graph.connectivity(u, v) for v in range(n)] for u in range(n)]
    best = None
    for perm in permutations(range(n)):
        if any(color[perm[pos]] != block[pos] for pos in range(n)):
            continue
        cert = certificate(mat, list(perm))
        if best is None or cert < best:
            best = cert
    return tuple(len(c) for c in cells), best if best is not None else ()


def canonical_graph_nauty(graph: AdjacencyGraph) -> str:
    """Canonical form of an uncolored graph via nauty shortg, as graph6.

    Raises RuntimeError if nauty is not available.
    """
    if not nauty_available():
        raise RuntimeError(
            "nauty not available for canonical_graph_nauty. "
            "Install nauty (shortg) or use canonical_form."
        )
    return canon_g6(edges_to_g6(graph.edges(), graph.vertex_count()))
