"""The graph capability consumed by the refiners, and a generic implementation."""
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

import networkx as nx

from grouptools.group.partition import Partition, partition_from_colors
from grouptools.group.permutation import Permutation
from grouptools.io.graph6 import g6_to_edges

EdgeValue = Union[int, float]


@runtime_checkable
class Graph(Protocol):
    """
    What the search needs from a problem domain.

    ``connectivity(i, j)`` is 0 for non-adjacent vertices and otherwise an
    edge label (1 for plain graphs, a bond order for atom graphs). It must be
    symmetric and 0 on the diagonal.
    """

    def vertex_count(self) -> int: ...

    def connectivity(self, i: int, j: int) -> EdgeValue: ...

    def connected(self, i: int, j: int) -> bool: ...

    def initial_partition(self) -> Partition: ...


def check_vertex(i: int, n: int) -> None:
    if not 0 <= i < n:
        raise ValueError(f"vertex {i} out of range 0..{n - 1}")


class AdjacencyGraph:
    """
    Immutable labelled graph on {0..n-1} with an optional vertex coloring.

    Edges are (u, v) pairs, or (u, v, value) triples for labelled edges.
    """

    def __init__(
        self,
        n: int,
        edges: Iterable[Sequence] = (),
        colors: Optional[Sequence[Hashable]] = None,
    ):
        if n < 0:
            raise ValueError(f"negative vertex count {n}")
        self._n = n
        self._adj: List[Dict[int, EdgeValue]] = [{} for _ in range(n)]
        for e in edges:
            u, v = e[0], e[1]
            value = e[2] if len(e) > 2 else 1
            check_vertex(u, n)
            check_vertex(v, n)
            if u == v:
                raise ValueError(f"self-loop at vertex {u}")
            if not value:
                raise ValueError(f"edge ({u}, {v}) has zero label")
            self._adj[u][v] = value
            self._adj[v][u] = value
        if colors is not None and len(colors) != n:
            raise ValueError(f"{len(colors)} colors for {n} vertices")
        self._colors = tuple(colors) if colors is not None else None

    @classmethod
    def from_networkx(
        cls,
        G: nx.Graph,
        color_attr: Optional[str] = None,
        edge_attr: Optional[str] = None,
    ) -> "AdjacencyGraph":
        """
        Vertices are numbered in ``G.nodes`` order.
        """
        index = {node: i for i, node in enumerate(G.nodes)}
        if edge_attr is None:
            edges: List[Tuple] = [(index[u], index[v]) for u, v in G.edges]
        else:
            edges = [(index[u], index[v], d.get(edge_attr, 1)) for u, v, d in G.edges(data=True)]
        colors = None
        if color_attr is not None:
            colors = [G.nodes[node].get(color_attr) for node in G.nodes]
        return cls(len(index), edges, colors)

    @classmethod
    def from_g6(cls, g6: str) -> "AdjacencyGraph":
        n, edges = g6_to_edges(g6)
        return cls(n, edges)

    # ------------------------------------------------------------------
    # Graph capability
    # ------------------------------------------------------------------

    def vertex_count(self) -> int:
        return self._n

    def connectivity(self, i: int, j: int) -> EdgeValue:
        check_vertex(i, self._n)
        check_vertex(j, self._n)
        return self._adj[i].get(j, 0)

    def connected(self, i: int, j: int) -> bool:
        return self.connectivity(i, j) != 0

    def initial_partition(self) -> Partition:
        if self._colors is None:
            return Partition.unit(self._n)
        return partition_from_colors(self._colors)

    # ------------------------------------------------------------------
    # Extras
    # ------------------------------------------------------------------

    @property
    def colors(self) -> Optional[Tuple[Hashable, ...]]:
        return self._colors

    def neighbors(self, i: int) -> List[int]:
        check_vertex(i, self._n)
        return sorted(self._adj[i])

    def edges(self) -> List[Tuple[int, int]]:
        return [(u, v) for u in range(self._n) for v in sorted(self._adj[u]) if u < v]

    def relabel(self, perm: Permutation) -> "AdjacencyGraph":
        """The isomorphic copy in which vertex v becomes perm[v]."""
        if len(perm) != self._n:
            raise ValueError(f"permutation of degree {len(perm)} for {self._n} vertices")
        edges = [
            (perm[u], perm[v], val)
            for u in range(self._n)
            for v, val in self._adj[u].items()
            if u < v
        ]
        colors = None
        if self._colors is not None:
            inv = perm.inverse()
            colors = [self._colors[inv[v]] for v in range(self._n)]
        return AdjacencyGraph(self._n, edges, colors)
