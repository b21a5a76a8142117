"""
Automorphism group and canonical labeling by individualization-refinement.

The search walks a tree of ordered partitions. The root is the equitable
refinement of the starting coloring; a node branches on the first
non-singleton cell by individualizing each of its vertices in turn, and a
discrete node (a leaf) is a total ordering of the vertices.

Each ordering p is scored by its certificate, the upper triangle of the
relabelled adjacency matrix read column by column::

    (c(p[0], p[1]), c(p[0], p[2]), c(p[1], p[2]), c(p[0], p[3]), ...)

The smallest certificate wins. Two leaves with equal certificates differ by
an automorphism. Since the entries fixed by the first k positions form a
prefix of the certificate, a node whose fixed prefix is already larger than
the best leaf's can be abandoned.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from grouptools.group.partition import Partition
from grouptools.group.permutation import Permutation
from grouptools.group.permutation_group import PermutationGroup
from grouptools.refine.equitable import EquitablePartitionRefiner
from grouptools.refine.graph import EdgeValue, Graph

logger = logging.getLogger(__name__)

Certificate = Tuple[EdgeValue, ...]


@dataclass
class _Frame:
    """A branching node on the explicit search stack."""

    partition: Partition
    cell_index: int
    candidates: List[int]
    # vertices individualized on the path from the root
    fixed: Tuple[int, ...]
    cursor: int = 0
    explored: List[int] = field(default_factory=list)


def _matrix(graph: Graph) -> List[List[EdgeValue]]:
    n = graph.vertex_count()
    mat: List[List[EdgeValue]] = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            val = graph.connectivity(i, j)
            if val != graph.connectivity(j, i):
                raise ValueError(f"connectivity is not symmetric at ({i}, {j})")
            mat[i][j] = mat[j][i] = val
    for i in range(n):
        if graph.connectivity(i, i):
            raise ValueError(f"vertex {i} is connected to itself")
    return mat


def certificate(matrix: List[List[EdgeValue]], ordering: List[int]) -> Certificate:
    """Column-major upper triangle of *matrix* under the given ordering."""
    out: List[EdgeValue] = []
    for j in range(1, len(ordering)):
        row_j = matrix[ordering[j]]
        for i in range(j):
            out.append(row_j[ordering[i]])
    return tuple(out)


def _orbit_union(seeds: List[int], gens: List[Permutation]) -> set:
    seen = set(seeds)
    queue = list(seeds)
    while queue:
        nxt = []
        for x in queue:
            for g in gens:
                y = g[x]
                if y not in seen:
                    seen.add(y)
                    nxt.append(y)
        queue = nxt
    return seen


class DiscretePartitionRefiner:
    """
    Finds the automorphism group of a colored graph and checks whether its
    current vertex numbering is canonical.

    If both the group and the canonical check are needed, refine once::

        refiner = DiscretePartitionRefiner()
        refiner.refine(graph)
        is_canon = refiner.is_canonical()
        aut = refiner.get_automorphism_group()

    Each :meth:`refine` starts from a clean state. The instance keeps the
    results of the last run until the next one or :meth:`reset`; it is not
    safe to share between threads.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Forget the results of the last refinement."""
        self._group: Optional[PermutationGroup] = None
        self._best: Optional[Permutation] = None
        self._first: Optional[Permutation] = None
        self._best_cert: Optional[Certificate] = None
        self._first_cert: Optional[Certificate] = None
        self.node_count = 0

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def refine(
        self,
        graph: Graph,
        partition: Optional[Partition] = None,
        group: Optional[PermutationGroup] = None,
    ) -> None:
        """
        Run the search on *graph*, starting from *partition* (by default the
        graph's own coloring). The partition must be at least as fine as
        the coloring the automorphisms are meant to respect.

        *group*, if given, must consist of automorphisms of the colored
        graph; it seeds the search and only speeds it up. Otherwise the
        result is unspecified.
        """
        self.reset()
        n = graph.vertex_count()
        if partition is None:
            partition = graph.initial_partition()
        partition.check(n)
        if group is not None and group.size != n:
            raise ValueError(f"starting group has degree {group.size}, graph has {n} vertices")

        self._matrix = _matrix(graph)
        self._group = PermutationGroup(n, group.generators if group is not None else ())
        self._equitable = EquitablePartitionRefiner(graph)

        self._search(self._equitable.refine(partition))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "refined %d vertices: %d nodes, %d generators, |Aut| = %d",
                n, self.node_count, len(self._group.generators), self._group.order(),
            )

    def get_automorphism_group(
        self,
        graph: Optional[Graph] = None,
        group: Optional[PermutationGroup] = None,
        partition: Optional[Partition] = None,
    ) -> PermutationGroup:
        """
        Without arguments, the group found by the last :meth:`refine`.
        With a graph, refine it first (optionally seeded by *group* and/or
        started from *partition*).
        """
        if graph is not None:
            self.refine(graph, partition, group)
        self._require_result()
        return self._group

    def is_canonical(self, graph: Optional[Graph] = None) -> bool:
        """
        True iff the graph's own numbering is equivalent to the best leaf,
        i.e. the best ordering is itself an automorphism of the colored
        graph. Exactly one numbering per isomorphism class passes.
        """
        if graph is not None:
            self.refine(graph)
        self._require_result()
        return self._best.is_identity() or self._group.test(self._best)

    # ------------------------------------------------------------------
    # Result accessors
    # ------------------------------------------------------------------

    def _require_result(self) -> None:
        if self._group is None:
            raise RuntimeError("no refinement has been run; call refine() first")

    def get_best(self) -> Permutation:
        """The canonical ordering (position -> vertex) of the last run."""
        self._require_result()
        return self._best

    def get_first(self) -> Permutation:
        """The ordering at the first leaf reached."""
        self._require_result()
        return self._first

    def get_certificate(self) -> Certificate:
        self._require_result()
        return self._best_cert

    def get_half_matrix_string(self) -> str:
        self._require_result()
        return "".join(str(x) for x in self._best_cert)

    def get_first_half_matrix_string(self) -> str:
        self._require_result()
        return "".join(str(x) for x in self._first_cert)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _search(self, root: Partition) -> None:
        n = len(self._matrix)
        if n == 0:
            self._first = self._best = Permutation.identity(0)
            self._first_cert = self._best_cert = ()
            return

        stack: List[_Frame] = []
        frame = self._visit(root, ())
        if frame is not None:
            stack.append(frame)

        while stack:
            frame = stack[-1]
            v = self._next_candidate(frame)
            if v is None:
                stack.pop()
                continue
            frame.explored.append(v)
            child = self._equitable.refine(frame.partition.split_before(frame.cell_index, v))
            child_frame = self._visit(child, frame.fixed + (v,))
            if child_frame is not None:
                stack.append(child_frame)

    def _visit(self, partition: Partition, fixed: Tuple[int, ...]) -> Optional[_Frame]:
        """Process a refined node; return a frame if it must be branched on."""
        self.node_count += 1
        index = partition.index_of_first_non_discrete_cell()
        if index == -1:
            self._leaf(partition.to_permutation())
            return None

        if self._best_cert is not None:
            head = partition.prefix()
            prefix = certificate(self._matrix, head)
            if prefix > self._best_cert[:len(prefix)]:
                return None

        return _Frame(
            partition=partition,
            cell_index=index,
            candidates=list(partition.get_cell(index)),
            fixed=fixed,
        )

    def _next_candidate(self, frame: _Frame) -> Optional[int]:
        """
        Next vertex of the branching cell to individualize, skipping those in
        the orbit of an explored sibling under known automorphisms that fix
        the path to this node.
        """
        gens = [g for g in self._group.generators if g.fixes(frame.fixed)]
        covered = _orbit_union(frame.explored, gens) if gens else set(frame.explored)
        while frame.cursor < len(frame.candidates):
            v = frame.candidates[frame.cursor]
            frame.cursor += 1
            if v not in covered:
                return v
        return None

    def _leaf(self, ordering: Permutation) -> None:
        cert = certificate(self._matrix, list(ordering))
        if self._first is None:
            self._first = self._best = ordering
            self._first_cert = self._best_cert = cert
            return

        if cert < self._best_cert:
            logger.debug("new best leaf %s", list(ordering))
            self._best = ordering
            self._best_cert = cert
        elif cert == self._best_cert:
            # g sends the vertex at each position of best to the vertex at
            # the same position of this leaf
            g = ordering * self._best.inverse()
            if not g.is_identity() and self._group.enter(g):
                logger.debug("automorphism %s", g.to_cycle_string())
