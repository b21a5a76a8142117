"""Equitable refinement of vertex partitions on bitset adjacency."""
from __future__ import annotations

from typing import Dict, List, Tuple

from grouptools.group.partition import Partition
from grouptools.refine.graph import EdgeValue, Graph


def _popcount(x: int) -> int:
    return bin(x).count("1")


def _bitset_adjacency(graph: Graph) -> Tuple[List[EdgeValue], List[List[int]]]:
    """
    Split the adjacency by edge label.

    Returns (labels, adj) where adj[k][u] has bit v set iff
    connectivity(u, v) == labels[k]. Labels are sorted.
    """
    n = graph.vertex_count()
    by_label: Dict[EdgeValue, List[int]] = {}
    for u in range(n):
        for v in range(u + 1, n):
            val = graph.connectivity(u, v)
            if val:
                rows = by_label.setdefault(val, [0] * n)
                rows[u] |= 1 << v
                rows[v] |= 1 << u
    labels = sorted(by_label)
    return labels, [by_label[val] for val in labels]


class EquitablePartitionRefiner:
    """
    Computes the coarsest equitable refinement of a partition.

    A partition is equitable when, for every pair of cells (A, B), all
    vertices of A have the same number of neighbors in B (counted per edge
    label). Cells are only ever split in place, and sub-cells are ordered
    by their neighbor counts, so the result depends on cell positions and
    adjacency but never on vertex numbering.
    """

    def __init__(self, graph: Graph):
        self._n = graph.vertex_count()
        self._labels, self._adj = _bitset_adjacency(graph)

    def _signature(self, v: int, mask: int) -> Tuple[int, ...]:
        return tuple(_popcount(rows[v] & mask) for rows in self._adj)

    def _split(self, cell: List[int], mask: int) -> List[List[int]]:
        buckets: Dict[Tuple[int, ...], List[int]] = {}
        for v in cell:
            buckets.setdefault(self._signature(v, mask), []).append(v)
        if len(buckets) == 1:
            return [cell]
        return [buckets[sig] for sig in sorted(buckets)]

    def refine(self, partition: Partition) -> Partition:
        """
        Split cells against each splitter cell in turn until a full pass
        over all splitters changes nothing.
        """
        cells = [list(c) for c in partition]
        changed = True
        while changed:
            changed = False
            b = 0
            while b < len(cells):
                mask = 0
                for x in cells[b]:
                    mask |= 1 << x
                new_cells: List[List[int]] = []
                for cell in cells:
                    if len(cell) == 1:
                        new_cells.append(cell)
                        continue
                    parts = self._split(cell, mask)
                    if len(parts) > 1:
                        changed = True
                    new_cells.extend(parts)
                cells = new_cells
                b += 1
        return Partition(cells)

    def is_equitable(self, partition: Partition) -> bool:
        masks = []
        for cell in partition:
            m = 0
            for x in cell:
                m |= 1 << x
            masks.append(m)
        for cell in partition:
            for mask in masks:
                if len({self._signature(v, mask) for v in cell}) > 1:
                    return False
        return True
