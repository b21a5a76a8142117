"""Atom automorphisms of a molecule: vertices are atoms, edges are bonds."""
from __future__ import annotations

from typing import Dict, Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from grouptools.group.partition import Partition
from grouptools.group.permutation_group import PermutationGroup
from grouptools.refine.discrete import DiscretePartitionRefiner
from grouptools.refine.graph import EdgeValue, check_vertex


class AtomGraph:
    """
    Immutable atom graph of one molecule.

    Atoms are numbered in ``mol.nodes`` order. The connectivity of two
    bonded atoms is the bond order, or 1 when bond orders are ignored, so
    automorphisms must map double bonds to double bonds unless told not to.
    """

    def __init__(
        self,
        elements: Sequence[str],
        bonds: Sequence[Tuple[int, int, EdgeValue]],
        ignore_bond_orders: bool = False,
        atoms: Optional[Sequence[Hashable]] = None,
    ):
        n = len(elements)
        self._elements = tuple(elements)
        self._atoms = tuple(atoms) if atoms is not None else tuple(range(n))
        self._ignore_bond_orders = ignore_bond_orders
        self._adj: List[Dict[int, EdgeValue]] = [{} for _ in range(n)]
        for u, v, order in bonds:
            check_vertex(u, n)
            check_vertex(v, n)
            if u == v:
                raise ValueError(f"atom {u} bonded to itself")
            if not order:
                raise ValueError(f"bond ({u}, {v}) has zero order")
            value = 1 if ignore_bond_orders else order
            self._adj[u][v] = value
            self._adj[v][u] = value

    @classmethod
    def from_networkx(
        cls,
        mol: nx.Graph,
        ignore_bond_orders: bool = False,
        element_attr: str = "element",
        order_attr: str = "order",
    ) -> "AtomGraph":
        atoms = list(mol.nodes)
        index = {a: i for i, a in enumerate(atoms)}
        try:
            elements = [mol.nodes[a][element_attr] for a in atoms]
        except KeyError:
            raise ValueError(f"an atom has no {element_attr!r} attribute") from None
        bonds = [
            (index[u], index[v], data.get(order_attr, 1))
            for u, v, data in mol.edges(data=True)
        ]
        return cls(elements, bonds, ignore_bond_orders, atoms)

    @property
    def atoms(self) -> Tuple[Hashable, ...]:
        return self._atoms

    @property
    def elements(self) -> Tuple[str, ...]:
        return self._elements

    def vertex_count(self) -> int:
        return len(self._elements)

    def connectivity(self, i: int, j: int) -> EdgeValue:
        check_vertex(i, len(self._elements))
        check_vertex(j, len(self._elements))
        return self._adj[i].get(j, 0)

    def connected(self, i: int, j: int) -> bool:
        return self.connectivity(i, j) != 0

    def initial_partition(self) -> Partition:
        """One cell per element symbol, cells in symbol order."""
        cells: Dict[str, List[int]] = {}
        for i, el in enumerate(self._elements):
            cells.setdefault(el, []).append(i)
        return Partition(cells[el] for el in sorted(cells))


class AtomDiscretePartitionRefiner(DiscretePartitionRefiner):
    """Automorphism group and canonical check for the atoms of a molecule."""

    def __init__(
        self,
        ignore_bond_orders: bool = False,
        element_attr: str = "element",
        order_attr: str = "order",
    ):
        super().__init__()
        self.ignore_bond_orders = ignore_bond_orders
        self.element_attr = element_attr
        self.order_attr = order_attr

    def reset(self) -> None:
        super().reset()
        self._graph: Optional[AtomGraph] = None

    @property
    def graph(self) -> Optional[AtomGraph]:
        return self._graph

    def atom_graph(self, mol: nx.Graph) -> AtomGraph:
        return AtomGraph.from_networkx(mol, self.ignore_bond_orders, self.element_attr, self.order_attr)

    def get_element_partition(self, mol: nx.Graph) -> Partition:
        return self.atom_graph(mol).initial_partition()

    def refine(  # type: ignore[override]
        self,
        mol: nx.Graph,
        partition: Optional[Partition] = None,
        group: Optional[PermutationGroup] = None,
    ) -> None:
        graph = self.atom_graph(mol)
        super().refine(graph, partition, group)
        self._graph = graph

    def is_canonical(self, mol: Optional[nx.Graph] = None) -> bool:  # type: ignore[override]
        if mol is not None:
            self.refine(mol)
        return super().is_canonical()

    def get_automorphism_group(  # type: ignore[override]
        self,
        mol: Optional[nx.Graph] = None,
        group: Optional[PermutationGroup] = None,
        partition: Optional[Partition] = None,
    ) -> PermutationGroup:
        if mol is not None:
            self.refine(mol, partition, group)
        return super().get_automorphism_group()

    def get_vertex_count(self) -> int:
        self._require_result()
        return self._graph.vertex_count()

    def get_connectivity(self, i: int, j: int) -> EdgeValue:
        self._require_result()
        return self._graph.connectivity(i, j)
