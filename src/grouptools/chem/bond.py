"""
Bond automorphisms of a molecule.

Two bonds are equivalent under an automorphism when, roughly speaking, they
sit in symmetric positions in the molecule; the C-C bonds attaching two
methyl groups to a benzene ring are one example. The refiner works on the
bond graph (the line graph of the molecule): its vertices are bonds, and two
bonds are adjacent iff they share an atom.

Molecules are networkx graphs with an ``element`` attribute on atoms and an
``order`` attribute on bonds::

    mol = nx.Graph()
    mol.add_node(0, element="C")
    mol.add_node(1, element="O")
    mol.add_edge(0, 1, order=2)

    refiner = BondDiscretePartitionRefiner()
    for automorphism in refiner.get_automorphism_group(mol).all():
        ...
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Hashable, List, Optional, Sequence, Set, Tuple, Union

import networkx as nx

from grouptools.group.partition import Partition
from grouptools.group.permutation_group import PermutationGroup
from grouptools.refine.discrete import DiscretePartitionRefiner
from grouptools.refine.graph import check_vertex

logger = logging.getLogger(__name__)

BondOrder = Union[int, float]


@dataclass(frozen=True)
class BondView:
    """The parts of a bond the refiner looks at."""

    atoms: Tuple[Hashable, Hashable]
    elements: Tuple[str, str]
    order: BondOrder = 1


def format_order(order: BondOrder) -> str:
    """'2' for 2 or 2.0, '1.5' for 1.5."""
    if float(order).is_integer():
        return str(int(order))
    return str(order)


def bond_signature(elements: Tuple[str, str], order: BondOrder, ignore_bond_orders: bool = False) -> str:
    """
    Mini-descriptor of a bond such as "C2O" or "C3N": the two element
    symbols in sorted order around the bond order. With
    *ignore_bond_orders* the order slot is always "1".
    """
    el0, el1 = sorted(elements)
    bo = "1" if ignore_bond_orders else format_order(order)
    return el0 + bo + el1


def bonds_from_networkx(
    mol: nx.Graph,
    element_attr: str = "element",
    order_attr: str = "order",
) -> List[BondView]:
    """Bond views in ``mol.edges`` order; a missing order counts as 1."""
    bonds = []
    for u, v, data in mol.edges(data=True):
        try:
            elements = (mol.nodes[u][element_attr], mol.nodes[v][element_attr])
        except KeyError:
            raise ValueError(f"atom in bond ({u}, {v}) has no {element_attr!r} attribute") from None
        bonds.append(BondView((u, v), elements, data.get(order_attr, 1)))
    return bonds


class BondGraph:
    """
    Immutable bond graph of one molecule, with its bond-type coloring.
    """

    def __init__(self, bonds: Sequence[BondView], ignore_bond_orders: bool = False):
        self._bonds = tuple(bonds)
        self._ignore_bond_orders = ignore_bond_orders
        self._adj = self._connection_table(self._bonds)

    @classmethod
    def from_networkx(
        cls,
        mol: nx.Graph,
        ignore_bond_orders: bool = False,
        element_attr: str = "element",
        order_attr: str = "order",
    ) -> "BondGraph":
        return cls(bonds_from_networkx(mol, element_attr, order_attr), ignore_bond_orders)

    @staticmethod
    def _connection_table(bonds: Sequence[BondView]) -> List[Set[int]]:
        """
        Bonds incident to a common atom form a clique; built through an
        atom -> incident-bonds table in O(m + sum_a deg(a)^2).
        """
        incident: Dict[Hashable, List[int]] = {}
        for bi, bond in enumerate(bonds):
            a, b = bond.atoms
            if a == b:
                raise ValueError(f"bond {bi} joins atom {a!r} to itself")
            incident.setdefault(a, []).append(bi)
            incident.setdefault(b, []).append(bi)

        adj: List[Set[int]] = [set() for _ in bonds]
        for inc in incident.values():
            for i in range(len(inc)):
                for j in range(i + 1, len(inc)):
                    adj[inc[i]].add(inc[j])
                    adj[inc[j]].add(inc[i])
        return adj

    @property
    def bonds(self) -> Tuple[BondView, ...]:
        return self._bonds

    @property
    def ignore_bond_orders(self) -> bool:
        return self._ignore_bond_orders

    def vertex_count(self) -> int:
        return len(self._bonds)

    def connectivity(self, i: int, j: int) -> int:
        check_vertex(i, len(self._bonds))
        check_vertex(j, len(self._bonds))
        return 1 if j in self._adj[i] else 0

    def connected(self, i: int, j: int) -> bool:
        return self.connectivity(i, j) == 1

    def signature(self, i: int) -> str:
        check_vertex(i, len(self._bonds))
        bond = self._bonds[i]
        return bond_signature(bond.elements, bond.order, self._ignore_bond_orders)

    def initial_partition(self) -> Partition:
        """
        One cell per bond signature, cells ordered by signature string so the
        result does not depend on the order bonds were listed in.
        """
        cells: Dict[str, List[int]] = {}
        for i in range(len(self._bonds)):
            cells.setdefault(self.signature(i), []).append(i)
        # no order() afterwards: sorting cells by smallest bond index would
        # make the starting partition depend on the bond numbering
        return Partition(cells[key] for key in sorted(cells))


class BondDiscretePartitionRefiner(DiscretePartitionRefiner):
    """
    Automorphism group and canonical check for the bonds of a molecule.

    If both the group and the canonical check are required, refine once and
    query the results::

        refiner = BondDiscretePartitionRefiner()
        refiner.refine(mol)
        is_canon = refiner.is_canonical()
        aut = refiner.get_automorphism_group()

    Passing a molecule to :meth:`is_canonical` or
    :meth:`get_automorphism_group` refines it again.
    """

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
        self._graph: Optional[BondGraph] = None

    @property
    def graph(self) -> Optional[BondGraph]:
        """The bond graph of the last refined molecule."""
        return self._graph

    def bond_graph(self, mol: nx.Graph) -> BondGraph:
        return BondGraph.from_networkx(
            mol,
            ignore_bond_orders=self.ignore_bond_orders,
            element_attr=self.element_attr,
            order_attr=self.order_attr,
        )

    def get_bond_partition(self, mol: nx.Graph) -> Partition:
        """Partition of the bonds by element types and bond order."""
        return self.bond_graph(mol).initial_partition()

    def refine(  # type: ignore[override]
        self,
        mol: nx.Graph,
        partition: Optional[Partition] = None,
        group: Optional[PermutationGroup] = None,
    ) -> None:
        graph = self.bond_graph(mol)
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

    def get_connectivity(self, i: int, j: int) -> int:
        self._require_result()
        return self._graph.connectivity(i, j)


def equivalent_bond_classes(mol: nx.Graph, ignore_bond_orders: bool = False) -> List[List[Tuple[Hashable, Hashable]]]:
    """
    Group the bonds of *mol* into symmetry classes (orbits of the bond
    automorphism group). Bonds are reported as (atom, atom) pairs.
    """
    refiner = BondDiscretePartitionRefiner(ignore_bond_orders)
    aut = refiner.get_automorphism_group(mol)
    bonds = refiner.graph.bonds
    classes = [[bonds[i].atoms for i in orbit] for orbit in aut.orbits()]
    logger.debug("%d bonds in %d symmetry classes", len(bonds), len(classes))
    return classes
