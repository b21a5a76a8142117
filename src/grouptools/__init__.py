"""
grouptools: automorphism groups and canonical labelings of colored graphs by
partition refinement, with adapters for the bonds and atoms of molecules.
"""

from .group.permutation import Permutation
from .group.permutation_group import PermutationGroup
from .group.partition import Partition
from .refine.graph import Graph, AdjacencyGraph
from .refine.equitable import EquitablePartitionRefiner
from .refine.discrete import DiscretePartitionRefiner

# Molecule adapters
from .chem.bond import (
    BondView,
    BondGraph,
    BondDiscretePartitionRefiner,
    equivalent_bond_classes,
)
from .chem.atom import AtomGraph, AtomDiscretePartitionRefiner

# Nauty wrappers
from .external.nauty import (
    nauty_available,
    dreadnaut_available,
    canon_g6,
    aut_size_dreadnaut,
    aut_size_g6,
)

# Shared utilities
from .io.graph6 import g6_to_nx, edges_to_g6
from .utils.automorphisms import aut_size, aut_size_edges, orbit_size_under_Sn, vertex_orbits
from .utils.canonical import canonical_form, canonical_graph_bruteforce

__all__ = [
    # Group data types
    "Permutation",
    "PermutationGroup",
    "Partition",
    # Refinement
    "Graph",
    "AdjacencyGraph",
    "EquitablePartitionRefiner",
    "DiscretePartitionRefiner",
    # Chemistry
    "BondView",
    "BondGraph",
    "BondDiscretePartitionRefiner",
    "equivalent_bond_classes",
    "AtomGraph",
    "AtomDiscretePartitionRefiner",
    # Nauty
    "nauty_available",
    "dreadnaut_available",
    "canon_g6",
    "aut_size_dreadnaut",
    "aut_size_g6",
    # IO
    "g6_to_nx",
    "edges_to_g6",
    # Utils
    "aut_size",
    "aut_size_edges",
    "orbit_size_under_Sn",
    "vertex_orbits",
    "canonical_form",
    "canonical_graph_bruteforce",
]
