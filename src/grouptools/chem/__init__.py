from .bond import (
    BondView,
    BondGraph,
    BondDiscretePartitionRefiner,
    bond_signature,
    bonds_from_networkx,
    equivalent_bond_classes,
)
from .atom import AtomGraph, AtomDiscretePartitionRefiner

__all__ = [
    "BondView",
    "BondGraph",
    "BondDiscretePartitionRefiner",
    "bond_signature",
    "bonds_from_networkx",
    "equivalent_bond_classes",
    "AtomGraph",
    "AtomDiscretePartitionRefiner",
]
