from .graph import Graph, AdjacencyGraph
from .equitable import EquitablePartitionRefiner
from .discrete import DiscretePartitionRefiner, certificate

__all__ = [
    "Graph",
    "AdjacencyGraph",
    "EquitablePartitionRefiner",
    "DiscretePartitionRefiner",
    "certificate",
]
