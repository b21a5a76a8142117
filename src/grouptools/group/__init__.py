from .permutation import Permutation
from .permutation_group import PermutationGroup
from .partition import Partition, partition_from_colors

__all__ = [
    "Permutation",
    "PermutationGroup",
    "Partition",
    "partition_from_colors",
]
