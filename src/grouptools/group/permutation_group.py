"""Permutation groups given by generators, backed by sympy.combinatorics."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from sympy.combinatorics import PermutationGroup as SymPermutationGroup
from sympy.combinatorics.named_groups import SymmetricGroup

from grouptools.group.permutation import Permutation


class PermutationGroup:
    """
    The group generated by a list of permutations of fixed degree.

    Generators are kept exactly as entered (the identity is never stored).
    The sympy group, and with it the Schreier-Sims chain, is built on the
    first query that needs it and rebuilt after a new generator is entered.
    """

    def __init__(self, size: int, generators: Iterable[Permutation] = ()):
        if size < 0:
            raise ValueError(f"negative degree {size}")
        self._size = size
        self._generators: List[Permutation] = []
        self._group = None
        for g in generators:
            self._check_degree(g)
            if not g.is_identity():
                self._generators.append(g)

    @classmethod
    def symmetric(cls, n: int) -> "PermutationGroup":
        if n < 2:
            return cls(n)
        return cls(n, [Permutation.from_sympy(g) for g in SymmetricGroup(n).generators])

    @classmethod
    def from_sympy(cls, group) -> "PermutationGroup":
        return cls(group.degree, [Permutation.from_sympy(g) for g in group.generators])

    def _check_degree(self, g: Permutation) -> None:
        if len(g) != self._size:
            raise ValueError(f"permutation of degree {len(g)} in group of degree {self._size}")

    def _sympy(self):
        # only reached with at least one non-identity generator, so degree >= 2
        if self._group is None:
            self._group = SymPermutationGroup([g.to_sympy() for g in self._generators])
        return self._group

    @property
    def size(self) -> int:
        """Degree of the group (number of points acted on)."""
        return self._size

    @property
    def generators(self) -> Tuple[Permutation, ...]:
        return tuple(self._generators)

    def copy(self) -> "PermutationGroup":
        return PermutationGroup(self._size, self._generators)

    # ------------------------------------------------------------------
    # Group queries
    # ------------------------------------------------------------------

    def test(self, g: Permutation) -> bool:
        self._check_degree(g)
        if g.is_identity():
            return True
        if not self._generators:
            return False
        return self._sympy().contains(g.to_sympy())

    def __contains__(self, g: object) -> bool:
        return isinstance(g, Permutation) and len(g) == self._size and self.test(g)

    def enter(self, g: Permutation) -> bool:
        """
        Add g as a generator unless it is already a member.

        Returns True iff the group grew.
        """
        if self.test(g):
            return False
        self._generators.append(g)
        self._group = None
        return True

    def order(self) -> int:
        if not self._generators:
            return 1
        return int(self._sympy().order())

    def all(self) -> Iterator[Permutation]:
        """Lazily enumerate every group element exactly once."""
        if not self._generators:
            yield Permutation.identity(self._size)
            return
        for g in self._sympy().generate():
            yield Permutation.from_sympy(g)

    def orbit(self, point: int) -> List[int]:
        """Sorted orbit of *point* under the generators."""
        if not 0 <= point < self._size:
            raise ValueError(f"point {point} out of range 0..{self._size - 1}")
        if not self._generators:
            return [point]
        return sorted(self._sympy().orbit(point))

    def orbits(self) -> List[List[int]]:
        """All orbits, each sorted, ordered by their smallest point."""
        if not self._generators:
            return [[v] for v in range(self._size)]
        return sorted(sorted(orb) for orb in self._sympy().orbits())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermutationGroup):
            return NotImplemented
        if self._size != other._size or self.order() != other.order():
            return False
        return all(other.test(g) for g in self._generators)

    __hash__ = None  # type: ignore[assignment]

    def to_sympy(self):
        """Export as a :class:`sympy.combinatorics.PermutationGroup`."""
        if not self._generators:
            return SymPermutationGroup([Permutation.identity(max(self._size, 1)).to_sympy()])
        return self._sympy()

    def __repr__(self) -> str:
        gens = ", ".join(g.to_cycle_string() for g in self._generators)
        return f"PermutationGroup(size={self._size}, generators=[{gens}])"
