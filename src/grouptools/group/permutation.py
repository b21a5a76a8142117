"""Immutable permutations of {0..n-1}."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from sympy.combinatorics import Permutation as SymPermutation


class Permutation:
    """
    A bijection on {0..n-1} stored as an image array.

    ``p[i]`` is where ``i`` is sent. Composition follows the usual
    group-action convention: ``(p * q)[i] == p[q[i]]``, i.e. apply ``q``
    first, then ``p``.
    """

    __slots__ = ("_images",)

    def __init__(self, images: Iterable[int]):
        imgs = tuple(images)
        n = len(imgs)
        if sorted(imgs) != list(range(n)):
            raise ValueError(f"not a permutation of 0..{n - 1}: {imgs!r}")
        self._images = imgs

    @classmethod
    def identity(cls, n: int) -> "Permutation":
        if n < 0:
            raise ValueError(f"negative degree {n}")
        return cls(range(n))

    @classmethod
    def from_cycles(cls, n: int, cycles: Iterable[Iterable[int]]) -> "Permutation":
        """
        Build from disjoint cycles, e.g. ``from_cycles(4, [(0, 1), (2, 3)])``.
        Points not mentioned are fixed.
        """
        img = list(range(n))
        seen: set[int] = set()
        for cyc in cycles:
            c = list(cyc)
            for i, x in enumerate(c):
                if x in seen or not 0 <= x < n:
                    raise ValueError(f"bad cycle element {x} in {c!r}")
                seen.add(x)
                img[x] = c[(i + 1) % len(c)]
        return cls(img)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def images(self) -> Tuple[int, ...]:
        return self._images

    def size(self) -> int:
        return len(self._images)

    def __len__(self) -> int:
        return len(self._images)

    def __getitem__(self, i: int) -> int:
        return self._images[i]

    def __iter__(self) -> Iterator[int]:
        return iter(self._images)

    def is_identity(self) -> bool:
        return all(x == i for i, x in enumerate(self._images))

    def fixes(self, points: Iterable[int]) -> bool:
        """True iff every point in *points* is a fixed point."""
        return all(self._images[x] == x for x in points)

    # ------------------------------------------------------------------
    # Group operations
    # ------------------------------------------------------------------

    def __mul__(self, other: "Permutation") -> "Permutation":
        if len(other) != len(self):
            raise ValueError(f"degree mismatch: {len(self)} vs {len(other)}")
        mine = self._images
        return Permutation(mine[x] for x in other._images)

    def inverse(self) -> "Permutation":
        inv = [0] * len(self._images)
        for i, x in enumerate(self._images):
            inv[x] = i
        return Permutation(inv)

    # ------------------------------------------------------------------
    # Comparison / display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._images == other._images

    def __hash__(self) -> int:
        return hash(self._images)

    def cycles(self, include_fixed: bool = False) -> List[Tuple[int, ...]]:
        """Disjoint cycles, each starting at its smallest point."""
        if not self._images:
            return []
        sp = self.to_sympy()
        form = sp.full_cyclic_form if include_fixed else sp.cyclic_form
        return [tuple(c) for c in form]

    def to_sympy(self):
        """Same permutation as a :class:`sympy.combinatorics.Permutation`."""
        return SymPermutation(list(self._images))

    @classmethod
    def from_sympy(cls, perm) -> "Permutation":
        return cls(perm.array_form)

    def to_cycle_string(self) -> str:
        cyc = self.cycles()
        if not cyc:
            return "()"
        return "".join("(" + ",".join(str(x) for x in c) + ")" for c in cyc)

    def __repr__(self) -> str:
        return f"Permutation({list(self._images)!r})"

    def __str__(self) -> str:
        return self.to_cycle_string()
