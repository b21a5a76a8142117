"""Ordered partitions of {0..n-1} into cells."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from grouptools.group.permutation import Permutation


class Partition:
    """
    An ordered list of disjoint, non-empty cells; each cell is kept sorted.

    Disjointness and coverage are the caller's responsibility when cells are
    added one at a time; :meth:`check` verifies them on demand.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Optional[Iterable[Iterable[int]]] = None):
        self._cells: List[List[int]] = []
        if cells is not None:
            for c in cells:
                self.add_cell(c)

    @classmethod
    def unit(cls, n: int) -> "Partition":
        """The single-cell partition [0,1,...,n-1] (empty for n == 0)."""
        return cls([range(n)] if n > 0 else [])

    @classmethod
    def from_string(cls, s: str) -> "Partition":
        """
        Parse the bracket notation used by :meth:`__str__`, e.g. "[0,1|2|3,4]".
        """
        body = s.strip()
        if body.startswith("["):
            body = body[1:]
        if body.endswith("]"):
            body = body[:-1]
        if not body.strip():
            return cls()
        return cls(
            [int(x) for x in part.split(",")]
            for part in body.split("|")
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_cell(self, cell: Iterable[int]) -> None:
        c = sorted(cell)
        if not c:
            raise ValueError("partition cells must be non-empty")
        self._cells.append(c)

    def order(self) -> None:
        """Sort cells by their first (smallest) element."""
        self._cells.sort(key=lambda c: c[0])

    def copy(self) -> "Partition":
        p = Partition()
        p._cells = [list(c) for c in self._cells]
        return p

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def size(self) -> int:
        """Number of vertices covered."""
        return sum(len(c) for c in self._cells)

    def cell_count(self) -> int:
        return len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return (tuple(c) for c in self._cells)

    @property
    def cells(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(c) for c in self._cells)

    def get_cell(self, index: int) -> Tuple[int, ...]:
        return tuple(self._cells[index])

    def is_discrete(self) -> bool:
        return all(len(c) == 1 for c in self._cells)

    def index_of_first_non_discrete_cell(self) -> int:
        """Index of the first cell with more than one element, or -1."""
        for i, c in enumerate(self._cells):
            if len(c) > 1:
                return i
        return -1

    def in_same_cell(self, a: int, b: int) -> bool:
        for c in self._cells:
            if a in c:
                return b in c
        return False

    def check(self, n: int) -> None:
        """Raise ValueError unless the cells cover {0..n-1} exactly once."""
        seen = [False] * n
        for c in self._cells:
            for x in c:
                if not 0 <= x < n:
                    raise ValueError(f"element {x} out of range 0..{n - 1} in {self}")
                if seen[x]:
                    raise ValueError(f"element {x} appears twice in {self}")
                seen[x] = True
        if not all(seen):
            missing = [i for i, s in enumerate(seen) if not s]
            raise ValueError(f"partition {self} does not cover {missing}")

    # ------------------------------------------------------------------
    # Derived partitions
    # ------------------------------------------------------------------

    def split_before(self, cell_index: int, element: int) -> "Partition":
        """
        Individualize *element*: a new partition in which the cell at
        *cell_index* is replaced by [element] followed by the remainder.
        """
        cell = self._cells[cell_index]
        if element not in cell:
            raise ValueError(f"{element} is not in cell {cell_index} of {self}")
        p = Partition()
        p._cells = [list(c) for c in self._cells[:cell_index]]
        p._cells.append([element])
        rest = [x for x in cell if x != element]
        if rest:
            p._cells.append(rest)
        p._cells.extend(list(c) for c in self._cells[cell_index + 1:])
        return p

    def prefix(self) -> List[int]:
        """Elements of the leading run of singleton cells, in cell order."""
        out = []
        for c in self._cells:
            if len(c) > 1:
                break
            out.append(c[0])
        return out

    def to_permutation(self) -> Permutation:
        """
        For a discrete partition, the ordering position -> vertex
        (image[i] is the element of cell i).
        """
        if not self.is_discrete():
            raise ValueError(f"partition {self} is not discrete")
        return Permutation(c[0] for c in self._cells)

    # ------------------------------------------------------------------
    # Comparison / display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._cells == other._cells

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + "|".join(",".join(str(x) for x in c) for c in self._cells) + "]"

    def __repr__(self) -> str:
        return f"Partition({self})"


def partition_from_colors(colors: Sequence[object]) -> Partition:
    """
    One cell per distinct color, cells ordered by sorted color value.

    Colors must be mutually comparable; the cell order then does not depend
    on how the vertices are numbered.
    """
    groups: dict = {}
    for v, c in enumerate(colors):
        groups.setdefault(c, []).append(v)
    return Partition(groups[c] for c in sorted(groups))
