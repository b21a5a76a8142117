from __future__ import annotations

import os
import re
import shutil
import subprocess

from grouptools.group.partition import Partition
from grouptools.io.graph6 import strip_graph6_header
from grouptools.refine.graph import AdjacencyGraph, Graph


NAUTY_SHORTG = os.environ.get("NAUTY_SHORTG", "shortg")
NAUTY_DREADNAUT = os.environ.get("NAUTY_DREADNAUT", "dreadnaut")


def nauty_available() -> bool:
    """Returns True iff shortg appears runnable."""
    return shutil.which(NAUTY_SHORTG) is not None


def dreadnaut_available() -> bool:
    """Returns True iff dreadnaut appears runnable."""
    return shutil.which(NAUTY_DREADNAUT) is not None


def _run(command: list[str], env_var: str, text: str, check: bool = False) -> subprocess.CompletedProcess:
    if shutil.which(command[0]) is None:
        raise RuntimeError(f"{command[0]!r} not found in PATH (set {env_var} to override)")
    return subprocess.run(
        command,
        input=text.encode("ascii"),
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=check,
    )


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------

def canon_g6(g6: str) -> str:
    """Canonical graph6 label of *g6*, as printed by ``shortg -q``."""
    p = _run([NAUTY_SHORTG, "-q"], "NAUTY_SHORTG", strip_graph6_header(g6) + "\n", check=True)
    # shortg may echo comments or headers; graph6 bodies never contain blanks
    out = [
        ln for ln in p.stdout.decode("ascii", errors="replace").split()
        if ln and not ln.startswith(">")
    ]
    if not out:
        raise RuntimeError(f"shortg gave no graph6 output for {g6!r}: {p.stderr!r}")
    return out[-1]


# ---------------------------------------------------------------------------
# Automorphism group order
# ---------------------------------------------------------------------------

def dreadnaut_input(graph: Graph, partition: Partition | None = None) -> str:
    """
    Dreadnaut commands that load *graph* with its coloring as the starting
    partition and run the search. Only adjacency is passed on; edge labels
    other than "connected" are not representable.
    """
    n = graph.vertex_count()
    if partition is None:
        partition = graph.initial_partition()
    lines = [f"n={n} g"]
    for v in range(n):
        neighbors = [u for u in range(n) if graph.connected(v, u)]
        lines.append(f"{v} : {' '.join(str(u) for u in neighbors)};")
    lines.append(f"f={partition}")
    lines.append("x")
    lines.append("q")
    return "\n".join(lines) + "\n"


_GRPSIZE_RE = re.compile(r"grpsize=(\d+(?:\.\d+)?)(?:e(\d+)|\*10\^(\d+))?")


def _parse_grpsize(output: str) -> int:
    """Parse 'grpsize=N', 'grpsize=AeB' or 'grpsize=A*10^B' from dreadnaut output."""
    m = _GRPSIZE_RE.search(output)
    if not m:
        raise RuntimeError(f"Could not parse grpsize from dreadnaut output:\n{output}")
    base = float(m.group(1))
    exp_str = m.group(2) or m.group(3)
    exp = int(exp_str) if exp_str else 0
    return round(base * (10 ** exp))


def _run_dreadnaut(inp: str) -> str:
    p = _run([NAUTY_DREADNAUT], "NAUTY_DREADNAUT", inp)
    return p.stdout.decode("ascii", errors="replace") + p.stderr.decode("ascii", errors="replace")


def aut_size_dreadnaut(graph: Graph, partition: Partition | None = None) -> int:
    """|Aut| of a colored graph, computed by dreadnaut."""
    if graph.vertex_count() == 0:
        return 1
    return _parse_grpsize(_run_dreadnaut(dreadnaut_input(graph, partition)))


def aut_size_g6(g6: str) -> int:
    """Compute |Aut(G)| for an uncolored graph given in graph6 format."""
    return aut_size_dreadnaut(AdjacencyGraph.from_g6(g6))
