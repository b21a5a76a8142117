from .automorphisms import (
    automorphisms_bruteforce,
    aut_size_bruteforce,
    aut_size,
    aut_size_edges,
    orbit_size_under_Sn,
    vertex_orbits,
)
from .canonical import canonical_form, canonical_graph_bruteforce, canonical_graph_nauty

__all__ = [
    "automorphisms_bruteforce",
    "aut_size_bruteforce",
    "aut_size",
    "aut_size_edges",
    "orbit_size_under_Sn",
    "vertex_orbits",
    "canonical_form",
    "canonical_graph_bruteforce",
    "canonical_graph_nauty",
]
