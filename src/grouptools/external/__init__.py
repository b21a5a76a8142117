from .nauty import (
    NAUTY_SHORTG,
    NAUTY_DREADNAUT,
    nauty_available,
    dreadnaut_available,
    canon_g6,
    dreadnaut_input,
    aut_size_dreadnaut,
    aut_size_g6,
)

__all__ = [
    "NAUTY_SHORTG",
    "NAUTY_DREADNAUT",
    "nauty_available",
    "dreadnaut_available",
    "canon_g6",
    "dreadnaut_input",
    "aut_size_dreadnaut",
    "aut_size_g6",
]
