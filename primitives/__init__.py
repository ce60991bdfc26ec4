"""Primitives - field arithmetic and circuit-free reference computations."""

from primitives.field import (
    BN254_SCALAR_PRIME,
    FF,
    Field,
    field_of,
    is_nonresidue,
    sqrt,
)
from primitives.residue import residue_pattern

__all__ = [
    # Field
    "BN254_SCALAR_PRIME",
    "FF",
    "Field",
    "field_of",
    "is_nonresidue",
    "sqrt",
    # Reference
    "residue_pattern",
]
