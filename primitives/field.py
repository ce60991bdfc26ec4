"""BN254 scalar field GF(r).

Uses galois library for all field arithmetic. FF is the default field type for
circuits; any odd-order prime galois field can be used in its place, since
circuit code only relies on the operations below and recovers the field class
from its inputs.

Field interface relied on by circuit code:
    +, -, *, ** 2      field arithmetic
    F(n)               conversion from a small integer (F(0), F(1) are identities)
    sqrt(x)            a square root of x, or None when x is a nonresidue
"""

from typing import Optional, Type

import galois
import numpy as np

# --- Field Construction ---

BN254_SCALAR_PRIME = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001

# Multiplicative generator of GF(r)*; passing it skips galois' search, which
# would factor r - 1 at import time.
BN254_GENERATOR = 7

FF = galois.GF(BN254_SCALAR_PRIME, primitive_element=BN254_GENERATOR, verify=False)
"""Base field GF(r) - scalar field of the BN254 curve."""

Field = Type[galois.FieldArray]
"""Any galois prime field class (FF or another GF(p))."""


# --- Square Roots ---

def sqrt(x: galois.FieldArray) -> Optional[galois.FieldArray]:
    """Return a square root of scalar x, or None if x has no square root.

    Zero is a square (its root is zero).
    """
    if not x.is_square():
        return None
    if x == type(x)(0):
        return x
    # galois square roots go through the np.sqrt override, which needs an array
    return np.sqrt(np.atleast_1d(x))[0]


def is_nonresidue(x: galois.FieldArray) -> bool:
    """True iff scalar x has no square root in its field."""
    return not bool(x.is_square())


def field_of(x: galois.FieldArray) -> Field:
    """Return the galois field class a scalar or array belongs to."""
    field = type(x)
    if not issubclass(field, galois.FieldArray):
        raise TypeError(f"Expected a galois field element, got {field.__name__}")
    return field
