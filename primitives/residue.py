"""Reference residue pattern, computed without any circuit.

The pattern of x over a window of length L records, most-significant bit
first, whether x + i is a quadratic residue for i = 0 .. L-1:

    pattern = 0
    for i in range(L):
        pattern = 2 * pattern + (1 if x + i is a square else 0)

This is the oracle the constrained assignment in witness/residue_pattern.py
is checked against.
"""

import galois

from primitives.field import field_of


def residue_pattern(x: galois.FieldArray, length: int) -> int:
    """Compute the L-bit residue pattern of field element x.

    Args:
        x: Scalar field element (any galois prime field)
        length: Window length L; the result has at most L bits

    Returns:
        Pattern as an unsigned integer, bit for x + 0 most significant
    """
    field = field_of(x)
    pattern = 0
    for i in range(length):
        bit = 1 if (x + field(i)).is_square() else 0
        pattern = 2 * pattern + bit
    return pattern
