"""Tests for field construction and square-root helpers."""

import galois
import pytest

from primitives.field import BN254_SCALAR_PRIME, FF, field_of, is_nonresidue, sqrt
from tests.vectors import NONRESIDUE


class TestFieldConstruction:
    """The default field is the BN254 scalar field."""

    def test_order(self) -> None:
        """FF has the BN254 scalar field order."""
        assert FF.order == BN254_SCALAR_PRIME

    def test_wraps_modulus(self) -> None:
        """Arithmetic reduces modulo r."""
        assert FF(BN254_SCALAR_PRIME - 1) + FF(1) == FF(0)

    def test_field_of_scalar(self) -> None:
        """field_of recovers the field class of an element."""
        assert field_of(FF(5)) is FF

    def test_field_of_rejects_int(self) -> None:
        """Plain integers are not field elements."""
        with pytest.raises(TypeError):
            field_of(5)


class TestSqrt:
    """sqrt returns a root or None."""

    def test_square_has_root(self) -> None:
        """A square's root squares back to it."""
        x = FF(123456789) ** 2
        root = sqrt(x)
        assert root is not None
        assert root ** 2 == x

    def test_zero_is_square(self) -> None:
        """Zero has root zero."""
        assert sqrt(FF(0)) == FF(0)

    def test_one_is_square(self) -> None:
        """One has a root."""
        root = sqrt(FF(1))
        assert root is not None
        assert root ** 2 == FF(1)

    def test_nonresidue_has_no_root(self) -> None:
        """The circuit's nonresidue has no square root."""
        assert sqrt(FF(NONRESIDUE)) is None
        assert is_nonresidue(FF(NONRESIDUE))

    def test_nonresidue_products_are_squares(self) -> None:
        """Nonresidue times nonresidue is a residue."""
        nr = FF(NONRESIDUE)
        other = next(FF(n) for n in range(2, 100) if is_nonresidue(FF(n)))
        assert not is_nonresidue(nr * other)

    def test_root_is_scalar(self) -> None:
        """A root of a scalar is a scalar element of the same field."""
        root = sqrt(FF(4))
        assert type(root) is FF
        assert root.ndim == 0
        assert root ** 2 == FF(4)

    def test_large_square(self) -> None:
        """Roots exist for squares spanning the full field width."""
        x = FF(BN254_SCALAR_PRIME - 1) ** 2
        root = sqrt(x)
        assert root is not None
        assert root ** 2 == x

    def test_small_prime_field(self) -> None:
        """The helpers work for any odd prime field."""
        GF13 = galois.GF(13)
        squares = {int(x) ** 2 % 13 for x in range(13)}
        for n in range(13):
            root = sqrt(GF13(n))
            if n in squares:
                assert root is not None and root ** 2 == GF13(n)
            else:
                assert root is None
