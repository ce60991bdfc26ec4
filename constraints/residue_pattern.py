"""Residue pattern gadget: column layout and gates.

Each input value occupies a block of L consecutive rows, one per index
i = 0 .. L-1. Row i carries:

    index        fixed    i
    value        advice   the input x, same on every row of the block
    is_residue   advice   1 if x + i is a square, else 0
    square_root  advice   root of x + i, or of nonresidue * (x + i)
    pattern      advice   running value 2 * pattern[i-1] + is_residue[i]

Gates (each expression must vanish):
    1. index * (value - value')                         no selector
    2. always * is_residue * (1 - is_residue)
    3. always * is_residue * (square_root^2 - (value + index))
    4. always * (1 - is_residue) * (square_root^2 - nonresidue * (value + index))
    5. index_nonzero * (pattern - 2 * pattern' - is_residue)

where ' denotes the previous row. Gate 1 relies on index being nonzero
exactly on the rows after a block's first. Gates 3 and 4 make is_residue
honest only if nonresidue really has no square root: nonresidue * (x + i) is
then a square exactly when x + i is not.
"""

from dataclasses import dataclass

import galois

from primitives.field import Field, field_of
from protocol.constraint_system import ConstraintSystem
from protocol.data import Column, Selector
from .base import ConstraintModule, ConstraintContext


@dataclass(frozen=True)
class ResiduePatternConfig(ConstraintModule):
    """Column/selector handles of a configured residue pattern gadget.

    Attributes:
        nonresidue: Quadratic nonresidue of the circuit's field (caller-guaranteed)
        always_enabled: Selector enabled on every assigned row
        index_is_nonzero: Selector enabled on every row but a block's first
        index: Fixed column, position within the block
        value, is_residue, pattern, square_root: Advice columns
    """
    nonresidue: galois.FieldArray
    always_enabled: Selector
    index_is_nonzero: Selector
    index: Column
    value: Column
    is_residue: Column
    pattern: Column
    square_root: Column

    @property
    def field(self) -> Field:
        """Field the gadget was configured over."""
        return field_of(self.nonresidue)

    @classmethod
    def configure(cls, cs: ConstraintSystem, nonresidue) -> 'ResiduePatternConfig':
        """Declare the gadget's columns on cs and register its five gates.

        Args:
            cs: Constraint system to configure
            nonresidue: Quadratic nonresidue of cs.field (field element or int).
                Not checked here; a residue is caught during assignment.

        Returns:
            ResiduePatternConfig holding the declared handles
        """
        if isinstance(nonresidue, int):
            nonresidue = cs.field(nonresidue)
        elif field_of(nonresidue) is not cs.field:
            raise TypeError("nonresidue must be an element of the constraint system's field")

        always_enabled = cs.selector("always_enabled")
        index_is_nonzero = cs.selector("index_is_nonzero")
        index = cs.fixed_column("index")
        value = cs.advice_column("value")
        is_residue = cs.advice_column("is_residue")
        pattern = cs.advice_column("pattern")
        square_root = cs.advice_column("square_root")

        def value_is_constant(ctx: ConstraintContext):
            i = ctx.const(index.name)
            return [i * (ctx.col(value.name) - ctx.prev_col(value.name))]

        def is_residue_is_binary(ctx: ConstraintContext):
            q = ctx.selector(always_enabled.name)
            r = ctx.col(is_residue.name)
            return [q * r * (ctx.field(1) - r)]

        def root_of_square(ctx: ConstraintContext):
            q = ctx.selector(always_enabled.name)
            r = ctx.col(is_residue.name)
            root = ctx.col(square_root.name)
            square = ctx.col(value.name) + ctx.const(index.name)
            return [q * r * (root ** 2 - square)]

        def root_of_nonresidue_multiple(ctx: ConstraintContext):
            q = ctx.selector(always_enabled.name)
            not_r = ctx.field(1) - ctx.col(is_residue.name)
            root = ctx.col(square_root.name)
            square = ctx.col(value.name) + ctx.const(index.name)
            return [q * not_r * (root ** 2 - nonresidue * square)]

        def pattern_accumulates(ctx: ConstraintContext):
            q = ctx.selector(index_is_nonzero.name)
            current = ctx.col(pattern.name)
            previous = ctx.prev_col(pattern.name)
            bit = ctx.col(is_residue.name)
            return [q * (current - ctx.field(2) * previous - bit)]

        cs.create_gate("value does not change if index is non-zero", value_is_constant)
        cs.create_gate("is_residue is binary", is_residue_is_binary)
        cs.create_gate("square_root^2 = value + index if is_residue", root_of_square)
        cs.create_gate(
            "square_root^2 = nonresidue * (value + index) if not is_residue",
            root_of_nonresidue_multiple,
        )
        cs.create_gate("current pattern = is_residue + 2 * previous pattern", pattern_accumulates)

        return cls(
            nonresidue=nonresidue,
            always_enabled=always_enabled,
            index_is_nonzero=index_is_nonzero,
            index=index,
            value=value,
            is_residue=is_residue,
            pattern=pattern,
            square_root=square_root,
        )
