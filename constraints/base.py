"""Base classes for gate evaluation.

ConstraintContext provides a uniform interface for gate evaluation that works
over the whole assignment table (returns arrays) and at a single row (returns
scalars). The same gate code is used in both contexts thanks to galois
broadcasting.

Example:
    def gate(ctx: ConstraintContext):
        a = ctx.col('a')
        b = ctx.prev_col('b')
        return [ctx.selector('q') * (a - b)]

    # Every row at once (arrays)
    table_result = gate(TableConstraintContext(table))

    # One row (scalars)
    row_result = gate(RowConstraintContext(table, row=5))
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Union

import galois
import numpy as np

from primitives.field import Field

if TYPE_CHECKING:
    from protocol.data import AssignmentTable

# Type aliases for clarity
FFPoly = galois.FieldArray  # Array of field elements, one per row
FFScalar = galois.FieldArray  # 0-d field element


class ConstraintContext(ABC):
    """Uniform interface for gate evaluation - works over a table or a row."""

    @property
    @abstractmethod
    def field(self) -> Field:
        """Field class of all values returned by this context."""
        pass

    @abstractmethod
    def col(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get advice column at current row.

        Args:
            name: Column name

        Returns:
            Table: array of values at all rows
            Row: scalar value at the evaluated row
        """
        pass

    @abstractmethod
    def next_col(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get advice column at next row (offset +1, circular)."""
        pass

    @abstractmethod
    def prev_col(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get advice column at previous row (offset -1, circular)."""
        pass

    @abstractmethod
    def const(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get fixed column at current row.

        Args:
            name: Fixed column name (e.g., 'index')

        Returns:
            Table: array of fixed values
            Row: scalar fixed value at the evaluated row
        """
        pass

    @abstractmethod
    def next_const(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get fixed column at next row (offset +1, circular)."""
        pass

    @abstractmethod
    def prev_const(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get fixed column at previous row (offset -1, circular)."""
        pass

    @abstractmethod
    def selector(self, name: str) -> Union[FFPoly, FFScalar]:
        """Get selector at current row as a field element (1 enabled, 0 disabled)."""
        pass


class TableConstraintContext(ConstraintContext):
    """Whole-table implementation - returns per-row arrays.

    Gates are evaluated at all rows simultaneously, producing one array of
    constraint values per constraint expression.
    """

    def __init__(self, table: 'AssignmentTable'):
        self._table = table

    @property
    def field(self) -> Field:
        return self._table.field

    def col(self, name: str) -> FFPoly:
        return self._table.advice[name]

    def next_col(self, name: str) -> FFPoly:
        return np.roll(self.col(name), -1)

    def prev_col(self, name: str) -> FFPoly:
        return np.roll(self.col(name), 1)

    def const(self, name: str) -> FFPoly:
        return self._table.fixed[name]

    def next_const(self, name: str) -> FFPoly:
        return np.roll(self.const(name), -1)

    def prev_const(self, name: str) -> FFPoly:
        return np.roll(self.const(name), 1)

    def selector(self, name: str) -> FFPoly:
        enabled = self._table.selectors[name]
        return self.field([1 if e else 0 for e in enabled])


class RowConstraintContext(ConstraintContext):
    """Single-row implementation - returns scalars.

    Used to inspect the constraint values of one row, e.g. when reporting
    which cells a failing gate looked at.
    """

    def __init__(self, table: 'AssignmentTable', row: int):
        if not 0 <= row < table.n_rows:
            raise IndexError(f"Row {row} outside table of {table.n_rows} rows")
        self._table = table
        self._row = row

    @property
    def field(self) -> Field:
        return self._table.field

    def _at(self, values: FFPoly, rotation: int) -> FFScalar:
        return values[(self._row + rotation) % self._table.n_rows]

    def col(self, name: str) -> FFScalar:
        return self._at(self._table.advice[name], 0)

    def next_col(self, name: str) -> FFScalar:
        return self._at(self._table.advice[name], 1)

    def prev_col(self, name: str) -> FFScalar:
        return self._at(self._table.advice[name], -1)

    def const(self, name: str) -> FFScalar:
        return self._at(self._table.fixed[name], 0)

    def next_const(self, name: str) -> FFScalar:
        return self._at(self._table.fixed[name], 1)

    def prev_const(self, name: str) -> FFScalar:
        return self._at(self._table.fixed[name], -1)

    def selector(self, name: str) -> FFScalar:
        return self.field(1 if self._table.selectors[name][self._row] else 0)


class ConstraintModule(ABC):
    """Per-gadget column layout and gates.

    Each gadget has its own constraint module that declares its columns and
    selectors on a ConstraintSystem and registers the gates relating them.
    The returned instance holds the handles the gadget's witness module
    writes through.
    """

    @classmethod
    @abstractmethod
    def configure(cls, cs, *args) -> 'ConstraintModule':
        """Declare columns/selectors and register gates on cs.

        Args:
            cs: ConstraintSystem being configured
            *args: Gadget-specific circuit parameters

        Returns:
            Configured instance holding the column and selector handles
        """
        pass
