"""Region-based assignment of cell values into an AssignmentTable.

Regions are placed one after another: each assign_region() call starts at the
first row after the previous region. Writes inside a region use offsets
relative to the region start and only reach the table once the region's
assignment function returns.
"""

import logging
from typing import Callable, List, Tuple, TypeVar, Union

import galois

from protocol.constraint_system import ConstraintSystem
from protocol.data import AssignmentTable, Column, ColumnKind, Selector

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Pending write: (target dict, name, absolute row, value)
_Write = Tuple[dict, str, int, Union[galois.FieldArray, bool]]


class CellAssignmentError(ValueError):
    """A cell write was rejected (handle not declared by this constraint system, or row out of range)."""


class Region:
    """A contiguous block of rows being assigned.

    Attributes:
        name: Region name, used in error messages
        start: Absolute row of offset 0
    """

    def __init__(self, name: str, start: int, cs: ConstraintSystem, table: AssignmentTable):
        self.name = name
        self.start = start
        self._cs = cs
        self._table = table
        self._writes: List[_Write] = []
        self.n_rows = 0

    def _row(self, offset: int, what: str) -> int:
        row = self.start + offset
        if offset < 0 or row >= self._table.n_rows:
            raise CellAssignmentError(
                f"Region '{self.name}': {what} at offset {offset} (row {row}) "
                f"outside table of {self._table.n_rows} rows"
            )
        self.n_rows = max(self.n_rows, offset + 1)
        return row

    def _check_column(self, column: Column, kind: ColumnKind) -> None:
        declared = self._cs.fixed_columns if kind is ColumnKind.FIXED else self._cs.advice_columns
        if column.kind is not kind or not any(c is column for c in declared):
            raise CellAssignmentError(
                f"Region '{self.name}': {column.name!r} is not a declared {kind.value} column"
            )

    def assign_advice(self, column: Column, offset: int, value) -> None:
        """Write a witness value into an advice column."""
        self._check_column(column, ColumnKind.ADVICE)
        row = self._row(offset, f"advice '{column.name}'")
        self._writes.append((self._table.advice, column.name, row, self._table.field(value)))

    def assign_fixed(self, column: Column, offset: int, value) -> None:
        """Write a circuit-defined value into a fixed column."""
        self._check_column(column, ColumnKind.FIXED)
        row = self._row(offset, f"fixed '{column.name}'")
        self._writes.append((self._table.fixed, column.name, row, self._table.field(value)))

    def enable_selector(self, selector: Selector, offset: int) -> None:
        """Enable a selector at one row of this region."""
        if not any(s is selector for s in self._cs.selectors):
            raise CellAssignmentError(
                f"Region '{self.name}': {selector.name!r} is not a declared selector"
            )
        row = self._row(offset, f"selector '{selector.name}'")
        self._writes.append((self._table.selectors, selector.name, row, True))

    def _commit(self) -> None:
        for target, name, row, value in self._writes:
            target[name][row] = value
        self._writes.clear()


class Layouter:
    """Places regions consecutively in a table.

    Attributes:
        next_row: First row not yet claimed by any region
    """

    def __init__(self, cs: ConstraintSystem, table: AssignmentTable):
        self._cs = cs
        self._table = table
        self.next_row = 0

    def assign_region(self, name: str, assignment: Callable[[Region], T]) -> T:
        """Run assignment on a fresh region and commit its writes.

        Args:
            name: Region name
            assignment: Function filling the region; its return value is passed through

        Returns:
            Whatever assignment returned

        Raises:
            CellAssignmentError: If any write was rejected; nothing is committed
        """
        region = Region(name, self.next_row, self._cs, self._table)
        result = assignment(region)
        region._commit()
        logger.debug("region %r: rows %d..%d", name, region.start, region.start + region.n_rows - 1)
        self.next_row += region.n_rows
        return result
