"""Data structures for circuit declaration and witness storage.

Architecture Overview:
    A circuit is described in two layers:

    1. ConstraintSystem (protocol/constraint_system.py)
       - Column/selector declarations and registered gates
       - Built once by configure(), immutable afterwards

    2. AssignmentTable (this module)
       - Dict-based storage with named columns, one array per column
       - Filled by the layouter during synthesize(), read by gate functions
         through a ConstraintContext

Usage:
    table = AssignmentTable.empty(cs, n_rows=1 << k)
    ctx = TableConstraintContext(table)
    for gate in cs.gates:
        constraints = gate.evaluate(ctx)
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import TYPE_CHECKING

import galois
import numpy as np

from primitives.field import Field

if TYPE_CHECKING:
    from protocol.constraint_system import ConstraintSystem


class ColumnKind(Enum):
    """Who provides a column's values."""
    FIXED = "fixed"    # circuit-defined, not chosen by the prover
    ADVICE = "advice"  # witness supplied by the prover


@dataclass(frozen=True)
class Column:
    """Handle to a declared fixed or advice column."""
    kind: ColumnKind
    name: str


@dataclass(frozen=True)
class Selector:
    """Handle to a declared selector (per-row boolean gating condition)."""
    name: str


@dataclass
class AssignmentTable:
    """Cell values of every declared column over n_rows rows.

    Attributes:
        field: Field class of all cell values
        n_rows: Number of rows (2^k)
        fixed: Fixed columns keyed by name
        advice: Advice columns keyed by name
        selectors: Selector columns keyed by name (numpy bool arrays)

    Cells that are never assigned hold zero; selectors default to disabled.
    """
    field: Field
    n_rows: int
    fixed: dict[str, galois.FieldArray] = dataclass_field(default_factory=dict)
    advice: dict[str, galois.FieldArray] = dataclass_field(default_factory=dict)
    selectors: dict[str, np.ndarray] = dataclass_field(default_factory=dict)

    @classmethod
    def empty(cls, cs: 'ConstraintSystem', n_rows: int) -> 'AssignmentTable':
        """Allocate a zeroed table for every column and selector of cs."""
        if n_rows < 1:
            raise ValueError(f"Table needs at least one row, got {n_rows}")
        F = cs.field
        return cls(
            field=F,
            n_rows=n_rows,
            fixed={c.name: F.Zeros(n_rows) for c in cs.fixed_columns},
            advice={c.name: F.Zeros(n_rows) for c in cs.advice_columns},
            selectors={s.name: np.zeros(n_rows, dtype=bool) for s in cs.selectors},
        )

    def column(self, column: Column) -> galois.FieldArray:
        """Return the value array backing a column handle."""
        columns = self.fixed if column.kind is ColumnKind.FIXED else self.advice
        return columns[column.name]
