"""Protocol - constraint system, witness table and satisfiability checking."""

from protocol.circuit import Circuit
from protocol.constraint_system import ConstraintSystem, Gate
from protocol.data import AssignmentTable, Column, ColumnKind, Selector
from protocol.layouter import CellAssignmentError, Layouter, Region
from protocol.mock_prover import MockProver, VerifyFailure

__all__ = [
    "AssignmentTable",
    "CellAssignmentError",
    "Circuit",
    "Column",
    "ColumnKind",
    "ConstraintSystem",
    "Gate",
    "Layouter",
    "MockProver",
    "Region",
    "Selector",
    "VerifyFailure",
]
