"""Gate satisfiability check over a fully assigned table.

MockProver stands in for proof generation: instead of committing to the table
it evaluates every gate on every row directly and reports each nonzero
constraint value. A table that passes verify() is one a real prover could
produce a valid proof for.

Usage:
    prover = MockProver.run(k=10, circuit=circuit)
    assert prover.verify() == []
"""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from constraints.base import RowConstraintContext, TableConstraintContext
from primitives.field import FF, Field
from protocol.circuit import Circuit
from protocol.constraint_system import ConstraintSystem, Gate
from protocol.data import AssignmentTable
from protocol.layouter import Layouter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerifyFailure:
    """One constraint expression of one gate that is nonzero at one row."""
    gate: str
    constraint: int
    row: int

    def __str__(self) -> str:
        return f"gate '{self.gate}' constraint {self.constraint} not satisfied at row {self.row}"


class MockProver:
    """Configured constraint system plus the table synthesized for one circuit.

    Attributes:
        k: log2 of the table height
        cs: Constraint system built by the circuit's configure()
        table: Assignment table filled by the circuit's synthesize()
    """

    def __init__(self, k: int, cs: ConstraintSystem, table: AssignmentTable):
        self.k = k
        self.cs = cs
        self.table = table

    @classmethod
    def run(cls, k: int, circuit: Circuit, field: Field = FF) -> 'MockProver':
        """Configure and synthesize circuit into a 2^k row table.

        Raises:
            CellAssignmentError: Propagated from synthesize() if a write is rejected
        """
        cs = ConstraintSystem(field)
        config = circuit.configure(cs)
        table = AssignmentTable.empty(cs, n_rows=1 << k)
        circuit.synthesize(config, Layouter(cs, table))
        return cls(k, cs, table)

    def verify(self) -> List[VerifyFailure]:
        """Evaluate every gate on every row.

        Returns:
            All failures ordered by gate, constraint and row; empty if satisfied
        """
        ctx = TableConstraintContext(self.table)
        failures = []
        for gate in self.cs.gates:
            for i, values in enumerate(gate.evaluate(ctx)):
                for row in np.flatnonzero(np.asarray(values) != 0):
                    failures.append(VerifyFailure(gate.name, i, int(row)))
        logger.debug(
            "verified %d gate(s) over %d rows: %d failure(s)",
            len(self.cs.gates), self.table.n_rows, len(failures),
        )
        return failures

    def evaluate_row(self, gate: Gate, row: int) -> list:
        """Return the constraint values of one gate at one row (all zero when satisfied)."""
        return gate.evaluate(RowConstraintContext(self.table, row))
