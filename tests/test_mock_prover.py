"""Tests for MockProver gate checking on a small copy-forward circuit."""

import pytest

from primitives.field import FF
from protocol.circuit import Circuit
from protocol.layouter import CellAssignmentError
from protocol.mock_prover import MockProver, VerifyFailure


class CopyCircuit(Circuit):
    """Each enabled row repeats the previous row's value."""

    def __init__(self, values):
        self.values = values

    @classmethod
    def configure(cls, cs):
        a = cs.advice_column('a')
        q = cs.selector('q')
        cs.create_gate('a = prev a', lambda ctx: [ctx.selector('q') * (ctx.col('a') - ctx.prev_col('a'))])
        return a, q

    def synthesize(self, config, layouter):
        a, q = config

        def assignment(region):
            for offset, value in enumerate(self.values):
                region.assign_advice(a, offset, value)
                if offset > 0:
                    region.enable_selector(q, offset)

        layouter.assign_region('copy', assignment)


def test_circuit_is_abstract() -> None:
    with pytest.raises(TypeError):
        Circuit()


class TestMockProver:
    """verify() reports every nonzero constraint value."""

    def test_satisfied(self) -> None:
        prover = MockProver.run(3, CopyCircuit([4, 4, 4, 4]))
        assert prover.table.n_rows == 8
        assert prover.verify() == []

    def test_unsatisfied(self) -> None:
        prover = MockProver.run(3, CopyCircuit([4, 4, 5, 5]))
        assert prover.verify() == [VerifyFailure('a = prev a', 0, 2)]

    def test_failure_message(self) -> None:
        failure = VerifyFailure('a = prev a', 0, 2)
        assert 'row 2' in str(failure)

    def test_unselected_rows_unconstrained(self) -> None:
        """Row 0's selector is off, so its wraparound predecessor is irrelevant."""
        prover = MockProver.run(2, CopyCircuit([7, 7]))
        assert prover.verify() == []

    def test_evaluate_row(self) -> None:
        prover = MockProver.run(3, CopyCircuit([4, 4, 5, 5]))
        gate = prover.cs.gates[0]
        assert prover.evaluate_row(gate, 1) == [FF(0)]
        assert prover.evaluate_row(gate, 2) == [FF(1)]

    def test_tampering_detected(self) -> None:
        prover = MockProver.run(3, CopyCircuit([4, 4, 4, 4]))
        prover.table.advice['a'][1] = FF(9)
        rows = sorted(f.row for f in prover.verify())
        assert rows == [1, 2]

    def test_table_too_small(self) -> None:
        """Rejected writes propagate out of run()."""
        with pytest.raises(CellAssignmentError):
            MockProver.run(1, CopyCircuit([1, 1, 1]))
