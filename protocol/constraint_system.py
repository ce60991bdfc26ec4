"""Column, selector and gate declarations of a circuit.

A ConstraintSystem is filled once by a circuit's configure() and is read-only
afterwards. Gates are plain Python callables over a ConstraintContext that
return the list of expressions required to vanish on every row.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List

from primitives.field import FF, Field
from protocol.data import AssignmentTable, Column, ColumnKind, Selector

if TYPE_CHECKING:
    from constraints.base import ConstraintContext

logger = logging.getLogger(__name__)

# Gate function: ctx -> [expr, ...], each expr must evaluate to zero
GateFn = Callable[['ConstraintContext'], list]


@dataclass(frozen=True)
class Gate:
    """A named group of constraint expressions."""
    name: str
    fn: GateFn

    def evaluate(self, ctx: 'ConstraintContext') -> list:
        """Evaluate every constraint expression of this gate in ctx."""
        return list(self.fn(ctx))


class ConstraintSystem:
    """Declarations of one circuit over a fixed field.

    Attributes:
        field: Field class of every cell
        fixed_columns: Declared fixed columns, in declaration order
        advice_columns: Declared advice columns, in declaration order
        selectors: Declared selectors, in declaration order
        gates: Registered gates, in registration order
    """

    def __init__(self, field: Field = FF):
        self.field = field
        self.fixed_columns: List[Column] = []
        self.advice_columns: List[Column] = []
        self.selectors: List[Selector] = []
        self.gates: List[Gate] = []
        self._names: set = set()

    def _claim(self, name: str) -> None:
        if not name:
            raise ValueError("Column and selector names must be non-empty")
        if name in self._names:
            raise ValueError(f"Duplicate column or selector name '{name}'")
        self._names.add(name)

    def fixed_column(self, name: str) -> Column:
        """Declare a fixed column (values set by the circuit, not the prover)."""
        self._claim(name)
        column = Column(ColumnKind.FIXED, name)
        self.fixed_columns.append(column)
        return column

    def advice_column(self, name: str) -> Column:
        """Declare an advice (witness) column."""
        self._claim(name)
        column = Column(ColumnKind.ADVICE, name)
        self.advice_columns.append(column)
        return column

    def selector(self, name: str) -> Selector:
        """Declare a selector, enabled per row during assignment."""
        self._claim(name)
        selector = Selector(name)
        self.selectors.append(selector)
        return selector

    def create_gate(self, name: str, fn: GateFn) -> Gate:
        """Register a gate.

        The gate is evaluated once on a one-row zero table so that queries of
        undeclared columns fail here rather than during verification.

        Args:
            name: Human-readable gate name, reported on failures
            fn: Gate function returning the expressions that must vanish

        Returns:
            The registered Gate

        Raises:
            KeyError: If fn queries an undeclared column or selector
            ValueError: If fn returns no constraint expressions
        """
        # Local import: constraints.base depends on protocol.data
        from constraints.base import RowConstraintContext

        gate = Gate(name, fn)
        probe = AssignmentTable.empty(self, n_rows=1)
        constraints = gate.evaluate(RowConstraintContext(probe, row=0))
        if not constraints:
            raise ValueError(f"Gate '{name}' has no constraints")
        self.gates.append(gate)
        logger.debug("registered gate %r with %d constraint(s)", name, len(constraints))
        return gate

