"""Residue pattern gadget: witness assignment.

For every input value x a block of L rows is written, row i holding
index = i, value = x, is_residue = [x + i is a square], a matching
square_root, and the running pattern. See constraints/residue_pattern.py for
the gates these rows satisfy.
"""

import logging
from typing import List, Sequence

from constraints.residue_pattern import ResiduePatternConfig
from primitives.field import Field, sqrt
from protocol.circuit import Circuit
from protocol.constraint_system import ConstraintSystem
from protocol.layouter import Layouter, Region
from .base import WitnessModule

logger = logging.getLogger(__name__)

# Nonresidue of the BN254 scalar field used by ResiduePatternCircuit
DEFAULT_NONRESIDUE = 11

DEFAULT_LENGTH = 64


class ResiduePatternChip(WitnessModule):
    """Assigns residue pattern blocks for a configured gadget.

    Attributes:
        config: Column/selector handles and nonresidue from configure()
        length: Window length L, rows per input value
    """

    def __init__(self, config: ResiduePatternConfig, length: int = DEFAULT_LENGTH):
        field = config.field
        if length < 1:
            raise ValueError(f"Window length must be positive, got {length}")
        # Every pattern value must be a canonical field element
        if 1 << length > field.order:
            raise ValueError(f"Window length {length} too large for a field of order {field.order}")
        self.config = config
        self.length = length

    def assign(self, layouter: Layouter, values: Sequence) -> List[int]:
        """Assign one block per value in a single region.

        Args:
            layouter: Layouter placing the region
            values: Field elements (or ints) to compute patterns for

        Returns:
            Pattern of each value, in input order

        Raises:
            CellAssignmentError: If the table cannot hold every block
        """
        def assignment(region: Region) -> List[int]:
            patterns = []
            offset = 0
            for value in values:
                patterns.append(self._assign_value(region, offset, value))
                offset += self.length
            return patterns

        patterns = layouter.assign_region("residue_pattern", assignment)
        logger.debug("assigned %d residue pattern block(s) of %d rows", len(patterns), self.length)
        return patterns

    def _assign_value(self, region: Region, offset: int, value) -> int:
        config = self.config
        F = config.field
        value = F(value)
        pattern = 0
        for i in range(self.length):
            row = offset + i
            region.enable_selector(config.always_enabled, row)
            if i != 0:
                region.enable_selector(config.index_is_nonzero, row)

            index = F(i)
            region.assign_fixed(config.index, row, index)
            region.assign_advice(config.value, row, value)

            candidate = value + index
            square_root = sqrt(candidate)
            is_residue = square_root is not None
            if not is_residue:
                square_root = sqrt(config.nonresidue * candidate)
                assert square_root is not None, (
                    f"nonresidue {int(config.nonresidue)} has a square root; "
                    f"it must be a quadratic nonresidue"
                )

            pattern = 2 * pattern + int(is_residue)
            region.assign_advice(config.is_residue, row, F(int(is_residue)))
            region.assign_advice(config.pattern, row, F(pattern))
            region.assign_advice(config.square_root, row, square_root)
        return pattern


class ResiduePatternCircuit(Circuit):
    """Circuit computing the residue patterns of a batch of values.

    After synthesis, patterns holds the pattern of each value in input order.
    """

    def __init__(self, values: Sequence, length: int = DEFAULT_LENGTH):
        self.values = list(values)
        self.length = length
        self.patterns: List[int] = []

    @staticmethod
    def nonresidue(field: Field):
        """Quadratic nonresidue used by this circuit (valid for the BN254 scalar field)."""
        return field(DEFAULT_NONRESIDUE)

    @classmethod
    def configure(cls, cs: ConstraintSystem) -> ResiduePatternConfig:
        return ResiduePatternConfig.configure(cs, cls.nonresidue(cs.field))

    def synthesize(self, config: ResiduePatternConfig, layouter: Layouter) -> None:
        chip = ResiduePatternChip(config, self.length)
        self.patterns = chip.assign(layouter, self.values)
