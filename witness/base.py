"""Base class for witness assignment."""

from abc import ABC, abstractmethod
from typing import Sequence

from protocol.layouter import Layouter


class WitnessModule(ABC):
    """Per-gadget witness assignment. Used by the prover only.

    Each gadget has a witness module that computes the concrete cell values
    satisfying its constraint module's gates and writes them through a
    Layouter. Unlike the ConstraintModule, the witness module never needs to
    exist on the verifying side.
    """

    @abstractmethod
    def assign(self, layouter: Layouter, values: Sequence) -> list:
        """Assign one block of rows per input value.

        Args:
            layouter: Layouter placing the gadget's region
            values: Input values, assigned in order

        Returns:
            One result per input value, in input order
        """
        pass
