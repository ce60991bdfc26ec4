"""Base class for circuits run by the MockProver."""

from abc import ABC, abstractmethod

from protocol.constraint_system import ConstraintSystem
from protocol.layouter import Layouter


class Circuit(ABC):
    """A circuit: a column/gate layout plus the witnesses filling it.

    configure() depends only on the circuit type, never on witness data, so
    the same ConstraintSystem serves every instance. synthesize() writes one
    instance's witnesses through the layouter.
    """

    @classmethod
    @abstractmethod
    def configure(cls, cs: ConstraintSystem):
        """Declare columns and gates; return the config passed to synthesize()."""
        pass

    @abstractmethod
    def synthesize(self, config, layouter: Layouter) -> None:
        """Assign this instance's witnesses."""
        pass
