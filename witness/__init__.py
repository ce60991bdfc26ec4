"""Witness modules.

This module provides per-gadget witness assignment. Each gadget has its own
WitnessModule that computes concrete cell values satisfying the gates of the
matching constraint module and writes them through a Layouter.
"""

from .base import WitnessModule
from .residue_pattern import (
    DEFAULT_LENGTH,
    DEFAULT_NONRESIDUE,
    ResiduePatternChip,
    ResiduePatternCircuit,
)

# Registry mapping gadget names to witness module classes
WITNESS_REGISTRY: dict[str, type[WitnessModule]] = {
    'ResiduePattern': ResiduePatternChip,
}


def get_witness_module(name: str) -> type[WitnessModule]:
    """Get the witness module class for a gadget.

    Args:
        name: Name of the gadget (e.g., 'ResiduePattern')

    Returns:
        WitnessModule subclass; construct it from the gadget's config

    Raises:
        KeyError: If no witness module is registered for the gadget
    """
    if name in WITNESS_REGISTRY:
        return WITNESS_REGISTRY[name]
    raise KeyError(f"No witness module for gadget '{name}'. "
                   f"Available: {list(WITNESS_REGISTRY.keys())}")


__all__ = [
    'WitnessModule',
    'ResiduePatternChip',
    'ResiduePatternCircuit',
    'DEFAULT_LENGTH',
    'DEFAULT_NONRESIDUE',
    'WITNESS_REGISTRY',
    'get_witness_module',
]
