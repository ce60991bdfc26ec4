"""Constraint modules.

This module provides per-gadget column layouts and gates. Each gadget has its
own ConstraintModule whose configure() declares columns on a ConstraintSystem
and registers the gate functions relating them. Gate functions are written
against ConstraintContext, so the same code is evaluated over a whole table
or at a single row.
"""

from .base import (
    ConstraintContext,
    ConstraintModule,
    RowConstraintContext,
    TableConstraintContext,
)
from .residue_pattern import ResiduePatternConfig

# Registry mapping gadget names to constraint module classes
CONSTRAINT_REGISTRY: dict[str, type[ConstraintModule]] = {
    "ResiduePattern": ResiduePatternConfig,
}


def get_constraint_module(name: str) -> type[ConstraintModule]:
    """Get the constraint module class for a gadget.

    Args:
        name: Name of the gadget (e.g., 'ResiduePattern')

    Returns:
        ConstraintModule subclass; call its configure() on a ConstraintSystem

    Raises:
        KeyError: If no constraint module is registered for the gadget
    """
    if name in CONSTRAINT_REGISTRY:
        return CONSTRAINT_REGISTRY[name]
    raise KeyError(
        f"No constraint module for gadget '{name}'. "
        f"Available: {list(CONSTRAINT_REGISTRY.keys())}"
    )


__all__ = [
    "ConstraintContext",
    "TableConstraintContext",
    "RowConstraintContext",
    "ConstraintModule",
    "ResiduePatternConfig",
    "CONSTRAINT_REGISTRY",
    "get_constraint_module",
]
