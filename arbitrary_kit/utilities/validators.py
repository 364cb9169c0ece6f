"""
Precondition checks.

Violations are caller bugs: they raise ContractViolationError and are never
recovered inside the library.
"""

from .constants import ContractViolationError


def validate_size(size: int, name: str = "size") -> None:
    """Validate that a size hint is a non-negative integer."""
    if not isinstance(size, int) or isinstance(size, bool):
        raise ContractViolationError(f"{name} must be an int, got {type(size).__name__}")
    if size < 0:
        raise ContractViolationError(f"{name} must be non-negative, got {size}")


def validate_range(lo, hi, name: str = "range") -> None:
    """Validate that an inclusive range is not empty."""
    if lo > hi:
        raise ContractViolationError(f"{name} is empty: {lo} > {hi}")


def validate_weights(weights: list[int]) -> None:
    """Validate frequency weights: non-negative with a positive total."""
    if not weights:
        raise ContractViolationError("frequency requires at least one alternative")
    for weight in weights:
        if weight < 0:
            raise ContractViolationError(f"frequency weights must be non-negative, got {weight}")
    if sum(weights) <= 0:
        raise ContractViolationError("frequency weights must have a positive total")


def validate_arity(arity: int, lowest: int, highest: int, name: str) -> None:
    """Validate that an arity is within the supported bounds."""
    if not lowest <= arity <= highest:
        raise ContractViolationError(
            f"{name} arity must be between {lowest} and {highest}, got {arity}"
        )
