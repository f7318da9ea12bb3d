"""Domain-layer error definitions."""

from typing import Any

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       Sequence related errors
# ============================================================================


class SequenceIndexError(DomainError, IndexError):
    """Raised when an index falls outside the valid range for an operation."""

    def __init__(self, operation: str, index: int, size: int) -> None:
        super().__init__(
            f"{operation}: index {index} out of range for sequence of size {size}."
        )
        self.operation = operation
        self.index = index
        self.size = size


class EmptySequenceError(DomainError, ValueError):
    """Raised when an operation requires at least one element."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation}() arg is an empty sequence.")
        self.operation = operation


# ============================================================================
#                       Coercion related errors
# ============================================================================


class CoercionError(DomainError, ValueError):
    """Raised by the strict coercion policy when a value cannot be converted."""

    def __init__(self, value: Any, target: str) -> None:
        super().__init__(f"Cannot coerce {value!r} to {target}.")
        self.value = value
        self.target = target


class UnknownCoercionPolicyError(DomainError, ValueError):
    """Raised when a coercion policy name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown coercion policy: {name!r}.")
        self.name = name
