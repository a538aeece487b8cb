"""Domain exception hierarchy for Expense Ledger.

All domain-specific exceptions inherit from ExpenseLedgerError.
This allows catching all application errors with a single base class
while preserving specificity for individual error types.
"""

from typing import Any


class ExpenseLedgerError(Exception):
    """Base exception for all Expense Ledger errors.

    Includes an error_code for callers that translate failures into
    user-facing messages, plus extra context.
    """

    error_code: str = "EXL_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dictionary."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(ExpenseLedgerError):
    """Raised for malformed or missing required input."""

    error_code = "VALIDATION_ERROR"


class EmptyNameError(ValidationError):
    """Raised when an entity name is empty or whitespace-only."""

    error_code = "EMPTY_NAME"

    def __init__(self) -> None:
        super().__init__("Entity name must not be empty")


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is negative or not a number."""

    error_code = "INVALID_AMOUNT"

    def __init__(self, amount: Any, reason: str) -> None:
        super().__init__(
            f"Invalid amount '{amount}': {reason}",
            context={"amount": str(amount), "reason": reason},
        )


class InvalidStatusError(ValidationError):
    """Raised when an invoice status is outside the fixed status set."""

    error_code = "INVALID_STATUS"

    def __init__(self, status: str) -> None:
        super().__init__(
            f"Invalid invoice status: {status}",
            context={"status": status},
        )


# =============================================================================
# Lookup Errors
# =============================================================================


class NotFoundError(ExpenseLedgerError):
    """Raised when an operation references a nonexistent record."""

    error_code = "NOT_FOUND"


class EntityNotFoundError(NotFoundError):
    """Raised when an entity cannot be found."""

    error_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_id: int | str) -> None:
        super().__init__(
            f"Entity not found: {entity_id}",
            context={"entity_id": entity_id},
        )


# =============================================================================
# Precondition Errors
# =============================================================================


class PreconditionViolationError(ExpenseLedgerError):
    """Raised when an operation is disallowed given the current state."""

    error_code = "PRECONDITION_VIOLATION"


class EntityHasExpensesError(PreconditionViolationError):
    """Raised when deleting an entity that still carries expenses."""

    error_code = "ENTITY_HAS_EXPENSES"

    def __init__(self, entity_id: int, total_expenses: str) -> None:
        super().__init__(
            "entity has existing expenses",
            context={"entity_id": entity_id, "total_expenses": total_expenses},
        )


# =============================================================================
# Aggregation Input Errors
# =============================================================================


class InvalidInputError(ExpenseLedgerError):
    """Raised when aggregation receives data of the wrong shape."""

    error_code = "INVALID_INPUT"


class EmptySeriesError(InvalidInputError):
    """Raised when a series is shorter than an operation requires."""

    error_code = "EMPTY_SERIES"

    def __init__(self, operation: str, required: int, actual: int) -> None:
        super().__init__(
            f"{operation} requires at least {required} point(s), got {actual}",
            context={"operation": operation, "required": required, "actual": actual},
        )


class SeriesLengthError(InvalidInputError):
    """Raised when a series does not have the exact expected length."""

    error_code = "SERIES_LENGTH"

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Expected a series of exactly {expected} points, got {actual}",
            context={"expected": expected, "actual": actual},
        )


# =============================================================================
# Snapshot Errors
# =============================================================================


class SnapshotError(ExpenseLedgerError):
    """Raised when a snapshot document cannot be read or parsed."""

    error_code = "SNAPSHOT_ERROR"
