from decimal import Decimal, InvalidOperation
from enum import Enum

from expense_ledger.exceptions import InvalidAmountError, InvalidStatusError

MONTH_LABELS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

QUARTER_LABELS: tuple[str, ...] = ("Q1", "Q2", "Q3", "Q4")

ZERO = Decimal("0")


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PROCESSED = "processed"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def parse(cls, value: "InvoiceStatus | str") -> "InvoiceStatus":
        if isinstance(value, InvoiceStatus):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidStatusError(str(value)) from None


class TrendPeriod(str, Enum):
    MONTH = "month"
    YEAR = "year"


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Coerce a caller-supplied amount to a non-negative Decimal."""
    if isinstance(value, bool):
        raise InvalidAmountError(value, "not a number")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise InvalidAmountError(value, "not a number") from None
    if not amount.is_finite():
        raise InvalidAmountError(value, "not a finite number")
    if amount < ZERO:
        raise InvalidAmountError(value, "must not be negative")
    return amount


__all__ = [
    "InvoiceStatus",
    "MONTH_LABELS",
    "QUARTER_LABELS",
    "TrendPeriod",
    "ZERO",
    "to_amount",
]
