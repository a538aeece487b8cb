from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from expense_ledger.domain.value_objects import MONTH_LABELS, to_amount
from expense_ledger.exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class TimeSeriesPoint:
    label: str
    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_amount(self.amount))


@dataclass(frozen=True, slots=True)
class CategoryTotal:
    name: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True, slots=True)
class EntityShare:
    entity_id: int
    name: str
    color: str
    total_expenses: Decimal
    percentage: Decimal


def monthly_points(amounts: Sequence[Decimal | int | float | str]) -> list[TimeSeriesPoint]:
    """Label a sequence of amounts Jan, Feb, ... in order.

    At most twelve amounts are accepted; shorter sequences yield a partial
    year so callers can still compute deltas on year-to-date data.
    """
    if len(amounts) > len(MONTH_LABELS):
        raise InvalidInputError(
            f"A monthly series holds at most {len(MONTH_LABELS)} points, got {len(amounts)}",
            context={"actual": len(amounts)},
        )
    return [TimeSeriesPoint(label, amount) for label, amount in zip(MONTH_LABELS, amounts)]
