"""Pure aggregation functions over entities, invoices and time series.

None of these functions mutate their inputs or touch registry state; the
same arguments always produce the same result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal

from expense_ledger.config import get_settings
from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import CategoryTotal, EntityShare, TimeSeriesPoint
from expense_ledger.domain.value_objects import (
    MONTH_LABELS,
    QUARTER_LABELS,
    ZERO,
    InvoiceStatus,
)
from expense_ledger.exceptions import EmptySeriesError, SeriesLengthError

HUNDRED = Decimal("100")
MONTHS_PER_QUARTER = 3


@dataclass(frozen=True)
class InvoiceSummary:
    invoice_count: int
    total_amount: Decimal
    approved_amount: Decimal
    approved_count: int
    pending_count: int


def round_percentage(value: Decimal, places: int) -> Decimal:
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def total_expenses(entities: Iterable[Entity]) -> Decimal:
    return sum((entity.total_expenses for entity in entities), ZERO)


def average_per_period(series: Sequence[TimeSeriesPoint]) -> Decimal:
    """Arithmetic mean of the point amounts.

    Raises:
        EmptySeriesError: if the series has no points.
    """
    if not series:
        raise EmptySeriesError("average_per_period", 1, 0)
    total = sum((point.amount for point in series), ZERO)
    return total / Decimal(len(series))


def average_per_entity(entities: Sequence[Entity]) -> Decimal:
    """Combined expenses divided by entity count, rounded to whole units."""
    if not entities:
        return ZERO
    average = total_expenses(entities) / Decimal(len(entities))
    return average.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def month_over_month_change(series: Sequence[TimeSeriesPoint]) -> Decimal | None:
    """Percentage change of the last point relative to the one before it.

    Returns None when the previous point is zero: the change is undefined
    and is not reported as a number.

    Raises:
        EmptySeriesError: if the series has fewer than two points.
    """
    if len(series) < 2:
        raise EmptySeriesError("month_over_month_change", 2, len(series))
    previous = series[-2].amount
    current = series[-1].amount
    if previous == ZERO:
        return None
    return (current - previous) / previous * HUNDRED


def quarterly_rollup(monthly_series: Sequence[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    """Sum a Jan..Dec series into Q1..Q4.

    Raises:
        SeriesLengthError: unless the series has exactly twelve points.
    """
    if len(monthly_series) != len(MONTH_LABELS):
        raise SeriesLengthError(len(MONTH_LABELS), len(monthly_series))

    quarters: list[TimeSeriesPoint] = []
    for index, label in enumerate(QUARTER_LABELS):
        start = index * MONTHS_PER_QUARTER
        window = monthly_series[start : start + MONTHS_PER_QUARTER]
        quarters.append(
            TimeSeriesPoint(label, sum((point.amount for point in window), ZERO))
        )
    return quarters


def monthly_series(invoices: Iterable[Invoice], year: int) -> list[TimeSeriesPoint]:
    """Build the twelve-point Jan..Dec series for one calendar year."""
    by_month = [ZERO] * len(MONTH_LABELS)
    for invoice in invoices:
        if invoice.date.year == year:
            by_month[invoice.date.month - 1] += invoice.amount
    return [TimeSeriesPoint(label, amount) for label, amount in zip(MONTH_LABELS, by_month)]


def entity_share(entity: Entity, entities: Iterable[Entity]) -> Decimal:
    """Entity's percentage of combined expenses; 0 when there are none."""
    combined = total_expenses(entities)
    if combined == ZERO:
        return ZERO
    return entity.total_expenses / combined * HUNDRED


def entity_breakdown(
    entities: Sequence[Entity], places: int | None = None
) -> list[EntityShare]:
    if places is None:
        places = get_settings().share_percentage_places
    combined = total_expenses(entities)

    breakdown: list[EntityShare] = []
    for entity in entities:
        percentage = ZERO
        if combined > ZERO:
            percentage = entity.total_expenses / combined * HUNDRED
        breakdown.append(
            EntityShare(
                entity_id=entity.id,
                name=entity.name,
                color=entity.color,
                total_expenses=entity.total_expenses,
                percentage=round_percentage(percentage, places),
            )
        )
    return breakdown


def category_breakdown(
    invoices: Iterable[Invoice], places: int | None = None
) -> list[CategoryTotal]:
    """Group invoice amounts by category in order of first occurrence.

    Percentages use largest-remainder rounding: every share is floored to
    ``places`` decimals and the leftover units go to the shares with the
    largest remainders (earlier categories win ties), so a non-empty set
    with a positive total sums to exactly 100.
    """
    if places is None:
        places = get_settings().category_percentage_places

    by_category: dict[str, Decimal] = {}
    for invoice in invoices:
        by_category[invoice.category] = (
            by_category.get(invoice.category, ZERO) + invoice.amount
        )

    total = sum(by_category.values(), ZERO)
    if total > ZERO:
        exact = [amount / total * HUNDRED for amount in by_category.values()]
        percentages = _largest_remainder(exact, places)
    else:
        percentages = [round_percentage(ZERO, places)] * len(by_category)

    return [
        CategoryTotal(name=name, amount=amount, percentage=percentage)
        for (name, amount), percentage in zip(by_category.items(), percentages)
    ]


def _largest_remainder(shares: Sequence[Decimal], places: int) -> list[Decimal]:
    unit = Decimal(1).scaleb(-places)
    floored = [share.quantize(unit, rounding=ROUND_FLOOR) for share in shares]
    leftover = int((HUNDRED - sum(floored, ZERO)) / unit)

    by_remainder = sorted(
        range(len(shares)), key=lambda i: (-(shares[i] - floored[i]), i)
    )
    for i in by_remainder[:leftover]:
        floored[i] += unit
    return floored


def invoice_summary(invoices: Iterable[Invoice]) -> InvoiceSummary:
    count = 0
    total = ZERO
    approved_amount = ZERO
    approved_count = 0
    pending_count = 0

    for invoice in invoices:
        count += 1
        total += invoice.amount
        if invoice.status == InvoiceStatus.APPROVED:
            approved_amount += invoice.amount
            approved_count += 1
        elif invoice.status == InvoiceStatus.PENDING:
            pending_count += 1

    return InvoiceSummary(
        invoice_count=count,
        total_amount=total,
        approved_amount=approved_amount,
        approved_count=approved_count,
        pending_count=pending_count,
    )
