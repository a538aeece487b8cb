"""Dashboard report assembling the headline expense figures."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import CategoryTotal, EntityShare, TimeSeriesPoint
from expense_ledger.domain.value_objects import TrendPeriod
from expense_ledger.exceptions import InvalidInputError
from expense_ledger.logging_config import get_logger
from expense_ledger.services.aggregation import (
    average_per_period,
    category_breakdown,
    entity_breakdown,
    month_over_month_change,
    quarterly_rollup,
    total_expenses,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class DashboardReport:
    total_expenses: Decimal
    monthly_average: Decimal | None
    current_month: TimeSeriesPoint | None
    month_over_month_change: Decimal | None
    active_entities: int
    entities: list[EntityShare]
    categories: list[CategoryTotal]
    period: TrendPeriod
    trend: list[TimeSeriesPoint]

    @property
    def is_increase(self) -> bool | None:
        if self.month_over_month_change is None:
            return None
        return self.month_over_month_change >= 0


def build_dashboard(
    entities: Sequence[Entity],
    invoices: Sequence[Invoice],
    monthly: Sequence[TimeSeriesPoint],
    period: TrendPeriod | str = TrendPeriod.MONTH,
) -> DashboardReport:
    """Compute everything the overview screen shows.

    Figures that need more data than supplied are None rather than an
    error: no average without months, no change without two months (or
    when the previous month is zero). A yearly trend needs all twelve
    months; anything else raises SeriesLengthError from the rollup.
    """
    try:
        period = TrendPeriod(period)
    except ValueError:
        raise InvalidInputError(
            f"Unknown trend period: {period}", context={"period": str(period)}
        ) from None

    monthly_average = average_per_period(monthly) if monthly else None
    current_month = monthly[-1] if monthly else None

    change = None
    if len(monthly) >= 2:
        change = month_over_month_change(monthly)
        if change is None:
            logger.warning(
                "month_over_month_undefined",
                previous_label=monthly[-2].label,
                current_label=monthly[-1].label,
            )

    if period == TrendPeriod.YEAR:
        trend = quarterly_rollup(monthly)
    else:
        trend = list(monthly)

    report = DashboardReport(
        total_expenses=total_expenses(entities),
        monthly_average=monthly_average,
        current_month=current_month,
        month_over_month_change=change,
        active_entities=len(entities),
        entities=entity_breakdown(entities),
        categories=category_breakdown(invoices),
        period=period,
        trend=trend,
    )

    logger.debug(
        "dashboard_built",
        entity_count=len(entities),
        invoice_count=len(invoices),
        period=period.value,
    )
    return report
