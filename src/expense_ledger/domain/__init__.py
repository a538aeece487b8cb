from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import (
    CategoryTotal,
    EntityShare,
    TimeSeriesPoint,
    monthly_points,
)
from expense_ledger.domain.value_objects import (
    MONTH_LABELS,
    QUARTER_LABELS,
    InvoiceStatus,
    TrendPeriod,
)

__all__ = [
    "CategoryTotal",
    "Entity",
    "EntityShare",
    "Invoice",
    "InvoiceStatus",
    "MONTH_LABELS",
    "QUARTER_LABELS",
    "TimeSeriesPoint",
    "TrendPeriod",
    "monthly_points",
]
