from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import CategoryTotal, TimeSeriesPoint
from expense_ledger.domain.value_objects import InvoiceStatus

__all__ = [
    "CategoryTotal",
    "Entity",
    "Invoice",
    "InvoiceStatus",
    "TimeSeriesPoint",
]

__version__ = "0.1.0"
