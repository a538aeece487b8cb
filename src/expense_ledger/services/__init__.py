from expense_ledger.services.aggregation import (
    InvoiceSummary,
    average_per_entity,
    average_per_period,
    category_breakdown,
    entity_breakdown,
    entity_share,
    invoice_summary,
    month_over_month_change,
    monthly_series,
    quarterly_rollup,
    total_expenses,
)
from expense_ledger.services.entity_registry import InMemoryEntityRegistry
from expense_ledger.services.filtering import (
    FilterCriteria,
    apply_filter,
    build_predicate,
    distinct_categories,
    distinct_entities,
    distinct_statuses,
)
from expense_ledger.services.interfaces import EntityRegistry
from expense_ledger.services.reporting import DashboardReport, build_dashboard

__all__ = [
    "DashboardReport",
    "EntityRegistry",
    "FilterCriteria",
    "InMemoryEntityRegistry",
    "InvoiceSummary",
    "apply_filter",
    "average_per_entity",
    "average_per_period",
    "build_dashboard",
    "build_predicate",
    "category_breakdown",
    "distinct_categories",
    "distinct_entities",
    "distinct_statuses",
    "entity_breakdown",
    "entity_share",
    "invoice_summary",
    "month_over_month_change",
    "monthly_series",
    "quarterly_rollup",
    "total_expenses",
]
