"""Multi-criteria invoice search and facet extraction."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, fields

from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.value_objects import InvoiceStatus

InvoicePredicate = Callable[[Invoice], bool]


@dataclass(frozen=True)
class FilterCriteria:
    """Optional search and exact-match constraints.

    A field left as None places no constraint on the result. Blank strings
    coming from form input are normalized to None on construction, so
    "filter for the empty string" is not expressible.
    """

    search_term: str | None = None
    entity: str | int | None = None
    category: str | None = None
    status: InvoiceStatus | None = None

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, str) and not value.strip():
                object.__setattr__(self, f.name, None)
        if self.status is not None:
            object.__setattr__(self, "status", InvoiceStatus.parse(self.status))

    @property
    def is_active(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def cleared(self) -> FilterCriteria:
        return FilterCriteria()


def _matches_search(invoice: Invoice, needle: str) -> bool:
    return (
        needle in invoice.number.lower()
        or needle in invoice.vendor.lower()
        or needle in invoice.filename.lower()
    )


def build_predicate(criteria: FilterCriteria) -> InvoicePredicate:
    """Combine every set criterion into a single AND-ed match function."""
    checks: list[InvoicePredicate] = []

    if criteria.search_term is not None:
        needle = criteria.search_term.lower()
        checks.append(lambda invoice: _matches_search(invoice, needle))
    if criteria.entity is not None:
        entity = criteria.entity
        checks.append(lambda invoice: invoice.entity == entity)
    if criteria.category is not None:
        category = criteria.category
        checks.append(lambda invoice: invoice.category == category)
    if criteria.status is not None:
        status = criteria.status
        checks.append(lambda invoice: invoice.status == status)

    frozen_checks = tuple(checks)

    def predicate(invoice: Invoice) -> bool:
        return all(check(invoice) for check in frozen_checks)

    return predicate


def apply_filter(invoices: Iterable[Invoice], criteria: FilterCriteria) -> list[Invoice]:
    """Return the matching invoices in their original order."""
    predicate = build_predicate(criteria)
    return [invoice for invoice in invoices if predicate(invoice)]


def distinct_entities(invoices: Iterable[Invoice]) -> list[str | int]:
    # Taken from invoices, not the registry: deleted entities keep their history.
    return list(dict.fromkeys(invoice.entity for invoice in invoices))


def distinct_categories(invoices: Iterable[Invoice]) -> list[str]:
    return list(dict.fromkeys(invoice.category for invoice in invoices))


def distinct_statuses() -> list[InvoiceStatus]:
    return list(InvoiceStatus)
