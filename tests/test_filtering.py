"""Tests for invoice search, filtering and facets."""

from datetime import date
from decimal import Decimal

import pytest

from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.value_objects import InvoiceStatus
from expense_ledger.exceptions import InvalidStatusError
from expense_ledger.services.filtering import (
    FilterCriteria,
    apply_filter,
    build_predicate,
    distinct_categories,
    distinct_entities,
    distinct_statuses,
)


def _ids(invoices: list[Invoice]) -> list[str]:
    return [invoice.id for invoice in invoices]


class TestFilterCriteria:
    def test_defaults_are_unset(self):
        criteria = FilterCriteria()
        assert criteria.search_term is None
        assert criteria.entity is None
        assert criteria.category is None
        assert criteria.status is None
        assert not criteria.is_active

    def test_blank_strings_normalize_to_unset(self):
        criteria = FilterCriteria(search_term="", entity="  ", category="", status="")
        assert criteria == FilterCriteria()
        assert not criteria.is_active

    def test_status_string_is_parsed(self):
        assert FilterCriteria(status="Approved").status == InvoiceStatus.APPROVED

    def test_unknown_status_fails(self):
        with pytest.raises(InvalidStatusError):
            FilterCriteria(status="archived")

    def test_is_active_with_any_constraint(self):
        assert FilterCriteria(category="Travel").is_active

    def test_cleared(self):
        criteria = FilterCriteria(search_term="adobe", status="approved")
        assert criteria.cleared() == FilterCriteria()


class TestSearchTerm:
    def test_matches_vendor_case_insensitively(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(search_term="ADOBE"))
        assert _ids(result) == ["INV-002"]

    def test_matches_invoice_number(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(search_term="2024-004"))
        assert _ids(result) == ["INV-004"]

    def test_matches_filename(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(search_term="laptop"))
        assert _ids(result) == ["INV-005"]

    def test_matches_any_of_three_fields(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(search_term="inv-2024"))
        assert len(result) == len(sample_invoices)

    def test_does_not_search_category_or_entity(self, sample_invoices: list[Invoice]):
        assert apply_filter(sample_invoices, FilterCriteria(search_term="Travel")) == []
        assert apply_filter(sample_invoices, FilterCriteria(search_term="Marketing Pro")) == []


class TestExactMatchCriteria:
    def test_entity(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(entity="Marketing Pro LLC"))
        assert _ids(result) == ["INV-003", "INV-004"]

    def test_entity_is_exact_not_substring(self, sample_invoices: list[Invoice]):
        assert apply_filter(sample_invoices, FilterCriteria(entity="Marketing")) == []

    def test_category(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(category="Software"))
        assert _ids(result) == ["INV-002"]

    def test_category_is_case_sensitive(self, sample_invoices: list[Invoice]):
        assert apply_filter(sample_invoices, FilterCriteria(category="software")) == []

    def test_status(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria(status=InvoiceStatus.APPROVED))
        assert _ids(result) == ["INV-001", "INV-004"]


class TestCombination:
    def test_criteria_are_anded(self, sample_invoices: list[Invoice]):
        criteria = FilterCriteria(entity="Tech Solutions Inc", status="approved")
        assert _ids(apply_filter(sample_invoices, criteria)) == ["INV-001"]

    def test_no_or_semantics_across_criteria(self, sample_invoices: list[Invoice]):
        criteria = FilterCriteria(category="Software", status="pending")
        assert apply_filter(sample_invoices, criteria) == []

    def test_search_with_exact_match(self, sample_invoices: list[Invoice]):
        criteria = FilterCriteria(search_term=".pdf", entity="Marketing Pro LLC", status="pending")
        assert _ids(apply_filter(sample_invoices, criteria)) == ["INV-003"]


class TestApplyFilterProperties:
    def test_empty_criteria_is_identity(self, sample_invoices: list[Invoice]):
        assert apply_filter(sample_invoices, FilterCriteria()) == sample_invoices

    def test_idempotent(self, sample_invoices: list[Invoice]):
        criteria = FilterCriteria(search_term="inv", entity="Tech Solutions Inc")
        once = apply_filter(sample_invoices, criteria)
        assert apply_filter(once, criteria) == once

    def test_preserves_input_order(self, sample_invoices: list[Invoice]):
        reversed_invoices = list(reversed(sample_invoices))
        result = apply_filter(reversed_invoices, FilterCriteria(status="approved"))
        assert _ids(result) == ["INV-004", "INV-001"]

    def test_returns_new_list(self, sample_invoices: list[Invoice]):
        result = apply_filter(sample_invoices, FilterCriteria())
        assert result is not sample_invoices

    def test_repeated_calls_have_no_residual_effect(self, sample_invoices: list[Invoice]):
        apply_filter(sample_invoices, FilterCriteria(category="Travel"))
        result = apply_filter(sample_invoices, FilterCriteria(category="Software"))
        assert _ids(result) == ["INV-002"]

    def test_accepts_iterator(self, sample_invoices: list[Invoice]):
        result = apply_filter(iter(sample_invoices), FilterCriteria(status="rejected"))
        assert _ids(result) == ["INV-005"]


class TestBuildPredicate:
    def test_predicate_is_reusable(self, sample_invoices: list[Invoice]):
        predicate = build_predicate(FilterCriteria(search_term="google"))
        first = [predicate(inv) for inv in sample_invoices]
        second = [predicate(inv) for inv in sample_invoices]
        assert first == second == [False, False, False, True, False]

    def test_empty_criteria_accepts_everything(self, sample_invoices: list[Invoice]):
        predicate = build_predicate(FilterCriteria())
        assert all(predicate(inv) for inv in sample_invoices)

    def test_entity_id_reference(self):
        invoice = Invoice(
            id="X-1",
            number="X-1",
            vendor="Vendor",
            entity=7,
            category="Other",
            amount=Decimal("10"),
            date=date(2024, 3, 1),
        )
        assert build_predicate(FilterCriteria(entity=7))(invoice)
        assert not build_predicate(FilterCriteria(entity=8))(invoice)


class TestFacets:
    def test_distinct_entities_first_seen_order(self, sample_invoices: list[Invoice]):
        assert distinct_entities(sample_invoices) == [
            "Tech Solutions Inc",
            "Design Studio Co",
            "Marketing Pro LLC",
        ]

    def test_distinct_categories_first_seen_order(self, sample_invoices: list[Invoice]):
        assert distinct_categories(sample_invoices) == [
            "Office Supplies",
            "Software",
            "Travel",
            "Marketing",
            "Equipment",
        ]

    def test_facets_of_empty_set(self):
        assert distinct_entities([]) == []
        assert distinct_categories([]) == []

    def test_facets_come_from_invoices_not_registry(self, sample_invoices, registry):
        registry.update(3, "Design Studio Co", "#F59E0B")
        registry.recompute(3, [])
        registry.remove(3)

        assert "Design Studio Co" in distinct_entities(sample_invoices)

    def test_status_facets(self):
        assert [s.value for s in distinct_statuses()] == [
            "pending",
            "processed",
            "approved",
            "rejected",
        ]
