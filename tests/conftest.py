from datetime import date
from decimal import Decimal

import pytest

from expense_ledger.config import get_settings
from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import TimeSeriesPoint, monthly_points
from expense_ledger.domain.value_objects import InvoiceStatus
from expense_ledger.services.entity_registry import InMemoryEntityRegistry

REFERENCE_MONTHLY = [
    4200,
    3800,
    5100,
    4600,
    6200,
    5800,
    7200,
    6900,
    5400,
    6800,
    7500,
    8200,
]


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in ("EXL_LOG_LEVEL", "EXL_ENVIRONMENT", "EXL_DEFAULT_ENTITY_COLOR"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_entities() -> list[Entity]:
    return [
        Entity(id=1, name="Tech Solutions Inc", color="#3B82F6", total_expenses=Decimal("12500")),
        Entity(id=2, name="Marketing Pro LLC", color="#10B981", total_expenses=Decimal("8900")),
        Entity(id=3, name="Design Studio Co", color="#F59E0B", total_expenses=Decimal("6750")),
    ]


@pytest.fixture
def sample_invoices() -> list[Invoice]:
    return [
        Invoice(
            id="INV-001",
            number="INV-2024-001",
            vendor="Office Depot",
            entity="Tech Solutions Inc",
            category="Office Supplies",
            amount=Decimal("245.50"),
            date=date(2024, 1, 15),
            status=InvoiceStatus.APPROVED,
            filename="office_supplies_jan.pdf",
        ),
        Invoice(
            id="INV-002",
            number="INV-2024-002",
            vendor="Adobe Inc",
            entity="Design Studio Co",
            category="Software",
            amount=Decimal("599.00"),
            date=date(2024, 1, 20),
            status=InvoiceStatus.PROCESSED,
            filename="adobe_license.pdf",
        ),
        Invoice(
            id="INV-003",
            number="INV-2024-003",
            vendor="Delta Airlines",
            entity="Marketing Pro LLC",
            category="Travel",
            amount=Decimal("1250.75"),
            date=date(2024, 1, 22),
            status=InvoiceStatus.PENDING,
            filename="flight_booking_confirmation.pdf",
        ),
        Invoice(
            id="INV-004",
            number="INV-2024-004",
            vendor="Google Ads",
            entity="Marketing Pro LLC",
            category="Marketing",
            amount=Decimal("850.00"),
            date=date(2024, 1, 25),
            status=InvoiceStatus.APPROVED,
            filename="google_ads_invoice.pdf",
        ),
        Invoice(
            id="INV-005",
            number="INV-2024-005",
            vendor="Best Buy",
            entity="Tech Solutions Inc",
            category="Equipment",
            amount=Decimal("1899.99"),
            date=date(2024, 1, 28),
            status=InvoiceStatus.REJECTED,
            filename="laptop_purchase.pdf",
        ),
    ]


@pytest.fixture
def reference_monthly() -> list[TimeSeriesPoint]:
    return monthly_points(REFERENCE_MONTHLY)


@pytest.fixture
def registry(sample_entities: list[Entity]) -> InMemoryEntityRegistry:
    return InMemoryEntityRegistry(sample_entities)
