from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from expense_ledger.domain.entities import Entity
from expense_ledger.domain.value_objects import InvoiceStatus, to_amount
from expense_ledger.exceptions import ValidationError

_TEXT_FIELDS = ("id", "number", "vendor", "category", "filename")


def _parse_date(value: date | str) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(
            f"Invalid invoice date: {value}", context={"date": str(value)}
        ) from None


@dataclass(frozen=True, slots=True)
class Invoice:
    """A single expense record.

    Invoices are historical records: once created by an upload collaborator
    they are only read by aggregation and filtering. ``entity`` is a lookup
    reference (entity name, or entity id) and ``category`` a free-text
    grouping key.
    """

    id: str
    number: str
    vendor: str
    entity: str | int
    category: str
    amount: Decimal
    date: date
    status: InvoiceStatus = InvoiceStatus.PENDING
    filename: str = ""

    def __post_init__(self) -> None:
        for name in _TEXT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValidationError(
                    f"Invoice {name} must be text, got {type(value).__name__}",
                    context={"invoice_id": str(self.id), "field": name},
                )
        if isinstance(self.entity, bool) or not isinstance(self.entity, (str, int)):
            raise ValidationError(
                f"Invoice entity must be a name or an id: {self.entity!r}",
                context={"invoice_id": str(self.id), "field": "entity"},
            )
        object.__setattr__(self, "amount", to_amount(self.amount))
        object.__setattr__(self, "date", _parse_date(self.date))
        object.__setattr__(self, "status", InvoiceStatus.parse(self.status))

    def matches_entity(self, entity: Entity) -> bool:
        if isinstance(self.entity, int) and not isinstance(self.entity, bool):
            return self.entity == entity.id
        return self.entity == entity.name

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Invoice":
        return cls(
            id=str(data["id"]),
            number=data.get("number", ""),
            vendor=data.get("vendor", ""),
            entity=data["entity"],
            category=data.get("category", ""),
            amount=data["amount"],
            date=data["date"],
            status=data.get("status", InvoiceStatus.PENDING),
            filename=data.get("filename", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "number": self.number,
            "vendor": self.vendor,
            "entity": self.entity,
            "category": self.category,
            "amount": str(self.amount),
            "date": self.date.isoformat(),
            "status": self.status.value,
            "filename": self.filename,
        }
