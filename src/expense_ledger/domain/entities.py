from dataclasses import dataclass, field
from decimal import Decimal

from expense_ledger.config import get_settings
from expense_ledger.domain.value_objects import ZERO, to_amount
from expense_ledger.exceptions import EmptyNameError, ValidationError


def clean_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise EmptyNameError()
    return name.strip()


@dataclass
class Entity:
    id: int
    name: str
    color: str
    total_expenses: Decimal = field(default=ZERO)

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValidationError(
                f"Entity id must be a positive integer: {self.id!r}",
                context={"entity_id": self.id},
            )
        self.name = clean_name(self.name)
        self.total_expenses = to_amount(self.total_expenses)

    @property
    def has_expenses(self) -> bool:
        return self.total_expenses > ZERO

    def rename(self, name: str) -> None:
        self.name = clean_name(name)

    def recolor(self, color: str) -> None:
        self.color = color

    def set_total_expenses(self, total: Decimal) -> None:
        self.total_expenses = to_amount(total)

    @classmethod
    def from_dict(cls, data: dict) -> "Entity":
        return cls(
            id=data["id"],
            name=data["name"],
            color=data.get("color") or get_settings().default_entity_color,
            total_expenses=data.get("total_expenses", ZERO),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "total_expenses": str(self.total_expenses),
        }
