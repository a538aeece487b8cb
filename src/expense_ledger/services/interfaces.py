from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice


class EntityRegistry(ABC):
    """Owner of the mutable entity collection.

    Callers change entities only through these operations. Invoice data is
    not observed: after any invoice change the caller must call recompute()
    (or recompute_all()) to refresh the cached totals.
    """

    @abstractmethod
    def add(self, name: str, color: str | None = None) -> Entity:
        pass

    @abstractmethod
    def update(self, entity_id: int, name: str, color: str) -> Entity:
        pass

    @abstractmethod
    def remove(self, entity_id: int) -> Entity:
        pass

    @abstractmethod
    def recompute(self, entity_id: int, invoices: Iterable[Invoice]) -> Entity:
        pass

    @abstractmethod
    def recompute_all(self, invoices: Iterable[Invoice]) -> list[Entity]:
        pass

    @abstractmethod
    def get(self, entity_id: int) -> Entity:
        pass

    @abstractmethod
    def get_by_name(self, name: str) -> Entity | None:
        pass

    @abstractmethod
    def list_entities(self) -> list[Entity]:
        pass

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.list_entities())

    def __len__(self) -> int:
        return len(self.list_entities())
