from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace
from decimal import Decimal

from expense_ledger.config import get_settings
from expense_ledger.domain.entities import Entity, clean_name
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.value_objects import ZERO
from expense_ledger.exceptions import (
    EntityHasExpensesError,
    EntityNotFoundError,
    ValidationError,
)
from expense_ledger.logging_config import get_logger
from expense_ledger.services.interfaces import EntityRegistry

logger = get_logger(__name__)


class InMemoryEntityRegistry(EntityRegistry):
    """Entity registry backed by an insertion-ordered dict.

    Returned entities are copies; the registry's own records change only
    through its operations. Ids come from a high-water mark, so an id is
    never handed out twice even after the highest entity is removed.
    """

    def __init__(self, entities: Iterable[Entity] | None = None) -> None:
        self._entities: dict[int, Entity] = {}
        self._next_id = 1
        for entity in entities or ():
            if entity.id in self._entities:
                raise ValidationError(
                    f"Duplicate entity id: {entity.id}",
                    context={"entity_id": entity.id},
                )
            self._entities[entity.id] = replace(entity)
            self._next_id = max(self._next_id, entity.id + 1)

    def add(self, name: str, color: str | None = None) -> Entity:
        if color is None:
            color = get_settings().default_entity_color
        entity = Entity(id=self._next_id, name=name, color=color, total_expenses=ZERO)
        self._entities[entity.id] = entity
        self._next_id += 1

        logger.info("entity_added", entity_id=entity.id, name=entity.name)
        return replace(entity)

    def update(self, entity_id: int, name: str, color: str) -> Entity:
        entity = self._require(entity_id)
        cleaned = clean_name(name)

        entity.rename(cleaned)
        entity.recolor(color)

        logger.info("entity_updated", entity_id=entity_id, name=entity.name)
        return replace(entity)

    def remove(self, entity_id: int) -> Entity:
        entity = self._require(entity_id)
        if entity.has_expenses:
            logger.warning(
                "entity_remove_refused",
                entity_id=entity_id,
                total_expenses=str(entity.total_expenses),
            )
            raise EntityHasExpensesError(entity_id, str(entity.total_expenses))

        del self._entities[entity_id]
        logger.info("entity_removed", entity_id=entity_id, name=entity.name)
        return entity

    def recompute(self, entity_id: int, invoices: Iterable[Invoice]) -> Entity:
        entity = self._require(entity_id)
        total = sum(
            (invoice.amount for invoice in invoices if invoice.matches_entity(entity)),
            ZERO,
        )
        previous = entity.total_expenses
        entity.set_total_expenses(total)

        logger.debug(
            "entity_totals_recomputed",
            entity_id=entity_id,
            previous=str(previous),
            total_expenses=str(total),
        )
        return replace(entity)

    def recompute_all(self, invoices: Iterable[Invoice]) -> list[Entity]:
        totals: dict[int, Decimal] = {entity_id: ZERO for entity_id in self._entities}
        by_name: dict[str, list[int]] = {}
        for entity in self._entities.values():
            by_name.setdefault(entity.name, []).append(entity.id)

        for invoice in invoices:
            if isinstance(invoice.entity, int) and not isinstance(invoice.entity, bool):
                matched = [invoice.entity] if invoice.entity in totals else []
            else:
                matched = by_name.get(invoice.entity, [])
            for entity_id in matched:
                totals[entity_id] += invoice.amount

        for entity_id, total in totals.items():
            self._entities[entity_id].set_total_expenses(total)

        logger.debug("entity_totals_recomputed", entity_count=len(totals))
        return self.list_entities()

    def get(self, entity_id: int) -> Entity:
        return replace(self._require(entity_id))

    def get_by_name(self, name: str) -> Entity | None:
        for entity in self._entities.values():
            if entity.name == name:
                return replace(entity)
        return None

    def list_entities(self) -> list[Entity]:
        return [replace(entity) for entity in self._entities.values()]

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def _require(self, entity_id: int) -> Entity:
        entity = self._entities.get(entity_id)
        if entity is None:
            raise EntityNotFoundError(entity_id)
        return entity
