"""Load an expense snapshot (entities, invoices, monthly series) from JSON.

Expected document shape::

    {
        "entities": [{"id": 1, "name": "Tech Solutions Inc", "color": "#3B82F6",
                      "total_expenses": "12500"}],
        "invoices": [{"id": "INV-001", "number": "INV-2024-001", "vendor": "Office Depot",
                      "entity": "Tech Solutions Inc", "category": "Office Supplies",
                      "amount": "245.50", "date": "2024-01-15", "status": "approved",
                      "filename": "office_supplies_jan.pdf"}],
        "monthly": [4200, 3800, 5100]
    }

``monthly`` may be omitted; callers can derive it from invoices instead.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from expense_ledger.domain.entities import Entity
from expense_ledger.domain.invoices import Invoice
from expense_ledger.domain.series import TimeSeriesPoint, monthly_points
from expense_ledger.exceptions import ExpenseLedgerError, SnapshotError
from expense_ledger.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class Snapshot:
    entities: list[Entity] = field(default_factory=list)
    invoices: list[Invoice] = field(default_factory=list)
    monthly: list[TimeSeriesPoint] = field(default_factory=list)


def parse_snapshot(document: dict[str, Any]) -> Snapshot:
    if not isinstance(document, dict):
        raise SnapshotError("Snapshot must be a JSON object")

    try:
        entities = [Entity.from_dict(item) for item in document.get("entities", [])]
        invoices = [Invoice.from_dict(item) for item in document.get("invoices", [])]
        monthly = monthly_points(document.get("monthly", []))
    except ExpenseLedgerError as e:
        raise SnapshotError(
            f"Invalid snapshot record: {e.message}", context=e.context
        ) from e
    except (KeyError, TypeError, AttributeError) as e:
        raise SnapshotError(f"Malformed snapshot record: {e}") from e

    return Snapshot(entities=entities, invoices=invoices, monthly=monthly)


def load_snapshot(path: Path) -> Snapshot:
    if not path.exists():
        raise SnapshotError(f"File not found: {path}", context={"path": str(path)})

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SnapshotError(
            f"Snapshot is not valid JSON: {e}", context={"path": str(path)}
        ) from e
    except UnicodeDecodeError as e:
        raise SnapshotError(
            f"Snapshot is not UTF-8 text: {path}", context={"path": str(path)}
        ) from e
    except OSError as e:
        raise SnapshotError(
            f"Cannot read snapshot {path}: {e.strerror or e}",
            context={"path": str(path)},
        ) from e

    snapshot = parse_snapshot(document)
    logger.info(
        "snapshot_loaded",
        path=str(path),
        entities=len(snapshot.entities),
        invoices=len(snapshot.invoices),
        months=len(snapshot.monthly),
    )
    return snapshot
