"""Command-line interface for Expense Ledger."""

import argparse
import sys
from decimal import Decimal
from pathlib import Path

from expense_ledger import __version__
from expense_ledger.config import get_settings
from expense_ledger.domain.series import TimeSeriesPoint
from expense_ledger.exceptions import ExpenseLedgerError
from expense_ledger.logging_config import LogContext, configure_logging
from expense_ledger.services.aggregation import (
    average_per_entity,
    entity_breakdown,
    invoice_summary,
    monthly_series,
    total_expenses,
)
from expense_ledger.services.entity_registry import InMemoryEntityRegistry
from expense_ledger.services.filtering import (
    FilterCriteria,
    apply_filter,
    distinct_categories,
    distinct_entities,
)
from expense_ledger.services.reporting import build_dashboard
from expense_ledger.snapshot import Snapshot, load_snapshot

DEFAULT_SNAPSHOT = Path("expenses.json")


def _load(args: argparse.Namespace) -> tuple[Snapshot, InMemoryEntityRegistry]:
    path = Path(args.snapshot)
    with LogContext(snapshot=str(path)):
        snapshot = load_snapshot(path)
        registry = InMemoryEntityRegistry(snapshot.entities)
        if args.recompute:
            registry.recompute_all(snapshot.invoices)
    return snapshot, registry


def _monthly(args: argparse.Namespace, snapshot: Snapshot) -> list[TimeSeriesPoint]:
    if args.year is not None:
        return monthly_series(snapshot.invoices, args.year)
    return snapshot.monthly


def _format_change(change: Decimal | None) -> str:
    if change is None:
        return "n/a"
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.1f}%"


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"{get_settings().app_name} v{__version__}")
    return 0


def cmd_summary(args: argparse.Namespace) -> int:
    """Show the dashboard headline figures."""
    snapshot, registry = _load(args)
    entities = registry.list_entities()
    report = build_dashboard(entities, snapshot.invoices, _monthly(args, snapshot))

    print("Expense Summary")
    print("=" * 50)
    print(f"  Total Expenses: ${report.total_expenses:,.2f}")
    if report.monthly_average is not None:
        print(f"  Monthly Average: ${report.monthly_average:,.0f}")
    if report.current_month is not None:
        print(
            f"  This Month ({report.current_month.label}): "
            f"${report.current_month.amount:,.2f} "
            f"({_format_change(report.month_over_month_change)} from last month)"
        )
    print(f"  Active Entities: {report.active_entities}")

    if report.categories:
        print(f"\n{'Category':<25} {'Amount':>15} {'Share':>8}")
        print("-" * 50)
        for category in report.categories:
            print(
                f"{category.name:<25} ${category.amount:>14,.2f} {category.percentage:>7}%"
            )
    return 0


def cmd_entities(args: argparse.Namespace) -> int:
    """List entities with their share of combined expenses."""
    _, registry = _load(args)
    entities = registry.list_entities()
    print(f"Entities ({len(entities)})")
    print("=" * 50)
    for share in entity_breakdown(entities):
        print(
            f"  [{share.entity_id}] {share.name:<28} "
            f"${share.total_expenses:>12,.2f} {share.percentage:>6}%"
        )
    print("-" * 50)
    print(f"  Combined Expenses: ${total_expenses(entities):,.2f}")
    print(f"  Average per Entity: ${average_per_entity(entities):,.0f}")
    return 0


def cmd_invoices(args: argparse.Namespace) -> int:
    """List invoices matching the search and filter options."""
    snapshot, _ = _load(args)
    criteria = FilterCriteria(
        search_term=args.search,
        entity=args.entity,
        category=args.category,
        status=args.status,
    )
    matched = apply_filter(snapshot.invoices, criteria)
    summary = invoice_summary(matched)

    total_note = ""
    if len(matched) != len(snapshot.invoices):
        total_note = f" of {len(snapshot.invoices)} total"
    print(f"Invoices ({len(matched)}{total_note})")
    print("=" * 50)

    if not matched:
        if criteria.is_active:
            print("  No invoices found. Try adjusting your filters or search terms.")
        else:
            print("  No invoices found.")
        return 0

    for invoice in matched:
        print(
            f"  {invoice.number:<16} {invoice.vendor:<20} {str(invoice.entity):<20} "
            f"{invoice.category:<16} ${invoice.amount:>10,.2f} "
            f"{invoice.date.isoformat()} {invoice.status.value}"
        )
    print("-" * 50)
    print(f"  Total Amount: ${summary.total_amount:,.2f}")
    print(f"  Approved: ${summary.approved_amount:,.2f} ({summary.approved_count} invoices)")
    print(f"  Pending Review: {summary.pending_count}")

    if args.facets:
        print(f"\n  Entities: {', '.join(str(e) for e in distinct_entities(snapshot.invoices))}")
        print(f"  Categories: {', '.join(distinct_categories(snapshot.invoices))}")
    return 0


def cmd_trend(args: argparse.Namespace) -> int:
    """Show the monthly series or its quarterly rollup."""
    snapshot, registry = _load(args)
    report = build_dashboard(
        registry.list_entities(),
        snapshot.invoices,
        _monthly(args, snapshot),
        period=args.period,
    )

    print("Expense Trend (monthly)" if args.period == "month" else "Expense Trend (quarterly)")
    print("=" * 50)
    for point in report.trend:
        print(f"  {point.label:<6} ${point.amount:>14,.2f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="exl",
        description="Expense Ledger - entity expense metrics and invoice search",
    )
    parser.add_argument(
        "--snapshot",
        "-s",
        help=f"Path to the JSON snapshot file (default: {DEFAULT_SNAPSHOT})",
        default=str(DEFAULT_SNAPSHOT),
    )
    parser.add_argument(
        "--recompute",
        action="store_true",
        help="Recompute entity totals from the snapshot's invoices",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Derive the monthly series from invoices dated in this year",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    summary_parser = subparsers.add_parser("summary", help="Show dashboard figures")
    summary_parser.set_defaults(func=cmd_summary)

    entities_parser = subparsers.add_parser("entities", help="List entities and shares")
    entities_parser.set_defaults(func=cmd_entities)

    invoices_parser = subparsers.add_parser("invoices", help="Search and filter invoices")
    invoices_parser.add_argument(
        "--search", help="Match invoice number, vendor or filename", default=None
    )
    invoices_parser.add_argument("--entity", help="Exact entity name", default=None)
    invoices_parser.add_argument("--category", help="Exact category", default=None)
    invoices_parser.add_argument(
        "--status",
        choices=["pending", "processed", "approved", "rejected"],
        default=None,
    )
    invoices_parser.add_argument(
        "--facets",
        action="store_true",
        help="Also list the entities and categories seen in the invoices",
    )
    invoices_parser.set_defaults(func=cmd_invoices)

    trend_parser = subparsers.add_parser("trend", help="Show expense trend")
    trend_parser.add_argument(
        "--period",
        choices=["month", "year"],
        default="month",
        help="'month' for Jan..Dec, 'year' for the quarterly rollup",
    )
    trend_parser.set_defaults(func=cmd_trend)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(get_settings())

    try:
        result: int = args.func(args)
    except ExpenseLedgerError as e:
        print(f"Error: {e.message}")
        return 1
    return result


if __name__ == "__main__":
    sys.exit(main())
