import csv
import io
import json
from dataclasses import asdict

from rich.table import Table

from tag_inventory_cli.config import TABLE_COLUMNS
from tag_inventory_cli.core.models import InventoryResult, ResourceRecord


def record_row(record: ResourceRecord) -> list[str]:
    """Region, Service, Product, ID — missing values render as empty strings."""
    return [
        record.region or "",
        record.service or "",
        record.product or "",
        record.identifier or "",
    ]


def format_as_table(records: list[ResourceRecord], title: str | None = None) -> Table:
    """Builds the bordered rich table printed by the CLI."""
    table = Table(title=title, show_lines=False)
    for column in TABLE_COLUMNS:
        table.add_column(column, style="bold blue" if column == "Service" else None)

    for record in records:
        table.add_row(*record_row(record))
    return table


def format_as_json(result: InventoryResult) -> str:
    """Standard JSON output: run metadata plus one object per record."""
    payload = {
        "region": result.region,
        "pages_fetched": result.pages_fetched,
        "complete": result.complete,
        "resources": [
            {
                "region": r.region,
                "service": r.service,
                "product": r.product or "",
                "identifier": r.identifier,
                "arn": r.arn or "",
                "tags": dict(r.tags),
            }
            for r in result.records
        ],
        "skipped": [asdict(s) for s in result.skipped],
    }
    return json.dumps(payload, indent=2)


def format_as_csv(records: list[ResourceRecord]) -> str:
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(TABLE_COLUMNS + ["ARN"])
    for record in records:
        writer.writerow(record_row(record) + [record.arn or ""])
    return buf.getvalue()
