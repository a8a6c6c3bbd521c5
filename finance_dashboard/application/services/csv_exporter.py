"""CSV exporter for the filtered view of a resource page.

Values are joined literally with commas; embedded commas or quotes are
not escaped.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from finance_dashboard.domain.entities import Record

from .list_filter import as_text


@dataclass(frozen=True)
class CsvColumn:
    """One exported column: header label plus the field (or dotted path) it reads."""

    label: str
    field: str


@dataclass(frozen=True)
class CsvExport:
    """A ready-to-download CSV document."""

    filename: str
    content: str
    media_type: str = "text/csv"

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


def export_csv(
    records: Sequence[Record],
    columns: Sequence[CsvColumn],
    filename: str,
) -> CsvExport:
    """Serialise records into header + one row per record, newline separated."""
    lines = [",".join(column.label for column in columns)]
    for record in records:
        lines.append(",".join(as_text(record.get(column.field)) for column in columns))
    return CsvExport(filename=filename, content="\n".join(lines))
