"""Plain text tables."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from dok.output import Output

ELLIPSIS = "…"
MIN_COLUMN_WIDTH = 6
COLUMN_GAP = "  "
NO_RESULTS = "(no results)"


@dataclass(frozen=True)
class Column:
    """One table column; `width=None` sizes it to its content."""

    key: str
    header: str
    width: int | None = None


def fit(value: str, width: int) -> str:
    """Pad `value` to `width`, or cut it and end with an ellipsis when it does not fit."""

    if len(value) > width:
        return value[: max(0, width - 1)] + ELLIPSIS
    return value.ljust(width)


def column_widths(rows: Sequence[Mapping[str, str]], columns: Sequence[Column]) -> list[int]:
    widths: list[int] = []
    for column in columns:
        if column.width is not None:
            widths.append(column.width)
            continue
        longest = max((len(row.get(column.key, "")) for row in rows), default=0)
        widths.append(max(len(column.header), longest, MIN_COLUMN_WIDTH))
    return widths


def render_table(rows: Sequence[Mapping[str, str]], columns: Sequence[Column]) -> list[str]:
    """Render rows as aligned lines: header, dash separator, then one line per row."""

    if not rows:
        return [NO_RESULTS]

    widths = column_widths(rows, columns)
    lines = [
        COLUMN_GAP.join(fit(column.header, width) for column, width in zip(columns, widths)),
        COLUMN_GAP.join("-" * width for width in widths),
    ]
    for row in rows:
        lines.append(COLUMN_GAP.join(fit(row.get(column.key, ""), width) for column, width in zip(columns, widths)))
    return lines


def print_table(output: Output, rows: Sequence[Mapping[str, str]], columns: Sequence[Column]) -> None:
    for line in render_table(rows, columns):
        output.info(line)


def print_title(output: Output, title: str) -> None:
    output.info(f"\n=== {title} ===")
