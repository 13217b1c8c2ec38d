"""Parsing of delimiter-joined docker output."""

from __future__ import annotations

from collections.abc import Sequence

Record = dict[str, str]

FIELD_DELIMITER = "||"


def split_lines(text: str) -> list[str]:
    """Split command output into non-empty lines."""

    return [line for line in text.rstrip().splitlines() if line]


def parse_fields(text: str, names: Sequence[str], delimiter: str = FIELD_DELIMITER) -> list[Record]:
    """Map positional fields of each line onto `names`.

    Missing trailing fields become empty strings; surplus fields are ignored.
    """

    records: list[Record] = []
    for line in split_lines(text):
        values = line.split(delimiter)
        records.append({name: values[idx] if idx < len(values) else "" for idx, name in enumerate(names)})
    return records


def parse_key_values(text: str, delimiter: str = FIELD_DELIMITER) -> list[Record]:
    """Parse `KEY=value` segments of each line; the value is everything after the first `=`."""

    records: list[Record] = []
    for line in split_lines(text):
        record: Record = {}
        for segment in line.split(delimiter):
            key, _, value = segment.partition("=")
            record[key] = value
        records.append(record)
    return records
