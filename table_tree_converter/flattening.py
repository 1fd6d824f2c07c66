from __future__ import annotations

import json
from typing import Any, List, Sequence

from .accessors import get_value_by_path
from .paths import DEFAULT_LEGACY_PREFIX, HeaderPath, parse_headers
from .values import Record, Table


def _cell(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except TypeError:
        return str(value)


def _array_column(record: Record, path: HeaderPath) -> List[Any]:
    """Per-element values of the first array on `path`."""
    split = next(i for i, seg in enumerate(path.segments) if seg.is_array)
    items = get_value_by_path(record, HeaderPath(path.header, path.segments[:split + 1]))
    if not items:
        return []

    rest = path.segments[split + 1:]
    if not rest:
        return list(items)
    rest_path = HeaderPath(path.header, rest)
    return [get_value_by_path(item, rest_path) if isinstance(item, dict) else None for item in items]


def flatten_record(record: Record, paths: Sequence[HeaderPath]) -> Table:
    """Lay one record out as rows under the given header paths.

    Identity columns repeat on every row so the rows regroup under the same
    key; nested object columns only fill the first row; array columns take
    one element per row.
    """
    columns: List[List[Any]] = []
    height = 1
    for path in paths:
        if path.is_array:
            values = _array_column(record, path)
            height = max(height, len(values))
        else:
            values = [get_value_by_path(record, path)]
        columns.append(values)

    rows: Table = []
    for i in range(height):
        row: List[str] = []
        for path, values in zip(paths, columns):
            if path.is_identity and not path.is_array:
                row.append(_cell(values[0]))
            elif i < len(values):
                row.append(_cell(values[i]))
            else:
                row.append('')
        rows.append(row)
    return rows


def flatten_records(
    records: Sequence[Record],
    headers: Sequence[str],
    legacy_prefix: str = DEFAULT_LEGACY_PREFIX,
) -> Table:
    """Flatten converted records back into a table (header row first)."""
    headers = list(headers)
    paths = parse_headers(headers, legacy_prefix)
    table: Table = [headers]
    for record in records or []:
        if isinstance(record, dict):
            table.extend(flatten_record(record, paths))
    return table


def table_to_tsv(table: Table) -> str:
    def clean(cell: str) -> str:
        return (cell or '').replace('\t', ' ').replace('\r', ' ').replace('\n', ' ')

    return '\n'.join('\t'.join(clean(cell) for cell in row) for row in table)
