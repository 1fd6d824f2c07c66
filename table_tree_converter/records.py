from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Union

from .accessors import set_value_by_path
from .merging import merge_into
from .paths import DEFAULT_LEGACY_PREFIX, HeaderPath, is_identity_header, parse_headers
from .values import EmptyValuePolicy, Record, Table, coerce_policy

logger = logging.getLogger(__name__)


def cell_at(row: Sequence[str], index: int) -> str:
    """Cell value at `index`; rows shorter than the header yield ''."""
    if index < len(row) and row[index] is not None:
        return row[index]
    return ''


def build_row_key(headers: Sequence[str], row: Sequence[str]) -> str:
    """Concatenate the values of identity columns in header order.

    Columns whose header contains '.' or '[]' never contribute.
    """
    return ''.join(cell_at(row, idx) for idx, header in enumerate(headers) if is_identity_header(header))


def build_record(
    paths: Sequence[HeaderPath],
    row: Sequence[str],
    policy: EmptyValuePolicy = EmptyValuePolicy.NULL,
) -> Record:
    record: Record = {}
    for idx, path in enumerate(paths):
        set_value_by_path(record, path, cell_at(row, idx), policy)
    return record


def convert_table(
    table: Optional[Table],
    policy: Union[EmptyValuePolicy, str] = EmptyValuePolicy.NULL,
    legacy_prefix: str = DEFAULT_LEGACY_PREFIX,
) -> Optional[List[Record]]:
    """Convert a header row plus data rows into merged nested records.

    Rows with the same key (see `build_row_key`) become one record; the result
    keeps the order in which keys first appeared. Returns None when the table
    has no data rows.
    """
    if not table or len(table) < 2:
        return None

    policy = coerce_policy(policy)
    headers = list(table[0])
    paths = parse_headers(headers, legacy_prefix)

    grouped: Dict[str, Record] = {}
    for row in table[1:]:
        record = build_record(paths, row, policy)
        key = build_row_key(headers, row)
        if key in grouped:
            merge_into(grouped[key], record)
        else:
            grouped[key] = record

    logger.debug(
        "Converted %d data rows into %d records (policy=%s)",
        len(table) - 1,
        len(grouped),
        policy.value,
    )
    return list(grouped.values())
