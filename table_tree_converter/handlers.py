from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Optional

from .config import settings
from .exceptions import ExportError, TableReadError, TableTreeError
from .flattening import flatten_records, table_to_tsv
from .io_utils import parse_clipboard_text, read_table_content
from .records import convert_table
from .schema_utils import build_header_tree
from .values import Record, Table, coerce_policy

logger = logging.getLogger(__name__)


def table_preview(table: Optional[Table], limit: Optional[int] = None) -> Dict[str, Any]:
    """Header/data payload for the table preview, rows padded to header width."""
    if not table:
        return {"headers": [], "data": []}
    limit = settings.ui.preview_rows if limit is None else limit
    headers = list(table[0])
    width = len(headers)
    data = [(list(row) + [''] * width)[:width] for row in table[1:1 + max(0, int(limit))]]
    return {"headers": headers, "data": data}


def compute_record_count_text(table: Optional[Table], records: Optional[List[Record]]) -> str:
    if not table:
        return ""
    data_rows = max(0, len(table) - 1)
    if records is None:
        return f"Rows: {data_rows} (no data rows to convert)"
    return f"Rows: {data_rows} | Records: {len(records)}"


def run_conversion(table: Optional[Table], policy) -> Optional[List[Record]]:
    return convert_table(table, coerce_policy(policy), settings.conversion.legacy_array_prefix)


def _load_result(table: Table, policy):
    records = run_conversion(table, policy)
    header_tree = build_header_tree(table[0], settings.conversion.legacy_array_prefix) if table else None
    return table, table_preview(table), records, header_tree, compute_record_count_text(table, records)


def handle_paste(text, policy):
    table = parse_clipboard_text(text)
    if not table:
        return [], table_preview(None), None, None, "Paste spreadsheet cells (header row first)."
    return _load_result(table, policy)


def handle_file_upload(file_obj, policy):
    try:
        table = read_table_content(file_obj)
    except TableReadError as exc:
        logger.warning("Upload rejected: %s", exc)
        return [], table_preview(None), None, None, str(exc)
    if not table:
        return [], table_preview(None), None, None, "Uploaded file contains no rows."
    return _load_result(table, policy)


def handle_policy_change(table, policy):
    """Recompute the whole conversion against the captured table."""
    if not table:
        return None, ""
    records = run_conversion(table, policy)
    return records, compute_record_count_text(table, records)


def write_export(table: Table, policy, output_format: str, file_name: Optional[str]) -> str:
    records = run_conversion(table, policy)
    if records is None:
        raise ExportError("No data rows to export.")

    fmt = (output_format or "JSON").upper()
    if fmt not in ("JSON", "TSV"):
        raise ExportError(f"Unsupported export format: {output_format}")

    if not file_name or not file_name.strip():
        file_name = settings.export.default_filename
    file_name = file_name.strip()

    ext = f".{fmt.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext

    output_dir = settings.export.output_dir
    path = os.path.join(str(output_dir), file_name)

    try:
        os.makedirs(str(output_dir), exist_ok=True)
        with open(path, 'w', encoding='utf-8', newline='') as f:
            if fmt == "TSV":
                flat = flatten_records(records, table[0], settings.conversion.legacy_array_prefix)
                f.write(table_to_tsv(flat))
                f.write('\n')
            else:
                json.dump(records, f, ensure_ascii=False, indent=settings.export.json_indent)
    except OSError as exc:
        raise ExportError(f"Error writing {path}: {exc}") from exc

    logger.info("Exported %d records to %s", len(records), path)
    return path


def export_data_handler(table, policy, output_format, file_name):
    if not table:
        return None, "No data loaded."
    try:
        path = write_export(table, policy, output_format, file_name)
    except TableTreeError as exc:
        logger.warning("Export failed: %s", exc)
        return None, str(exc)
    return path, f"Export successful! Saved to {path}"
