from __future__ import annotations

from typing import List, Optional

from .exceptions import TableReadError
from .values import Table


def parse_clipboard_text(text: Optional[str]) -> Table:
    """Split pasted spreadsheet text into rows of cells.

    Rows are newline-separated, cells tab-separated; '\\r' and surrounding
    whitespace are stripped from each cell. Rows with only blank cells (the
    trailing newline of a spreadsheet copy) are dropped.
    """
    if not text:
        return []

    rows: Table = []
    for line in text.split('\n'):
        cells: List[str] = [cell.replace('\r', '').strip() for cell in line.split('\t')]
        if not any(cells):
            continue
        rows.append(cells)
    return rows


def read_table_content(file_obj) -> Table:
    """Read a table from an uploaded file or file path."""
    if file_obj is None:
        raise TableReadError("No file uploaded.")

    try:
        if hasattr(file_obj, 'read'):
            if hasattr(file_obj, 'seek'):
                file_obj.seek(0)
            content = file_obj.read()
        else:
            path = file_obj.name if hasattr(file_obj, 'name') else file_obj
            with open(path, 'rb') as f:
                content = f.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8-sig')
    except (OSError, UnicodeDecodeError) as exc:
        raise TableReadError(f"Could not read file: {exc}") from exc

    return parse_clipboard_text(content.lstrip('\ufeff'))
