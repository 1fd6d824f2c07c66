class TableTreeError(Exception):
    """Base exception for Table Tree Converter errors."""
    pass

class TableReadError(TableTreeError):
    """Pasted text or uploaded file could not be turned into a table."""
    pass

class ExportError(TableTreeError):
    """Converted records could not be written out."""
    pass
