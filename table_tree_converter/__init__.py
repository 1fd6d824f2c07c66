"""Core logic for Table Tree Converter.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- split pasted spreadsheet text into a table
- parse header paths (`a.b`, `list[]`, `list[]field`)
- build one nested record per row and merge rows sharing a key
- flatten records back to rows for export
"""
