from __future__ import annotations

from typing import Any, Dict, Sequence

from .paths import ARRAY_MARKER, DEFAULT_LEGACY_PREFIX, parse_header


def build_header_tree(headers: Sequence[str], legacy_prefix: str = DEFAULT_LEGACY_PREFIX) -> Dict[str, Any]:
    """Convert header paths into a nested dictionary tree.

    Leaf nodes are the original header strings.
    Branch nodes are dictionaries; array segments are labelled 'name[]'.
    If a header names a node that other headers nest under (e.g. 'a' and
    'a.b'), the header for 'a' is stored under '__self__'.
    """
    tree: Dict[str, Any] = {}
    for header in headers:
        path = parse_header(header, legacy_prefix)
        if path.is_empty:
            continue
        labels = [seg.key + ARRAY_MARKER if seg.is_array else seg.key for seg in path.segments]

        current = tree
        for label in labels[:-1]:
            if label not in current:
                current[label] = {}

            # A node seen earlier as a leaf becomes a branch
            if isinstance(current[label], str):
                current[label] = {'__self__': current[label]}

            current = current[label]

        last = labels[-1]
        if isinstance(current.get(last), dict):
            current[last]['__self__'] = header
        elif last not in current:
            current[last] = header
    return tree
