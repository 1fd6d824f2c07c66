from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict

from .values import Record, ValueKind, value_kind


def merge_into(target: Dict[str, Any], source: Dict[str, Any]) -> Dict[str, Any]:
    """Fold `source` into `target` in place and return `target`.

    Per key of `source`, by what `target` already holds:
    - array: concatenate a list, append anything else
    - object: recurse when the incoming value is an object too
    - absent: adopt the incoming value
    - scalar (string or null): first seen wins
    """
    for key, incoming in source.items():
        kind = value_kind(target, key)
        if kind is ValueKind.ARRAY:
            if isinstance(incoming, list):
                target[key].extend(incoming)
            else:
                target[key].append(incoming)
        elif kind is ValueKind.OBJECT:
            if isinstance(incoming, dict):
                merge_into(target[key], incoming)
        elif kind is ValueKind.ABSENT:
            target[key] = incoming
    return target


def merge_records(existing: Record, incoming: Record) -> Record:
    """Pure variant of `merge_into`; neither argument is modified."""
    merged: Record = deepcopy(existing) if isinstance(existing, dict) else {}
    if isinstance(incoming, dict):
        merge_into(merged, deepcopy(incoming))
    return merged
