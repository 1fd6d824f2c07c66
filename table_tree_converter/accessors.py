from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from .paths import HeaderPath, PathSegment, parse_header
from .values import OMITTED, EmptyValuePolicy, Record, coerce_policy, resolve_empty_value


def _ensure_object(container: Dict[str, Any], key: str) -> Dict[str, Any]:
    child = container.get(key)
    if not isinstance(child, dict):
        child = {}
        container[key] = child
    return child


def _ensure_array(container: Dict[str, Any], key: str) -> List[Any]:
    items = container.get(key)
    if not isinstance(items, list):
        items = []
        container[key] = items
    return items


def _is_populated(node: Dict[str, Any], remaining: Sequence[PathSegment]) -> bool:
    """Whether the write along `remaining` would overwrite a value already on `node`.

    Nested arrays grow on their own, so a path crossing one never counts as
    populated.
    """
    current: Any = node
    for seg in remaining[:-1]:
        if seg.is_array or not isinstance(current, dict):
            return False
        current = current.get(seg.key)
    leaf = remaining[-1]
    if leaf.is_array or not isinstance(current, dict):
        return False
    return leaf.key in current


def set_value_by_path(
    record: Record,
    path: Union[HeaderPath, str],
    value: Optional[str],
    policy: Union[EmptyValuePolicy, str] = EmptyValuePolicy.NULL,
) -> Record:
    """Write a raw cell value into `record` along a header path (in place).

    - `a.b` creates/locates nested objects.
    - `list[]` appends the value to an array of scalars.
    - `list[]field` writes `field` on the last element of an array of objects,
      starting a new element once `field` is already set on it.
    """
    if isinstance(path, str):
        path = parse_header(path)
    if path.is_empty:
        return record

    resolved = resolve_empty_value(value, coerce_policy(policy))
    if resolved is OMITTED:
        return record

    segments = path.segments
    current: Dict[str, Any] = record
    for index, seg in enumerate(segments[:-1]):
        if seg.is_array:
            items = _ensure_array(current, seg.key)
            if not items or not isinstance(items[-1], dict) or _is_populated(items[-1], segments[index + 1:]):
                items.append({})
            current = items[-1]
        else:
            current = _ensure_object(current, seg.key)

    leaf = segments[-1]
    if leaf.is_array:
        _ensure_array(current, leaf.key).append(resolved)
    else:
        current[leaf.key] = resolved
    return record


def get_value_by_path(data: Any, path: Union[HeaderPath, str]) -> Any:
    """Read the value at a header path.

    Object segments are followed by key; an array segment returns the list
    itself so callers can index into it. Missing steps yield None.
    """
    if isinstance(path, str):
        path = parse_header(path)
    if path.is_empty:
        return None

    current = data
    for seg in path.segments:
        if not isinstance(current, dict):
            return None
        current = current.get(seg.key)
        if current is None:
            return None
        if seg.is_array:
            return current if isinstance(current, list) else None
    return current
