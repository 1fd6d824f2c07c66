from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

Value = Union[str, None, Dict[str, Any], List[Any]]
Record = Dict[str, Value]
Table = List[List[str]]


class EmptyValuePolicy(str, Enum):
    """How a blank cell is written into a record."""

    NULL = 'null'
    EMPTY = 'empty'
    OMIT = 'omit'


class ValueKind(Enum):
    ARRAY = 'array'
    OBJECT = 'object'
    SCALAR = 'scalar'
    ABSENT = 'absent'


class _Omitted:
    def __repr__(self) -> str:
        return '<omitted>'


OMITTED = _Omitted()


def value_kind(container: Mapping[str, Value], key: str) -> ValueKind:
    """Classify the value stored under `key` (ABSENT when the key is missing)."""
    if key not in container:
        return ValueKind.ABSENT
    value = container[key]
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return ValueKind.SCALAR


def coerce_policy(policy: Optional[Union[str, EmptyValuePolicy]]) -> EmptyValuePolicy:
    if policy is None:
        return EmptyValuePolicy.NULL
    if isinstance(policy, EmptyValuePolicy):
        return policy
    return EmptyValuePolicy(str(policy).strip().lower())


def resolve_empty_value(value: Optional[str], policy: EmptyValuePolicy):
    """Apply the policy to a raw cell.

    Returns the value to write, or `OMITTED` when nothing should be written.
    Missing cells (`None`) count as blank.
    """
    if value is None:
        value = ''
    if value != '':
        return value
    if policy is EmptyValuePolicy.EMPTY:
        return ''
    if policy is EmptyValuePolicy.OMIT:
        return OMITTED
    return None
