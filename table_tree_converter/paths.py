from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

ARRAY_MARKER = '[]'
DEFAULT_LEGACY_PREFIX = 'XX'


@dataclass(frozen=True)
class PathSegment:
    key: str
    is_array: bool = False


@dataclass(frozen=True)
class HeaderPath:
    """Structural interpretation of a single column header."""

    header: str
    segments: Tuple[PathSegment, ...]

    @property
    def keys(self) -> List[str]:
        return [seg.key for seg in self.segments]

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def is_array(self) -> bool:
        return any(seg.is_array for seg in self.segments)

    @property
    def array_field(self) -> Optional[str]:
        """Sub-field written on each element of the first array, if any.

        `family[]name` -> 'name'; `hobby[]` -> None.
        """
        for index, seg in enumerate(self.segments):
            if seg.is_array:
                rest = self.segments[index + 1:]
                return rest[0].key if rest else None
        return None

    @property
    def is_identity(self) -> bool:
        return is_identity_header(self.header)


def is_identity_header(header: str) -> bool:
    """Identity columns carry neither nesting nor array markers."""
    if header is None:
        return True
    return '.' not in header and ARRAY_MARKER not in header


def rewrite_legacy_alias(header: str, prefix: str = DEFAULT_LEGACY_PREFIX) -> str:
    """Rewrite `PREFIX.rest` into the explicit `PREFIX[].rest` form."""
    if not prefix or header is None:
        return header
    if header.startswith(prefix + '.'):
        return f"{prefix}{ARRAY_MARKER}{header[len(prefix):]}"
    return header


def tokenize_header(header: str) -> List[str]:
    """Split a header into name tokens and literal '[]' markers.

    '.', '[' and ']' act as boundaries; empty tokens are dropped, so stray
    brackets and doubled dots never raise.
    """
    if header is None:
        return []
    if not isinstance(header, str):
        header = str(header)

    tokens: List[str] = []
    buf: List[str] = []
    i = 0
    while i < len(header):
        ch = header[i]
        if ch in '.[]':
            if buf:
                tokens.append(''.join(buf))
                buf = []
            if header.startswith(ARRAY_MARKER, i):
                tokens.append(ARRAY_MARKER)
                i += 2
                continue
        else:
            buf.append(ch)
        i += 1

    if buf:
        tokens.append(''.join(buf))
    return tokens


def parse_header(header: str, legacy_prefix: str = DEFAULT_LEGACY_PREFIX) -> HeaderPath:
    raw = '' if header is None else str(header)
    tokens = tokenize_header(rewrite_legacy_alias(raw, legacy_prefix))

    segments: List[PathSegment] = []
    for token in tokens:
        if token == ARRAY_MARKER:
            # A marker only applies to the name right before it.
            if segments and not segments[-1].is_array:
                segments[-1] = PathSegment(segments[-1].key, True)
            continue
        segments.append(PathSegment(token))

    return HeaderPath(header=raw, segments=tuple(segments))


def parse_headers(headers: List[str], legacy_prefix: str = DEFAULT_LEGACY_PREFIX) -> List[HeaderPath]:
    return [parse_header(h, legacy_prefix) for h in headers]
