from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

Key = str | tuple[str, ...]


class ValueKind(Enum):
    """Closed set of value types a registry property can hold."""

    INTEGER = "integer"
    BOOLEAN = "boolean"
    TEXT = "text"
    BYTES = "bytes"
    MAPPING = "mapping"


def matches_kind(value: Any, kind: ValueKind) -> bool:
    # bool subclasses int, so the two kinds are checked exclusively.
    if kind is ValueKind.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is ValueKind.BOOLEAN:
        return isinstance(value, bool)
    if kind is ValueKind.TEXT:
        return isinstance(value, str)
    if kind is ValueKind.BYTES:
        return isinstance(value, (bytes, bytearray, memoryview))
    if kind is ValueKind.MAPPING:
        return isinstance(value, Mapping)
    return False


@dataclass(frozen=True)
class Candidate:
    key: Key
    kind: ValueKind
    unit: str = ""


def get_value(bag: Mapping[str, Any], key: Key, kind: ValueKind) -> Any | None:
    """Return the value stored under ``key`` if it has the expected kind.

    ``key`` is either a single property name or a tuple path into nested
    mappings. Missing keys, non-mapping intermediate nodes and kind mismatches
    all yield ``None``.
    """
    path = (key,) if isinstance(key, str) else key
    node: Any = bag
    for part in path:
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    if not matches_kind(node, kind):
        return None
    return node


def resolve_candidate(
    bag: Mapping[str, Any], candidates: Sequence[Candidate]
) -> tuple[Candidate, Any] | None:
    for candidate in candidates:
        value = get_value(bag, candidate.key, candidate.kind)
        if value is not None:
            return candidate, value
    return None


def resolve(bag: Mapping[str, Any], candidates: Sequence[Candidate]) -> Any | None:
    """Return the first present, correctly typed value among ``candidates``."""
    resolved = resolve_candidate(bag, candidates)
    if resolved is None:
        return None
    return resolved[1]


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({str(k): freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(item) for item in value)
    if isinstance(value, bytearray):
        return bytes(value)
    return value
