from __future__ import annotations

from enum import Enum
from typing import Any


class _Absent(Enum):
    """Marker for a missing value, distinct from JSON ``null`` (``None``)."""

    ABSENT = 'absent'

    def __repr__(self) -> str:
        return 'ABSENT'

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent.ABSENT


class NodeKind(Enum):
    ABSENT = 'absent'
    SCALAR = 'scalar'
    SEQUENCE = 'sequence'
    MAPPING = 'mapping'


def kind_of(node: Any) -> NodeKind:
    """Classify a value of a JSON-like tree."""
    if node is ABSENT:
        return NodeKind.ABSENT
    if isinstance(node, dict):
        return NodeKind.MAPPING
    if isinstance(node, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR
