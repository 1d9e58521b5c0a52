from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .casing import transform_key
from .nodes import ABSENT, NodeKind, kind_of
from .traversal import map_tree

PATH_DELIMITER = ' '
SCALAR_KEY = 'Value'


def flatten_mapping(data: Dict[Any, Any], delimiter: str = PATH_DELIMITER) -> Dict[str, Any]:
    """Collapse nested mappings into one level keyed by delimiter-joined paths.

    Sequences are leaves and are kept whole. Empty mappings and ABSENT values
    contribute nothing. Duplicate paths keep the last value seen. The input
    must be acyclic, e.g. the output of ``map_tree``.
    """
    flat: Dict[str, Any] = {}

    # Stack contains: (path_string, value), popped in document order
    stack: List[Tuple[str, Any]] = [(str(k), v) for k, v in reversed(list(data.items()))]

    while stack:
        prefix, value = stack.pop()
        kind = kind_of(value)

        if kind is NodeKind.ABSENT:
            continue
        if kind is NodeKind.MAPPING:
            for key, child in reversed(list(value.items())):
                key = str(key)
                stack.append((f"{prefix}{delimiter}{key}" if prefix else key, child))
            continue

        flat[prefix] = value

    return flat


def _flatten_start_case_mapping(data: Dict[Any, Any]) -> Dict[str, Any]:
    renamed = map_tree(data, key_fn=transform_key)
    return flatten_mapping(renamed)


def make_flat_start_case(node: Any) -> Any:
    """Create a flattened copy of ``node`` with every key rendered in start case.

    Example::

        make_flat_start_case({'image': {'size': 10, 'recommendedSize': 20}})
        # {'Image Size': 10, 'Image Recommended Size': 20}

    Environment-variable style keys (``FOO_BAR``) are kept as they are.
    Scalars are wrapped as ``{'Value': scalar}``, ABSENT is returned as is, and
    sequences are mapped element-wise (structural elements are transformed,
    scalar elements pass through).
    """
    kind = kind_of(node)

    if kind is NodeKind.ABSENT:
        return ABSENT
    if kind is NodeKind.SCALAR:
        return {SCALAR_KEY: node}
    if kind is NodeKind.SEQUENCE:
        return map_tree(node, mapping_fn=_flatten_start_case_mapping)
    return _flatten_start_case_mapping(node)
