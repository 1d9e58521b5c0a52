from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from .errors import CircularReferenceError
from .nodes import NodeKind, kind_of

KeyFn = Callable[[Any], Any]
ValueFn = Callable[[Any], Any]
MappingFn = Callable[[Dict[Any, Any]], Any]

_ENTER = 'enter'
_LEAVE = 'leave'


def map_tree(
    node: Any,
    key_fn: Optional[KeyFn] = None,
    value_fn: Optional[ValueFn] = None,
    mapping_fn: Optional[MappingFn] = None,
) -> Any:
    """Build a transformed copy of a JSON-like tree using DFS (no recursion limits).

    - ``key_fn`` renames every mapping key, at every depth.
    - ``value_fn`` rewrites every non-structural leaf (scalars and ABSENT).
    - ``mapping_fn``, when given, replaces nested mappings wholesale instead of
      descending into them. The root itself is always descended into.

    Sequences come back as lists. The input is never modified. When two keys
    are renamed to the same key, the later one wins.
    """
    kind = kind_of(node)
    if kind not in (NodeKind.MAPPING, NodeKind.SEQUENCE):
        return value_fn(node) if value_fn else node

    root = {} if kind is NodeKind.MAPPING else []

    # Stack contains: (action, source_node, destination_node, current_path)
    stack: List[tuple] = [(_ENTER, node, root, [])]
    on_path = set()

    while stack:
        action, src, dst, path = stack.pop()
        if action == _LEAVE:
            on_path.discard(id(src))
            continue

        if id(src) in on_path:
            raise CircularReferenceError(path)
        on_path.add(id(src))
        stack.append((_LEAVE, src, dst, path))

        is_mapping = isinstance(src, dict)
        iterator = src.items() if is_mapping else enumerate(src)
        children = []

        for key, raw in iterator:
            out_key = key_fn(key) if (is_mapping and key_fn) else key
            raw_kind = kind_of(raw)

            if raw_kind is NodeKind.MAPPING and mapping_fn is not None:
                if id(raw) in on_path:
                    raise CircularReferenceError(path + [key])
                val = mapping_fn(raw)
            elif raw_kind in (NodeKind.MAPPING, NodeKind.SEQUENCE):
                val = {} if raw_kind is NodeKind.MAPPING else []
                children.append((_ENTER, raw, val, path + [key]))
            else:
                val = value_fn(raw) if value_fn else raw

            if is_mapping:
                dst[out_key] = val
            else:
                dst.append(val)

        # Reverse to keep document order when popping (DFS)
        stack.extend(reversed(children))

    return root
