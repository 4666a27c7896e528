"""High-level API for ReflectTreeLib.

This module provides simple, functional interfaces for the common questions
asked of an object tree. These functions wrap the SearchPlan for ease of use
in simple cases.

Every function accepts either a raw value or a ReflectableNode as ``root``.
Matching always starts at root's fields: the root value itself is never
reported as a match.
"""

import types
from typing import Any, Callable, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .config import SearchConfig
from .core.adapter import ReflectionAdapter
from .core.matcher import LabelMatcher, PredicateMatcher, TypeMatcher
from .core.node import Field, ReflectableNode
from .planning import SearchPlan

T = TypeVar('T')

# Exact runtime types treated as "actions" by first_action
ACTION_TYPES = (types.FunctionType, types.MethodType)


def _plan(adapter: Optional[ReflectionAdapter], config: Optional[SearchConfig]) -> SearchPlan:
    return SearchPlan(config, adapter)


def find_by_type(
    root: Any,
    target: Union[Type[T], Tuple[type, ...]],
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[T]:
    """Find the first value whose runtime type is exactly ``target``.

    Depth-first, pre-order over fields in declaration order, stopping at the
    first hit. Subclasses do not count: searching for ``int`` skips ``True``.

    Args:
        root: Value or node to search below
        target: Exact type, or tuple of exact types, to look for
        adapter: Reflection adapter (defaults to ObjectAdapter)
        config: Search configuration

    Returns:
        The matching value, or None if no value matches

    Example:
        >>> find_by_type(Button(label=Text("Save")), str)
        'Save'
    """
    return _plan(adapter, config).find_first(root, TypeMatcher(target))


def find_by_label(
    root: Any,
    label: str,
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[ReflectableNode]:
    """Find the first field labelled ``label``.

    Uses the same traversal as find_by_type; the value's type is ignored.

    Args:
        root: Value or node to search below
        label: Field label to look for
        adapter: Reflection adapter (defaults to ObjectAdapter)
        config: Search configuration

    Returns:
        The field's value node, or None if no field has that label
    """
    return _plan(adapter, config).find_first(root, LabelMatcher(label))


def find_value_labelled(
    root: Any,
    label: str,
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Any]:
    """Like find_by_label, but return the field's raw value."""
    node = find_by_label(root, label, adapter, config)
    return None if node is None else node.payload


def flatten_group(
    root: Any,
    adapter: Optional[ReflectionAdapter] = None,
    where: Optional[Callable[[ReflectableNode], bool]] = None,
) -> List[ReflectableNode]:
    """Return the members of root if it is an ordered group.

    Not recursive: members are returned as they are, in order.

    Args:
        root: Value or node to inspect
        adapter: Reflection adapter (defaults to ObjectAdapter)
        where: Optional filter applied to each member node

    Returns:
        Member nodes, or [] when root is not a group
    """
    members = _plan(adapter, None).group_members(root)
    if where is not None:
        members = [member for member in members if where(member)]
    return members


def find_first(
    root: Any,
    predicate: Callable[[Field], bool],
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> Optional[Field]:
    """Find the first field for which ``predicate(field)`` is true.

    Returns:
        The matching Field, or None
    """
    matcher = PredicateMatcher(predicate, extract_func=lambda field: field)
    return _plan(adapter, config).find_first(root, matcher)


def find_all_by_type(
    root: Any,
    target: Union[Type[T], Tuple[type, ...]],
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> List[T]:
    """Return every value of exact type ``target``, in pre-order."""
    return list(_plan(adapter, config).find_all(root, TypeMatcher(target)))


def find_all_by_label(
    root: Any,
    label: str,
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> List[ReflectableNode]:
    """Return every node labelled ``label``, in pre-order."""
    return list(_plan(adapter, config).find_all(root, LabelMatcher(label)))


def iter_fields(
    root: Any,
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> Iterator[Tuple[Field, int]]:
    """Stream every (field, depth) below root in pre-order."""
    yield from _plan(adapter, config).iter_fields(root)


def first_string(root: Any, adapter: Optional[ReflectionAdapter] = None) -> Optional[str]:
    """Return the first ``str`` found below root.

    Format strings are returned raw; nothing is interpolated.
    """
    return find_by_type(root, str, adapter)


def first_action(root: Any, adapter: Optional[ReflectionAdapter] = None) -> Optional[Callable]:
    """Return the first plain function or bound method found below root."""
    return find_by_type(root, ACTION_TYPES, adapter)


def first_label_icon(root: Any, adapter: Optional[ReflectionAdapter] = None) -> Optional[ReflectableNode]:
    """Return the node labelled ``icon`` if its value has structure of its own.

    Icons that turn out to be plain scalars are ignored.
    """
    plan = _plan(adapter, None)
    icon = plan.find_first(root, LabelMatcher("icon"))
    if icon is None or not icon.adapter.is_reflectable(icon):
        return None
    return icon


def format_hierarchy(
    root: Any,
    adapter: Optional[ReflectionAdapter] = None,
    config: Optional[SearchConfig] = None,
) -> str:
    """Render the fields below root as an indented outline.

    Each field takes two lines: its label, then the repr of its value.
    Intended for debugging; the format may change.

    Example:
        >>> print(format_hierarchy(Point(1, 2)))
        -| x
        -|   1
        -| y
        -|   2
    """
    lines = []
    for field, depth in iter_fields(root, adapter, config):
        indent = '-' * depth
        label = field.label if field.label is not None else '<item>'
        lines.append(f"{indent}| {label}")
        lines.append(f"{indent}|   {field.value!r}")
    return '\n'.join(lines)
