"""Object adapter for ReflectTreeLib.

This is the default adapter. It takes ordinary Python values apart the way
a debugger would show them: dataclass fields, named tuple fields, tuple
positions, mapping entries, sequence items and instance attributes.
"""

import dataclasses
import functools
import types
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Tuple

from ..core.adapter import ReflectionAdapter
from .pydantic_models import PydanticModelAdapter, is_model_instance


Members = Iterable[Tuple[Optional[str], Any]]

# Values that are never taken apart
LEAF_TYPES = (
    type(None), bool, int, float, complex, str, bytes, bytearray, memoryview,
    range, type, types.ModuleType, types.FunctionType, types.BuiltinFunctionType,
    types.MethodType, types.BuiltinMethodType, types.CodeType, functools.partial,
)


def is_named_tuple(value: Any) -> bool:
    """Check if a value is an instance of a namedtuple class."""
    return isinstance(value, tuple) and hasattr(type(value), '_fields')


def tuple_label(index: int) -> str:
    """Label for a plain tuple position (``.0``, ``.1``, ...)."""
    return f".{index}"


def _slot_names(cls: type) -> Iterator[str]:
    """Yield attribute names for the slots a single class declares."""
    slots = cls.__dict__.get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    for name in slots:
        if name in ('__dict__', '__weakref__'):
            continue
        # Private slots are stored under their mangled name
        if name.startswith('__') and not name.endswith('__'):
            name = f"_{cls.__name__.lstrip('_')}{name}"
        yield name


class ObjectAdapter(ReflectionAdapter):
    """Adapter for arbitrary Python values.

    Dispatch order for a payload:

    1. reflectors registered for its type (or a base class)
    2. a ``__reflect_fields__()`` method on the payload
    3. leaf values (scalars, strings, enums, classes, functions, modules)
    4. named tuples, then plain tuples (both are groups)
    5. dataclass instances
    6. pydantic models
    7. mappings, sequences and sets
    8. ``__slots__`` then ``__dict__`` attributes

    Example:
        >>> adapter = ObjectAdapter()
        >>> [f.label for f in adapter.reflect(Point(1, 2)).fields()]
        ['x', 'y']
    """

    def __init__(self, error_policy=None, pydantic_adapter: Optional[PydanticModelAdapter] = None):
        """Initialize object adapter.

        Args:
            error_policy: ErrorPolicy for failing reads
            pydantic_adapter: Adapter used for pydantic models
        """
        super().__init__(error_policy)
        self.pydantic_adapter = pydantic_adapter or PydanticModelAdapter(error_policy=self.error_policy)
        self._reflectors: Dict[type, Callable[[Any], Members]] = {}
        self._groupers: Dict[type, Callable[[Any], Iterable[Any]]] = {}

    # Registry

    def register(self, cls: type, reflector: Callable[[Any], Members],
                 group: Optional[Callable[[Any], Iterable[Any]]] = None) -> None:
        """Register how instances of a type (and its subclasses) are reflected.

        Args:
            cls: Type to register
            reflector: Function(value) -> iterable of (label, value)
            group: Function(value) -> ordered members, for group types
        """
        self._reflectors[cls] = reflector
        if group is not None:
            self._groupers[cls] = group

    def unregister(self, cls: type) -> None:
        """Forget a registered type."""
        self._reflectors.pop(cls, None)
        self._groupers.pop(cls, None)

    def _lookup(self, registry: Dict[type, Callable], value: Any) -> Optional[Callable]:
        if not registry:
            return None
        for cls in type(value).__mro__:
            if cls in registry:
                return registry[cls]
        return None

    # Reflection

    def iter_members(self, payload: Any) -> Members:
        """Yield ``(label, value)`` pairs for a payload."""
        reflector = self._lookup(self._reflectors, payload)
        if reflector is not None:
            return reflector(payload)

        hook = getattr(type(payload), '__reflect_fields__', None)
        if hook is not None and not isinstance(payload, type):
            return payload.__reflect_fields__()

        if isinstance(payload, LEAF_TYPES) or isinstance(payload, Enum):
            return ()

        if is_named_tuple(payload):
            return zip(type(payload)._fields, payload)

        if isinstance(payload, tuple):
            return ((tuple_label(i), item) for i, item in enumerate(payload))

        if dataclasses.is_dataclass(payload):
            return self._dataclass_members(payload)

        if is_model_instance(payload):
            return self.pydantic_adapter.iter_model_fields(payload)

        if isinstance(payload, Mapping):
            return self._mapping_members(payload)

        if isinstance(payload, (Sequence, Set)):
            return ((None, item) for item in payload)

        return self._attribute_members(payload)

    def iter_group(self, payload: Any) -> Optional[Iterable[Any]]:
        """Return tuple elements (or registered group members), else None."""
        grouper = self._lookup(self._groupers, payload)
        if grouper is not None:
            return grouper(payload)

        hook = getattr(type(payload), '__reflect_group__', None)
        if hook is not None and not isinstance(payload, type):
            return payload.__reflect_group__()

        if isinstance(payload, tuple):
            return payload

        return None

    def _dataclass_members(self, payload: Any) -> Members:
        for field in dataclasses.fields(payload):
            yield field.name, getattr(payload, field.name)

    def _mapping_members(self, payload: Mapping) -> Members:
        for key, value in payload.items():
            yield (key if isinstance(key, str) else None), value

    def _attribute_members(self, payload: Any) -> Members:
        seen = set()
        for cls in type(payload).__mro__:
            for name in _slot_names(cls):
                if name in seen:
                    continue
                seen.add(name)
                try:
                    value = getattr(payload, name)
                except AttributeError:
                    continue  # Unset slot
                yield name, value

        attributes = getattr(payload, '__dict__', None)
        if isinstance(attributes, dict):
            for name, value in list(attributes.items()):
                if name not in seen:
                    yield name, value
