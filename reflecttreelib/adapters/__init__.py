"""Reflection adapters for specific kinds of values.

Adapters implement the ReflectionAdapter interface for different object
models, enabling ReflectTreeLib to search any of them.
"""

from .objects import ObjectAdapter, is_named_tuple, tuple_label
from .pydantic_models import PydanticModelAdapter, is_model_instance

__all__ = [
    "ObjectAdapter",
    "PydanticModelAdapter",
    "is_named_tuple",
    "is_model_instance",
    "tuple_label",
]
