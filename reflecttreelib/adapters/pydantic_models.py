"""Pydantic adapter for ReflectTreeLib.

Reflects pydantic (v2) models field by field in declaration order, so
validated data models can be searched like any other object tree.
"""

from typing import Any, Iterable, Iterator, Optional, Tuple

from pydantic import BaseModel

from ..core.adapter import ReflectionAdapter


def is_model_instance(value: Any) -> bool:
    """Check if a value is a pydantic model instance (not a model class)."""
    return isinstance(value, BaseModel)


class PydanticModelAdapter(ReflectionAdapter):
    """Adapter for trees made of pydantic models.

    Fields are declared fields in ``model_fields`` order, followed by any
    extra values the model accepted. Only models are taken apart; any other
    value is a leaf, so use ObjectAdapter for trees mixing models with
    dataclasses, containers or plain objects.
    """

    def __init__(self, by_alias: bool = False, include_computed: bool = False,
                 error_policy=None):
        """Initialize pydantic adapter.

        Args:
            by_alias: Label fields with their alias when one is declared
            include_computed: Also expose ``@computed_field`` values
            error_policy: ErrorPolicy for failing reads
        """
        super().__init__(error_policy)
        self.by_alias = by_alias
        self.include_computed = include_computed

    def iter_members(self, payload: Any) -> Iterable[Tuple[Optional[str], Any]]:
        """Yield model fields, or nothing for non-model values."""
        if not is_model_instance(payload):
            return ()
        return self.iter_model_fields(payload)

    def iter_model_fields(self, model: BaseModel) -> Iterator[Tuple[Optional[str], Any]]:
        """Yield ``(label, value)`` for every field of a model.

        Args:
            model: Pydantic model instance

        Yields:
            Declared fields, computed fields (if enabled), then extras
        """
        model_type = type(model)

        for name, info in model_type.model_fields.items():
            label = info.alias if self.by_alias and info.alias else name
            yield label, getattr(model, name)

        if self.include_computed:
            for name in model_type.model_computed_fields:
                yield name, getattr(model, name)

        extra = model.model_extra
        if extra:
            for name, value in extra.items():
                yield name, value
