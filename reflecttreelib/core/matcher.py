"""Field matching strategies for ReflectTreeLib.

FieldMatchers decide which visited fields count as a hit and what is handed
back to the caller for them. This allows the same traversal to answer
different questions (find by type, find by label, custom predicates).
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple, Union

from .node import Field


class FieldMatcher(ABC):
    """Abstract base class for field matching strategies."""

    @abstractmethod
    def matches(self, field: Field) -> bool:
        """Check whether a visited field is a hit.

        Args:
            field: The field being visited

        Returns:
            True if the field matches
        """
        pass

    def extract(self, field: Field) -> Any:
        """Return the result for a matching field.

        Default returns the field's node.
        """
        return field.node


class TypeMatcher(FieldMatcher):
    """Matches fields whose value has exactly the given runtime type.

    Subclass instances do NOT match: ``TypeMatcher(int)`` ignores ``True``.
    A tuple of types matches any of them, each compared exactly.
    """

    def __init__(self, target: Union[type, Tuple[type, ...]]):
        self.targets = target if isinstance(target, tuple) else (target,)

    def matches(self, field: Field) -> bool:
        """Exact type comparison."""
        runtime_type = field.node.runtime_type
        return any(runtime_type is target for target in self.targets)

    def extract(self, field: Field) -> Any:
        """Return the payload itself."""
        return field.node.payload

    def __repr__(self) -> str:
        names = ', '.join(t.__name__ for t in self.targets)
        return f"TypeMatcher({names})"


class LabelMatcher(FieldMatcher):
    """Matches fields by label, regardless of the value's type."""

    def __init__(self, label: str):
        self.label = label

    def matches(self, field: Field) -> bool:
        """Compare the field label."""
        return field.label == self.label

    def __repr__(self) -> str:
        return f"LabelMatcher({self.label!r})"


class PredicateMatcher(FieldMatcher):
    """Matcher that uses a user-provided function.

    Allows custom matching logic without subclassing.
    """

    def __init__(self, predicate: Callable[[Field], bool],
                 extract_func: Callable[[Field], Any] = None):
        """Initialize with custom predicate.

        Args:
            predicate: Function(field) -> bool
            extract_func: Function(field) -> Any (default: the field's node)
        """
        self.predicate = predicate
        self.extract_func = extract_func

    def matches(self, field: Field) -> bool:
        """Use custom predicate."""
        return bool(self.predicate(field))

    def extract(self, field: Field) -> Any:
        """Use custom extraction if given."""
        if self.extract_func is None:
            return field.node
        return self.extract_func(field)
