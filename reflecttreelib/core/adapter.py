"""ReflectionAdapter abstraction for ReflectTreeLib.

The ReflectionAdapter is what makes ReflectTreeLib universal. It knows HOW to
take a particular kind of value apart into labelled members, decoupling the
node view from the traversal and matching machinery.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from .node import Field, ReflectableNode


Member = Tuple[Optional[str], Any]


class ReflectionAdapter(ABC):
    """Abstract adapter for reflecting values into ReflectableNodes.

    Subclasses only describe a payload's raw members through
    ``iter_members`` and ``iter_group``. This base class wraps each member
    into a node, keeps iteration lazy, and routes any exception raised while
    reading a payload to the error policy so searches stay total.
    """

    def __init__(self, error_policy=None):
        """Initialize adapter.

        Args:
            error_policy: ErrorPolicy used when reading a payload fails
                (defaults to SkipUnreflectablePolicy)
        """
        if error_policy is None:
            from ..error_policies import SkipUnreflectablePolicy
            error_policy = SkipUnreflectablePolicy()
        self.error_policy = error_policy

    def reflect(self, value: Any) -> ReflectableNode:
        """Wrap a value in a node view bound to this adapter.

        Existing nodes are passed through untouched.
        """
        if isinstance(value, ReflectableNode):
            return value
        return ReflectableNode(value, self)

    @abstractmethod
    def iter_members(self, payload: Any) -> Iterable[Member]:
        """Yield ``(label, value)`` pairs for a payload's structural members.

        Must be deterministic: the same payload always yields the same
        labels in the same order. Leaves yield nothing.

        Args:
            payload: The value to take apart

        Returns:
            Iterable of (label, value) pairs
        """
        pass

    def iter_group(self, payload: Any) -> Optional[Iterable[Any]]:
        """Return a payload's ordered group members, or None if not a group.

        Default implementation treats nothing as a group.

        Args:
            payload: The value to inspect

        Returns:
            Iterable of member values, or None
        """
        return None

    def get_fields(self, node: ReflectableNode) -> Iterator[Field]:
        """Lazily yield a node's fields.

        Errors raised while reading the payload are handed to the error
        policy; the default policy ends the field stream instead of failing.

        Args:
            node: The node to expand

        Yields:
            Field instances in declaration order
        """
        try:
            for label, value in self.iter_members(node.payload):
                yield Field(label, self.reflect(value))
        except Exception as e:
            for label, value in self.error_policy.handle(e, 'get_fields', node) or ():
                yield Field(label, self.reflect(value))

    def get_group_members(self, node: ReflectableNode) -> List[ReflectableNode]:
        """Return a node's group members in order ([] if not a group).

        Args:
            node: The node to inspect

        Returns:
            List of member nodes
        """
        try:
            members = self.iter_group(node.payload)
            if members is None:
                return []
            return [self.reflect(member) for member in members]
        except Exception as e:
            return list(self.error_policy.handle(e, 'get_group_members', node) or [])

    def is_group(self, node: ReflectableNode) -> bool:
        """Check if a node's payload is an ordered group."""
        try:
            return self.iter_group(node.payload) is not None
        except Exception as e:
            self.error_policy.handle(e, 'is_group', node)
            return False

    def is_reflectable(self, value: Any) -> bool:
        """Check if a value has any structure to look into.

        A value is reflectable when it exposes at least one field or is a
        group.
        """
        node = self.reflect(value)
        return self.is_group(node) or not node.is_leaf()
