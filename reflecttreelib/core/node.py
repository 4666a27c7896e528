"""ReflectableNode abstraction for ReflectTreeLib.

A ReflectableNode is intentionally kept simple - it's a view over one value.
Working out a value's fields and group members is delegated to the
ReflectionAdapter, which is the key to making ReflectTreeLib work with any
object shape.
"""

from typing import Any, Iterator, List, NamedTuple, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .adapter import ReflectionAdapter


class Field(NamedTuple):
    """A labelled member of a node.

    Attributes:
        label: Field name, or None for unlabelled members (list items, etc.)
        node: View over the member's value
    """
    label: Optional[str]
    node: 'ReflectableNode'

    @property
    def value(self) -> Any:
        """The member's raw value."""
        return self.node.payload


class ReflectableNode:
    """A lightweight view over a single value in an object tree.

    Nodes are derived on demand from a payload and thrown away after use.
    They hold no state besides the payload and the adapter that knows how
    to take the payload apart, so building one is essentially free.

    Two nodes are equal when they wrap the same object (identity) through
    the same kind of adapter.
    """

    __slots__ = ('payload', 'adapter')

    def __init__(self, payload: Any, adapter: 'ReflectionAdapter'):
        """Initialize a node view.

        Args:
            payload: The wrapped value
            adapter: ReflectionAdapter used to derive fields and group members
        """
        self.payload = payload
        self.adapter = adapter

    @property
    def runtime_type(self) -> type:
        """Exact runtime type of the payload."""
        return type(self.payload)

    def fields(self) -> Iterator[Field]:
        """Iterate this node's labelled members in declaration order."""
        return self.adapter.get_fields(self)

    def group_members(self) -> List['ReflectableNode']:
        """Return the ordered members if this node is a group, else []."""
        return self.adapter.get_group_members(self)

    def is_group(self) -> bool:
        """Check whether the payload is a fixed-arity ordered group."""
        return self.adapter.is_group(self)

    def field(self, label: str) -> Optional['ReflectableNode']:
        """Return the first direct field with the given label.

        This is a shallow lookup; nested fields are not searched.
        """
        for member in self.fields():
            if member.label == label:
                return member.node
        return None

    def is_leaf(self) -> bool:
        """Check if this node has no fields."""
        for _ in self.fields():
            return False
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type={self.runtime_type.__name__}, payload={self.payload!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReflectableNode):
            return NotImplemented
        return self.payload is other.payload and type(self.adapter) is type(other.adapter)

    def __hash__(self) -> int:
        return hash((id(self.payload), type(self.adapter)))
