"""Field traversal strategies for ReflectTreeLib.

Traversers walk the fields below a root node. They are independent of the
shape of the values involved, working through the ReflectionAdapter.

Every traverser visits fields in pre-order: a field is yielded before any of
the fields of its value, and siblings are visited in declaration order. The
root node itself is never yielded; depth 1 is a field of the root.
"""

from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Tuple

from .adapter import ReflectionAdapter
from .node import Field, ReflectableNode


class FieldTraverser(ABC):
    """Abstract base class for field traversal strategies."""

    def __init__(self, adapter: ReflectionAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: ReflectionAdapter for taking values apart
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: ReflectableNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Field, int]]:
        """Traverse the fields below root.

        Args:
            root: Node whose fields are searched
            max_depth: Deepest field level to visit (None = unlimited)

        Yields:
            Tuples of (field, depth) where depth 1 is a field of root
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if the fields of a value at given depth should be visited."""
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(FieldTraverser):
    """Depth-first pre-order traversal with an explicit stack.

    Keeps one lazy field iterator per open level instead of recursing, so
    depth is only bounded by memory. This is the default strategy and the
    one to use for very deep chains.
    """

    def traverse(self,
                 root: ReflectableNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Field, int]]:
        """Traverse fields depth-first, pre-order, without recursion."""
        if not self._should_explore(0, max_depth):
            return

        stack: List[Iterator[Field]] = [root.fields()]

        while stack:
            field = next(stack[-1], None)
            if field is None:
                stack.pop()
                continue

            depth = len(stack)
            yield (field, depth)

            # Descend before moving on to the next sibling
            if self._should_explore(depth, max_depth):
                stack.append(field.node.fields())


class RecursivePreOrderTraverser(FieldTraverser):
    """Depth-first pre-order traversal using generator recursion.

    Reads like the definition of the search, but each level costs a few
    interpreter frames, so it is limited by ``sys.getrecursionlimit()``.
    Good for shallow trees.
    """

    def traverse(self,
                 root: ReflectableNode,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Field, int]]:
        """Traverse fields depth-first, pre-order, recursively."""

        def _traverse_recursive(node: ReflectableNode, depth: int) -> Iterator[Tuple[Field, int]]:
            if not self._should_explore(depth, max_depth):
                return
            for field in node.fields():
                yield (field, depth + 1)
                yield from _traverse_recursive(field.node, depth + 1)

        yield from _traverse_recursive(root, 0)


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: ReflectionAdapter) -> FieldTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs, dfs_pre, iterative, recursive)
        adapter: ReflectionAdapter for the values being searched

    Returns:
        FieldTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'iterative': DepthFirstPreOrderTraverser,
        'recursive': RecursivePreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
