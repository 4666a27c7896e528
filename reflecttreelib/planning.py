"""Search planning for ReflectTreeLib.

The SearchPlan validates a SearchConfig against an adapter and coordinates
running a matcher over the traversal.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .config import SearchConfig, TraversalStrategy
from .core.adapter import ReflectionAdapter
from .core.matcher import FieldMatcher
from .core.node import Field, ReflectableNode
from .core.traverser import FieldTraverser, create_traverser

logger = logging.getLogger(__name__)


class InvalidSearchConfigError(ValueError):
    """Raised when a SearchConfig is inconsistent."""
    pass


class SearchPlan:
    """Validated plan for searching object trees.

    The SearchPlan is the bridge between user intent (SearchConfig) and
    execution. It validates the configuration up front and assembles the
    traverser, so the searches themselves can never fail on bad settings.

    A plan holds no per-search state and may be reused for any number of
    searches, including nested or concurrent ones on independent roots.
    """

    def __init__(self, config: Optional[SearchConfig] = None,
                 adapter: Optional[ReflectionAdapter] = None):
        """Create and validate a search plan.

        Args:
            config: Search configuration (defaults to SearchConfig())
            adapter: Reflection adapter (defaults to ObjectAdapter)

        Raises:
            InvalidSearchConfigError: If the configuration is invalid
        """
        self.config = config or SearchConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise InvalidSearchConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        # error_policy only configures the default adapter; a caller's
        # adapter keeps its own policy
        if adapter is None:
            from .adapters.objects import ObjectAdapter
            adapter = ObjectAdapter(error_policy=self.config.error_policy)
        self.adapter = adapter

        self.traverser = self._select_traverser()
        logger.debug(
            "Search plan ready: adapter=%s traverser=%s max_depth=%s",
            self.adapter.__class__.__name__,
            self.traverser.__class__.__name__,
            self.config.max_depth,
        )

    def _select_traverser(self) -> FieldTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        strategy_map = {
            TraversalStrategy.ITERATIVE: "iterative",
            TraversalStrategy.RECURSIVE: "recursive",
        }
        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def node(self, root: Any) -> ReflectableNode:
        """Turn a raw value (or an existing node) into a node view."""
        return self.adapter.reflect(root)

    def iter_fields(self, root: Any) -> Iterator[Tuple[Field, int]]:
        """Stream every field below root in pre-order.

        Args:
            root: Value or node to search below

        Yields:
            Tuples of (field, depth)
        """
        yield from self.traverser.traverse(self.node(root), max_depth=self.config.max_depth)

    def find_first(self, root: Any, matcher: FieldMatcher) -> Any:
        """Return the extracted result for the first matching field.

        Stops the traversal as soon as a match is seen.

        Args:
            root: Value or node to search below
            matcher: FieldMatcher deciding hits

        Returns:
            The matcher's extracted result, or None when nothing matches
        """
        for field, _ in self.iter_fields(root):
            if matcher.matches(field):
                return matcher.extract(field)
        return None

    def find_all(self, root: Any, matcher: FieldMatcher) -> Iterator[Any]:
        """Yield the extracted result for every matching field in pre-order.

        Matching fields are still descended into.
        """
        for field, _ in self.iter_fields(root):
            if matcher.matches(field):
                yield matcher.extract(field)

    def group_members(self, root: Any) -> List[ReflectableNode]:
        """Return root's group members, or [] if root is not a group."""
        return self.node(root).group_members()

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the search plan.

        Useful for debugging and logging.
        """
        return {
            'strategy': self.config.strategy.value,
            'max_depth': self.config.max_depth,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'error_policy': self.adapter.error_policy.__class__.__name__,
        }
