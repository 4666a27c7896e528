"""Configuration system for ReflectTreeLib.

This module defines how users specify their search requirements (traversal
strategy, depth limits, error handling) and where the private resource
bundle lives.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional


class TraversalStrategy(Enum):
    """How to walk the fields of a tree.

    Both built-in strategies visit fields in the same pre-order; they only
    differ in how deep they can go.
    """
    ITERATIVE = "iterative"     # Explicit stack, no recursion limit
    RECURSIVE = "recursive"     # Generator recursion, shallow trees
    CUSTOM = "custom"           # User-defined traverser


@dataclass
class SearchConfig:
    """Complete configuration for a search.

    The SearchPlan validates this configuration before any value is
    reflected.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.ITERATIVE
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    max_depth: Optional[int] = None  # Deepest field level visited

    # Error handling for the default adapter (None = SkipUnreflectablePolicy)
    error_policy: Optional[Any] = None

    # Convenience constructors for common configurations

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'SearchConfig':
        """Create config that only looks a few levels down.

        Args:
            max_depth: How deep to search (default 1 = direct fields only)

        Returns:
            SearchConfig for shallow searches
        """
        return cls(max_depth=max_depth)

    @classmethod
    def strict(cls) -> 'SearchConfig':
        """Create config that re-raises reflection errors.

        Returns:
            SearchConfig with a FailFastPolicy
        """
        from .error_policies import FailFastPolicy
        return cls(error_policy=FailFastPolicy())

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"unknown strategy: {self.strategy!r}")

        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.error_policy is not None and not callable(getattr(self.error_policy, 'handle', None)):
            errors.append("error_policy must provide a handle() method")

        return errors


@dataclass
class BundleConfig:
    """Where to find the private resource bundle.

    ``class_path`` names the bundle class either as ``"package.module:Class"``
    or as a dotted path. ``selector`` is the attribute on that class that
    produces the bundle instance, and ``load_method`` is called on the
    instance to load it.
    """

    class_path: str = "sfsymbols.glyphs:CoreGlyphsBundle"
    selector: str = "private"
    load_method: str = "load"

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.class_path:
            errors.append("class_path cannot be empty")
        elif self.class_path.count(':') > 1:
            errors.append("class_path may contain at most one ':'")
        if not self.selector:
            errors.append("selector cannot be empty")
        if not self.load_method:
            errors.append("load_method cannot be empty")
        return errors
