"""Test fixtures for ReflectTreeLib consumers.

These fixtures help assert how a search walked a tree (what was reflected,
in which order, how often) without reaching into library internals.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from ..adapters.objects import ObjectAdapter
from ..core.adapter import ReflectionAdapter


@dataclass
class ChainLink:
    """One link of a single-child chain built by make_chain."""
    next: Any


def make_chain(depth: int, leaf: Any = None) -> Any:
    """Build a chain of ``depth`` nested ChainLinks ending in ``leaf``.

    ``make_chain(2, "x")`` is ``ChainLink(next=ChainLink(next="x"))``; the
    leaf sits at field depth ``depth`` below the outermost link.

    Built iteratively, so very deep chains are fine.
    """
    if depth < 1:
        raise ValueError("depth must be at least 1")
    value = leaf
    for _ in range(depth):
        value = ChainLink(next=value)
    return value


class RecordingAdapter(ReflectionAdapter):
    """Adapter wrapper that records every payload it takes apart.

    Example:
        adapter = RecordingAdapter()
        find_by_type(tree, str, adapter=adapter)
        assert len(adapter.expanded) == 3  # stopped early
    """

    def __init__(self, base_adapter: Optional[ReflectionAdapter] = None):
        """Initialize with the adapter doing the real work.

        Args:
            base_adapter: Adapter to delegate to (defaults to ObjectAdapter)
        """
        self._base_adapter = base_adapter or ObjectAdapter()
        super().__init__(self._base_adapter.error_policy)
        self.expanded: List[Any] = []
        self.grouped: List[Any] = []

    def iter_members(self, payload: Any) -> Iterable[Tuple[Optional[str], Any]]:
        """Record payload, then delegate."""
        self.expanded.append(payload)
        return self._base_adapter.iter_members(payload)

    def iter_group(self, payload: Any) -> Optional[Iterable[Any]]:
        """Record payload, then delegate."""
        self.grouped.append(payload)
        return self._base_adapter.iter_group(payload)

    def expanded_types(self) -> List[type]:
        """Exact types of the payloads expanded so far, in order."""
        return [type(payload) for payload in self.expanded]

    def reset(self) -> None:
        """Forget everything recorded so far."""
        self.expanded.clear()
        self.grouped.clear()
