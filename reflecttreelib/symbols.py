"""Symbol name extraction for image-like values.

An image value that was built from a named symbol carries, somewhere inside
it, a provider labelled ``base`` with a ``location`` and a ``name``. This
module digs the name out so the symbol can be re-created elsewhere.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from .api import find_by_label
from .bundles import BundleLookup, load_private_resource_bundle
from .core.adapter import ReflectionAdapter

logger = logging.getLogger(__name__)


class SymbolLocation(str, Enum):
    """Symbol sources whose names can be resolved."""
    SYSTEM = "system"
    PRIVATE_SYSTEM = "privateSystem"


SYMBOL_LOCATIONS = frozenset(location.value for location in SymbolLocation)


def describe(value: Any) -> str:
    """String description used to compare locations.

    Enum members describe as their value when it is a string and as their
    name otherwise, so ``Location.system`` reads as ``"system"``.
    """
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    return str(value)


def system_symbol_name(image: Any, adapter: Optional[ReflectionAdapter] = None) -> Optional[str]:
    """Return the symbol name an image was created from.

    Only symbols from a system or private-system location have a name
    worth returning; images from any other source give None.
    A location whose description cannot be produced also gives None.

    Args:
        image: Image-like value (or its node)
        adapter: Reflection adapter (defaults to ObjectAdapter)

    Returns:
        Symbol name, or None
    """
    provider = find_by_label(image, "base", adapter)
    if provider is None:
        return None

    location = provider.field("location")
    if location is None:
        return None
    try:
        location_name = describe(location.payload)
    except Exception as e:
        logger.warning(
            "Could not describe symbol location %s: %s: %s",
            type(location.payload).__name__, type(e).__name__, e
        )
        return None
    if location_name not in SYMBOL_LOCATIONS:
        return None

    name = provider.field("name")
    if name is None or not isinstance(name.payload, str):
        return None
    return name.payload


class SymbolImageResolver:
    """Turns image values back into loadable symbol assets.

    The symbol name is first offered to ``system_lookup``. If that has
    nothing, the private resource bundle is loaded and ``bundle_lookup`` is
    asked instead.

    Example:
        resolver = SymbolImageResolver(
            system_lookup=catalog.get,
            bundle_lookup=lambda name, bundle: bundle.image_named(name),
        )
        asset = resolver.resolve(image)
    """

    def __init__(self,
                 system_lookup: Callable[[str], Optional[Any]],
                 bundle_lookup: Optional[Callable[[str, Any], Optional[Any]]] = None,
                 loader: Callable[[], BundleLookup] = load_private_resource_bundle,
                 adapter: Optional[ReflectionAdapter] = None):
        """Initialize resolver.

        Args:
            system_lookup: Function(name) -> asset or None
            bundle_lookup: Function(name, bundle) -> asset or None
            loader: Function() -> BundleLookup for the private bundle
            adapter: Reflection adapter for reading images
        """
        self.system_lookup = system_lookup
        self.bundle_lookup = bundle_lookup
        self.loader = loader
        self.adapter = adapter

    def symbol_name(self, image: Any) -> Optional[str]:
        return system_symbol_name(image, self.adapter)

    def resolve(self, image: Any) -> Optional[Any]:
        """Resolve an image value to an asset, or None."""
        name = self.symbol_name(image)
        if name is None:
            return None

        asset = self.system_lookup(name)
        if asset is not None:
            return asset

        if self.bundle_lookup is None:
            return None

        lookup = self.loader()
        if not lookup:
            logger.debug("No private bundle for symbol %r: %s", name, lookup.reason)
            return None
        return self.bundle_lookup(name, lookup.bundle)
