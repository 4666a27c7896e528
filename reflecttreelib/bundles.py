"""Private resource bundle loading for ReflectTreeLib.

Some symbols are not served by the public symbol catalogue but by a private
resource bundle that has to be located by name at runtime. Locating it can
fail in three ways, and none of them should take the process down: callers
get an explicit "unavailable" result with the reason and decide on a
fallback themselves.
"""

import importlib
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .config import BundleConfig

logger = logging.getLogger(__name__)


class UnavailableReason(Enum):
    """Why the private bundle could not be provided."""
    CLASS_NOT_FOUND = "class_not_found"
    SELECTOR_NOT_FOUND = "selector_not_found"
    LOAD_FAILED = "load_failed"


@dataclass(frozen=True)
class BundleLookup:
    """Result of looking up the private bundle.

    Either ``bundle`` is set, or ``reason`` says why it is missing. Lookups
    are truthy only when the bundle is available.
    """

    bundle: Optional[Any] = None
    reason: Optional[UnavailableReason] = None
    detail: str = ""

    @property
    def available(self) -> bool:
        return self.reason is None and self.bundle is not None

    def __bool__(self) -> bool:
        return self.available

    @classmethod
    def unavailable(cls, reason: UnavailableReason, detail: str) -> 'BundleLookup':
        """Build an absent result and log why."""
        logger.warning("Private resource bundle unavailable (%s): %s", reason.value, detail)
        return cls(reason=reason, detail=detail)


def resolve_class(class_path: str) -> Any:
    """Import the object named by ``class_path``.

    Accepts ``"package.module:Name"`` or ``"package.module.Name"``.

    Raises:
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute
        Exception: Whatever the module body raises while importing
    """
    if ':' in class_path:
        module_name, _, attribute = class_path.partition(':')
    else:
        module_name, _, attribute = class_path.rpartition('.')
    if not module_name or not attribute:
        raise ImportError(f"not a class path: {class_path!r}")

    module = importlib.import_module(module_name)
    target = module
    for part in attribute.split('.'):
        target = getattr(target, part)
    return target


def load_private_resource_bundle(config: Optional[BundleConfig] = None) -> BundleLookup:
    """Locate, instantiate and load the private resource bundle.

    Args:
        config: Where the bundle lives (defaults to BundleConfig())

    Returns:
        BundleLookup with the loaded bundle, or with the reason it is missing
    """
    config = config or BundleConfig()

    config_errors = config.validate()
    if config_errors:
        return BundleLookup.unavailable(
            UnavailableReason.CLASS_NOT_FOUND, '; '.join(config_errors)
        )

    try:
        bundle_class = resolve_class(config.class_path)
    except Exception as e:
        return BundleLookup.unavailable(
            UnavailableReason.CLASS_NOT_FOUND, f"class not found: {config.class_path} ({e})"
        )

    try:
        selector = getattr(bundle_class, config.selector, None)
    except Exception as e:
        return BundleLookup.unavailable(
            UnavailableReason.SELECTOR_NOT_FOUND,
            f"{config.class_path}.{config.selector} raised {type(e).__name__}: {e}"
        )
    if selector is None:
        return BundleLookup.unavailable(
            UnavailableReason.SELECTOR_NOT_FOUND,
            f"{config.class_path} has no attribute {config.selector!r}"
        )

    try:
        bundle = selector() if callable(selector) else selector
    except Exception as e:
        return BundleLookup.unavailable(
            UnavailableReason.SELECTOR_NOT_FOUND,
            f"{config.class_path}.{config.selector} raised {type(e).__name__}: {e}"
        )
    if bundle is None:
        return BundleLookup.unavailable(
            UnavailableReason.SELECTOR_NOT_FOUND,
            f"{config.class_path}.{config.selector} returned no bundle"
        )

    try:
        load = getattr(bundle, config.load_method, None)
    except Exception as e:
        return BundleLookup.unavailable(
            UnavailableReason.LOAD_FAILED, f"{type(e).__name__}: {e}"
        )
    if not callable(load):
        return BundleLookup.unavailable(
            UnavailableReason.LOAD_FAILED,
            f"bundle has no callable {config.load_method!r}"
        )
    try:
        loaded = load()
    except Exception as e:
        return BundleLookup.unavailable(
            UnavailableReason.LOAD_FAILED, f"{type(e).__name__}: {e}"
        )
    if not loaded:
        return BundleLookup.unavailable(
            UnavailableReason.LOAD_FAILED, f"{config.load_method}() reported failure"
        )

    return BundleLookup(bundle=bundle)
