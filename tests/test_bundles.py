"""Tests for loading the private resource bundle.

Bundle classes used here live in this module and are located through
``__name__``, the same way a real class path would be resolved.
"""

import logging

import pytest

from reflecttreelib import BundleConfig, BundleLookup, UnavailableReason, load_private_resource_bundle
from reflecttreelib.bundles import resolve_class


class GlyphBundle:
    """Bundle whose private accessor works and loads fine."""

    def __init__(self, loads=True):
        self.loads = loads
        self.load_calls = 0

    @classmethod
    def private(cls):
        return cls()

    def load(self):
        self.load_calls += 1
        return self.loads


class BrokenLoadBundle(GlyphBundle):
    @classmethod
    def private(cls):
        return cls(loads=False)


class ExplodingLoadBundle(GlyphBundle):
    def load(self):
        raise OSError("disk on fire")


class UnreadableLoadBundle(GlyphBundle):
    @property
    def load(self):
        raise OSError("loader missing")


class NoAccessorBundle:
    pass


class EmptyAccessorBundle:
    @classmethod
    def private(cls):
        return None


class RaisingAccessorBundle:
    @classmethod
    def private(cls):
        raise RuntimeError("nope")


class _RaisingSelectorMeta(type):
    @property
    def private(cls):
        raise LookupError("accessor unavailable on this platform")


class PropertyAccessorBundle(metaclass=_RaisingSelectorMeta):
    """Bundle whose accessor is a class property that raises when read."""


class SharedBundle:
    """Bundle exposed as a plain attribute with a differently named loader."""

    def __init__(self):
        self.opened = False

    def open(self):
        self.opened = True
        return True


SharedBundle.shared = SharedBundle()


class Namespace:
    """Holder for a nested class path."""
    Inner = GlyphBundle


def config_for(name, **kwargs):
    return BundleConfig(class_path=f"{__name__}:{name}", **kwargs)


def test_loads_bundle():
    lookup = load_private_resource_bundle(config_for("GlyphBundle"))

    assert lookup
    assert lookup.available
    assert isinstance(lookup.bundle, GlyphBundle)
    assert lookup.bundle.load_calls == 1
    assert lookup.reason is None


def test_dotted_and_nested_class_paths():
    assert resolve_class(f"{__name__}.GlyphBundle") is GlyphBundle
    assert resolve_class(f"{__name__}:Namespace.Inner") is GlyphBundle


def test_custom_selector_and_load_method():
    lookup = load_private_resource_bundle(
        config_for("SharedBundle", selector="shared", load_method="open")
    )

    assert lookup
    assert lookup.bundle is SharedBundle.shared
    assert lookup.bundle.opened


@pytest.mark.parametrize("class_path", [
    "surely_missing_module_xyz:Bundle",
    f"{__name__}:DoesNotExist",
    "not-a-class-path",
    ".glyphs:Bundle",
])
def test_class_not_found(class_path, caplog):
    with caplog.at_level(logging.WARNING, logger="reflecttreelib.bundles"):
        lookup = load_private_resource_bundle(BundleConfig(class_path=class_path))

    assert not lookup
    assert lookup.bundle is None
    assert lookup.reason is UnavailableReason.CLASS_NOT_FOUND
    assert "class_not_found" in caplog.text


def test_module_failing_at_import_is_class_not_found(tmp_path, monkeypatch, caplog):
    (tmp_path / "unsupported_glyphs.py").write_text(
        'raise RuntimeError("platform not supported")\n'
    )
    monkeypatch.syspath_prepend(str(tmp_path))

    with caplog.at_level(logging.WARNING, logger="reflecttreelib.bundles"):
        lookup = load_private_resource_bundle(BundleConfig(class_path="unsupported_glyphs:Bundle"))

    assert not lookup
    assert lookup.reason is UnavailableReason.CLASS_NOT_FOUND
    assert "platform not supported" in lookup.detail
    assert "class_not_found" in caplog.text


@pytest.mark.parametrize("name", [
    "NoAccessorBundle", "EmptyAccessorBundle", "RaisingAccessorBundle", "PropertyAccessorBundle",
])
def test_selector_not_found(name, caplog):
    with caplog.at_level(logging.WARNING, logger="reflecttreelib.bundles"):
        lookup = load_private_resource_bundle(config_for(name))

    assert not lookup
    assert lookup.reason is UnavailableReason.SELECTOR_NOT_FOUND
    assert len(caplog.records) == 1


@pytest.mark.parametrize("name", ["BrokenLoadBundle", "ExplodingLoadBundle", "UnreadableLoadBundle"])
def test_load_failed(name):
    lookup = load_private_resource_bundle(config_for(name))

    assert not lookup
    assert lookup.reason is UnavailableReason.LOAD_FAILED
    assert lookup.detail


def test_default_config_is_absent_not_fatal():
    lookup = load_private_resource_bundle()
    assert isinstance(lookup, BundleLookup)
    assert lookup.reason is UnavailableReason.CLASS_NOT_FOUND


def test_invalid_config():
    assert BundleConfig(class_path="").validate() == ["class_path cannot be empty"]
    assert BundleConfig(class_path="a:b:c").validate() == ["class_path may contain at most one ':'"]
    lookup = load_private_resource_bundle(BundleConfig(class_path="", selector=""))
    assert lookup.reason is UnavailableReason.CLASS_NOT_FOUND
