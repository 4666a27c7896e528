"""Testing utilities for ReflectTreeLib consumers."""

from .fixtures import ChainLink, RecordingAdapter, make_chain

__all__ = ['ChainLink', 'RecordingAdapter', 'make_chain']
