"""Core abstractions for ReflectTreeLib.

This module contains the fundamental classes that define the ReflectTreeLib
architecture.
"""

from .node import Field, ReflectableNode
from .adapter import ReflectionAdapter
from .traverser import (
    FieldTraverser,
    DepthFirstPreOrderTraverser,
    RecursivePreOrderTraverser,
    create_traverser,
)
from .matcher import FieldMatcher, TypeMatcher, LabelMatcher, PredicateMatcher

__all__ = [
    "Field",
    "ReflectableNode",
    "ReflectionAdapter",
    "FieldTraverser",
    "DepthFirstPreOrderTraverser",
    "RecursivePreOrderTraverser",
    "create_traverser",
    "FieldMatcher",
    "TypeMatcher",
    "LabelMatcher",
    "PredicateMatcher",
]
