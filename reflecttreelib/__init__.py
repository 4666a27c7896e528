"""ReflectTreeLib - search inside arbitrary object trees.

ReflectTreeLib answers three questions about a tree of nested values whose
shape is not known in advance:

    from reflecttreelib import find_by_type, find_by_label, flatten_group

    find_by_type(view, str)          # first str anywhere below view
    find_by_label(view, "icon")      # first field labelled "icon"
    flatten_group(tuple_of_views)    # members of an ordered group

Values are taken apart by a ReflectionAdapter (ObjectAdapter by default),
which understands dataclasses, named tuples, tuples, pydantic models,
containers and plain objects.
"""

__version__ = "0.1.0"

# Core components
from .core import (
    Field,
    ReflectableNode,
    ReflectionAdapter,
    FieldTraverser,
    DepthFirstPreOrderTraverser,
    RecursivePreOrderTraverser,
    create_traverser,
    FieldMatcher,
    TypeMatcher,
    LabelMatcher,
    PredicateMatcher,
)

# Adapters
from .adapters import ObjectAdapter, PydanticModelAdapter

# Configuration, planning and errors
from .config import SearchConfig, TraversalStrategy, BundleConfig
from .planning import SearchPlan, InvalidSearchConfigError
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    SkipUnreflectablePolicy,
    CollectErrorsPolicy,
)

# High-level API
from .api import (
    find_by_type,
    find_by_label,
    find_value_labelled,
    flatten_group,
    find_first,
    find_all_by_type,
    find_all_by_label,
    iter_fields,
    first_string,
    first_action,
    first_label_icon,
    format_hierarchy,
)

# Symbols and bundles
from .symbols import SymbolLocation, SymbolImageResolver, system_symbol_name
from .bundles import BundleLookup, UnavailableReason, load_private_resource_bundle

__all__ = [
    "__version__",
    # Core
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
    # Adapters
    "ObjectAdapter",
    "PydanticModelAdapter",
    # Config
    "SearchConfig",
    "TraversalStrategy",
    "BundleConfig",
    "SearchPlan",
    "InvalidSearchConfigError",
    "ErrorPolicy",
    "FailFastPolicy",
    "SkipUnreflectablePolicy",
    "CollectErrorsPolicy",
    # API
    "find_by_type",
    "find_by_label",
    "find_value_labelled",
    "flatten_group",
    "find_first",
    "find_all_by_type",
    "find_all_by_label",
    "iter_fields",
    "first_string",
    "first_action",
    "first_label_icon",
    "format_hierarchy",
    # Symbols
    "SymbolLocation",
    "SymbolImageResolver",
    "system_symbol_name",
    "BundleLookup",
    "UnavailableReason",
    "load_private_resource_bundle",
]
