"""Runtime classification of builder arguments.

Every builder carries a :class:`Capability` tag. Composite slots use the
predicates here to decide what they accept before touching a document.
``None`` is never a member of any category.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from enum import Enum
from typing import Any


class Capability(str, Enum):
    """Schema category a builder belongs to."""

    QUERY = "query"
    FILTER = "filter"
    AGGREGATION = "aggregation"
    FACET = "facet"
    SHAPE = "shape"
    INDEXED_SHAPE = "indexed shape"
    RESCORE = "rescore"
    SORT = "sort"
    REQUEST = "request"


def has_capability(value: Any, *capabilities: Capability) -> bool:
    """Check that ``value`` is a builder tagged with one of ``capabilities``."""
    tag = getattr(value, "capability", None)
    if not isinstance(tag, Capability):
        return False
    if not callable(getattr(value, "to_dict", None)):
        return False
    return tag in capabilities


def is_builder(value: Any) -> bool:
    return has_capability(value, *Capability)


def is_query(value: Any) -> bool:
    return has_capability(value, Capability.QUERY)


def is_filter(value: Any) -> bool:
    return has_capability(value, Capability.FILTER)


def is_aggregation(value: Any) -> bool:
    return has_capability(value, Capability.AGGREGATION)


def is_facet(value: Any) -> bool:
    return has_capability(value, Capability.FACET)


def is_shape(value: Any) -> bool:
    return has_capability(value, Capability.SHAPE)


def is_indexed_shape(value: Any) -> bool:
    return has_capability(value, Capability.INDEXED_SHAPE)


def is_rescore(value: Any) -> bool:
    return has_capability(value, Capability.RESCORE)


def is_sort(value: Any) -> bool:
    return has_capability(value, Capability.SORT)


def is_array(value: Any) -> bool:
    """Plain sequence of values (``str`` and ``bytes`` excluded)."""
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Plain mapping; builders are not plain mappings."""
    return isinstance(value, Mapping) and not is_builder(value)


def is_number(value: Any) -> bool:
    """Finite real number. ``bool`` is not a number here."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and len(value) > 0


__all__ = [
    "Capability",
    "has_capability",
    "is_builder",
    "is_query",
    "is_filter",
    "is_aggregation",
    "is_facet",
    "is_shape",
    "is_indexed_shape",
    "is_rescore",
    "is_sort",
    "is_array",
    "is_object",
    "is_number",
    "is_string",
    "is_non_empty_string",
]
