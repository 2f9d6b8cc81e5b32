"""Builder registry.

Maps public builder names to their classes so builders can be created
from configuration or user input (``create_builder("BoolQuery")``). The
mapping is fixed at import time.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Type

from esbuilders.core.errors import UnknownBuilderError
from esbuilders.core.search.aggregations import (
    AvgAggregation,
    CardinalityAggregation,
    CompositeAggregation,
    DateHistogramAggregation,
    ExtendedStatsAggregation,
    HistogramAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    TermsAggregation,
)
from esbuilders.core.search.facets import TermStatsFacet
from esbuilders.core.search.filters import (
    ExistsFilter,
    QueryFilter,
    RangeFilter,
    TermFilter,
    TermsFilter,
)
from esbuilders.core.search.mixins import Builder
from esbuilders.core.search.predicates import Capability
from esbuilders.core.search.query import (
    BoolQuery,
    ExistsQuery,
    GeoShapeQuery,
    MatchAllQuery,
    MatchQuery,
    NestedQuery,
    PrefixQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
    WildcardQuery,
)
from esbuilders.core.search.request import SearchRequest
from esbuilders.core.search.rescore import Rescore
from esbuilders.core.search.shape import IndexedShape, Shape
from esbuilders.core.search.sort import Sort

logger = logging.getLogger(__name__)

_BUILDER_CLASSES: List[Type[Builder]] = [
    # Queries
    BoolQuery,
    ExistsQuery,
    GeoShapeQuery,
    MatchAllQuery,
    MatchQuery,
    NestedQuery,
    PrefixQuery,
    RangeQuery,
    TermQuery,
    TermsQuery,
    WildcardQuery,
    # Filters
    ExistsFilter,
    QueryFilter,
    RangeFilter,
    TermFilter,
    TermsFilter,
    # Aggregations
    AvgAggregation,
    CardinalityAggregation,
    CompositeAggregation,
    DateHistogramAggregation,
    ExtendedStatsAggregation,
    HistogramAggregation,
    MaxAggregation,
    MinAggregation,
    StatsAggregation,
    SumAggregation,
    TermsAggregation,
    # Facets
    TermStatsFacet,
    # Search
    IndexedShape,
    Rescore,
    SearchRequest,
    Shape,
    Sort,
]

BUILDERS: Mapping[str, Type[Builder]] = MappingProxyType(
    {cls.__name__: cls for cls in _BUILDER_CLASSES}
)


def get_builder(name: str) -> Type[Builder]:
    """Look up a builder class by name.

    Raises:
        UnknownBuilderError: If no builder has that name.
    """
    try:
        return BUILDERS[name]
    except KeyError:
        raise UnknownBuilderError(name) from None


def create_builder(name: str, *args: Any, **kwargs: Any) -> Builder:
    """Instantiate a builder by name with constructor arguments."""
    builder_cls = get_builder(name)
    logger.debug(f"Creating builder {name}", extra={"builder": name})
    return builder_cls(*args, **kwargs)


def list_builders(capability: Optional[Capability] = None) -> List[str]:
    """Sorted builder names, optionally restricted to one capability."""
    if capability is None:
        return sorted(BUILDERS)
    return sorted(
        name for name, cls in BUILDERS.items() if cls.capability is capability
    )


def builders_by_capability() -> Dict[Capability, List[str]]:
    grouped: Dict[Capability, List[str]] = {}
    for name in sorted(BUILDERS):
        grouped.setdefault(BUILDERS[name].capability, []).append(name)
    return grouped
