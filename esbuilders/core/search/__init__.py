"""Search DSL builders.

Provides:
- Builder framework (capability tags, mixins, composite slots)
- Query, filter, aggregation and facet builders
- Geo shapes, rescoring and sort clauses
- Search request body assembly
"""

from esbuilders.core.search.predicates import (
    Capability,
    has_capability,
    is_aggregation,
    is_array,
    is_facet,
    is_filter,
    is_indexed_shape,
    is_non_empty_string,
    is_number,
    is_object,
    is_query,
    is_rescore,
    is_shape,
    is_sort,
    is_string,
)
from esbuilders.core.search.mixins import (
    Builder,
    BuilderMixin,
    QueryMixin,
    FieldQueryMixin,
    FilterMixin,
    AggregationMixin,
    MetricsAggregationMixin,
    FacetMixin,
    extend,
)
from esbuilders.core.search.query import (
    BoolQuery,
    GeoShapeQuery,
    MatchAllQuery,
    MatchQuery,
    TermQuery,
    TermsQuery,
    RangeQuery,
    ExistsQuery,
    WildcardQuery,
    PrefixQuery,
    NestedQuery,
    bool_query,
)
from esbuilders.core.search.filters import (
    TermFilter,
    TermsFilter,
    RangeFilter,
    ExistsFilter,
    QueryFilter,
)
from esbuilders.core.search.aggregations import (
    MaxAggregation,
    MinAggregation,
    AvgAggregation,
    SumAggregation,
    StatsAggregation,
    ExtendedStatsAggregation,
    CardinalityAggregation,
    TermsAggregation,
    HistogramAggregation,
    DateHistogramAggregation,
    CompositeAggregation,
)
from esbuilders.core.search.facets import TermStatsFacet
from esbuilders.core.search.shape import Shape, IndexedShape
from esbuilders.core.search.rescore import Rescore
from esbuilders.core.search.sort import Sort
from esbuilders.core.search.request import SearchRequest
from esbuilders.core.search.registry import (
    BUILDERS,
    get_builder,
    create_builder,
    list_builders,
    builders_by_capability,
)

__all__ = [
    # Predicates
    "Capability",
    "has_capability",
    "is_aggregation",
    "is_array",
    "is_facet",
    "is_filter",
    "is_indexed_shape",
    "is_non_empty_string",
    "is_number",
    "is_object",
    "is_query",
    "is_rescore",
    "is_shape",
    "is_sort",
    "is_string",
    # Framework
    "Builder",
    "BuilderMixin",
    "QueryMixin",
    "FieldQueryMixin",
    "FilterMixin",
    "AggregationMixin",
    "MetricsAggregationMixin",
    "FacetMixin",
    "extend",
    # Queries
    "BoolQuery",
    "GeoShapeQuery",
    "MatchAllQuery",
    "MatchQuery",
    "TermQuery",
    "TermsQuery",
    "RangeQuery",
    "ExistsQuery",
    "WildcardQuery",
    "PrefixQuery",
    "NestedQuery",
    "bool_query",
    # Filters
    "TermFilter",
    "TermsFilter",
    "RangeFilter",
    "ExistsFilter",
    "QueryFilter",
    # Aggregations
    "MaxAggregation",
    "MinAggregation",
    "AvgAggregation",
    "SumAggregation",
    "StatsAggregation",
    "ExtendedStatsAggregation",
    "CardinalityAggregation",
    "TermsAggregation",
    "HistogramAggregation",
    "DateHistogramAggregation",
    "CompositeAggregation",
    # Facets
    "TermStatsFacet",
    # Search
    "Shape",
    "IndexedShape",
    "Rescore",
    "Sort",
    "SearchRequest",
    # Registry
    "BUILDERS",
    "get_builder",
    "create_builder",
    "list_builders",
    "builders_by_capability",
]
