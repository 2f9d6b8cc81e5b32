"""Search Aggregations.

Provides aggregation builders for Elasticsearch analytics.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from esbuilders.core.errors import BuilderTypeError
from esbuilders.core.search.mixins import AggregationMixin, MetricsAggregationMixin
from esbuilders.core.search.predicates import (
    is_aggregation,
    is_non_empty_string,
    is_number,
    is_object,
)

ORDER_DIRECTIONS = ("asc", "desc")


# ============================================================================
# Metrics Aggregations
# ============================================================================

class MaxAggregation(MetricsAggregationMixin):
    """Maximum of the numeric values extracted from the aggregated documents."""

    def __init__(self, name: str):
        super().__init__(name, "max")


class MinAggregation(MetricsAggregationMixin):
    """Minimum metric aggregation."""

    def __init__(self, name: str):
        super().__init__(name, "min")


class AvgAggregation(MetricsAggregationMixin):
    """Average metric aggregation."""

    def __init__(self, name: str):
        super().__init__(name, "avg")


class SumAggregation(MetricsAggregationMixin):
    """Sum metric aggregation."""

    def __init__(self, name: str):
        super().__init__(name, "sum")


class StatsAggregation(MetricsAggregationMixin):
    """Stats metric aggregation (count, min, max, avg, sum)."""

    def __init__(self, name: str):
        super().__init__(name, "stats")


class ExtendedStatsAggregation(MetricsAggregationMixin):
    """Extended stats metric aggregation.

    Adds sum_of_squares, variance and std_deviation to the plain stats.
    """

    def __init__(self, name: str):
        super().__init__(name, "extended_stats")

    def sigma(self, value: Optional[float] = None) -> Any:
        """Standard deviations above/below the mean for std_deviation_bounds."""
        return self._property(self._metric_body(), "sigma", value, is_number, "Number")


class CardinalityAggregation(MetricsAggregationMixin):
    """Cardinality (unique count) metric aggregation."""

    def __init__(self, name: str):
        super().__init__(name, "cardinality")

    def precision_threshold(self, value: Optional[int] = None) -> Any:
        return self._property(
            self._metric_body(), "precision_threshold", value, is_number, "Number"
        )


# ============================================================================
# Bucket Aggregations
# ============================================================================

class _BucketAggregation(AggregationMixin):
    """Bucket aggregation: ``{name: {kind: {...}, "aggs": {...}}}``."""

    kind: str = ""

    def __init__(self, name: str):
        super().__init__(name)
        self._body()[self.kind] = {}

    def _bucket_body(self) -> Dict[str, Any]:
        return self._body()[self.kind]

    def field(self, value: Optional[str] = None) -> Any:
        return self._property(self._bucket_body(), "field", value, is_non_empty_string, "String")

    def script(self, value: Optional[Union[str, Dict[str, Any]]] = None) -> Any:
        return self._property(self._bucket_body(), "script", value)

    def min_doc_count(self, value: Optional[int] = None) -> Any:
        return self._property(self._bucket_body(), "min_doc_count", value, is_number, "Number")

    def missing(self, value: Any = None) -> Any:
        return self._property(self._bucket_body(), "missing", value)


class TermsAggregation(_BucketAggregation):
    """Terms bucket aggregation."""

    kind = "terms"

    def size(self, value: Optional[int] = None) -> Any:
        return self._property(self._bucket_body(), "size", value, is_number, "Number")

    def order(self, key: Optional[str] = None, direction: str = "desc") -> Any:
        """Bucket order, e.g. ``order("_count", "desc")``.

        An unknown direction leaves the order unchanged.
        """
        body = self._bucket_body()
        if key is None:
            return body.get("order")
        if not is_non_empty_string(key):
            raise BuilderTypeError("Argument must be a String")
        scratch: Dict[str, Any] = {}
        self._choose(scratch, key, direction, ORDER_DIRECTIONS)
        if scratch:
            body["order"] = scratch
        return self

    def include(self, value: Optional[Union[str, List[str]]] = None) -> Any:
        return self._property(self._bucket_body(), "include", value)

    def exclude(self, value: Optional[Union[str, List[str]]] = None) -> Any:
        return self._property(self._bucket_body(), "exclude", value)


class HistogramAggregation(_BucketAggregation):
    """Numeric histogram bucket aggregation."""

    kind = "histogram"

    def interval(self, value: Optional[float] = None) -> Any:
        return self._property(self._bucket_body(), "interval", value, is_number, "Number")

    def offset(self, value: Optional[float] = None) -> Any:
        return self._property(self._bucket_body(), "offset", value, is_number, "Number")

    def extended_bounds(self, value: Optional[Dict[str, float]] = None) -> Any:
        return self._property(self._bucket_body(), "extended_bounds", value, is_object, "Mapping")


class DateHistogramAggregation(_BucketAggregation):
    """Date histogram bucket aggregation."""

    kind = "date_histogram"

    def calendar_interval(self, value: Optional[str] = None) -> Any:
        """minute, hour, day, week, month, quarter or year."""
        return self._property(self._bucket_body(), "calendar_interval", value)

    def fixed_interval(self, value: Optional[str] = None) -> Any:
        """Fixed unit interval such as ``30m``, ``1h`` or ``1d``."""
        return self._property(self._bucket_body(), "fixed_interval", value)

    def format(self, value: Optional[str] = None) -> Any:
        return self._property(self._bucket_body(), "format", value)

    def time_zone(self, value: Optional[str] = None) -> Any:
        return self._property(self._bucket_body(), "time_zone", value)


class CompositeAggregation(AggregationMixin):
    """Multi-bucket aggregation over combinations of value sources.

    Each source is itself a terms, histogram or date_histogram aggregation
    whose name becomes the key of that source in the composite bucket key.
    Unlike other bucket aggregations it can be paginated with ``after``.

    Example:
        agg = (CompositeAggregation("products")
            .sources([
                TermsAggregation("brand").field("brand.keyword"),
                DateHistogramAggregation("day").field("ts").calendar_interval("day"),
            ])
            .size(100))
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._body()["composite"] = {"sources": []}

    def _composite_body(self) -> Dict[str, Any]:
        return self._body()["composite"]

    def sources(self, sources: Any = None) -> Any:
        return self._accumulate(
            self._composite_body(), "sources", sources, is_aggregation, "Aggregation"
        )

    def size(self, value: Optional[int] = None) -> Any:
        return self._property(self._composite_body(), "size", value, is_number, "Number")

    def after(self, value: Optional[Dict[str, Any]] = None) -> Any:
        """Resume after this composite key (``after_key`` of the previous page)."""
        return self._property(self._composite_body(), "after", value, is_object, "Mapping")
