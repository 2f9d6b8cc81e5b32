"""Search Query DSL Builders.

Provides chainable builders for Elasticsearch queries.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union

from esbuilders.core.errors import BuilderTypeError, ErrorCode
from esbuilders.core.search.mixins import (
    FieldQueryMixin,
    QueryMixin,
    require_name,
    snapshot,
)
from esbuilders.core.search.predicates import (
    is_array,
    is_filter,
    is_indexed_shape,
    is_non_empty_string,
    is_query,
    is_shape,
)
from esbuilders.core.search.shape import IndexedShape, Shape

SHAPE_RELATIONS = ("intersects", "disjoint", "within")
SHAPE_STRATEGIES = ("recursive", "term")
MATCH_OPERATORS = ("and", "or")
NESTED_SCORE_MODES = ("avg", "max", "min", "sum", "none")


class MatchAllQuery(QueryMixin):
    """Match all documents."""

    def __init__(self):
        super().__init__("match_all")


class MatchQuery(FieldQueryMixin):
    """Full-text match query."""

    def __init__(self, field: str, query: Optional[str] = None):
        super().__init__("match", field)
        if query is not None:
            self.query(query)

    def query(self, value: Optional[str] = None) -> Any:
        return self._property(self._field_body(), "query", value)

    def operator(self, value: Optional[str] = None) -> Any:
        return self._choose(self._field_body(), "operator", value, MATCH_OPERATORS)

    def fuzziness(self, value: Optional[Union[str, int]] = None) -> Any:
        """AUTO, 0, 1 or 2."""
        return self._property(self._field_body(), "fuzziness", value)

    def analyzer(self, value: Optional[str] = None) -> Any:
        return self._property(self._field_body(), "analyzer", value)

    def minimum_should_match(self, value: Optional[Union[int, str]] = None) -> Any:
        return self._property(self._field_body(), "minimum_should_match", value)


class TermQuery(FieldQueryMixin):
    """Exact term match query."""

    def __init__(self, field: str, value: Any = None):
        super().__init__("term", field)
        if value is not None:
            self.value(value)

    def value(self, value: Any = None) -> Any:
        return self._property(self._field_body(), "value", value)


class TermsQuery(QueryMixin):
    """Multiple exact term match query: ``{"terms": {field: [...]}}``."""

    reserved_keys = ("boost",)

    def __init__(self, field: str, values: Sequence[Any] = ()):
        self._check_field(field)
        super().__init__("terms")
        self._field = field
        self._body()[field] = []
        if values:
            self.terms(values)

    def field(self, name: Optional[str] = None) -> Any:
        return self._keyed_field(name)

    def terms(self, values: Optional[Sequence[Any]] = None) -> Any:
        if values is None:
            return self._body()[self._field]
        if not is_array(values):
            raise BuilderTypeError("Argument must be a list")
        self._body()[self._field] = list(values)
        return self


class RangeQuery(FieldQueryMixin):
    """Range query."""

    def __init__(self, field: str):
        super().__init__("range", field)

    def gte(self, value: Any = None) -> Any:
        return self._property(self._field_body(), "gte", value)

    def gt(self, value: Any = None) -> Any:
        return self._property(self._field_body(), "gt", value)

    def lte(self, value: Any = None) -> Any:
        return self._property(self._field_body(), "lte", value)

    def lt(self, value: Any = None) -> Any:
        return self._property(self._field_body(), "lt", value)

    def format(self, value: Optional[str] = None) -> Any:
        """Date format used to parse date bounds."""
        return self._property(self._field_body(), "format", value)


class ExistsQuery(QueryMixin):
    """Field exists query."""

    def __init__(self, field: str):
        require_name(field, "field")
        super().__init__("exists")
        self._body()["field"] = field

    def field(self, name: Optional[str] = None) -> Any:
        return self._property(self._body(), "field", name, is_non_empty_string, "non-empty String")


class WildcardQuery(FieldQueryMixin):
    """Wildcard pattern query."""

    def __init__(self, field: str, value: Optional[str] = None):
        super().__init__("wildcard", field)
        if value is not None:
            self.value(value)

    def value(self, value: Optional[str] = None) -> Any:
        return self._property(self._field_body(), "value", value)


class PrefixQuery(FieldQueryMixin):
    """Prefix query."""

    def __init__(self, field: str, value: Optional[str] = None):
        super().__init__("prefix", field)
        if value is not None:
            self.value(value)

    def value(self, value: Optional[str] = None) -> Any:
        return self._property(self._field_body(), "value", value)


class BoolQuery(QueryMixin):
    """Boolean compound query.

    Each clause accessor takes one query (appended) or a list of queries
    (replaces the clause). Called without arguments it returns the clause
    list itself.

    Example:
        query = (BoolQuery()
            .must(MatchQuery("name", "test"))
            .filter(TermFilter("status", "active"))
            .should([MatchQuery("tags", "important"), TermQuery("pinned", True)])
            .minimum_should_match(1))
    """

    def __init__(self):
        super().__init__("bool")

    def must(self, query: Any = None) -> Any:
        """Clauses that must match and contribute to the score."""
        return self._accumulate(self._body(), "must", query, is_query, "Query")

    def must_not(self, query: Any = None) -> Any:
        """Clauses that must not match."""
        return self._accumulate(self._body(), "must_not", query, is_query, "Query")

    def should(self, query: Any = None) -> Any:
        return self._accumulate(self._body(), "should", query, is_query, "Query")

    def filter(self, flt: Any = None) -> Any:
        """Non-scoring clauses built from filters."""
        return self._accumulate(self._body(), "filter", flt, is_filter, "Filter")

    def filter_query(self, query: Any = None) -> Any:
        """Non-scoring clauses built from queries; shares the filter list."""
        return self._accumulate(self._body(), "filter", query, is_query, "Query")

    def adjust_pure_negative(self, value: Optional[bool] = None) -> Any:
        """Add a match_all clause when only must_not clauses exist. Default: true."""
        return self._property(self._body(), "adjust_pure_negative", value)

    def disable_coord(self, value: Optional[bool] = None) -> Any:
        return self._property(self._body(), "disable_coord", value)

    def minimum_should_match(self, value: Optional[Union[int, str]] = None) -> Any:
        """Number of should clauses required: ``3``, ``-2``, ``"75%"``, ``"3<90%"``."""
        return self._property(self._body(), "minimum_should_match", value)


class GeoShapeQuery(FieldQueryMixin):
    """Documents whose geo_shape field relates to a query shape.

    The shape is either inline (``shape``) or a reference to an indexed
    document (``indexed_shape``); setting one removes the other.
    """

    def __init__(self, field: str):
        super().__init__("geo_shape", field)

    def shape(self, shape: Optional[Shape] = None) -> Any:
        body = self._field_body()
        if shape is None:
            return body.get("shape")
        if not is_shape(shape):
            raise BuilderTypeError("Argument must be a Shape", ErrorCode.INVALID_CHILD)
        body.pop("indexed_shape", None)
        body["shape"] = snapshot(shape)
        return self

    def indexed_shape(self, shape: Optional[IndexedShape] = None) -> Any:
        body = self._field_body()
        if shape is None:
            return body.get("indexed_shape")
        if not is_indexed_shape(shape):
            raise BuilderTypeError("Argument must be an IndexedShape", ErrorCode.INVALID_CHILD)
        body.pop("shape", None)
        body["indexed_shape"] = snapshot(shape)
        return self

    def relation(self, value: Optional[str] = None) -> Any:
        """Spatial relation: intersects, disjoint or within."""
        return self._choose(self._field_body(), "relation", value, SHAPE_RELATIONS)

    def strategy(self, value: Optional[str] = None) -> Any:
        """Prefix tree strategy.

        ``recursive`` (default) supports non-point shapes; ``term`` only
        searches indexed points.
        """
        return self._choose(self._field_body(), "strategy", value, SHAPE_STRATEGIES)


class NestedQuery(QueryMixin):
    """Nested object query."""

    def __init__(self, path: str, query: Any = None):
        require_name(path, "path")
        super().__init__("nested")
        self._body()["path"] = path
        if query is not None:
            self.query(query)

    def path(self, value: Optional[str] = None) -> Any:
        return self._property(self._body(), "path", value, is_non_empty_string, "non-empty String")

    def query(self, query: Any = None) -> Any:
        return self._embed(self._body(), "query", query, is_query, "Query")

    def score_mode(self, value: Optional[str] = None) -> Any:
        return self._choose(self._body(), "score_mode", value, NESTED_SCORE_MODES)


# ============================================================================
# Convenience Functions
# ============================================================================

def bool_query(
    must: Optional[List[QueryMixin]] = None,
    must_not: Optional[List[QueryMixin]] = None,
    should: Optional[List[QueryMixin]] = None,
    filter: Optional[List[Any]] = None,
    minimum_should_match: Optional[Union[int, str]] = None,
) -> BoolQuery:
    """Create a bool query from lists of clause builders."""
    query = BoolQuery()

    if must:
        query.must(must)

    if must_not:
        query.must_not(must_not)

    if should:
        query.should(should)

    if filter:
        query.filter(filter)

    if minimum_should_match is not None:
        query.minimum_should_match(minimum_should_match)

    return query
