"""Search request body builder.

Assembles the top-level body sent to ``_search`` from query, filter,
aggregation, facet, rescore and sort builders.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from esbuilders.core.errors import BuilderTypeError, ErrorCode
from esbuilders.core.search.mixins import Builder, extend, snapshot
from esbuilders.core.search.predicates import (
    Capability,
    is_aggregation,
    is_array,
    is_facet,
    is_filter,
    is_non_empty_string,
    is_number,
    is_query,
    is_rescore,
    is_sort,
    is_string,
)


def _is_sort_clause(value: Any) -> bool:
    return is_sort(value) or is_non_empty_string(value)


class SearchRequest(Builder):
    """Fluent search request builder.

    Example:
        body = (SearchRequest()
            .query(BoolQuery().must(MatchQuery("name", "test")))
            .post_filter(TermFilter("status", "active"))
            .aggregation(TermsAggregation("by_type").field("type"))
            .sort([Sort("created_at").desc(), "_score"])
            .size(20)
            .to_dict())
    """

    capability = Capability.REQUEST

    def query(self, query: Any = None) -> Any:
        return self._embed(self._doc, "query", query, is_query, "Query")

    def post_filter(self, flt: Any = None) -> Any:
        """Filter applied to hits after aggregations are computed."""
        return self._embed(self._doc, "post_filter", flt, is_filter, "Filter")

    def aggregation(self, agg: Any = None) -> Any:
        if agg is None:
            return self._doc.get("aggs")
        if not is_aggregation(agg):
            raise BuilderTypeError("Argument must be an Aggregation", ErrorCode.INVALID_CHILD)
        self._doc["aggs"] = extend(self._doc.get("aggs", {}), snapshot(agg))
        return self

    agg = aggregation

    def facet(self, facet: Any = None) -> Any:
        if facet is None:
            return self._doc.get("facets")
        if not is_facet(facet):
            raise BuilderTypeError("Argument must be a Facet", ErrorCode.INVALID_CHILD)
        self._doc["facets"] = extend(self._doc.get("facets", {}), snapshot(facet))
        return self

    def rescore(self, rescore: Any = None) -> Any:
        return self._accumulate(self._doc, "rescore", rescore, is_rescore, "Rescore")

    def sort(self, sort: Any = None) -> Any:
        """Sort clauses: Sort builders or plain field names such as ``"_score"``."""
        return self._accumulate(self._doc, "sort", sort, _is_sort_clause, "Sort")

    def size(self, value: Optional[int] = None) -> Any:
        return self._property(self._doc, "size", value, is_number, "Number")

    def from_(self, value: Optional[int] = None) -> Any:
        """Offset of the first hit."""
        return self._property(self._doc, "from", value, is_number, "Number")

    def min_score(self, value: Optional[float] = None) -> Any:
        return self._property(self._doc, "min_score", value, is_number, "Number")

    def source(self, value: Optional[Union[bool, str, List[str]]] = None) -> Any:
        """``_source`` filtering: a flag, a field pattern or a list of patterns."""
        if value is None:
            return self._doc.get("_source")
        if isinstance(value, bool) or is_string(value):
            self._doc["_source"] = value
        elif is_array(value) and all(is_string(v) for v in value):
            self._doc["_source"] = list(value)
        else:
            raise BuilderTypeError("Argument must be a Boolean, String or list of String")
        return self

    def explain(self, value: Optional[bool] = None) -> Any:
        return self._property(self._doc, "explain", value)
