"""Search Filter Builders.

Filters are non-scoring clauses. They carry the ``filter`` capability and
are accepted by ``BoolQuery.filter``, facet filters and request post
filters.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from esbuilders.core.errors import BuilderTypeError, ErrorCode
from esbuilders.core.search.mixins import FilterMixin, require_name
from esbuilders.core.search.predicates import is_array, is_non_empty_string, is_query


class _FieldFilter(FilterMixin):
    """Filter keyed by a field name next to the ``_name``/``_cache`` options."""

    def __init__(self, root_key: str, field: str, initial: Any):
        self._check_field(field)
        super().__init__(root_key)
        self._field = field
        self._body()[field] = initial

    def field(self, name: Optional[str] = None) -> Any:
        return self._keyed_field(name)


class TermFilter(_FieldFilter):
    """Documents whose field contains the exact term."""

    def __init__(self, field: str, value: Any):
        super().__init__("term", field, value)

    def term(self, value: Any = None) -> Any:
        return self._property(self._body(), self._field, value)


class TermsFilter(_FieldFilter):
    """Documents whose field contains any of the terms."""

    reserved_keys = FilterMixin.reserved_keys + ("execution",)

    def __init__(self, field: str, values: Sequence[Any]):
        if not is_array(values):
            raise BuilderTypeError("Argument must be a list")
        super().__init__("terms", field, list(values))

    def terms(self, values: Optional[Sequence[Any]] = None) -> Any:
        if values is None:
            return self._body()[self._field]
        if not is_array(values):
            raise BuilderTypeError("Argument must be a list")
        self._body()[self._field] = list(values)
        return self

    def execution(self, value: Optional[str] = None) -> Any:
        return self._choose(self._body(), "execution", value, ("plain", "bool", "and", "or"))


class RangeFilter(_FieldFilter):
    """Range filter."""

    def __init__(self, field: str):
        super().__init__("range", field, {})

    def _range_body(self):
        return self._body()[self._field]

    def gte(self, value: Any = None) -> Any:
        return self._property(self._range_body(), "gte", value)

    def gt(self, value: Any = None) -> Any:
        return self._property(self._range_body(), "gt", value)

    def lte(self, value: Any = None) -> Any:
        return self._property(self._range_body(), "lte", value)

    def lt(self, value: Any = None) -> Any:
        return self._property(self._range_body(), "lt", value)


class ExistsFilter(FilterMixin):
    """Field exists filter."""

    def __init__(self, field: str):
        require_name(field, "field")
        super().__init__("exists")
        self._body()["field"] = field

    def field(self, name: Optional[str] = None) -> Any:
        return self._property(self._body(), "field", name, is_non_empty_string, "non-empty String")


class QueryFilter(FilterMixin):
    """Wrap a query so it can be used where a filter is expected.

    Serializes as ``{"fquery": {"query": {...}}}`` so the filter options
    (``_name``, ``_cache``) sit next to the wrapped query.
    """

    def __init__(self, query: Any):
        if not is_query(query):
            raise BuilderTypeError("Argument must be a Query", ErrorCode.INVALID_CHILD)
        super().__init__("fquery")
        self.query(query)

    def query(self, query: Any = None) -> Any:
        return self._embed(self._body(), "query", query, is_query, "Query")
