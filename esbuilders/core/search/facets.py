"""Search Facets.

Legacy facet builders, kept for clusters that still accept the ``facets``
section of a search request.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from esbuilders.core.search.mixins import FacetMixin
from esbuilders.core.search.predicates import is_non_empty_string, is_number, is_object

TERM_STATS_ORDERS = (
    "count",
    "term",
    "reverse_count",
    "reverse_term",
    "total",
    "reverse_total",
    "min",
    "reverse_min",
    "max",
    "reverse_max",
    "mean",
    "reverse_mean",
)


class TermStatsFacet(FacetMixin):
    """Statistics of a value field, grouped by the terms of a key field.

    Often described as a pivot table: ``key_field`` is the group-by column,
    ``value_field`` (or ``value_script``) the column being summarized.

    Example:
        facet = (TermStatsFacet("authors")
            .key_field("doc_authors")
            .value_field("num_pages")
            .order("reverse_mean")
            .size(5))
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._body()["terms_stats"] = {}

    def _stats_body(self) -> Dict[str, Any]:
        return self._body()["terms_stats"]

    def value_field(self, field: Optional[str] = None) -> Any:
        return self._property(self._stats_body(), "value_field", field, is_non_empty_string, "String")

    def key_field(self, field: Optional[str] = None) -> Any:
        """Field to pivot on (group-by)."""
        return self._property(self._stats_body(), "key_field", field, is_non_empty_string, "String")

    def script_field(self, script: Optional[str] = None) -> Any:
        """Script producing the grouping key instead of ``key_field``."""
        return self._property(self._stats_body(), "script_field", script)

    def value_script(self, code: Optional[str] = None) -> Any:
        return self._property(self._stats_body(), "value_script", code)

    def all_terms(self, value: Optional[bool] = None) -> Any:
        """Return all terms, even those with no hits.

        Avoid on fields with many unique terms.
        """
        return self._property(self._stats_body(), "all_terms", value)

    def lang(self, language: Optional[str] = None) -> Any:
        return self._property(self._stats_body(), "lang", language)

    def params(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return self._property(self._stats_body(), "params", params, is_object, "Mapping")

    def size(self, value: Optional[Union[int, float]] = None) -> Any:
        """Number of facet entries to return."""
        return self._property(self._stats_body(), "size", value, is_number, "Number")

    def order(self, value: Optional[str] = None) -> Any:
        """Entry ordering, one of TERM_STATS_ORDERS. Default: count."""
        return self._choose(self._stats_body(), "order", value, TERM_STATS_ORDERS)
