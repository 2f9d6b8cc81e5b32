"""Query rescoring.

A Rescore re-ranks the top ``window_size`` hits of the main query with a
second, usually more expensive, query.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from esbuilders.core.errors import BuilderTypeError, ErrorCode
from esbuilders.core.search.mixins import Builder
from esbuilders.core.search.predicates import Capability, is_number, is_query

SCORE_MODES = ("total", "multiply", "min", "max", "avg")


class Rescore(Builder):
    """Rescore request section.

    Example:
        rescore = (Rescore(50, MatchQuery("title", "quick brown"))
            .query_weight(0.7)
            .rescore_query_weight(1.2)
            .score_mode("multiply"))
    """

    capability = Capability.RESCORE

    def __init__(self, window_size: Optional[int] = None, query: Any = None):
        if window_size is not None and not is_number(window_size):
            raise BuilderTypeError("Argument must be a Number")
        if query is not None and not is_query(query):
            raise BuilderTypeError("Argument must be a Query", ErrorCode.INVALID_CHILD)

        super().__init__({"query": {}})
        if window_size is not None:
            self._doc["window_size"] = window_size
        if query is not None:
            self.rescore_query(query)

    def _rescore_body(self) -> Dict[str, Any]:
        return self._doc["query"]

    def rescore_query(self, query: Any = None) -> Any:
        return self._embed(self._rescore_body(), "rescore_query", query, is_query, "Query")

    def query_weight(self, weight: Optional[float] = None) -> Any:
        """Weight of the original query score."""
        return self._property(self._rescore_body(), "query_weight", weight, is_number, "Number")

    def rescore_query_weight(self, weight: Optional[float] = None) -> Any:
        """Weight of the rescore query score."""
        return self._property(
            self._rescore_body(), "rescore_query_weight", weight, is_number, "Number"
        )

    def window_size(self, size: Optional[int] = None) -> Any:
        """Number of top hits per shard to rescore."""
        return self._property(self._doc, "window_size", size, is_number, "Number")

    def score_mode(self, mode: Optional[str] = None) -> Any:
        """How the two scores combine: total, multiply, min, max or avg."""
        return self._choose(self._rescore_body(), "score_mode", mode, SCORE_MODES)
