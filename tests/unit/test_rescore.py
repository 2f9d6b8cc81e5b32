"""Tests for Rescore."""

from __future__ import annotations

import math

import pytest

from esbuilders.core.errors import BuilderTypeError, ErrorCode
from esbuilders.core.search.filters import TermFilter
from esbuilders.core.search.query import MatchQuery, TermQuery
from esbuilders.core.search.rescore import SCORE_MODES, Rescore


@pytest.fixture
def rescore_query():
    return MatchQuery("message", "the quick brown").boost(2)


class TestRescoreConstruction:
    def test_window_size_and_query(self, rescore_query):
        rescore = Rescore(50, rescore_query)

        assert rescore.window_size() == 50
        assert rescore.rescore_query() == rescore_query.to_dict()
        assert rescore.to_dict() == {
            "window_size": 50,
            "query": {
                "rescore_query": {
                    "match": {"message": {"query": "the quick brown", "boost": 2}}
                }
            },
        }

    def test_empty(self):
        rescore = Rescore()

        assert rescore.to_dict() == {"query": {}}
        assert rescore.window_size() is None
        assert rescore.rescore_query() is None

    @pytest.mark.parametrize("window_size", ["fifty", math.inf, True, [50]])
    def test_non_numeric_window_size(self, window_size, rescore_query):
        with pytest.raises(BuilderTypeError) as exc_info:
            Rescore(window_size, rescore_query)

        assert "Number" in str(exc_info.value)

    def test_non_query_rejected(self):
        with pytest.raises(BuilderTypeError) as exc_info:
            Rescore(50, TermFilter("status", "active"))

        assert exc_info.value.code == ErrorCode.INVALID_CHILD

    def test_plain_document_rejected(self):
        with pytest.raises(BuilderTypeError):
            Rescore(50, {"match_all": {}})


class TestRescoreAccessors:
    def test_weights_and_mode(self, rescore_query):
        rescore = (Rescore(100, rescore_query)
            .query_weight(0.7)
            .rescore_query_weight(1.2)
            .score_mode("Multiply"))

        assert rescore.query_weight() == 0.7
        assert rescore.rescore_query_weight() == 1.2
        assert rescore.score_mode() == "multiply"
        assert rescore.to_dict()["query"]["score_mode"] == "multiply"

    @pytest.mark.parametrize("mode", SCORE_MODES)
    def test_all_score_modes(self, mode):
        assert Rescore().score_mode(mode.upper()).score_mode() == mode

    def test_unknown_score_mode_ignored(self):
        rescore = Rescore().score_mode("avg")

        assert rescore.score_mode("median") is rescore
        assert rescore.score_mode() == "avg"

    @pytest.mark.parametrize("accessor", ["query_weight", "rescore_query_weight", "window_size"])
    def test_numeric_accessors_reject_strings(self, accessor):
        rescore = Rescore(10)

        with pytest.raises(BuilderTypeError):
            getattr(rescore, accessor)("1.0")

        assert rescore.to_dict() == {"window_size": 10, "query": {}}

    def test_replace_rescore_query(self, rescore_query):
        rescore = Rescore(10, rescore_query)

        rescore.rescore_query(TermQuery("tag", "python"))

        assert rescore.rescore_query() == {"term": {"tag": {"value": "python"}}}

    def test_rescore_query_rejects_filter(self, rescore_query):
        rescore = Rescore(10, rescore_query)

        with pytest.raises(BuilderTypeError):
            rescore.rescore_query(TermFilter("a", "b"))

        assert rescore.rescore_query() == rescore_query.to_dict()
