"""Tests for geo shapes and GeoShapeQuery."""

from __future__ import annotations

import pytest

from esbuilders.core.errors import BuilderTypeError, BuilderValueError, ErrorCode
from esbuilders.core.search.filters import TermFilter
from esbuilders.core.search.query import GeoShapeQuery, MatchAllQuery
from esbuilders.core.search.shape import GEOMETRY_TYPES, IndexedShape, Shape


class TestShape:
    """Tests for inline GeoJSON shapes."""

    def test_point(self):
        shape = Shape("point", [10, 20])

        assert shape.type() == "point"
        assert shape.coordinates() == [10, 20]
        assert shape.to_dict() == {"type": "point", "coordinates": [10, 20]}

    def test_type_is_case_insensitive(self):
        assert Shape("POINT", [10, 20]).type() == "point"
        assert Shape("MultiPolygon", []).type() == "multipolygon"

    @pytest.mark.parametrize("geometry", GEOMETRY_TYPES)
    def test_all_geometries_accepted(self, geometry):
        assert Shape(geometry, []).type() == geometry

    def test_unknown_geometry_leaves_shape_empty(self):
        """Test that an invalid type is dropped without raising."""
        shape = Shape("hexagon", [])

        assert shape.type() is None
        assert shape.coordinates() is None
        assert shape.to_dict() == {}

    def test_unknown_geometry_strict(self, strict_enums):
        with pytest.raises(BuilderValueError) as exc_info:
            Shape("hexagon", [])

        assert exc_info.value.code == ErrorCode.INVALID_ENUM_VALUE
        assert exc_info.value.value == "hexagon"

    def test_non_string_type(self):
        with pytest.raises(BuilderTypeError):
            Shape(None, [1, 2])

    def test_type_setter_ignores_unknown(self):
        shape = Shape("polygon", [[[0, 0], [1, 0], [1, 1], [0, 0]]])

        assert shape.type("triangle") is shape
        assert shape.type() == "polygon"
        shape.type("Envelope")
        assert shape.type() == "envelope"

    def test_circle_radius(self):
        shape = Shape("circle", [-45.0, 45.0]).radius("100m")

        assert shape.to_dict() == {
            "type": "circle",
            "coordinates": [-45.0, 45.0],
            "radius": "100m",
        }


class TestIndexedShape:
    def test_document(self):
        shape = (IndexedShape("country", "NL")
            .index("shapes")
            .shape_field_name("geometry"))

        assert shape.to_dict() == {
            "type": "country",
            "id": "NL",
            "index": "shapes",
            "shape_field_name": "geometry",
        }
        assert shape.id() == "NL"

    def test_requires_id(self):
        with pytest.raises(BuilderTypeError):
            IndexedShape("country", "")


class TestGeoShapeQuery:
    """Tests for field re-keying and shape exclusivity."""

    def test_seeded_document(self):
        assert GeoShapeQuery("location").to_dict() == {"geo_shape": {"location": {}}}

    def test_requires_field(self):
        with pytest.raises(BuilderTypeError) as exc_info:
            GeoShapeQuery(None)

        assert exc_info.value.code == ErrorCode.MISSING_REQUIRED_ARGUMENT

    def test_field_rename_moves_settings(self):
        """Test that renaming the field carries shape and relation along."""
        query = (GeoShapeQuery("location")
            .shape(Shape("point", [10, 20]))
            .relation("within")
            .strategy("term")
            .boost(2))

        assert query.field("place") is query

        assert query.field() == "place"
        assert query.to_dict() == {
            "geo_shape": {
                "place": {
                    "shape": {"type": "point", "coordinates": [10, 20]},
                    "relation": "within",
                    "strategy": "term",
                    "boost": 2,
                }
            }
        }
        assert "location" not in query.to_dict()["geo_shape"]
        assert query.relation() == "within"
        assert query.shape() == {"type": "point", "coordinates": [10, 20]}

    def test_field_rename_rejects_empty(self):
        query = GeoShapeQuery("location").relation("disjoint")

        with pytest.raises(BuilderTypeError):
            query.field("")

        assert query.field() == "location"
        assert query.to_dict() == {"geo_shape": {"location": {"relation": "disjoint"}}}

    def test_shape_replaces_indexed_shape(self):
        query = GeoShapeQuery("location").indexed_shape(IndexedShape("country", "NL"))

        query.shape(Shape("envelope", [[-45, 45], [45, -45]]))

        assert query.indexed_shape() is None
        assert query.to_dict()["geo_shape"]["location"] == {
            "shape": {"type": "envelope", "coordinates": [[-45, 45], [45, -45]]}
        }

    def test_indexed_shape_replaces_shape(self):
        query = GeoShapeQuery("location").shape(Shape("point", [1, 2]))

        query.indexed_shape(IndexedShape("country", "NL"))

        assert query.shape() is None
        assert query.indexed_shape() == {"type": "country", "id": "NL"}

    @pytest.mark.parametrize(
        "value",
        [{"type": "point", "coordinates": [1, 2]}, MatchAllQuery(), IndexedShape("t", "1")],
    )
    def test_shape_rejects_non_shapes(self, value):
        query = GeoShapeQuery("location").shape(Shape("point", [1, 2]))

        with pytest.raises(BuilderTypeError) as exc_info:
            query.shape(value)

        assert exc_info.value.code == ErrorCode.INVALID_CHILD
        assert query.shape() == {"type": "point", "coordinates": [1, 2]}

    def test_indexed_shape_rejects_inline_shape(self):
        query = GeoShapeQuery("location").shape(Shape("point", [1, 2]))

        with pytest.raises(BuilderTypeError):
            query.indexed_shape(Shape("point", [3, 4]))

        # the existing inline shape is kept
        assert query.shape() == {"type": "point", "coordinates": [1, 2]}

    def test_shape_is_snapshot(self):
        shape = Shape("point", [1, 2])
        query = GeoShapeQuery("location").shape(shape)

        shape.coordinates([5, 6])

        assert query.shape()["coordinates"] == [1, 2]

    def test_relation_soft_enum(self):
        query = GeoShapeQuery("location").relation("INTERSECTS")

        assert query.relation() == "intersects"
        assert query.relation("overlaps") is query
        assert query.relation() == "intersects"

    def test_strategy_soft_enum(self):
        query = GeoShapeQuery("location").strategy("recursive").strategy("quadtree")

        assert query.strategy() == "recursive"

    def test_non_string_enum_value_ignored(self):
        query = GeoShapeQuery("location").relation(3)

        assert query.relation() is None

    def test_is_a_query_not_a_filter(self):
        from esbuilders.core.search.query import BoolQuery

        bool_q = BoolQuery().must(GeoShapeQuery("location").shape(Shape("point", [0, 0])))
        assert len(bool_q.must()) == 1
        with pytest.raises(BuilderTypeError):
            BoolQuery().filter(GeoShapeQuery("location"))
        assert BoolQuery().filter(TermFilter("a", "b")).filter() == [{"term": {"a": "b"}}]
