"""Geo shapes for geo_shape queries.

Provides:
- Shape: an inline GeoJSON geometry
- IndexedShape: a reference to a shape stored in another document
"""

from __future__ import annotations

from typing import Any, Optional

from esbuilders.core.errors import BuilderTypeError
from esbuilders.core.search.mixins import Builder, require_name
from esbuilders.core.search.predicates import Capability, is_string

GEOMETRY_TYPES = (
    "point",
    "linestring",
    "polygon",
    "multipoint",
    "envelope",
    "multipolygon",
    "circle",
    "multilinestring",
)


class Shape(Builder):
    """Inline GeoJSON shape.

    Coordinates are not validated; see the GeoJSON specification for the
    layout each geometry type expects. An unknown geometry type leaves the
    shape empty rather than raising.

    Example:
        shape = Shape("envelope", [[-45.0, 45.0], [45.0, -45.0]])
    """

    capability = Capability.SHAPE

    def __init__(self, type: str, coordinates: Any = None):
        if not is_string(type):
            raise BuilderTypeError("Argument type must be a String")
        super().__init__()
        self.type(type)
        if "type" in self._doc and coordinates is not None:
            self._doc["coordinates"] = coordinates

    def type(self, value: Optional[str] = None) -> Any:
        """Geometry type, one of GEOMETRY_TYPES (case-insensitive)."""
        return self._choose(self._doc, "type", value, GEOMETRY_TYPES)

    def coordinates(self, value: Any = None) -> Any:
        return self._property(self._doc, "coordinates", value)

    def radius(self, value: Any = None) -> Any:
        """Radius of a ``circle`` shape, e.g. ``"100m"``."""
        return self._property(self._doc, "radius", value)


class IndexedShape(Builder):
    """Shape already indexed in another document."""

    capability = Capability.INDEXED_SHAPE

    def __init__(self, type: str, id: str):
        require_name(type, "type")
        require_name(id, "id")
        super().__init__({"type": type, "id": id})

    def type(self, value: Optional[str] = None) -> Any:
        return self._property(self._doc, "type", value)

    def id(self, value: Optional[str] = None) -> Any:
        return self._property(self._doc, "id", value)

    def index(self, value: Optional[str] = None) -> Any:
        """Index holding the shape document (defaults to ``shapes``)."""
        return self._property(self._doc, "index", value)

    def shape_field_name(self, value: Optional[str] = None) -> Any:
        return self._property(self._doc, "shape_field_name", value)
