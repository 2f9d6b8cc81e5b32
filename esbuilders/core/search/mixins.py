"""Builder base classes and shared accessor machinery.

Every concrete builder owns exactly one document (a nested dict) and
exposes get/set accessors over it: called without an argument an accessor
returns the current value, called with a value it validates, writes and
returns the builder for chaining.

Families:
- QueryMixin / FieldQueryMixin: ``{root: {...}}`` query documents
- FilterMixin: ``{root: {...}}`` filter documents
- AggregationMixin / MetricsAggregationMixin: ``{name: {kind: {...}}}``
- FacetMixin: ``{name: {...}}``

Child builders are embedded as deep copies of their document, so mutating
a child after it was embedded never leaks into the parent.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, Callable, ClassVar, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from esbuilders.core.config import get_settings
from esbuilders.core.errors import BuilderTypeError, BuilderValueError, ErrorCode
from esbuilders.core.search.predicates import (
    Capability,
    is_array,
    is_builder,
    is_filter,
    is_aggregation,
    is_non_empty_string,
    is_number,
    is_object,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


# ============================================================================
# Document helpers
# ============================================================================

def extend(base: Mapping[str, Any], *extensions: Mapping[str, Any]) -> Dict[str, Any]:
    """Shallow-merge mappings into a new dict; later keys win.

    Inputs are left untouched and values are not copied.
    """
    merged: Dict[str, Any] = dict(base)
    for extension in extensions:
        merged.update(extension)
    return merged


def rekey(container: Dict[str, Any], old: str, new: str) -> None:
    """Move ``container[old]`` to ``container[new]`` and drop ``old``."""
    if old == new:
        return
    value = container.pop(old, {})
    container[new] = value


def snapshot(value: Any) -> Any:
    """Independent copy of a child for embedding into a parent document."""
    if is_builder(value):
        return copy.deepcopy(value.to_dict())
    return copy.deepcopy(value)


def require_name(value: Any, what: str = "name") -> str:
    """Validate a required positional name argument."""
    if value is None:
        raise BuilderTypeError(
            f"Missing required argument: {what}",
            ErrorCode.MISSING_REQUIRED_ARGUMENT,
        )
    if not is_non_empty_string(value):
        raise BuilderTypeError(f"Argument {what} must be a non-empty String")
    return value


# ============================================================================
# Base builder
# ============================================================================

class Builder:
    """Capability-bearing handle over one document."""

    capability: ClassVar[Capability]

    def __init__(self, document: Optional[Dict[str, Any]] = None):
        self._doc: Dict[str, Any] = document if document is not None else {}

    def _type(self) -> str:
        """Capability tag used by composite slots for validation."""
        return self.capability.value

    def to_dict(self) -> Dict[str, Any]:
        """Return the live document.

        This is the builder's own storage, not a copy: treat it as read-only.
        """
        return self._doc

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the document to a JSON string."""
        if indent is None:
            indent = get_settings().JSON_INDENT
        return json.dumps(self._doc, indent=indent)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._doc!r})"

    # -- accessor machinery -------------------------------------------------

    def _property(
        self,
        container: Dict[str, Any],
        key: str,
        value: Any,
        check: Optional[Predicate] = None,
        expected: str = "",
    ) -> Any:
        if value is None:
            return container.get(key)
        if check is not None and not check(value):
            raise BuilderTypeError(f"Argument must be a {expected}")
        container[key] = value
        return self

    def _choose(
        self,
        container: Dict[str, Any],
        key: str,
        value: Any,
        allowed: Iterable[str],
    ) -> Any:
        """Case-folded enum accessor; values outside ``allowed`` are ignored."""
        if value is None:
            return container.get(key)
        allowed = tuple(allowed)
        normalized = value.lower() if isinstance(value, str) else None
        if normalized in allowed:
            container[key] = normalized
            return self

        logger.debug(
            f"Ignored invalid value for {type(self).__name__}.{key}",
            extra={
                "builder": type(self).__name__,
                "accessor": key,
                "value": value,
                "allowed": list(allowed),
            },
        )
        if get_settings().STRICT_ENUMS:
            raise BuilderValueError(
                f"Invalid value {value!r} for {key}, expected one of {', '.join(allowed)}",
                value=value,
                allowed=allowed,
            )
        return self

    def _embed(
        self,
        container: Dict[str, Any],
        key: str,
        value: Any,
        check: Predicate,
        expected: str,
    ) -> Any:
        """Single child slot holding a snapshot of one builder."""
        if value is None:
            return container.get(key)
        if not check(value):
            raise BuilderTypeError(f"Argument must be a {expected}", ErrorCode.INVALID_CHILD)
        container[key] = snapshot(value)
        return self

    def _accumulate(
        self,
        container: Dict[str, Any],
        key: str,
        value: Any,
        check: Predicate,
        expected: str,
    ) -> Any:
        """Ordered child slot.

        A single child is appended. A list or tuple replaces the whole slot,
        but only once every element has passed ``check``.
        """
        if value is None:
            return container.setdefault(key, [])

        if check(value):
            container.setdefault(key, []).append(snapshot(value))
            return self

        if is_array(value):
            scratch: List[Any] = []
            for item in value:
                if not check(item):
                    raise BuilderTypeError(
                        f"Argument must be a list of {expected}",
                        ErrorCode.INVALID_CHILD,
                    )
                scratch.append(snapshot(item))
            container[key] = scratch
            logger.debug(
                f"Replaced {type(self).__name__}.{key}",
                extra={
                    "builder": type(self).__name__,
                    "accessor": key,
                    "slot_size": len(scratch),
                },
            )
            return self

        raise BuilderTypeError(
            f"Argument must be a {expected} or list of {expected}",
            ErrorCode.INVALID_CHILD,
        )


class BuilderMixin(Builder):
    """Generic mixin: document seeded as ``{root_key: {}}``."""

    # Body keys written by option accessors; never usable as a field name
    reserved_keys: ClassVar[Tuple[str, ...]] = ()

    def __init__(self, root_key: str):
        super().__init__({root_key: {}})
        self._root = root_key

    def _body(self) -> Dict[str, Any]:
        return self._doc[self._root]

    def _check_field(self, name: Any) -> str:
        require_name(name, "field")
        if name in self.reserved_keys:
            raise BuilderTypeError(
                f"Field name {name} is reserved by {type(self).__name__}"
            )
        return name

    def _keyed_field(self, name: Optional[str]) -> Any:
        """Read the field keying the body, or move its entry under ``name``."""
        if name is None:
            return self._field
        self._check_field(name)
        rekey(self._body(), self._field, name)
        self._field = name
        return self


# ============================================================================
# Family mixins
# ============================================================================

class QueryMixin(BuilderMixin):
    """Base for query builders."""

    capability = Capability.QUERY

    def boost(self, value: Optional[float] = None) -> Any:
        """Boost applied to documents matching the query."""
        return self._property(self._body(), "boost", value, is_number, "Number")


class FieldQueryMixin(QueryMixin):
    """Query whose body is keyed by a field name: ``{root: {field: {...}}}``.

    Renaming the field moves the sub-document to the new key.
    """

    def __init__(self, root_key: str, field: str):
        self._check_field(field)
        super().__init__(root_key)
        self._field = field
        self._body()[field] = {}

    def _field_body(self) -> Dict[str, Any]:
        return self._body()[self._field]

    def field(self, name: Optional[str] = None) -> Any:
        return self._keyed_field(name)

    def boost(self, value: Optional[float] = None) -> Any:
        return self._property(self._field_body(), "boost", value, is_number, "Number")


class FilterMixin(BuilderMixin):
    """Base for filter builders."""

    capability = Capability.FILTER
    reserved_keys = ("_name", "_cache", "_cache_key")

    def name(self, value: Optional[str] = None) -> Any:
        """Name reported back in matched_filters."""
        return self._property(self._body(), "_name", value, is_non_empty_string, "String")

    def cache(self, value: Optional[bool] = None) -> Any:
        return self._property(self._body(), "_cache", value)

    def cache_key(self, value: Optional[str] = None) -> Any:
        return self._property(self._body(), "_cache_key", value)


class AggregationMixin(BuilderMixin):
    """Base for aggregation builders, keyed by the aggregation name."""

    capability = Capability.AGGREGATION

    def __init__(self, name: str):
        require_name(name, "aggregation name")
        super().__init__(name)

    def aggregation(self, agg: Optional["AggregationMixin"] = None) -> Any:
        """Add a sub-aggregation under ``aggs``; a repeated name replaces."""
        body = self._body()
        if agg is None:
            return body.get("aggs")
        if not is_aggregation(agg):
            raise BuilderTypeError("Argument must be an Aggregation", ErrorCode.INVALID_CHILD)
        body["aggs"] = extend(body.get("aggs", {}), snapshot(agg))
        return self

    agg = aggregation

    def meta(self, value: Optional[Dict[str, Any]] = None) -> Any:
        return self._property(self._body(), "meta", value, is_object, "Mapping")


class MetricsAggregationMixin(AggregationMixin):
    """Numeric metrics aggregation: ``{name: {kind: {...}}}``.

    Values come from ``field`` or ``script``; both may be stored.
    """

    def __init__(self, name: str, kind: str):
        super().__init__(name)
        self._kind = kind
        self._body()[kind] = {}

    def _metric_body(self) -> Dict[str, Any]:
        return self._body()[self._kind]

    def field(self, value: Optional[str] = None) -> Any:
        return self._property(self._metric_body(), "field", value, is_non_empty_string, "String")

    def script(self, value: Optional[Union[str, Dict[str, Any]]] = None) -> Any:
        return self._property(self._metric_body(), "script", value)

    def lang(self, value: Optional[str] = None) -> Any:
        return self._property(self._metric_body(), "lang", value)

    def script_values_sorted(self, value: Optional[bool] = None) -> Any:
        """Hint that script values are returned in sorted order."""
        return self._property(self._metric_body(), "script_values_sorted", value)

    def params(self, value: Optional[Dict[str, Any]] = None) -> Any:
        return self._property(self._metric_body(), "params", value, is_object, "Mapping")


class FacetMixin(BuilderMixin):
    """Base for facet builders, keyed by the facet name."""

    capability = Capability.FACET

    def __init__(self, name: str):
        require_name(name, "facet name")
        super().__init__(name)

    def facet_filter(self, value: Optional[FilterMixin] = None) -> Any:
        """Restrict the documents the facet is computed over."""
        return self._embed(self._body(), "facet_filter", value, is_filter, "Filter")

    def global_(self, value: Optional[bool] = None) -> Any:
        """Compute over all documents, ignoring the search query."""
        return self._property(self._body(), "global", value)

    def mode(self, value: Optional[str] = None) -> Any:
        return self._choose(self._body(), "mode", value, ("collector", "post"))

    def nested(self, value: Optional[str] = None) -> Any:
        return self._property(self._body(), "nested", value, is_non_empty_string, "String")

    def cache_filter(self, value: Optional[bool] = None) -> Any:
        """Cache the facet_filter between requests."""
        return self._property(self._body(), "cache_filter", value)

    def scope(self, value: Optional[str] = None) -> Any:
        return self._property(self._body(), "scope", value, is_non_empty_string, "String")


__all__ = [
    "extend",
    "rekey",
    "snapshot",
    "require_name",
    "Builder",
    "BuilderMixin",
    "QueryMixin",
    "FieldQueryMixin",
    "FilterMixin",
    "AggregationMixin",
    "MetricsAggregationMixin",
    "FacetMixin",
]
