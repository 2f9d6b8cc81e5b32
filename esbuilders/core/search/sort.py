"""Sort clauses for search requests."""

from __future__ import annotations

from typing import Any, Optional

from esbuilders.core.errors import BuilderTypeError
from esbuilders.core.search.mixins import BuilderMixin, require_name
from esbuilders.core.search.predicates import Capability, is_non_empty_string

SORT_ORDERS = ("asc", "desc")
SORT_MODES = ("min", "max", "sum", "avg", "median")


class Sort(BuilderMixin):
    """Sort on a single field: ``{field: {"order": ...}}``."""

    capability = Capability.SORT

    def __init__(self, field: str = "_score"):
        require_name(field, "field")
        super().__init__(field)

    def field(self, name: Optional[str] = None) -> Any:
        """Sorted field, which is also the document root key and cannot change."""
        if name is not None:
            raise BuilderTypeError("Sort field is fixed; create a new Sort instead")
        return self._root

    def order(self, value: Optional[str] = None) -> Any:
        return self._choose(self._body(), "order", value, SORT_ORDERS)

    def asc(self) -> "Sort":
        return self.order("asc")

    def desc(self) -> "Sort":
        return self.order("desc")

    def mode(self, value: Optional[str] = None) -> Any:
        """Value picked from multi-valued fields."""
        return self._choose(self._body(), "mode", value, SORT_MODES)

    def missing(self, value: Any = None) -> Any:
        """``_last``, ``_first`` or a custom value for documents without the field."""
        return self._property(self._body(), "missing", value)

    def unmapped_type(self, value: Optional[str] = None) -> Any:
        return self._property(self._body(), "unmapped_type", value, is_non_empty_string, "String")
