"""Typed filter tree models.

A filter is either a leaf comparison on one column or a logical grouping of
other filters.  Pydantic discriminated-union parsing on the ``type`` key
turns raw JSON (e.g. ``{"type": "column", "column": "title", ...}``) into
the matching model.

Usage::

    from restql.schema.filters import ColumnFilter, LogicalFilter

    tree = LogicalFilter(
        operator="or",
        values=[
            ColumnFilter(column="title", operator="eq", value="Cheese"),
            ColumnFilter(column="title", operator="eq", value="Salsa"),
        ],
    )
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from restql.schema.expressions import PATTERN_OPS

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class ColumnFilter(BaseModel):
    """A comparison on a single column: ``title=eq.Cheese``.

    Attributes:
        column: Column name.
        operator: Wire operator (``eq``, ``gt``, ``like``, ``is``, ...).
        value: Right-hand side, already rendered as text.
        negate: Prefix the rendered fragment with ``not.``.
    """

    model_config = _FROZEN

    type: Literal["column"] = "column"
    column: str
    operator: str
    value: str
    negate: bool = False

    def normalized(self) -> ColumnFilter:
        """Return the filter with pattern wildcards in wire form.

        ``%`` is a reserved character in URLs, so ``like`` / ``ilike``
        patterns use ``*`` instead.  Other operators are returned as-is.
        """
        if self.operator in PATTERN_OPS and "%" in self.value:
            return self.model_copy(update={"value": self.value.replace("%", "*")})
        return self


class LogicalFilter(BaseModel):
    """An ``and`` / ``or`` grouping of child filters.

    Attributes:
        operator: ``"and"`` or ``"or"``.
        values: Child filters, in order.  Never empty.
        negate: Negates this group only; children keep their own flag.
    """

    model_config = _FROZEN

    type: Literal["logical"] = "logical"
    operator: Literal["and", "or"]
    values: list[Filter] = Field(min_length=1)
    negate: bool = False


Filter = Annotated[ColumnFilter | LogicalFilter, Field(discriminator="type")]

# Resolve the forward reference in the recursive ``values`` field.
LogicalFilter.model_rebuild()
