"""Typed select-target models.

Each target is one entry of the ``select`` query parameter.  Only the plain
column shape is inspected by the request compiler (to spot the bare ``*``
default); every shape is rendered by
:class:`~restql.compile.clause_builders.TargetListBuilder`.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from restql.schema.expressions import WILDCARD_COLUMN

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class ColumnTarget(BaseModel):
    """A column, optionally renamed and cast: ``alias:column::cast``."""

    model_config = _FROZEN

    type: Literal["column-target"] = "column-target"
    column: str
    alias: str | None = None
    cast: str | None = None

    @property
    def is_wildcard(self) -> bool:
        """True for a bare ``*`` with no alias or cast."""
        return self.column == WILDCARD_COLUMN and self.alias is None and self.cast is None


class AggregateTarget(BaseModel):
    """An aggregate call such as ``count()`` or ``total:amount::int.sum()``.

    Attributes:
        function_name: Aggregate function (``count``, ``sum``, ``avg``, ...).
        column: Aggregated column; ``None`` for a bare ``count()``.
        alias: Optional output name.
        input_cast: Cast applied to ``column`` before aggregation.
        output_cast: Cast applied to the aggregate result.
    """

    model_config = _FROZEN

    type: Literal["aggregate-target"] = "aggregate-target"
    function_name: str
    column: str | None = None
    alias: str | None = None
    input_cast: str | None = None
    output_cast: str | None = None


class EmbeddedTarget(BaseModel):
    """A related resource embedded in the response: ``authors(name)``.

    Attributes:
        relation: Name of the related table.
        targets: Columns selected from the related table.
        alias: Optional output name.
        join_type: ``"inner"`` filters out parent rows without a match.
        flatten: Spread the related columns into the parent row.
    """

    model_config = _FROZEN

    type: Literal["embedded-target"] = "embedded-target"
    relation: str
    targets: list[Target] = Field(default_factory=list)
    alias: str | None = None
    join_type: Literal["left", "inner"] | None = None
    flatten: bool = False


Target = Annotated[
    ColumnTarget | AggregateTarget | EmbeddedTarget,
    Field(discriminator="type"),
]

# Resolve the forward reference in the recursive ``targets`` field.
EmbeddedTarget.model_rebuild()
