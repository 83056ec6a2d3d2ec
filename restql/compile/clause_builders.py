"""Clause-level query parameter builders.

Each class renders exactly one parameter of a select request.

Classes
-------
TargetListBuilder   -- ``select=<targets>``
OrderClauseBuilder  -- ``order=<col>[.dir][.nulls<pos>],...``
LimitClauseBuilder  -- ``limit=<n>`` / ``offset=<n>``
"""
from __future__ import annotations

from restql.compile.base import QueryParams
from restql.errors import CompilationError
from restql.schema.statement import Limit, Sort
from restql.schema.targets import AggregateTarget, ColumnTarget, EmbeddedTarget, Target


class TargetListBuilder:
    """Builds the ``select`` parameter value from a list of targets."""

    def build(self, targets: list[Target]) -> str:
        return ",".join(self._build_target(target) for target in targets)

    def is_default(self, targets: list[Target]) -> bool:
        """True when the list is just ``*``, which the server assumes anyway."""
        return (
            len(targets) == 1
            and isinstance(targets[0], ColumnTarget)
            and targets[0].is_wildcard
        )

    def _build_target(self, target: Target) -> str:
        if isinstance(target, ColumnTarget):
            text = target.column
            if target.cast:
                text = f"{text}::{target.cast}"
            return _with_alias(target.alias, text)

        if isinstance(target, AggregateTarget):
            call = f"{target.function_name}()"
            if target.column:
                column = target.column
                if target.input_cast:
                    column = f"{column}::{target.input_cast}"
                call = f"{column}.{call}"
            if target.output_cast:
                call = f"{call}::{target.output_cast}"
            return _with_alias(target.alias, call)

        if isinstance(target, EmbeddedTarget):
            relation = target.relation
            if target.join_type == "inner":
                relation = f"{relation}!inner"
            text = _with_alias(target.alias, f"{relation}({self.build(target.targets)})")
            return f"...{text}" if target.flatten else text

        raise CompilationError(
            f"Unknown target type: {type(target).__name__}", clause="select"
        )


def _with_alias(alias: str | None, text: str) -> str:
    return f"{alias}:{text}" if alias else text


class OrderClauseBuilder:
    """Builds the ``order`` parameter.

    The pair is appended, so a filter on a column named ``order`` is kept
    alongside it.
    """

    def build(self, params: QueryParams, sorts: list[Sort]) -> None:
        columns: list[str] = []
        for sort in sorts:
            value = sort.column
            if sort.direction:
                value += f".{sort.direction}"
            if sort.nulls:
                value += f".nulls{sort.nulls}"
            columns.append(value)

        if columns:
            params.append("order", ",".join(columns))


class LimitClauseBuilder:
    """Builds the ``limit`` and ``offset`` parameters.

    Like ``order``, both are appended after any filter on a column of the
    same name.
    """

    def build(self, params: QueryParams, limit: Limit) -> None:
        if limit.count is not None:
            params.append("limit", str(limit.count))
        if limit.offset is not None:
            params.append("offset", str(limit.offset))
