"""Core Statement -> HTTP request compilation logic.

``RequestBuilder`` is the top-level orchestrator.  It dispatches on the
statement kind and, for a select, drives the clause-level sub-builders in
wire order:

RequestBuilder
  ├── TargetListBuilder    (clause_builders.py)  ``select``
  ├── FilterBuilder        (filter_builder.py)   filters
  ├── OrderClauseBuilder   (clause_builders.py)  ``order``
  └── LimitClauseBuilder   (clause_builders.py)  ``limit`` / ``offset``

A fresh :class:`~restql.compile.base.QueryParams` is created per
``build()`` call and threaded through every sub-builder; the builders
themselves hold no per-request state.
"""

from __future__ import annotations

import logging

from restql.compile.base import HttpRequest, QueryParams
from restql.compile.clause_builders import (
    LimitClauseBuilder,
    OrderClauseBuilder,
    TargetListBuilder,
)
from restql.compile.filter_builder import FilterBuilder
from restql.errors import UnsupportedStatementKindError
from restql.schema.statement import Select, Statement

logger = logging.getLogger(__name__)


class RequestBuilder:
    """Compiles a Statement to an :class:`~restql.compile.base.HttpRequest`.

    Args:
        filter_builder: Optional filter compiler; defaults to
            :class:`~restql.compile.filter_builder.FilterBuilder`.
        target_builder: Optional ``select`` renderer; defaults to
            :class:`~restql.compile.clause_builders.TargetListBuilder`.
    """

    def __init__(
        self,
        filter_builder: FilterBuilder | None = None,
        target_builder: TargetListBuilder | None = None,
    ) -> None:
        self._filters = filter_builder or FilterBuilder()
        self._targets = target_builder or TargetListBuilder()
        self._order = OrderClauseBuilder()
        self._limit = LimitClauseBuilder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, statement: Statement) -> HttpRequest:
        """Compile ``statement`` to an HTTP request.

        Raises:
            UnsupportedStatementKindError: If ``statement`` is not a select.
            UnrecognizedFilterKindError: If the filter tree has an unknown node.
        """
        if isinstance(statement, Select):
            return self.build_select(statement)
        statement_type = getattr(statement, "type", type(statement).__name__)
        raise UnsupportedStatementKindError(str(statement_type))

    def build_select(self, select: Select) -> HttpRequest:
        """Compile a select statement."""
        logger.debug("Compiling select from %r", select.from_)
        params = QueryParams()

        if select.targets and not self._targets.is_default(select.targets):
            params.set("select", self._targets.build(select.targets))

        if select.filter is not None:
            self._filters.build_root(params, select.filter)

        if select.sorts:
            self._order.build(params, select.sorts)

        if select.limit is not None:
            self._limit.build(params, select.limit)

        logger.debug("Compiled %d query parameters for %r", len(params), select.from_)
        return HttpRequest(path=f"/{select.from_}", params=params)


_DEFAULT_BUILDER = RequestBuilder()


def compile_statement(statement: Statement) -> HttpRequest:
    """Compile any supported statement with a default builder."""
    return _DEFAULT_BUILDER.build(statement)


def compile_select(select: Select) -> HttpRequest:
    """Compile a select statement with a default builder."""
    return _DEFAULT_BUILDER.build_select(select)
