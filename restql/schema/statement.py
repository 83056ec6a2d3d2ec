"""Pydantic models for the restQL Statement.

A Statement is the already-parsed form of a read query.  Only the
``select`` kind exists; ``parse_statement`` rejects any other tag before
pydantic sees the input so callers get
:class:`~restql.errors.UnsupportedStatementKindError` rather than a generic
shape error.
"""
from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from restql.errors import ParseError, UnrecognizedFilterKindError, UnsupportedStatementKindError
from restql.schema.expressions import FILTER_KINDS, STATEMENT_KINDS, FilterKind
from restql.schema.filters import Filter
from restql.schema.targets import Target


class Sort(BaseModel):
    """A single sort key.

    Attributes:
        column: Column to order by.
        direction: Sort direction; omitted on the wire when ``None``.
        nulls: Null placement; omitted on the wire when ``None``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    column: str
    direction: Literal["asc", "desc"] | None = None
    nulls: Literal["first", "last"] | None = None


class Limit(BaseModel):
    """Paging: row count and offset, each independently optional."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    count: int | None = None
    offset: int | None = None


class Select(BaseModel):
    """A select-style read of one table.

    Attributes:
        from_: Table name (JSON key ``from``).
        targets: Output targets; empty means no ``select`` parameter.
        filter: Root of the filter tree.
        sorts: Sort keys, in priority order.
        limit: Paging clause.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    type: Literal["select"] = "select"
    from_: str = Field(alias="from")
    targets: list[Target] = Field(default_factory=list)
    filter: Filter | None = None
    sorts: list[Sort] | None = None
    limit: Limit | None = None


#: Every statement kind the compiler accepts.
Statement = Select


def parse_statement(raw: str | dict[str, Any]) -> Statement:
    """Parse a JSON string or dict into a typed Statement.

    Args:
        raw: JSON text or an already-decoded dict.

    Returns:
        The typed statement.

    Raises:
        ParseError: If ``raw`` is not valid JSON or does not match the
            Statement shape.
        UnsupportedStatementKindError: If the statement tag is not ``select``.
        UnrecognizedFilterKindError: If any filter node has an unknown tag.
    """
    data: Any = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON: {exc}", raw=raw) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Statement must be a JSON object, got {type(data).__name__}.", raw=raw
        )

    statement_type = data.get("type", "select")
    if not isinstance(statement_type, str) or statement_type not in STATEMENT_KINDS:
        raise UnsupportedStatementKindError(str(statement_type))

    if data.get("filter") is not None:
        _check_filter_kinds(data["filter"])

    try:
        return Select.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Statement structure is invalid: {exc}", raw=raw) from exc


def _check_filter_kinds(node: Any) -> None:
    """Raise on the first filter node whose tag is not a known kind."""
    if not isinstance(node, dict) or "type" not in node:
        return  # Shape errors are reported by pydantic.
    kind = node["type"]
    if not isinstance(kind, str) or kind not in FILTER_KINDS:
        raise UnrecognizedFilterKindError(str(kind))
    if kind == FilterKind.LOGICAL.value:
        for child in node.get("values") or []:
            _check_filter_kinds(child)
