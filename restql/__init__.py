"""restQL – compile parsed read queries to PostgREST-style HTTP requests.

Public API
----------
``compile_request``
    Parse (if needed) and compile a Statement to an ``HttpRequest``.

``render_request``
    Render an ``HttpRequest`` as raw HTTP text or as a ``curl`` command.

Re-exported types
-----------------
``Statement``, ``Select``, the filter and target models, ``HttpRequest``,
``QueryParams``, ``RenderConfig``, the encoders, and all error classes.

Extensibility
-------------
New output formats can be registered via::

    from restql.render.registry import FormatterRegistry

    @FormatterRegistry.register("httpie")
    def format_httpie(base_url, request):
        ...

After registration, ``render_request(..., fmt="httpie")`` picks it up.
"""

from __future__ import annotations

from typing import Any

from restql.compile.base import HttpRequest, QueryParams
from restql.compile.builder import RequestBuilder, compile_select
from restql.compile.filter_builder import FilterBuilder, compile_filter, compile_root_filter
from restql.config import RenderConfig
from restql.encoding import DEFAULT_WHITELIST, encode_params, percent_encode, restore_whitelist
from restql.errors import (
    CompilationError,
    ConfigError,
    ParseError,
    RestQLError,
    UnrecognizedFilterKindError,
    UnsupportedStatementKindError,
)
from restql.render.curl import format_curl
from restql.render.http import format_http
from restql.render.registry import FormatterRegistry
from restql.schema.filters import ColumnFilter, Filter, LogicalFilter
from restql.schema.statement import Limit, Select, Sort, Statement, parse_statement
from restql.schema.targets import AggregateTarget, ColumnTarget, EmbeddedTarget, Target

# ---------------------------------------------------------------------------
# Register built-in renderers with FormatterRegistry
# ---------------------------------------------------------------------------

FormatterRegistry.register_formatter("http", format_http)
FormatterRegistry.register_formatter("curl", format_curl)

__all__ = [
    # Core pipeline
    "compile_request",
    "render_request",
    "parse_statement",
    # Schema types
    "Statement",
    "Select",
    "Sort",
    "Limit",
    "Filter",
    "ColumnFilter",
    "LogicalFilter",
    "Target",
    "ColumnTarget",
    "AggregateTarget",
    "EmbeddedTarget",
    # Compilation
    "HttpRequest",
    "QueryParams",
    "RequestBuilder",
    "FilterBuilder",
    "compile_select",
    "compile_filter",
    "compile_root_filter",
    # Encoding
    "DEFAULT_WHITELIST",
    "percent_encode",
    "restore_whitelist",
    "encode_params",
    # Rendering
    "RenderConfig",
    "FormatterRegistry",
    "format_http",
    "format_curl",
    # Errors
    "RestQLError",
    "ParseError",
    "ConfigError",
    "CompilationError",
    "UnsupportedStatementKindError",
    "UnrecognizedFilterKindError",
]


def compile_request(statement: Statement | dict[str, Any] | str) -> HttpRequest:
    """Compile a Statement to an HTTP request.

    This is the main entry point::

        request = restql.compile_request(
            {"type": "select", "from": "books", "targets": [...], "filter": {...}}
        )
        print(request.full_path)

    Args:
        statement: A typed statement, or its dict / JSON form.

    Returns:
        ``HttpRequest`` with ``method``, ``path``, ``params`` and the derived
        ``full_path``.

    Raises:
        ParseError: If raw input is not valid JSON or not a valid Statement.
        UnsupportedStatementKindError: If the statement is not a select.
        UnrecognizedFilterKindError: If the filter tree has an unknown node.
    """
    if isinstance(statement, (str, dict)):
        statement = parse_statement(statement)
    return RequestBuilder().build(statement)


def render_request(
    request: HttpRequest,
    base_url: str | RenderConfig,
    fmt: str = "http",
) -> str:
    """Render a compiled request in the given output format.

    Args:
        request: Output of :func:`compile_request`.
        base_url: API root URL, or a full ``RenderConfig``.
        fmt: Registered format name (``"http"`` or ``"curl"`` built in).

    Returns:
        The rendered text.

    Raises:
        ConfigError: If ``fmt`` is unknown or ``base_url`` is invalid.
    """
    return FormatterRegistry.get(fmt)(base_url, request)
