"""restQL compilation layer: Statement → HTTP request."""
from restql.compile.base import HttpRequest, QueryParams
from restql.compile.builder import RequestBuilder, compile_select, compile_statement
from restql.compile.filter_builder import FilterBuilder, compile_filter, compile_root_filter

__all__ = [
    "HttpRequest",
    "QueryParams",
    "RequestBuilder",
    "FilterBuilder",
    "compile_filter",
    "compile_root_filter",
    "compile_select",
    "compile_statement",
]
