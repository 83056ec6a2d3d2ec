"""restQL rendering layer: HttpRequest → HTTP text / curl command."""
from restql.render.curl import format_curl
from restql.render.http import format_http
from restql.render.registry import Formatter, FormatterRegistry

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "format_curl",
    "format_http",
]
