"""curl command rendering."""
from __future__ import annotations

from restql.compile.base import HttpRequest
from restql.config import RenderConfig
from restql.encoding import percent_encode

_LINE_CONTINUATION = " \\\n"


def format_curl(base_url: str | RenderConfig, request: HttpRequest) -> str:
    """Render ``request`` as a shell-ready ``curl`` command.

    GET parameters are passed as ``-d`` arguments under ``-G`` so each one
    sits on its own line; keys and values are encoded separately::

        curl -G http://localhost:54321/rest/v1/books \\
          -d "id=eq.1"

    Raises:
        ConfigError: If ``base_url`` is not an absolute URL.
    """
    config = RenderConfig.coerce(base_url)
    lines: list[str] = []

    if request.method == "GET":
        lines.append(f"curl -G {config.base}{request.path}")
        for key, value in request.params:
            encoded_key = percent_encode(key, config.whitelist)
            encoded_value = percent_encode(value, config.whitelist)
            lines.append(f'  -d "{encoded_key}={encoded_value}"')

    return _LINE_CONTINUATION.join(lines)
