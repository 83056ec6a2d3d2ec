"""Raw HTTP request rendering."""
from __future__ import annotations

from restql.compile.base import HttpRequest
from restql.config import RenderConfig


def format_http(base_url: str | RenderConfig, request: HttpRequest) -> str:
    """Render ``request`` as an HTTP/1.1 request line plus ``Host`` header.

    The base URL contributes its path prefix and host only::

        GET /rest/v1/books?id=eq.1 HTTP/1.1
        Host: localhost:54321

    Raises:
        ConfigError: If ``base_url`` is not an absolute URL.
    """
    config = RenderConfig.coerce(base_url)
    return (
        f"{request.method} {config.path_prefix}{request.encoded_path(config.whitelist)} HTTP/1.1\n"
        f"Host: {config.host}"
    )
