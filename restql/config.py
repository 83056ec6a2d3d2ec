"""Render configuration: where requests are addressed and what stays literal.

The compiler itself needs no configuration; only the renderers do.  A
``RenderConfig`` is normally created implicitly from a base URL string::

    from restql import render_request

    render_request(request, "http://localhost:54321/rest/v1", fmt="curl")

or explicitly, e.g. to change the literal-character whitelist::

    config = RenderConfig(base_url="https://api.example.com", whitelist=("*", "(", ")"))
"""
from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from restql.encoding import DEFAULT_WHITELIST
from restql.errors import ConfigError


class RenderConfig(BaseModel):
    """Settings shared by the HTTP and curl renderers.

    Attributes:
        base_url: Absolute URL of the API root (scheme and host required,
            path prefix optional).
        whitelist: Characters left literal when percent-encoding.

    Raises:
        ConfigError: On construction, if either field is invalid; ``field``
            names the offending attribute.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str
    whitelist: tuple[str, ...] = DEFAULT_WHITELIST

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            errors = exc.errors()
            loc = errors[0]["loc"] if errors else ()
            field = str(loc[0]) if loc else None
            raise ConfigError(f"Invalid render configuration: {exc}", field=field) from exc

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not parts.hostname:
            raise ValueError(f"base URL must include a scheme and host, got {value!r}")
        return value

    @field_validator("whitelist")
    @classmethod
    def _check_whitelist(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        # Restoration matches single-byte ``%XX`` escapes, and ``%`` itself
        # would turn ``%25XX`` into a different escape.
        for char in value:
            if len(char) != 1 or not char.isascii() or char.isalnum() or char == "%":
                raise ValueError(
                    f"whitelist entries must be single ASCII punctuation characters "
                    f"other than '%', got {char!r}"
                )
        return value

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def coerce(cls, value: str | RenderConfig) -> RenderConfig:
        """Return ``value`` as a config, building one from a URL string.

        Raises:
            ConfigError: If the URL is invalid.
        """
        if isinstance(value, RenderConfig):
            return value
        return cls(base_url=value)

    # ------------------------------------------------------------------
    # Derived URL parts
    # ------------------------------------------------------------------

    @property
    def path_prefix(self) -> str:
        """Path of the base URL without a trailing slash (may be empty)."""
        return urlsplit(self.base_url).path.rstrip("/")

    @property
    def host(self) -> str:
        """``hostname[:port]`` of the base URL, without credentials."""
        parts = urlsplit(self.base_url)
        host = parts.hostname or ""
        if ":" in host:
            host = f"[{host}]"
        if parts.port is not None:
            host = f"{host}:{parts.port}"
        return host

    @property
    def base(self) -> str:
        """The base URL without query, fragment, or trailing slash."""
        parts = urlsplit(self.base_url)
        return f"{parts.scheme}://{parts.netloc}{self.path_prefix}"
