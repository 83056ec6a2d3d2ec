"""Renderer registry.

Maps output format names to render functions so new renderings can be
added without touching :func:`restql.render_request`.

Usage::

    from restql.render.registry import FormatterRegistry

    @FormatterRegistry.register("httpie")
    def format_httpie(base_url, request):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from restql.compile.base import HttpRequest
from restql.config import RenderConfig
from restql.errors import ConfigError

#: ``(base_url, request) -> text``
Formatter = Callable[[str | RenderConfig, HttpRequest], str]


class FormatterRegistry:
    """Registry mapping format names to :data:`Formatter` callables."""

    _formatters: ClassVar[dict[str, Formatter]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[Formatter], Formatter]:
        """Decorator that registers a formatter under ``name``."""

        def decorator(formatter: Formatter) -> Formatter:
            cls._formatters[name] = formatter
            return formatter

        return decorator

    @classmethod
    def register_formatter(cls, name: str, formatter: Formatter) -> None:
        """Register a formatter without using the decorator form."""
        cls._formatters[name] = formatter

    @classmethod
    def get(cls, name: str) -> Formatter:
        """Return the formatter registered for ``name``.

        Raises:
            ConfigError: If no formatter is registered for ``name``.
        """
        formatter = cls._formatters.get(name)
        if formatter is None:
            raise ConfigError(
                f"Unsupported output format: '{name}'. Registered formats: {cls.registered_formats()}.",
                field="fmt",
            )
        return formatter

    @classmethod
    def registered_formats(cls) -> list[str]:
        """Return the sorted list of registered format names."""
        return sorted(cls._formatters)
