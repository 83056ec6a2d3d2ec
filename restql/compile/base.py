"""Compiler output: the QueryParams multimap and HttpRequest.

``HttpRequest`` plays the role a compiled SQL string plays for a database
driver: it is the fully resolved request, ready to be rendered or sent.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Literal

from restql.encoding import DEFAULT_WHITELIST, encode_params


class QueryParams:
    """Ordered multimap of query parameters.

    Insertion order is preserved and a key may appear more than once, which
    the server reads as a conjunction of the repeated filters.

    Example::

        params = QueryParams()
        params.append("id", "gt.1")
        params.append("id", "lt.9")
        params.set("limit", "10")
        list(params)  # [("id", "gt.1"), ("id", "lt.9"), ("limit", "10")]
    """

    def __init__(self, pairs: list[tuple[str, str]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = list(pairs or [])

    def append(self, key: str, value: str) -> None:
        """Add a pair, keeping any existing pairs for ``key``."""
        self._pairs.append((key, value))

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to a single value.

        The new pair takes the position of the first existing pair for
        ``key`` (or goes to the end) and every other pair for ``key`` is
        dropped.
        """
        replaced = False
        pairs: list[tuple[str, str]] = []
        for k, v in self._pairs:
            if k != key:
                pairs.append((k, v))
            elif not replaced:
                pairs.append((key, value))
                replaced = True
        if not replaced:
            pairs.append((key, value))
        self._pairs = pairs

    def extend(self, pairs: Iterable[tuple[str, str]]) -> None:
        """Append every pair from ``pairs``, in order."""
        self._pairs.extend(pairs)

    def delete(self, key: str) -> None:
        """Remove every pair for ``key``."""
        self._pairs = [(k, v) for k, v in self._pairs if k != key]

    def get(self, key: str) -> str | None:
        """Return the first value for ``key``, or ``None``."""
        for k, v in self._pairs:
            if k == key:
                return v
        return None

    def get_all(self, key: str) -> list[str]:
        """Return every value for ``key`` in insertion order."""
        return [v for k, v in self._pairs if k == key]

    def keys(self) -> list[str]:
        """Return keys in insertion order, repeats included."""
        return [k for k, _ in self._pairs]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._pairs))

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryParams):
            return self._pairs == other._pairs
        return NotImplemented

    def __repr__(self) -> str:
        return f"QueryParams({self._pairs!r})"


@dataclass
class HttpRequest:
    """The output of a successful compilation.

    Attributes:
        path: Resource path, ``/<from>``, never encoded.
        params: Query parameters in wire order.
        method: HTTP method; reads are always ``GET``.
    """

    path: str
    params: QueryParams = field(default_factory=QueryParams)
    method: Literal["GET"] = "GET"

    @property
    def full_path(self) -> str:
        """Path plus encoded query string, recomputed on every access."""
        return self.encoded_path(DEFAULT_WHITELIST)

    def encoded_path(self, whitelist: Iterable[str]) -> str:
        """Like :attr:`full_path` but with a custom literal whitelist."""
        if len(self.params) > 0:
            return f"{self.path}?{encode_params(self.params, whitelist)}"
        return self.path
