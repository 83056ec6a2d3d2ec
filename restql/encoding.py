"""Percent encoding with a literal-character whitelist.

The query grammar uses ``*()``, ``,``, ``:`` and ``!`` as structural
punctuation (wildcards, grouping, list separators, casts, embedding hints).
Encoding them would change how the server reads a request, so every
encoder here runs standard percent encoding first and then turns the
``%XX`` escapes of whitelisted characters back into literals.
"""
from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import quote, urlencode

#: Characters left literal in every encoded query.
DEFAULT_WHITELIST: tuple[str, ...] = ("*", "(", ")", ",", ":", "!")


def restore_whitelist(text: str, whitelist: Iterable[str] = DEFAULT_WHITELIST) -> str:
    """Convert percent escapes of whitelisted characters back to literals.

    ``%2A`` becomes ``*``, ``%28`` becomes ``(`` and so on.  No escape of
    one whitelisted character contains another's, so the order of the
    replacements does not matter and a second pass is a no-op.

    Args:
        text: Already percent-encoded text.
        whitelist: Single characters to restore.

    Returns:
        ``text`` with the whitelisted escapes replaced.
    """
    for char in whitelist:
        text = text.replace(f"%{ord(char):02X}", char)
    return text


def percent_encode(text: str, whitelist: Iterable[str] = DEFAULT_WHITELIST) -> str:
    """Percent-encode ``text`` except for whitelisted characters.

    Every character outside the unreserved set (letters, digits, ``-._~``)
    is UTF-8 encoded to uppercase ``%XX`` escapes, including ``/``, ``=``
    and ``&``; whitelisted characters are then restored.

    Example::

        >>> percent_encode("or=(title.like.*Cheese*)")
        'or%3D(title.like.*Cheese*)'
    """
    return restore_whitelist(quote(text, safe=""), whitelist)


def encode_params(
    params: Iterable[tuple[str, str]],
    whitelist: Iterable[str] = DEFAULT_WHITELIST,
) -> str:
    """Serialize query parameters as ``application/x-www-form-urlencoded``.

    Pairs are joined with ``&`` in the given order (repeated keys are
    kept), spaces become ``+``, and whitelisted characters are restored.

    Args:
        params: ``(key, value)`` pairs.
        whitelist: Characters left literal.

    Returns:
        The query string without a leading ``?``.
    """
    return restore_whitelist(urlencode(list(params)), whitelist)
