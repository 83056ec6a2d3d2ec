"""Test fixtures: sample Statement JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

_FIXTURES_DIR = Path(__file__).parent

#: Base URL of a local Supabase-style REST endpoint.
BASE_URL = "http://localhost:54321/rest/v1"


def load_raw_statement(name: str) -> dict[str, Any]:
    """Return one raw statement dict from statements.json.

    Args:
        name: Top-level key in the fixture file (e.g. ``'select_star'``).

    Returns:
        A fresh dict, safe to modify.
    """
    data = json.loads((_FIXTURES_DIR / "statements.json").read_text())
    return data[name]
