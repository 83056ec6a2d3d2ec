"""Constants for Statement filter, sort, and target types.

This module defines the tag values and operator groups shared by the
schema models, ``parse_statement``, and the compiler.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Node tags
# ---------------------------------------------------------------------------


class StatementKind(str, Enum):
    """The discriminator value of each statement type."""

    SELECT = "select"


class FilterKind(str, Enum):
    """The discriminator value of each filter node type."""

    COLUMN = "column"
    LOGICAL = "logical"


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class LogicalOp(str, Enum):
    """Logical connectives."""

    AND = "and"
    OR = "or"


class PatternOp(str, Enum):
    """Pattern-match operators whose ``%`` wildcards become ``*`` on the wire."""

    LIKE = "like"
    ILIKE = "ilike"


#: Operators whose values get the ``%`` -> ``*`` wildcard remap.
PATTERN_OPS: frozenset[str] = frozenset(op.value for op in PatternOp)

#: All filter tags the compiler understands.
FILTER_KINDS: frozenset[str] = frozenset(k.value for k in FilterKind)

#: All statement tags the compiler understands.
STATEMENT_KINDS: frozenset[str] = frozenset(k.value for k in StatementKind)

#: Prefix marking a negated filter on the wire.
NEGATION_PREFIX = "not."

#: Column name meaning "every column" (the default select).
WILDCARD_COLUMN = "*"
