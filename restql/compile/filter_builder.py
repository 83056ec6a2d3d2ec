"""Filter tree compiler.

A filter tree has two renderings:

* **root** -- the outermost node becomes one or more query parameters
  (``title=eq.Cheese``, ``or=(a.eq.1,b.eq.2)``).  An un-negated ``and`` at
  the root is flattened: each child becomes its own parameter, because the
  server already combines sibling parameters with AND.
* **nested** -- any node inside a logical group is a single string
  (``title.eq.Cheese``, ``and(a.eq.1,b.eq.2)``); flattening never applies.

The two are separate entry points, :meth:`FilterBuilder.build_root` and
:meth:`FilterBuilder.build`, so the flattening rule cannot leak below the
root.
"""
from __future__ import annotations

import logging
from typing import NoReturn

from restql.compile.base import QueryParams
from restql.errors import UnrecognizedFilterKindError
from restql.schema.expressions import NEGATION_PREFIX, LogicalOp
from restql.schema.filters import ColumnFilter, Filter, LogicalFilter

logger = logging.getLogger(__name__)


def _negation(node: Filter) -> str:
    return NEGATION_PREFIX if node.negate else ""


def _unrecognized(node: NoReturn) -> NoReturn:
    # Typed as NoReturn so a type checker flags any Filter variant the
    # isinstance chains do not handle.
    raise UnrecognizedFilterKindError(str(getattr(node, "type", type(node).__name__)))


class FilterBuilder:
    """Compiles :data:`~restql.schema.filters.Filter` trees to wire syntax.

    The builder keeps no state between calls; one instance can serve any
    number of compilations.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build_root(self, params: QueryParams, node: Filter) -> None:
        """Append the parameters for a root filter to ``params``.

        ``params`` is only touched once the whole tree has compiled, so a
        failure leaves it unchanged.

        Args:
            params: Parameter collection of the request being compiled.
            node: Root of the filter tree.

        Raises:
            UnrecognizedFilterKindError: If a node is not a known filter type.
        """
        compiled = QueryParams()
        self._build_root_into(compiled, node)
        params.extend(compiled)

    def build(self, node: Filter) -> str:
        """Compile a filter in nested position to a single string.

        Raises:
            UnrecognizedFilterKindError: If a node is not a known filter type.
        """
        if isinstance(node, ColumnFilter):
            leaf = node.normalized()
            return f"{_negation(leaf)}{leaf.column}.{leaf.operator}.{leaf.value}"
        if isinstance(node, LogicalFilter):
            return f"{_negation(node)}{node.operator}{self._build_group(node)}"
        _unrecognized(node)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _build_root_into(self, params: QueryParams, node: Filter) -> None:
        if isinstance(node, ColumnFilter):
            leaf = node.normalized()
            params.append(leaf.column, f"{_negation(leaf)}{leaf.operator}.{leaf.value}")
        elif isinstance(node, LogicalFilter):
            if node.operator == LogicalOp.AND.value and not node.negate:
                logger.debug("Flattening root 'and' into %d parameters", len(node.values))
                for child in node.values:
                    self._build_root_into(params, child)
            else:
                params.append(f"{_negation(node)}{node.operator}", self._build_group(node))
        else:
            _unrecognized(node)

    def _build_group(self, node: LogicalFilter) -> str:
        return f"({','.join(self.build(child) for child in node.values)})"


_DEFAULT_BUILDER = FilterBuilder()


def compile_root_filter(params: QueryParams, node: Filter) -> None:
    """Module-level shortcut for :meth:`FilterBuilder.build_root`."""
    _DEFAULT_BUILDER.build_root(params, node)


def compile_filter(node: Filter) -> str:
    """Module-level shortcut for :meth:`FilterBuilder.build`."""
    return _DEFAULT_BUILDER.build(node)
