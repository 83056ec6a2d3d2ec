"""restQL schema models: Statement, Filter, Target."""
from restql.schema.filters import ColumnFilter, Filter, LogicalFilter
from restql.schema.statement import Limit, Select, Sort, Statement, parse_statement
from restql.schema.targets import AggregateTarget, ColumnTarget, EmbeddedTarget, Target

__all__ = [
    "AggregateTarget",
    "ColumnFilter",
    "ColumnTarget",
    "EmbeddedTarget",
    "Filter",
    "Limit",
    "LogicalFilter",
    "Select",
    "Sort",
    "Statement",
    "Target",
    "parse_statement",
]
