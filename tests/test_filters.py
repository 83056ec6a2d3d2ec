"""Unit tests for FilterBuilder (root and nested renderings)."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from restql.compile.base import QueryParams
from restql.compile.filter_builder import FilterBuilder, compile_filter, compile_root_filter
from restql.errors import UnrecognizedFilterKindError
from restql.schema.filters import ColumnFilter, LogicalFilter


def _root(node) -> list[tuple[str, str]]:
    params = QueryParams()
    compile_root_filter(params, node)
    return list(params)


# ---------------------------------------------------------------------------
# Column leaves
# ---------------------------------------------------------------------------


class TestColumnFilter:
    def test_root(self):
        node = ColumnFilter(column="title", operator="eq", value="Cheese")
        assert _root(node) == [("title", "eq.Cheese")]

    def test_root_negated(self):
        node = ColumnFilter(column="title", operator="eq", value="Cheese", negate=True)
        assert _root(node) == [("title", "not.eq.Cheese")]

    def test_nested(self):
        node = ColumnFilter(column="title", operator="eq", value="Cheese")
        assert compile_filter(node) == "title.eq.Cheese"

    def test_nested_negated(self):
        node = ColumnFilter(column="title", operator="eq", value="Cheese", negate=True)
        assert compile_filter(node) == "not.title.eq.Cheese"

    @pytest.mark.parametrize("operator", ["like", "ilike"])
    def test_pattern_wildcards_become_stars(self, operator):
        node = ColumnFilter(column="title", operator=operator, value="%Chee%se%")
        assert _root(node) == [("title", f"{operator}.*Chee*se*")]
        assert compile_filter(node) == f"title.{operator}.*Chee*se*"

    def test_percent_kept_for_other_operators(self):
        node = ColumnFilter(column="discount", operator="eq", value="30%")
        assert _root(node) == [("discount", "eq.30%")]

    def test_remap_does_not_mutate_input(self, filter_builder: FilterBuilder):
        node = ColumnFilter(column="price", operator="like", value="30%")
        first = filter_builder.build(node)
        second = filter_builder.build(node)
        assert first == second == "price.like.30*"
        assert node.value == "30%"


# ---------------------------------------------------------------------------
# Logical nodes
# ---------------------------------------------------------------------------


class TestLogicalFilterRoot:
    def test_and_flattens(self, id_and_name):
        assert _root(id_and_name) == [("id", "eq.1"), ("name", "eq.Joe")]

    def test_and_flattening_keeps_duplicate_columns(self):
        node = LogicalFilter(
            operator="and",
            values=[
                ColumnFilter(column="pages", operator="gt", value="100"),
                ColumnFilter(column="pages", operator="lt", value="200"),
            ],
        )
        assert _root(node) == [("pages", "gt.100"), ("pages", "lt.200")]

    def test_and_flattening_recurses_through_nested_and(self, id_eq_1, name_eq_joe):
        inner = LogicalFilter(operator="and", values=[name_eq_joe])
        node = LogicalFilter(operator="and", values=[id_eq_1, inner])
        assert _root(node) == [("id", "eq.1"), ("name", "eq.Joe")]

    def test_and_with_or_child(self, id_eq_1, name_eq_joe):
        node = LogicalFilter(
            operator="and",
            values=[id_eq_1, LogicalFilter(operator="or", values=[id_eq_1, name_eq_joe])],
        )
        assert _root(node) == [("id", "eq.1"), ("or", "(id.eq.1,name.eq.Joe)")]

    def test_negated_and_is_grouped(self, id_eq_1, name_eq_joe):
        node = LogicalFilter(operator="and", values=[id_eq_1, name_eq_joe], negate=True)
        assert _root(node) == [("not.and", "(id.eq.1,name.eq.Joe)")]

    @pytest.mark.parametrize("negate, key", [(False, "or"), (True, "not.or")])
    def test_or_is_always_grouped(self, id_eq_1, name_eq_joe, negate, key):
        node = LogicalFilter(operator="or", values=[id_eq_1, name_eq_joe], negate=negate)
        assert _root(node) == [(key, "(id.eq.1,name.eq.Joe)")]

    def test_negation_is_not_pushed_to_children(self, id_eq_1):
        negated_child = ColumnFilter(column="name", operator="eq", value="Joe", negate=True)
        node = LogicalFilter(operator="or", values=[id_eq_1, negated_child], negate=True)
        assert _root(node) == [("not.or", "(id.eq.1,not.name.eq.Joe)")]


class TestLogicalFilterNested:
    def test_nested_and_is_never_flattened(self, id_and_name):
        node = LogicalFilter(operator="or", values=[id_and_name])
        assert _root(node) == [("or", "(and(id.eq.1,name.eq.Joe))")]

    def test_nested_negated_group(self, id_eq_1, name_eq_joe):
        node = LogicalFilter(operator="or", values=[id_eq_1, name_eq_joe], negate=True)
        assert compile_filter(node) == "not.or(id.eq.1,name.eq.Joe)"

    def test_deep_nesting_keeps_order(self, id_eq_1, name_eq_joe):
        like = ColumnFilter(column="title", operator="ilike", value="%a%")
        node = LogicalFilter(
            operator="or",
            values=[
                LogicalFilter(operator="and", values=[id_eq_1, like]),
                name_eq_joe,
            ],
        )
        assert compile_filter(node) == "or(and(id.eq.1,title.ilike.*a*),name.eq.Joe)"


# ---------------------------------------------------------------------------
# Unknown variants
# ---------------------------------------------------------------------------


class TestUnrecognizedFilter:
    def test_root(self):
        with pytest.raises(UnrecognizedFilterKindError) as exc_info:
            _root(SimpleNamespace(type="range", negate=False))
        assert exc_info.value.filter_type == "range"
        assert "range" in str(exc_info.value)

    def test_nested(self, id_eq_1):
        node = LogicalFilter.model_construct(
            type="logical",
            operator="or",
            values=[id_eq_1, SimpleNamespace(type="range", negate=False)],
            negate=False,
        )
        with pytest.raises(UnrecognizedFilterKindError, match="range"):
            compile_filter(node)

    def test_no_partial_params_escape_through_error(self):
        params = QueryParams()
        with pytest.raises(UnrecognizedFilterKindError):
            compile_root_filter(params, SimpleNamespace(type="range", negate=False))
        assert len(params) == 0

    def test_flattened_and_with_bad_child_leaves_params_unchanged(self, id_eq_1):
        params = QueryParams([("select", "id")])
        node = LogicalFilter.model_construct(
            type="logical",
            operator="and",
            values=[id_eq_1, SimpleNamespace(type="range", negate=False)],
            negate=False,
        )
        with pytest.raises(UnrecognizedFilterKindError, match="range"):
            compile_root_filter(params, node)
        assert list(params) == [("select", "id")]
