"""Shared pytest fixtures for restQL tests."""
from __future__ import annotations

import pytest

from restql.compile.builder import RequestBuilder
from restql.compile.filter_builder import FilterBuilder
from restql.schema.filters import ColumnFilter, LogicalFilter


@pytest.fixture
def builder() -> RequestBuilder:
    return RequestBuilder()


@pytest.fixture
def filter_builder() -> FilterBuilder:
    return FilterBuilder()


@pytest.fixture
def id_eq_1() -> ColumnFilter:
    return ColumnFilter(column="id", operator="eq", value="1")


@pytest.fixture
def name_eq_joe() -> ColumnFilter:
    return ColumnFilter(column="name", operator="eq", value="Joe")


@pytest.fixture
def id_and_name(id_eq_1: ColumnFilter, name_eq_joe: ColumnFilter) -> LogicalFilter:
    """Un-negated ``and`` of ``id.eq.1`` and ``name.eq.Joe``."""
    return LogicalFilter(operator="and", values=[id_eq_1, name_eq_joe])
