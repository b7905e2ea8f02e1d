"""Shared pytest fixtures for sqlstanza unit tests."""
from __future__ import annotations

import pytest

from sqlstanza import Statement


@pytest.fixture()
def employees() -> Statement:
    """``SELECT * FROM Employees`` with nothing else set."""
    return Statement().select("*").from_("Employees")


@pytest.fixture()
def out_of_order() -> Statement:
    """Every clause kind, added deliberately out of grammar order."""
    s = Statement()
    s = s.group("role").order("id").limit("30")
    s = s.where("name = 'Marge'")
    s = s.select("*").from_("Employees")
    s = s.having("a=1")
    s = s.join("LEFT JOIN Companies").join("INNER JOIN Roles")
    return s
