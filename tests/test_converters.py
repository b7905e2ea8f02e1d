"""Unit tests for sqlstanza.converters.to_sqlalchemy_text."""

from __future__ import annotations

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from sqlstanza import Statement, to_sqlalchemy_text


@pytest.fixture()
def engine() -> Engine:
    """In-memory SQLite engine with a small employees table."""
    engine = create_engine("sqlite:///:memory:")
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE employees (
                    id   INTEGER PRIMARY KEY,
                    name TEXT    NOT NULL,
                    role TEXT    NOT NULL
                )
                """
            )
        )
        conn.execute(
            text("INSERT INTO employees (id, name, role) VALUES (:id, :name, :role)"),
            [
                {"id": 1, "name": "Marge", "role": "Comptroller"},
                {"id": 2, "name": "Alice", "role": "Engineer"},
                {"id": 3, "name": "Bob", "role": "Engineer"},
            ],
        )
    return engine


def test_text_uses_named_binds():
    clause = to_sqlalchemy_text(Statement().select("*").from_("t").where("a = ?", 5))
    assert str(clause) == "SELECT *\nFROM t\nWHERE (a = :param_1)"
    assert clause.compile().params == {"param_1": 5}


def test_text_without_args():
    clause = to_sqlalchemy_text(Statement().select("1"))
    assert str(clause) == "SELECT 1"


def test_executes_against_sqlite(engine):
    stmt = (
        Statement()
        .select("name")
        .from_("employees")
        .where("role = ?", "Engineer")
        .where("id > ?", 1)
        .order("id DESC")
        .limit("?", 5)
    )
    with engine.connect() as conn:
        rows = conn.execute(to_sqlalchemy_text(stmt)).all()
    assert [r.name for r in rows] == ["Bob", "Alice"]


def test_postgresql_flag_is_ignored(engine):
    stmt = Statement(postgresql=True).select("count(*)").from_("employees").where(
        "name = ?", "Marge"
    )
    with engine.connect() as conn:
        assert conn.execute(to_sqlalchemy_text(stmt)).scalar_one() == 1


def test_qmark_output_runs_on_driver(engine):
    stmt = Statement().select("name").from_("employees").where("id = ?", 2)
    sql, args = stmt.to_sql()
    with engine.connect() as conn:
        assert conn.exec_driver_sql(sql, tuple(args)).scalar_one() == "Alice"
