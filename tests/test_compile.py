"""Unit tests for placeholder styles, StyleFactory and Statement.compile."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from sqlstanza import (
    CompilationError,
    CompiledSQL,
    DialectProfile,
    NamedStyle,
    PlaceholderStyle,
    PostgresStyle,
    QmarkStyle,
    Statement,
    StyleFactory,
)


def _three_markers() -> Statement:
    return (
        Statement()
        .select("*")
        .from_("t")
        .where("a = ? OR b = ?", "x", "y")
        .limit("?", 10)
    )


def test_postgres_numbers_left_to_right():
    assert PostgresStyle().rewrite("? ? ?") == "$1 $2 $3"


def test_qmark_leaves_text_alone():
    assert QmarkStyle().rewrite("a = ? AND b = ?") == "a = ? AND b = ?"


def test_named_style():
    assert NamedStyle().rewrite("a = ? AND b = ?") == "a = :param_1 AND b = :param_2"


def test_rewrite_without_markers_is_identity():
    assert PostgresStyle().rewrite("SELECT 1") == "SELECT 1"


def test_compile_defaults_to_flag():
    compiled = _three_markers().compile()
    assert compiled == CompiledSQL(
        sql="SELECT *\nFROM t\nWHERE (a = ? OR b = ?)\nLIMIT ?",
        params=["x", "y", 10],
        dialect="qmark",
    )

    pg = _three_markers().with_postgresql().compile()
    assert pg.sql == "SELECT *\nFROM t\nWHERE (a = $1 OR b = $2)\nLIMIT $3"
    assert pg.params == ["x", "y", 10]
    assert pg.dialect == "postgres"


def test_compile_explicit_target_overrides_flag():
    compiled = _three_markers().with_postgresql().compile("qmark")
    assert "$" not in compiled.sql
    assert compiled.sql.count("?") == 3


def test_compile_with_profile():
    compiled = _three_markers().compile(DialectProfile(target="postgres"))
    assert compiled.sql.endswith("LIMIT $3")


def test_sqlite_alias_uses_qmark():
    compiled = _three_markers().compile("sqlite")
    assert compiled.dialect == "qmark"
    assert compiled.sql.count("?") == 3


def test_compiled_sql_shapes():
    compiled = _three_markers().compile("named")
    assert compiled.as_tuple() == (compiled.sql, ("x", "y", 10))
    assert compiled.named_params() == {"param_1": "x", "param_2": "y", "param_3": 10}


def test_unknown_target_raises():
    with pytest.raises(CompilationError) as exc_info:
        Statement().select("1").compile("oracle")
    assert exc_info.value.target == "oracle"
    assert "postgres" in str(exc_info.value)


def test_registered_targets():
    assert {"named", "postgres", "qmark", "sqlite"} <= set(StyleFactory.registered_targets())


class ColonNumericStyle(PlaceholderStyle):
    @property
    def dialect_name(self) -> str:
        return "colon_numeric"

    def placeholder(self, position: int) -> str:
        return f":{position}"


class AtStyle(PlaceholderStyle):
    @property
    def dialect_name(self) -> str:
        return "at"

    def placeholder(self, position: int) -> str:
        return f"@p{position}"


def test_custom_style_registration():
    with StyleFactory.registered("colon_numeric", ColonNumericStyle):
        compiled = Statement().where("a = ?", 1).where("b = ?", 2).compile("colon_numeric")
        assert compiled.sql == "WHERE (a = :1) AND (b = :2)"
        assert compiled.params == [1, 2]
    assert "colon_numeric" not in StyleFactory.registered_targets()


def test_decorator_registration_and_unregister():
    StyleFactory.register("at")(AtStyle)
    try:
        assert Statement().where("a = ?", 1).compile("at").sql == "WHERE (a = @p1)"
    finally:
        StyleFactory.unregister("at")
    with pytest.raises(CompilationError):
        Statement().compile("at")


@pytest.mark.parametrize("name", ["qmark", "sqlite", "postgres", "named"])
def test_builtin_targets_cannot_be_replaced(name):
    with pytest.raises(CompilationError) as exc_info:
        StyleFactory.register_class(name, AtStyle)
    assert exc_info.value.target == name
    with pytest.raises(CompilationError):
        StyleFactory.unregister(name)
    assert StyleFactory.create(name).rewrite("?") != "@p1"
    assert Statement().where("a = ?", 1).sql() == "WHERE (a = ?)"
    assert Statement(postgresql=True).select("?", 1).sql() == "SELECT $1"


def test_sql_ignores_custom_registrations():
    with StyleFactory.registered("qmark_like", AtStyle):
        assert Statement().where("a = ?", 1).sql() == "WHERE (a = ?)"
        assert Statement(postgresql=True).where("a = ?", 1).sql() == "WHERE (a = $1)"


def test_profile_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        DialectProfile(target="postgres", quote_aware=True)


def test_profile_rejects_empty_target():
    with pytest.raises(ValidationError):
        DialectProfile(target="")


def test_profile_for_flag():
    assert DialectProfile.for_flag(True).target == "postgres"
    assert DialectProfile.for_flag(False).target == "qmark"


def test_compile_logs_target_not_values(caplog):
    with caplog.at_level(logging.DEBUG, logger="sqlstanza.statement.statement"):
        Statement().where("secret = ?", "hunter2").compile("postgres")
    assert "postgres" in caplog.text
    assert "1 placeholder" in caplog.text
    assert "hunter2" not in caplog.text
