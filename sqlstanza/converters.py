"""Bridge from :class:`~sqlstanza.statement.Statement` to SQLAlchemy.

``to_sqlalchemy_text`` compiles a statement with the ``named`` placeholder
style and binds its arguments, producing a ``TextClause`` that any
SQLAlchemy ``Connection`` or ``Session`` can execute::

    from sqlalchemy import create_engine

    engine = create_engine("sqlite:///:memory:")
    stmt = Statement().select("name").from_("employees").where("id = ?", 3)
    with engine.connect() as conn:
        rows = conn.execute(to_sqlalchemy_text(stmt)).all()
"""
from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.sql.expression import TextClause

from sqlstanza.statement.statement import Statement


def to_sqlalchemy_text(statement: Statement) -> TextClause:
    """Return ``statement`` as a bound SQLAlchemy ``TextClause``.

    Args:
        statement: The statement to compile.  Its ``postgresql`` flag is
            ignored; SQLAlchemy renders the driver's own paramstyle.

    Returns:
        A ``TextClause`` with one bound parameter per ``?`` marker.  When
        the statement has no arguments the clause carries no bindings.
    """
    compiled = statement.compile("named")
    clause = text(compiled.sql)
    params = compiled.named_params()
    if params:
        clause = clause.bindparams(**params)
    return clause
