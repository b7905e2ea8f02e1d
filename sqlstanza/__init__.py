"""sqlstanza – compose SQL from independent stanzas.

Build a query a clause at a time, in any order, and get back the text plus
the bind arguments in the order their placeholders appear.

Public API
----------
``Statement``
    Immutable builder: ``select``, ``from_``, ``join``, ``where``, ``group``,
    ``having``, ``order``, ``limit``; ``sql``, ``args``, ``to_sql`` and
    ``compile`` to retrieve the result.

``to_sqlalchemy_text``
    Compile a statement into a bound SQLAlchemy ``TextClause``.

Re-exported types
-----------------
``Component``, ``CompiledSQL``, ``DialectProfile``, the placeholder styles,
and all error classes.

Extensibility
-------------
New placeholder styles can be registered under any name that is not
built in (built-in targets cannot be replaced)::

    from sqlstanza.compile.registry import StyleFactory

    @StyleFactory.register("oracle")
    class OracleStyle(PlaceholderStyle):
        def placeholder(self, position: int) -> str:
            return f":{position}"

After registration, ``Statement.compile("oracle")`` picks it up.
"""

from __future__ import annotations

from sqlstanza.compile.base import CompiledSQL, PlaceholderStyle
from sqlstanza.compile.named import NamedStyle
from sqlstanza.compile.postgres import PostgresStyle
from sqlstanza.compile.qmark import QmarkStyle
from sqlstanza.compile.registry import StyleFactory
from sqlstanza.converters import to_sqlalchemy_text
from sqlstanza.errors import CompilationError, SqlStanzaError
from sqlstanza.schema.dialect import DialectProfile
from sqlstanza.statement.component import Component
from sqlstanza.statement.statement import Statement

__all__ = [
    # Builder
    "Statement",
    "Component",
    # Configuration
    "DialectProfile",
    # Compilation
    "CompiledSQL",
    "PlaceholderStyle",
    "StyleFactory",
    "QmarkStyle",
    "PostgresStyle",
    "NamedStyle",
    # Converters
    "to_sqlalchemy_text",
    # Errors
    "SqlStanzaError",
    "CompilationError",
]
