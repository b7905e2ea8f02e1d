"""Question-mark placeholder style (DB-API ``qmark``)."""
from __future__ import annotations

from sqlstanza.compile.base import UNNAMED_MARKER, PlaceholderStyle


class QmarkStyle(PlaceholderStyle):
    """Leaves ``?`` markers as written.

    Parameter style: ``?`` – compatible with Python's built-in ``sqlite3``
    positional execution (``cursor.execute(sql, tuple)``), and with MySQL
    drivers that accept qmark.
    """

    @property
    def dialect_name(self) -> str:
        return "qmark"

    def placeholder(self, position: int) -> str:
        return UNNAMED_MARKER

    def rewrite(self, sql: str) -> str:
        return sql
