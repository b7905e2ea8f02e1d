"""PostgreSQL placeholder style."""
from __future__ import annotations

from sqlstanza.compile.base import PlaceholderStyle


class PostgresStyle(PlaceholderStyle):
    """Rewrites ``?`` markers to PostgreSQL's numbered ``$1, $2 ...`` form.

    Parameter style: ``$n`` – the native libpq form, used by ``asyncpg`` and
    by server-side prepared statements.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def placeholder(self, position: int) -> str:
        return f"${position}"
