"""Named placeholder style for SQLAlchemy ``text()`` constructs."""
from __future__ import annotations

from sqlstanza.compile.base import PlaceholderStyle


class NamedStyle(PlaceholderStyle):
    """Rewrites ``?`` markers to ``:param_1, :param_2 ...``.

    Parameter style: ``:name`` – what ``sqlalchemy.text`` binds against.
    Pair with :meth:`CompiledSQL.named_params` for the value mapping.
    """

    @property
    def dialect_name(self) -> str:
        return "named"

    def placeholder(self, position: int) -> str:
        return f":param_{position}"
