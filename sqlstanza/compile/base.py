"""Compiler abstractions: CompiledSQL and the PlaceholderStyle ABC.

The Template Method pattern (GoF) is used:
- ``PlaceholderStyle.rewrite`` defines the scan over unnamed ``?`` markers.
- ``QmarkStyle``, ``PostgresStyle`` and ``NamedStyle`` override the single
  dialect-specific step, the placeholder text for a given position.
"""
from __future__ import annotations

import itertools
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

#: The unnamed placeholder marker every fragment is written with.
UNNAMED_MARKER = "?"

_MARKER_RE = re.compile(re.escape(UNNAMED_MARKER))


@dataclass
class CompiledSQL:
    """The output of a successful compilation.

    Attributes:
        sql: The rendered SQL string in the target's placeholder style.
        params: Bind values in the order their placeholders appear in ``sql``.
        dialect: The placeholder target (``'qmark'``, ``'postgres'`` ...).
    """

    sql: str
    params: list[Any]
    dialect: str

    def as_tuple(self) -> tuple[str, tuple[Any, ...]]:
        """Return ``(sql, params)`` in the shape DB-API ``execute`` takes."""
        return self.sql, tuple(self.params)

    def named_params(self) -> dict[str, Any]:
        """Return the params keyed ``param_1`` .. ``param_n``.

        Matches the names produced by the ``named`` placeholder style.
        """
        return {f"param_{i}": value for i, value in enumerate(self.params, start=1)}


class PlaceholderStyle(ABC):
    """Abstract base for dialect-specific placeholder rewriting.

    Subclasses only decide what the n-th placeholder looks like; the
    left-to-right scan lives here.  The scan is purely textual and does not
    skip quoted literals, so a ``?`` inside ``'why?'`` is renumbered too.
    """

    @abstractmethod
    def placeholder(self, position: int) -> str:
        """Return the placeholder text for a 1-based bind position.

        Args:
            position: 1 for the first marker in the text, 2 for the next ...

        Returns:
            Dialect-specific placeholder string.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical target name (``'qmark'``, ``'postgres'`` ...)."""

    def rewrite(self, sql: str) -> str:
        """Replace every unnamed marker in ``sql`` with a numbered placeholder.

        Args:
            sql: Rendered statement text containing ``?`` markers.

        Returns:
            The text with markers replaced in order of occurrence, numbering
            from 1.  Text without markers is returned unchanged.
        """
        counter = itertools.count(1)
        return _MARKER_RE.sub(lambda _: self.placeholder(next(counter)), sql)

    @staticmethod
    def count_markers(sql: str) -> int:
        """Return how many unnamed markers ``sql`` contains."""
        return sql.count(UNNAMED_MARKER)
