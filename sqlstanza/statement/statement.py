"""The Statement builder.

A ``Statement`` collects SQL stanzas without rendering them.  Every builder
method returns a new ``Statement`` and leaves its receiver untouched, so a
base query can be shared and extended along independent branches::

    base = Statement().select("*").from_("Employees")
    active = base.where("active = ?", True)
    by_name = base.where("name = ?", "Marge").order("id")

    by_name.to_sql()
    # ('SELECT *\\nFROM Employees\\nWHERE (name = ?)\\nORDER BY id', ['Marge'])

Clause lists are tuples: appending builds a new tuple of length n + 1, so two
statements derived from the same ancestor never observe each other's stanzas.

Nothing here validates SQL.  Fragments are emitted exactly as given (WHERE
and HAVING add one pair of parentheses), and the number of ``?`` markers is
never checked against the number of arguments.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from sqlstanza.compile.base import CompiledSQL, PlaceholderStyle
from sqlstanza.compile.postgres import PostgresStyle
from sqlstanza.compile.qmark import QmarkStyle
from sqlstanza.compile.registry import StyleFactory
from sqlstanza.schema.dialect import DialectProfile
from sqlstanza.statement.clauses import GRAMMAR_ORDER, LIMIT, Clause
from sqlstanza.statement.component import Component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Statement:
    """A SQL SELECT statement being built.

    Attributes:
        postgresql: Rewrite ``?`` markers to ``$1, $2 ...`` when rendering.
        select_items: SELECT stanzas, joined by commas.
        from_items: FROM stanzas, joined by commas.
        join_items: JOIN stanzas, joined by spaces.
        where_items: Parenthesised WHERE stanzas, joined by ``AND``.
        group_items: GROUP BY stanzas, joined by commas.
        having_items: Parenthesised HAVING stanzas, joined by ``AND``.
        order_items: ORDER BY stanzas, joined by commas.
        limit_item: The LIMIT stanza; an empty fragment means no LIMIT.
    """

    postgresql: bool = False
    select_items: tuple[Component, ...] = ()
    from_items: tuple[Component, ...] = ()
    join_items: tuple[Component, ...] = ()
    where_items: tuple[Component, ...] = ()
    group_items: tuple[Component, ...] = ()
    having_items: tuple[Component, ...] = ()
    order_items: tuple[Component, ...] = ()
    limit_item: Component = Component()

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def select(self, fragment: str, *args: Any) -> Statement:
        """Add a SELECT stanza, joined by commas."""
        return self._append("select_items", Component(fragment, args))

    def from_(self, fragment: str, *args: Any) -> Statement:
        """Add a FROM stanza, joined by commas."""
        return self._append("from_items", Component(fragment, args))

    def join(self, fragment: str, *args: Any) -> Statement:
        """Add a JOIN stanza, joined by spaces.

        Unlike other stanzas, the ``JOIN`` / ``LEFT JOIN`` / ``INNER JOIN``
        keyword is part of ``fragment``.
        """
        return self._append("join_items", Component(fragment, args))

    def where(self, fragment: str, *args: Any) -> Statement:
        """Add a WHERE stanza, wrapped in parentheses and joined by AND."""
        return self._append("where_items", Component(fragment, args).wrapped())

    def having(self, fragment: str, *args: Any) -> Statement:
        """Add a HAVING stanza, wrapped in parentheses and joined by AND."""
        return self._append("having_items", Component(fragment, args).wrapped())

    def group(self, fragment: str, *args: Any) -> Statement:
        """Add a GROUP BY stanza, joined by commas."""
        return self._append("group_items", Component(fragment, args))

    def order(self, fragment: str, *args: Any) -> Statement:
        """Add an ORDER BY stanza, joined by commas."""
        return self._append("order_items", Component(fragment, args))

    def limit(self, fragment: str, *args: Any) -> Statement:
        """Set or overwrite the LIMIT stanza.

        Pass an empty ``fragment`` to drop a previously set LIMIT.
        """
        return replace(self, limit_item=Component(fragment, args))

    def with_postgresql(self, enabled: bool = True) -> Statement:
        """Return a copy that renders ``$n`` placeholders when ``enabled``."""
        return replace(self, postgresql=enabled)

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def args(self) -> list[Any]:
        """Return positional arguments in the order they appear in the SQL."""
        args: list[Any] = []
        for clause in GRAMMAR_ORDER:
            for component in self._stanzas(clause):
                args.extend(component.args)
        return args

    def sql(self) -> str:
        """Join the stanzas, returning the composed SQL."""
        return self._style(None).rewrite(self._render())

    def to_sql(self) -> tuple[str, list[Any]]:
        """Return ``(sql, args)`` as a matched pair."""
        return self.sql(), self.args()

    def compile(self, dialect: DialectProfile | str | None = None) -> CompiledSQL:
        """Render for an explicit placeholder target.

        Args:
            dialect: A :class:`DialectProfile`, a registered target name, or
                ``None`` to follow the ``postgresql`` flag.

        Returns:
            :class:`~sqlstanza.compile.base.CompiledSQL` with the rewritten
            text, the arguments, and the resolved target name.

        Raises:
            CompilationError: If the target is not registered.
        """
        style = self._style(dialect)
        text = self._render()
        logger.debug(
            "compiling statement for %s with %d placeholder(s)",
            style.dialect_name,
            style.count_markers(text),
        )
        return CompiledSQL(sql=style.rewrite(text), params=self.args(), dialect=style.dialect_name)

    def __str__(self) -> str:
        return self.sql()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _append(self, field: str, component: Component) -> Statement:
        return replace(self, **{field: getattr(self, field) + (component,)})

    def _stanzas(self, clause: Clause) -> tuple[Component, ...]:
        value = getattr(self, clause.field)
        if isinstance(value, Component):
            return (value,)
        return value

    def _render(self) -> str:
        lines: list[str] = []
        for clause in GRAMMAR_ORDER:
            if clause is LIMIT and not self.limit_item.fragment:
                continue
            stanzas = self._stanzas(clause)
            if stanzas:
                lines.append(clause.render(stanzas))
        return "\n".join(lines)

    def _style(self, dialect: DialectProfile | str | None) -> PlaceholderStyle:
        # The flag path never consults the registry, so sql() cannot raise.
        if dialect is None:
            return PostgresStyle() if self.postgresql else QmarkStyle()
        target = dialect.target if isinstance(dialect, DialectProfile) else dialect
        return StyleFactory.create(target)
