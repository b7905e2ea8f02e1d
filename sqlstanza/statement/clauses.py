"""Clause layout: keyword, joiner, and fixed grammar order.

Rendering never depends on the order in which stanzas were added across
clause kinds.  ``GRAMMAR_ORDER`` is the only order lines are emitted in::

    SELECT ...
    FROM ...
    <joins>
    WHERE ...
    GROUP BY ...
    HAVING ...
    ORDER BY ...
    LIMIT ...
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from sqlstanza.statement.component import Component


@dataclass(frozen=True)
class Clause:
    """Static description of how one clause kind is rendered.

    Attributes:
        field: Name of the ``Statement`` attribute holding the components.
        keyword: Prefix for the rendered line (empty for JOIN, where the
            caller writes ``LEFT JOIN`` and friends inline).
        joiner: Separator placed between component fragments.
    """

    field: str
    keyword: str
    joiner: str

    def render(self, components: Iterable[Component]) -> str:
        """Return the clause line, or ``""`` when there is nothing to emit."""
        partials = [c.fragment for c in components]
        if not partials:
            return ""
        return f"{self.keyword}{self.joiner.join(partials)}"


SELECT = Clause("select_items", "SELECT ", ", ")
FROM = Clause("from_items", "FROM ", ", ")
JOIN = Clause("join_items", "", " ")
WHERE = Clause("where_items", "WHERE ", " AND ")
GROUP_BY = Clause("group_items", "GROUP BY ", ", ")
HAVING = Clause("having_items", "HAVING ", " AND ")
ORDER_BY = Clause("order_items", "ORDER BY ", ", ")
LIMIT = Clause("limit_item", "LIMIT ", "")

#: Every clause kind, in the order it appears in rendered SQL.
GRAMMAR_ORDER: tuple[Clause, ...] = (
    SELECT,
    FROM,
    JOIN,
    WHERE,
    GROUP_BY,
    HAVING,
    ORDER_BY,
    LIMIT,
)
