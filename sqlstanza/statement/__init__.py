"""sqlstanza statement layer: stanza accumulation and rendering."""
from sqlstanza.statement.clauses import GRAMMAR_ORDER, Clause
from sqlstanza.statement.component import Component
from sqlstanza.statement.statement import Statement

__all__ = ["GRAMMAR_ORDER", "Clause", "Component", "Statement"]
