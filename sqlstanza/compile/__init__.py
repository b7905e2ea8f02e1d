"""sqlstanza compilation layer: rendered text → driver placeholder style."""
from sqlstanza.compile.base import CompiledSQL, PlaceholderStyle
from sqlstanza.compile.named import NamedStyle
from sqlstanza.compile.postgres import PostgresStyle
from sqlstanza.compile.qmark import QmarkStyle
from sqlstanza.compile.registry import StyleFactory

__all__ = [
    "CompiledSQL",
    "PlaceholderStyle",
    "NamedStyle",
    "PostgresStyle",
    "QmarkStyle",
    "StyleFactory",
]
