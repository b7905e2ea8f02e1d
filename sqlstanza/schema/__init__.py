"""sqlstanza configuration models."""
from sqlstanza.schema.dialect import DEFAULT_TARGET, DialectProfile

__all__ = ["DEFAULT_TARGET", "DialectProfile"]
