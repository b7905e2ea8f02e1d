"""Pydantic model for the DialectProfile a statement is compiled against.

A profile names the placeholder target the consuming driver expects::

    from sqlstanza import DialectProfile, Statement

    profile = DialectProfile(target="postgres")
    compiled = Statement().select("*").from_("t").where("id = ?", 7).compile(profile)
    # compiled.sql == "SELECT *\\nFROM t\\nWHERE (id = $1)"

The target is checked against :class:`~sqlstanza.compile.registry.StyleFactory`
when the profile is used, so styles registered after the profile was created
are still accepted.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

#: Target used when neither a profile nor the postgresql flag says otherwise.
DEFAULT_TARGET = "qmark"


class DialectProfile(BaseModel):
    """Selects the placeholder style used when compiling a statement.

    Attributes:
        target: Registered placeholder target (``'qmark'``, ``'sqlite'``,
            ``'postgres'``, ``'named'`` or any custom registration).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target: str = Field(default=DEFAULT_TARGET, min_length=1)

    @classmethod
    def for_flag(cls, postgresql: bool) -> DialectProfile:
        """Return the profile implied by a statement's ``postgresql`` flag."""
        return cls(target="postgres" if postgresql else DEFAULT_TARGET)
