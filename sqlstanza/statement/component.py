"""Component value object: one SQL fragment plus its bind arguments."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Component:
    """A literal SQL fragment contributed by a single builder call.

    Attributes:
        fragment: Raw SQL text, possibly containing ``?`` markers.  An empty
            fragment is legal; the LIMIT slot uses it to mean "not set".
        args: Bind values matching the ``?`` markers in ``fragment``, left
            to right.  Values are never inspected, only counted and ordered.
    """

    fragment: str = ""
    args: tuple[Any, ...] = ()

    def wrapped(self) -> Component:
        """Return a copy whose fragment is enclosed in one pair of parentheses."""
        return Component(f"({self.fragment})", self.args)
