"""Placeholder style registry.

Maps the target names accepted by :meth:`Statement.compile` to
:class:`~sqlstanza.compile.base.PlaceholderStyle` classes.  The built-in
targets (``qmark``, ``sqlite``, ``postgres``, ``named``) are fixed: they can
be looked up but never replaced or removed, so a custom registration cannot
change how an existing statement renders.

Custom targets are added by name and can be scoped to a block::

    from sqlstanza.compile.registry import StyleFactory

    class OracleStyle(PlaceholderStyle):
        ...

    with StyleFactory.registered("oracle", OracleStyle):
        Statement().where("id = ?", 1).compile("oracle")
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from types import MappingProxyType
from typing import ClassVar

from sqlstanza.compile.base import PlaceholderStyle
from sqlstanza.compile.named import NamedStyle
from sqlstanza.compile.postgres import PostgresStyle
from sqlstanza.compile.qmark import QmarkStyle
from sqlstanza.errors import CompilationError

#: Targets that ship with sqlstanza.  Read-only.
BUILTIN_STYLES: MappingProxyType[str, type[PlaceholderStyle]] = MappingProxyType(
    {
        "qmark": QmarkStyle,
        "sqlite": QmarkStyle,
        "postgres": PostgresStyle,
        "named": NamedStyle,
    }
)


class StyleFactory:
    """Lookup of placeholder targets: the built-ins plus custom registrations."""

    _custom: ClassVar[dict[str, type[PlaceholderStyle]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[PlaceholderStyle]], type[PlaceholderStyle]]:
        """Decorator form of :meth:`register_class`."""

        def decorator(style_cls: type[PlaceholderStyle]) -> type[PlaceholderStyle]:
            cls.register_class(name, style_cls)
            return style_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, style_cls: type[PlaceholderStyle]) -> None:
        """Add a custom target, replacing an earlier custom one of the same name.

        Raises:
            CompilationError: If ``name`` is a built-in target.
        """
        if name in BUILTIN_STYLES:
            raise CompilationError(f"Cannot replace built-in placeholder target '{name}'.", target=name)
        cls._custom[name] = style_cls

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a custom target.  Unknown names are ignored.

        Raises:
            CompilationError: If ``name`` is a built-in target.
        """
        if name in BUILTIN_STYLES:
            raise CompilationError(f"Cannot remove built-in placeholder target '{name}'.", target=name)
        cls._custom.pop(name, None)

    @classmethod
    @contextmanager
    def registered(cls, name: str, style_cls: type[PlaceholderStyle]) -> Iterator[None]:
        """Register ``style_cls`` under ``name`` for the duration of a block."""
        previous = cls._custom.get(name)
        cls.register_class(name, style_cls)
        try:
            yield
        finally:
            if previous is None:
                cls.unregister(name)
            else:
                cls._custom[name] = previous

    @classmethod
    def create(cls, name: str) -> PlaceholderStyle:
        """Instantiate the style for ``name``; built-ins take precedence.

        Raises:
            CompilationError: If ``name`` is neither built in nor registered.
        """
        style_cls = BUILTIN_STYLES.get(name) or cls._custom.get(name)
        if style_cls is None:
            raise CompilationError(
                f"No placeholder style for target '{name}'; "
                f"known targets: {', '.join(cls.registered_targets())}.",
                target=name,
            )
        return style_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        return sorted({*BUILTIN_STYLES, *cls._custom})
