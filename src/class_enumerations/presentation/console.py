"""Rich-based console rendering of enumerations.

:class:`EnumerationConsole` prints an enumeration's members either as a
``rich`` table or as plain ``NAME = value`` lines, according to a
:class:`~class_enumerations.infrastructure.config.DisplayConfig`.
"""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from class_enumerations.domain.enumeration import Enumeration
from class_enumerations.infrastructure.config import DisplayConfig
from class_enumerations.infrastructure.registry import qualified_name


class EnumerationConsole:
    """Console presentation layer for enumeration classes and members.

    Parameters
    ----------
    config:
        Display options.  Defaults to ``DisplayConfig()``.
    file:
        Output stream.  Defaults to ``sys.stdout``.
    """

    def __init__(self, config: DisplayConfig | None = None, file: Any = None) -> None:
        self._config = config or DisplayConfig()
        self._config.validate()
        self._console = Console(file=file or sys.stdout, highlight=False)

    @property
    def config(self) -> DisplayConfig:
        return self._config

    # -- public API --------------------------------------------------------

    def print_members(self, enum_cls: type[Enumeration]) -> None:
        """Print every member of *enum_cls* in declaration order."""
        members = enum_cls.get_all_members()
        if not members:
            self._console.print(f"[no members in {enum_cls.__name__}]", markup=False)
            return
        if self._config.format == "plain":
            for member in members:
                self._console.print(self._format_plain(member), markup=False)
        else:
            self._console.print(self._build_table(enum_cls, members))

    def print_member(self, member: Enumeration) -> None:
        """Print a single member as ``Class.NAME = value``."""
        self._console.print(
            f"{type(member).__name__}.{self._format_plain(member)}", markup=False
        )

    def print_names(self, names: list[str]) -> None:
        if not names:
            self._console.print("[no enumerations registered]", markup=False)
            return
        for name in names:
            self._console.print(name, markup=False)

    # -- helpers -----------------------------------------------------------

    def _format_plain(self, member: Enumeration) -> str:
        return f"{member.get_name(self._config.lowercase)} = {member.get_value()!r}"

    def _build_table(
        self, enum_cls: type[Enumeration], members: tuple[Enumeration, ...]
    ) -> Table:
        table = Table(
            title=self._config.title or enum_cls.__name__,
            caption=qualified_name(enum_cls),
            show_header=True,
            header_style="bold cyan",
        )
        if self._config.show_index:
            table.add_column("#", justify="right", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Value")
        table.add_column("Type", style="dim")

        for index, member in enumerate(members):
            row = [
                Text(member.get_name(self._config.lowercase)),
                Text(repr(member.get_value())),
                Text(type(member.get_value()).__name__),
            ]
            if self._config.show_index:
                row.insert(0, Text(str(index)))
            table.add_row(*row)
        return table
