"""Configuration dataclasses for class-enumerations.

The engine itself takes no configuration; these settings only shape how
members are rendered by the console and the command-line interface.  Each
config is a frozen ``dataclass`` with a ``validate()`` method that raises
``ValueError`` on invalid combinations.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

_VALID_FORMATS = frozenset({"table", "plain"})


@dataclass(frozen=True)
class DisplayConfig:
    """How an enumeration's members are printed.

    Attributes
    ----------
    format:
        ``"table"`` for a rich table, ``"plain"`` for one ``NAME = value``
        line per member.
    lowercase:
        Print member names lower-cased (``get_name(True)``).
    show_index:
        Include the declaration position in table output.
    title:
        Table title.  Empty means the enumeration's class name.
    """

    format: str = "table"
    lowercase: bool = False
    show_index: bool = True
    title: str = ""

    def validate(self) -> None:
        """Raise ``ValueError`` if any field is out of valid range."""
        if self.format not in _VALID_FORMATS:
            raise ValueError(
                f"format must be one of {sorted(_VALID_FORMATS)}, "
                f"got '{self.format}'"
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DisplayConfig:
        valid_keys = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        cfg = cls(**filtered)
        cfg.validate()
        return cfg
