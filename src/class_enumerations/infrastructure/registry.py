"""Registry of concrete enumeration classes.

Every class created by ``EnumerationMeta`` is recorded here under its
qualified name (``"module:QualName"``), which is also the target syntax the
command-line interface accepts.  A **global singleton** ``registry`` is
provided; tests can instantiate their own ``EnumerationRegistry``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def qualified_name(enum_cls: type) -> str:
    """Return ``"module:QualName"`` for *enum_cls*."""
    return f"{enum_cls.__module__}:{enum_cls.__qualname__}"


class EnumerationRegistry:
    """Lookup table of enumeration classes keyed by qualified name.

    Usage::

        registry.register(Suit)
        registry.get("cards.suits:Suit")
    """

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}

    # ------------------------------------------------------------------ #
    #  Registration                                                       #
    # ------------------------------------------------------------------ #

    def register(self, enum_cls: type, *, overwrite: bool = False) -> str:
        """Record *enum_cls* and return the key it was stored under.

        Parameters
        ----------
        enum_cls:
            The enumeration class.
        overwrite:
            If ``True``, replace an existing registration (a module reload
            or a class redefined in the same scope).  Otherwise raise
            ``ValueError`` on duplicates.
        """
        key = qualified_name(enum_cls)
        existing = self._classes.get(key)
        if existing is not None and existing is not enum_cls and not overwrite:
            raise ValueError(
                f"Enumeration '{key}' is already registered as {existing!r}. "
                f"Pass overwrite=True to replace."
            )
        self._classes[key] = enum_cls
        logger.debug("Registered enumeration %s", key)
        return key

    # ------------------------------------------------------------------ #
    #  Lookup                                                              #
    # ------------------------------------------------------------------ #

    def get(self, key: str) -> type:
        """Return the class registered under *key*.

        Raises ``KeyError`` if not found.
        """
        try:
            return self._classes[key]
        except KeyError:
            raise KeyError(
                f"Enumeration '{key}' not registered. "
                f"Known: {self.list_names()}"
            ) from None

    def get_or_none(self, key: str) -> type | None:
        return self._classes.get(key)

    def has(self, key: str) -> bool:
        return key in self._classes

    def list_names(self, prefix: str = "") -> list[str]:
        """Return registered keys starting with *prefix*, sorted."""
        return sorted(k for k in self._classes if k.startswith(prefix))

    def count(self) -> int:
        return len(self._classes)

    # ------------------------------------------------------------------ #
    #  Dunder helpers                                                      #
    # ------------------------------------------------------------------ #

    def __repr__(self) -> str:
        return f"<EnumerationRegistry [{len(self._classes)} classes]>"

    def __contains__(self, key: object) -> bool:
        """Support ``"cards.suits:Suit" in registry`` and ``Suit in registry``."""
        if isinstance(key, type):
            return self._classes.get(qualified_name(key)) is key
        return isinstance(key, str) and key in self._classes


# ===================================================================== #
#  Global singleton                                                      #
# ===================================================================== #

registry = EnumerationRegistry()
"""Module-level global registry, populated by ``EnumerationMeta``."""
