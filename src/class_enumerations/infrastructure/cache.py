"""Process-wide member cache.

Every concrete enumeration class materializes its members exactly once.
:class:`MemberCache` holds the resulting tuples keyed by class and guards
the first build with a lock, so concurrent first access never builds twice
or exposes a partial member set.  Entries are never evicted.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)


class MemberCache:
    """Lazily populated map of ``enumeration class -> tuple of members``.

    Usage::

        members = member_cache.get_or_build(Suit, Suit._build_members)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._members: dict[type, tuple[Any, ...]] = {}

    def get_or_build(
        self,
        enum_cls: type,
        builder: Callable[[], Iterable[Any]],
    ) -> tuple[Any, ...]:
        """Return the cached members of *enum_cls*, building them on first use.

        If *builder* raises, nothing is stored and the exception propagates;
        the next call tries again.
        """
        members = self._members.get(enum_cls)
        if members is not None:
            return members
        with self._lock:
            members = self._members.get(enum_cls)
            if members is None:
                members = tuple(builder())
                self._members[enum_cls] = members
                logger.debug(
                    "Materialized %d members of %s", len(members), enum_cls.__qualname__
                )
        return members

    def get_or_none(self, enum_cls: type) -> tuple[Any, ...] | None:
        """Return the cached members or ``None`` if not yet materialized."""
        return self._members.get(enum_cls)

    def is_materialized(self, enum_cls: type) -> bool:
        return enum_cls in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, enum_cls: object) -> bool:
        return enum_cls in self._members

    def __repr__(self) -> str:
        parts = [f"{cls.__qualname__}({len(ms)})" for cls, ms in self._members.items()]
        return f"<MemberCache [{', '.join(parts)}]>"


member_cache = MemberCache()
"""Module-level cache shared by every enumeration class."""
