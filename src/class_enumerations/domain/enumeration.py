"""The enumeration engine.

Subclass :class:`Enumeration` and declare constants in the class body::

    class Suit(Enumeration):
        HEARTS = "H"
        SPADES = "S"

The constants are the enumeration's closed set of ``(name, value)`` pairs.
``EnumerationMeta`` records them when the class is created and swaps each
one for an accessor, so ``Suit.HEARTS`` is the ``HEARTS`` member rather than
the raw ``"H"``.  Members are built on first use, once per class, and shared
through :data:`~class_enumerations.infrastructure.cache.member_cache`.

Lookups::

    Suit.from_value("H")      # Suit.HEARTS
    Suit("H")                 # same thing
    Suit.from_name("hearts")  # case-insensitive
    Suit.hearts               # attribute sugar for from_name
    Suit.has_value("X")       # False, never raises
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from class_enumerations.domain.exceptions import (
    WrongNameError,
    WrongValueError,
    WrongValueTypeError,
)
from class_enumerations.domain.scalars import Scalar, is_scalar, loose_equals
from class_enumerations.infrastructure.cache import member_cache
from class_enumerations.infrastructure.registry import registry

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Enumeration")

# Public attribute names of ``Enumeration`` itself; filled in once the base
# class exists.  Constants may not reuse them.
_API_NAMES: frozenset[str] = frozenset()


def _is_constant(name: str, value: Any) -> bool:
    """Decide whether a class-body attribute is a declared constant.

    Private names, classes and descriptors (functions, properties,
    class/static methods) are skipped.  Everything else counts, including
    values of the wrong type, which are rejected at materialization.
    """
    if name.startswith("_"):
        return False
    if isinstance(value, type):
        return False
    return not hasattr(type(value), "__get__")


def definition_issues(constants: Mapping[str, Any]) -> list[str]:
    """Return human-readable problems with a set of declared constants.

    Reports values that are not strings or numbers, names that collide
    case-insensitively and values that collide under loose equality.
    """
    issues: list[str] = []
    seen_names: dict[str, str] = {}
    seen_values: list[tuple[str, Any]] = []
    for name, value in constants.items():
        if not is_scalar(value):
            issues.append(
                f"{name} has a {type(value).__name__} value; "
                f"only strings and numbers are allowed"
            )
            continue
        previous = seen_names.setdefault(name.lower(), name)
        if previous != name:
            issues.append(f"{name} duplicates the name {previous} (case-insensitive)")
        for other_name, other_value in seen_values:
            if loose_equals(value, other_value):
                issues.append(f"{name} duplicates the value of {other_name} ({value!r})")
                break
        seen_values.append((name, value))
    return issues


class _MemberAccessor:
    """Stands in for a declared constant on the class."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type[E]) -> E:
        return owner.from_name(self.name)

    def __repr__(self) -> str:
        return f"<member accessor {self.name}>"


# ===================================================================== #
#  Metaclass                                                             #
# ===================================================================== #

class EnumerationMeta(type):
    """Collects declared constants and gives enumeration classes their
    container behaviour (iteration, ``len``, ``in``, call-to-lookup).
    """

    def __new__(
        mcls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> EnumerationMeta:
        constants: dict[str, Any] = {}
        for base in reversed(bases):
            inherited = getattr(base, "__constants__", None)
            if inherited is not None:
                constants.update(inherited)

        body: dict[str, Any] = {}
        for attr, value in namespace.items():
            if _is_constant(attr, value):
                if attr in _API_NAMES:
                    raise TypeError(
                        f"Enumeration {name} cannot declare constant '{attr}': "
                        f"the name is part of the Enumeration API"
                    )
                constants[attr] = value
                body[attr] = _MemberAccessor(attr)
            else:
                body[attr] = value

        body["__constants__"] = MappingProxyType(constants)
        body.setdefault("__slots__", ())
        cls = super().__new__(mcls, name, bases, body, **kwargs)

        if _API_NAMES:
            for issue in definition_issues(constants):
                logger.warning("Enumeration %s: %s", cls.__qualname__, issue)
            registry.register(cls, overwrite=True)
        return cls

    def __call__(cls: type[E], value: Any) -> E:  # type: ignore[misc]
        """``Suit("H")`` looks up a member by value; it never constructs."""
        if isinstance(value, cls) and cls.has(value):
            return value
        return cls.from_value(value)

    def __getattr__(cls, name: str) -> Any:
        # Only reached for names the class does not define: ``Suit.hearts``.
        if name.startswith("_"):
            raise AttributeError(name)
        # checked against the declarations so unknown names never materialize
        declared = cls.__dict__.get("__constants__", {})
        if name.lower() not in {n.lower() for n in declared}:
            raise AttributeError(
                f"type object '{cls.__name__}' has no member or attribute '{name}'"
            )
        try:
            return cls.from_name(name)
        except WrongNameError:
            raise AttributeError(
                f"type object '{cls.__name__}' has no member or attribute '{name}'"
            ) from None

    def __iter__(cls: type[E]) -> Iterator[E]:
        return iter(cls.get_all_members())

    def __reversed__(cls: type[E]) -> Iterator[E]:
        return reversed(cls.get_all_members())

    def __len__(cls) -> int:
        return len(cls.get_all_members())

    def __bool__(cls) -> bool:
        return True

    def __contains__(cls, item: object) -> bool:
        return cls.has(item)

    def __repr__(cls) -> str:
        names = ", ".join(cls.__dict__.get("__constants__", {}))
        return f"<enumeration {cls.__qualname__} [{names}]>"


# ===================================================================== #
#  Base class                                                            #
# ===================================================================== #

class Enumeration(metaclass=EnumerationMeta):
    """Base class for closed enumerations built from class constants.

    Members are singletons: ``Suit.from_value("H") is Suit.HEARTS``.  They
    compare and hash by identity; use :meth:`equals` or
    :meth:`equals_to_value` for loose value comparison.
    """

    __slots__ = ("_name", "_value")

    __constants__: Mapping[str, Any]

    def __new__(cls, *args: Any, **kwargs: Any) -> Enumeration:
        raise TypeError(
            f"{cls.__name__} members cannot be created directly; "
            f"use {cls.__name__}.from_value() or {cls.__name__}.from_name()"
        )

    # ------------------------------------------------------------------ #
    #  Materialization                                                    #
    # ------------------------------------------------------------------ #

    @classmethod
    def _validate(cls, value: Any) -> None:
        if not is_scalar(value):
            raise WrongValueTypeError(
                f"{cls.__name__} values must be strings or numbers, "
                f"got {type(value).__name__}",
                enumeration=cls.__name__,
                value=value,
            )
        if not any(loose_equals(value, declared) for declared in cls.__constants__.values()):
            raise WrongValueError(
                f"{value!r} is not a value of {cls.__name__}",
                enumeration=cls.__name__,
                value=value,
            )

    @classmethod
    def _create(cls: type[E], name: str, value: Scalar) -> E:
        cls._validate(value)
        member = object.__new__(cls)
        object.__setattr__(member, "_name", name)
        object.__setattr__(member, "_value", value)
        return member

    @classmethod
    def _build_members(cls: type[E]) -> list[E]:
        return [cls._create(name, value) for name, value in cls.__constants__.items()]

    @classmethod
    def is_materialized(cls) -> bool:
        """Return ``True`` once the members of this class have been built."""
        return member_cache.is_materialized(cls)

    # ------------------------------------------------------------------ #
    #  Class-level lookup                                                 #
    # ------------------------------------------------------------------ #

    @classmethod
    def get_all_members(cls: type[E]) -> tuple[E, ...]:
        """Return every member in declaration order.

        The first call builds the members; later calls return the very same
        tuple.  If any declared value is invalid the whole build fails with
        :class:`WrongValueTypeError` or :class:`WrongValueError`.
        """
        return member_cache.get_or_build(cls, cls._build_members)

    @classmethod
    def get_all_values(cls) -> tuple[Any, ...]:
        """Return the declared values in declaration order.

        Reads the declarations only; members are not built.
        """
        return tuple(cls.__constants__.values())

    @classmethod
    def from_value(cls: type[E], value: Any) -> E:
        """Return the member whose value loosely equals *value*.

        Raises
        ------
        WrongValueTypeError
            *value* is neither a string nor a number.
        WrongValueError
            *value* is not one of the declared values.
        """
        cls._validate(value)
        for member in cls.get_all_members():
            if loose_equals(member._value, value):
                return member
        raise WrongValueError(
            f"{value!r} is not a value of {cls.__name__}",
            enumeration=cls.__name__,
            value=value,
        )

    @classmethod
    def from_name(cls: type[E], name: str) -> E:
        """Return the member called *name*, ignoring case.

        Raises :class:`WrongNameError` if there is none.
        """
        if isinstance(name, str):
            lowered = name.lower()
            for member in cls.get_all_members():
                if member.get_name(True) == lowered:
                    return member
        raise WrongNameError(
            f"{name!r} is not a member name of {cls.__name__}",
            enumeration=cls.__name__,
            name=str(name),
        )

    @classmethod
    def value_from_name(cls, name: str) -> Any:
        """Return the value of the member called *name*, ignoring case."""
        return cls.from_name(name).get_value()

    @classmethod
    def has_value(cls, value: Any) -> bool:
        """Return ``True`` if :meth:`from_value` would succeed for *value*."""
        if not all(is_scalar(declared) for declared in cls.__constants__.values()):
            # a malformed class cannot materialize, so no lookup succeeds
            return False
        try:
            cls._validate(value)
        except (WrongValueTypeError, WrongValueError):
            return False
        return True

    @classmethod
    def has(cls, instance: object) -> bool:
        """Return ``True`` if *instance* is one of this class's members."""
        return any(member is instance for member in cls.get_all_members())

    # ------------------------------------------------------------------ #
    #  Member accessors                                                   #
    # ------------------------------------------------------------------ #

    def get_name(self, lowercase: bool = False) -> str:
        return self._name.lower() if lowercase else self._name

    def get_value(self) -> Any:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Any:
        return self._value

    def equals_to_value(self, value: Any) -> bool:
        """Loosely compare this member's value with *value*."""
        return loose_equals(self._value, value)

    def is_(self, value: Any) -> bool:
        """Alias of :meth:`equals_to_value`."""
        return self.equals_to_value(value)

    def equals(self, other: Enumeration) -> bool:
        """Loosely compare the values of two members.

        Only values are compared, so members of two different enumerations
        with the same value are equal here.
        """
        if not isinstance(other, Enumeration):
            raise TypeError(
                f"equals() expects an Enumeration member, got {type(other).__name__}"
            )
        return loose_equals(self._value, other._value)

    # ------------------------------------------------------------------ #
    #  Dunder helpers                                                      #
    # ------------------------------------------------------------------ #

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"Cannot modify '{key}' of {type(self).__name__} member")

    def __delattr__(self, key: str) -> None:
        raise AttributeError(f"Cannot delete '{key}' of {type(self).__name__} member")

    def __copy__(self: E) -> E:
        return self

    def __deepcopy__(self: E, memo: dict[int, Any]) -> E:
        return self

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}.{self._name}: {self._value!r}>"


_API_NAMES = frozenset(
    attr for klass in (Enumeration, EnumerationMeta) for attr in dir(klass)
    if not attr.startswith("_")
)
