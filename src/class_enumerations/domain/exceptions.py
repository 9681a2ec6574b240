"""Domain exceptions for class-enumerations.

All lookup and validation failures inherit from ``EnumerationError`` so
callers can catch the full family with a single ``except`` clause.  Each
concrete error also derives from the closest built-in exception
(``TypeError``, ``ValueError``, ``LookupError``) so generic handlers keep
working.
"""

from __future__ import annotations

from typing import Any


class EnumerationError(Exception):
    """Base exception for all enumeration errors."""

    def __init__(self, message: str = "", details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}


class WrongValueTypeError(EnumerationError, TypeError):
    """Raised when a value is neither a string nor a number.

    Booleans, ``None``, containers and complex numbers all end up here,
    whether they come from a lookup or from a malformed class body.
    """

    def __init__(
        self,
        message: str = "Enumeration values must be strings or numbers",
        enumeration: str = "",
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.enumeration = enumeration
        self.value = value


class WrongValueError(EnumerationError, ValueError):
    """Raised when a well-typed value is not one of the declared constants."""

    def __init__(
        self,
        message: str = "Value is not declared by the enumeration",
        enumeration: str = "",
        value: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.enumeration = enumeration
        self.value = value


class WrongNameError(EnumerationError, LookupError):
    """Raised when a name lookup matches no member."""

    def __init__(
        self,
        message: str = "Name is not declared by the enumeration",
        enumeration: str = "",
        name: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.enumeration = enumeration
        self.name = name
