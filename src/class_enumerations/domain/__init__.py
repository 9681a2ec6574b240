"""Domain layer for class-enumerations.

Re-exports all public domain types so that consumers can write::

    from class_enumerations.domain import Enumeration, WrongValueError
"""

# -- Engine -------------------------------------------------------------------
from .enumeration import Enumeration, EnumerationMeta, definition_issues

# -- Scalars ------------------------------------------------------------------
from .scalars import is_scalar, loose_equals, normalize

# -- Exceptions ---------------------------------------------------------------
from .exceptions import (
    EnumerationError,
    WrongNameError,
    WrongValueError,
    WrongValueTypeError,
)

__all__ = [
    "Enumeration",
    "EnumerationMeta",
    "definition_issues",
    "is_scalar",
    "loose_equals",
    "normalize",
    "EnumerationError",
    "WrongNameError",
    "WrongValueError",
    "WrongValueTypeError",
]
