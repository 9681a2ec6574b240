"""class-enumerations.

Closed, type-checked enumerations built from plain class constants: a
fixed set of named, valued singleton members with lookup by name or by
value, membership testing and loose value comparison.
"""

__version__ = "0.1.0"

from class_enumerations.domain import (
    Enumeration,
    EnumerationError,
    WrongNameError,
    WrongValueError,
    WrongValueTypeError,
)

__all__ = [
    "Enumeration",
    "EnumerationError",
    "WrongNameError",
    "WrongValueError",
    "WrongValueTypeError",
]
