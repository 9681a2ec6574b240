"""Presentation layer for class-enumerations.

Public API
----------
- :class:`EnumerationConsole` -- rich-based console output of members
"""

from class_enumerations.presentation.console import EnumerationConsole

__all__ = ["EnumerationConsole"]
