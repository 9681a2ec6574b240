"""Public testing utilities for class-enumerations.

Lets host projects check their enumeration definitions from their own
test suites.
"""

from class_enumerations.testing.checks import assert_well_formed, check_enumeration

__all__ = ["assert_well_formed", "check_enumeration"]
