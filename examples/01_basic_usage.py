#!/usr/bin/env python3
"""Example 01: declaring and querying an enumeration.

Demonstrates:
  - declaring members as class constants
  - lookup by value (loose) and by name (case-insensitive)
  - the non-throwing ``has_value`` probe
  - catching the error kinds

Run:
    python examples/01_basic_usage.py
"""

from __future__ import annotations

from class_enumerations import Enumeration, WrongValueError, WrongValueTypeError
from class_enumerations.presentation import EnumerationConsole


class HttpStatus(Enumeration):
    OK = 200
    NOT_FOUND = 404
    SERVER_ERROR = 500


def main() -> None:
    EnumerationConsole().print_members(HttpStatus)

    print(f"from_value('404')   -> {HttpStatus.from_value('404')!r}")
    print(f"from_name('ok')     -> {HttpStatus.from_name('ok')!r}")
    print(f"HttpStatus(500)     -> {HttpStatus(500)!r}")
    print(f"has_value(418)      -> {HttpStatus.has_value(418)}")
    print(f"OK.is_('200')       -> {HttpStatus.OK.is_('200')}")

    for probe in (418, None):
        try:
            HttpStatus.from_value(probe)
        except (WrongValueError, WrongValueTypeError) as exc:
            print(f"from_value({probe!r}) -> {type(exc).__name__}: {exc}")


if __name__ == "__main__":
    main()
