"""Command-line interface for class-enumerations.

Inspects enumeration classes defined anywhere on the import path.  Targets
are written ``package.module:ClassName`` (or ``package.module.ClassName``).

Entry point
-----------
The ``main()`` function is registered as a console script in
``pyproject.toml``::

    [project.scripts]
    class-enumerations = "class_enumerations.cli:main"

Usage examples::

    class-enumerations show cards.suits:Suit --format plain
    class-enumerations lookup cards.suits:Suit --value H
    class-enumerations lookup cards.suits:Suit --name hearts
    class-enumerations list --prefix cards.
    class-enumerations info
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any

from class_enumerations.domain.enumeration import Enumeration
from class_enumerations.domain.exceptions import EnumerationError
from class_enumerations.infrastructure.config import DisplayConfig
from class_enumerations.infrastructure.registry import registry
from class_enumerations.presentation.console import EnumerationConsole

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="class-enumerations",
        description="Inspect and query enumeration classes.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        default=False,
        help="Show the package version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    # -- show --------------------------------------------------------------
    show_parser = subparsers.add_parser(
        "show",
        help="Print the members of an enumeration.",
        description="Import an enumeration class and print its members.",
    )
    show_parser.add_argument("target", help="Enumeration as 'package.module:ClassName'.")
    show_parser.add_argument(
        "--format",
        type=str,
        default="table",
        choices=["table", "plain"],
        help="Display format. (default: table)",
    )
    show_parser.add_argument(
        "--lowercase",
        action="store_true",
        default=False,
        help="Print member names in lower case.",
    )

    # -- lookup ------------------------------------------------------------
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Find a member by value or by name.",
        description="Resolve a value or a name to a member of an enumeration.",
    )
    lookup_parser.add_argument("target", help="Enumeration as 'package.module:ClassName'.")
    key = lookup_parser.add_mutually_exclusive_group(required=True)
    key.add_argument("--value", type=str, help="Value to look up (compared loosely).")
    key.add_argument("--name", type=str, help="Member name, case-insensitive.")

    # -- list --------------------------------------------------------------
    list_parser = subparsers.add_parser(
        "list",
        help="List enumerations registered in this process.",
        description=(
            "List enumeration classes imported so far.  Use --import to load "
            "modules first."
        ),
    )
    list_parser.add_argument(
        "--prefix",
        type=str,
        default="",
        help="Only show names starting with this prefix.",
    )
    list_parser.add_argument(
        "--import",
        dest="modules",
        action="append",
        default=[],
        metavar="MODULE",
        help="Import MODULE before listing. May be repeated.",
    )

    # -- info --------------------------------------------------------------
    subparsers.add_parser(
        "info",
        help="Show version and registry size.",
        description="Display the package version and how many enumerations are registered.",
    )

    return parser


def resolve_target(target: str) -> type[Enumeration]:
    """Import and return the enumeration class named by *target*.

    Accepts a registry key, ``module:QualName`` or ``module.ClassName``.
    Raises ``ValueError`` if the target is malformed or not an enumeration.
    """
    found = registry.get_or_none(target)
    if found is not None:
        return found

    if ":" in target:
        module_name, _, attr_path = target.partition(":")
    else:
        module_name, _, attr_path = target.rpartition(".")
    if not module_name or not attr_path:
        raise ValueError(
            f"target must look like 'package.module:ClassName', got '{target}'"
        )

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"'{part}' not found while resolving '{target}'") from None

    if not (isinstance(obj, type) and issubclass(obj, Enumeration)):
        raise ValueError(f"'{target}' is not an Enumeration subclass")
    logger.debug("Resolved %s to %r", target, obj)
    return obj


# =========================================================================
# Subcommand handlers
# =========================================================================

def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the ``show`` subcommand."""
    enum_cls = resolve_target(args.target)
    config = DisplayConfig.from_dict(vars(args))
    EnumerationConsole(config).print_members(enum_cls)
    return 0


def _cmd_lookup(args: argparse.Namespace) -> int:
    """Handle the ``lookup`` subcommand."""
    enum_cls = resolve_target(args.target)
    try:
        if args.name is not None:
            member = enum_cls.from_name(args.name)
        else:
            member = enum_cls.from_value(args.value)
    except EnumerationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    EnumerationConsole().print_member(member)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    """Handle the ``list`` subcommand."""
    for module_name in args.modules:
        importlib.import_module(module_name)
    EnumerationConsole().print_names(registry.list_names(args.prefix))
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    """Handle the ``info`` subcommand."""
    from class_enumerations import __version__

    print(f"class-enumerations v{__version__}")
    print(f"Registered enumerations: {registry.count()}")
    return 0


# =========================================================================
# Main entry point
# =========================================================================

def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parameters
    ----------
    argv:
        Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from class_enumerations import __version__
        print(f"class-enumerations {__version__}")
        sys.exit(0)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    handlers: dict[str, Any] = {
        "show": _cmd_show,
        "lookup": _cmd_lookup,
        "list": _cmd_list,
        "info": _cmd_info,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(1)

    try:
        exit_code = handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        exit_code = 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1

    sys.exit(exit_code)
