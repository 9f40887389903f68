# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse parsers for the `tabwise` developer command line.

Key Components:
- `TabwiseParsers`: Container for the root parser and its subcommand parsers.
- `get_arg_parsers()`: Factory for the full parser suite.
- `get_root_parser()`: Creates the root-level parser with global options.
- `get_subparsers()`: Helper to attach subcommand parsers to the root parser.
"""
from argparse import ArgumentParser, Namespace, _SubParsersAction
from dataclasses import dataclass, fields
from typing import Sequence


@dataclass
class TabwiseParsers:
    """Defines the argument parsers for the tabwise command line."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    check: ArgumentParser
    suggest: ArgumentParser
    shell: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)

    def as_dict(self) -> dict[str, ArgumentParser]:
        """Convert the TabwiseParsers instance to a dictionary."""
        return {field.name: getattr(self, field.name) for field in fields(self)}

    def get_parser(self, name: str) -> ArgumentParser | None:
        """Get the parser by name."""
        return self.as_dict().get(name)


def get_root_parser(
    prog: str | None = "tabwise",
    description: str | None = "Tabwise - parse and complete input against a grammar.",
    epilog: str | None = "Grammars are read from tabwise.yaml or tabwise.toml by default.",
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser.

    Args:
        prog (str | None): Name of the program.
        description (str | None): Description shown in the help.
        epilog (str | None): Message displayed at the end of help output.

    Returns:
        ArgumentParser: The root parser with global options attached.

    Notes:
        ```
        Includes the following arguments:
            --config PATH        : Grammar definition file.
            -v / --verbose       : Enable debug logging.
            --log-mode MODE      : Console log format (cli or json).
        ```
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "--config",
        help="Path to a YAML or TOML grammar definition.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        help="Console log format. Defaults to TABWISE_LOG_MODE or auto-detection.",
    )
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "Tabwise Commands",
    description: str | None = "Available commands for the tabwise CLI.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    subparsers = parser.add_subparsers(
        title=title,
        description=description,
        dest="command",
    )
    return subparsers


def get_arg_parsers(prog: str | None = "tabwise") -> TabwiseParsers:
    """
    Create and return the full suite of argument parsers.

    Example:
        ```python
        >>> parsers = get_arg_parsers()
        >>> args = parsers.parse_args(["suggest", "deploy --re"])
        ```
    """
    root_parser = get_root_parser(prog=prog)
    subparsers = get_subparsers(root_parser)

    check_parser = subparsers.add_parser(
        "check",
        help="Parse a line and report errors.",
        description="Parse LINE against the grammar and print any errors.",
    )
    check_parser.add_argument("line", help="The input line to parse.")

    suggest_parser = subparsers.add_parser(
        "suggest",
        help="List completions for a line.",
        description="Print the suggestions for LINE at the cursor position.",
    )
    suggest_parser.add_argument("line", help="The input line to complete.")
    suggest_parser.add_argument(
        "-p",
        "--position",
        type=int,
        help="Cursor offset in LINE. Defaults to the end of the line.",
    )

    shell_parser = subparsers.add_parser(
        "shell",
        help="Start an interactive prompt with completion.",
        description="Read lines interactively with completion and validation.",
    )

    return TabwiseParsers(
        root=root_parser,
        subparsers=subparsers,
        check=check_parser,
        suggest=suggest_parser,
        shell=shell_parser,
    )
