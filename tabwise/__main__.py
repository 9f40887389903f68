"""
Tabwise CLI Grammar

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Sequence

from prompt_toolkit import PromptSession
from rich.markup import escape

from tabwise.completer import TabwiseCompleter
from tabwise.config import loader
from tabwise.console import console
from tabwise.exceptions import TabwiseError
from tabwise.grammar.symbols import Command
from tabwise.parser import ParseResult, Parser
from tabwise.parsers import get_arg_parsers
from tabwise.utils import setup_logging
from tabwise.validators import GrammarValidator


def find_tabwise_config() -> Path | None:
    candidates = [
        Path.cwd() / "tabwise.yaml",
        Path.cwd() / "tabwise.toml",
        Path.cwd() / ".tabwise.yaml",
        Path.cwd() / ".tabwise.toml",
        Path(os.environ.get("TABWISE_CONFIG", "tabwise.yaml")),
    ]
    return next((p for p in candidates if p.exists()), None)


def bootstrap(config: str | None = None) -> Path | None:
    config_path = Path(config) if config else find_tabwise_config()
    if config_path and str(config_path.parent) not in sys.path:
        sys.path.insert(0, str(config_path.parent))
    return config_path


def render_result(result: ParseResult) -> None:
    path = []
    for match in result.matches[1:]:
        style = "tabwise.command" if isinstance(match.symbol, Command) else "tabwise.option"
        text = f"[{style}]{escape(match.symbol.name)}[/]"
        if match.values:
            values = " ".join(escape(value) for value in match.values)
            text += f" [tabwise.value]{values}[/]"
        path.append(text)
    console.print(" → ".join(path) if path else "[tabwise.muted](nothing matched)[/]")
    for error in result.errors:
        console.print(f"[tabwise.error]✗[/] {escape(error.message)} [tabwise.muted]({error.kind})[/]")


def run_check(parser: Parser, line: str) -> int:
    result = parser.parse(line)
    render_result(result)
    return 0 if result.is_valid else 1


def run_suggest(parser: Parser, line: str, position: int | None = None) -> int:
    for suggestion in sorted(parser.parse(line).suggestions(position)):
        console.print(escape(suggestion), highlight=False)
    return 0


def run_shell(parser: Parser) -> int:
    session: PromptSession = PromptSession(
        message="tabwise > ",
        completer=TabwiseCompleter(parser),
        validator=GrammarValidator(parser),
        validate_while_typing=False,
    )
    while True:
        try:
            line = session.prompt()
        except (EOFError, KeyboardInterrupt):
            return 0
        if line.strip():
            render_result(parser.parse(line))


def main(argv: Sequence[str] | None = None) -> int:
    parsers = get_arg_parsers()
    args = parsers.parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if not args.command:
        parsers.root.print_help()
        return 2

    config_path = bootstrap(args.config)
    if config_path is None:
        console.print(
            "[tabwise.error]No grammar found.[/] Pass --config or create tabwise.yaml."
        )
        return 2

    try:
        parser = loader(config_path)
    except (TabwiseError, FileNotFoundError) as error:
        console.print(f"[tabwise.error]Could not load grammar:[/] {escape(str(error))}")
        return 2

    if args.command == "check":
        return run_check(parser, args.line)
    if args.command == "suggest":
        return run_suggest(parser, args.line, args.position)
    return run_shell(parser)


if __name__ == "__main__":
    sys.exit(main())
