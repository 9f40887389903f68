# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the grammar tree: `Command` and `Option` symbols and the implicit
`RootCommand` every `Parser` is anchored on.

A grammar is declared once, top-down, and never changes afterwards:

    grammar = Command(
        "deploy", "Deploy a service.",
        define_arguments().add_suggestions("web", "api").exactly_one(),
        Option(["--region", "-r"], "Target region.",
               define_arguments().from_among("us-east-1", "eu-west-1")),
        Command("status", "Show deployment status."),
    )

Parents own their children; there are no back references. The parser carries
the path through the tree explicitly while it walks the tokens.

A symbol with an empty `help_text` is hidden: it still parses and validates but is
never offered as a completion candidate.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from tabwise.exceptions import DuplicateSymbolError, GrammarError
from tabwise.grammar.argument_rule import NO_ARGUMENTS, ArgumentRule, ArgumentRuleBuilder
from tabwise.logger import logger

if TYPE_CHECKING:
    from tabwise.parser.parse_result import ParseResult


def _check_alias(alias: str, kind: str) -> str:
    if not isinstance(alias, str):
        raise GrammarError(f"{kind} names must be strings, got {alias!r}")
    if not alias:
        raise GrammarError(f"{kind} names cannot be empty")
    if any(char.isspace() for char in alias):
        raise GrammarError(f"{kind} name '{alias}' cannot contain whitespace")
    return alias


def _build_rule(rule: ArgumentRule | ArgumentRuleBuilder | None) -> ArgumentRule:
    if rule is None:
        return NO_ARGUMENTS
    if isinstance(rule, ArgumentRuleBuilder):
        return rule.build()
    if isinstance(rule, ArgumentRule):
        return rule
    raise GrammarError(f"Expected an ArgumentRule or ArgumentRuleBuilder, got {rule!r}")


class Symbol:
    """
    Base class for grammar symbols.

    Attributes:
        aliases (tuple[str, ...]): Tokens that match this symbol.
        help_text (str): Description; empty hides the symbol from suggestions.
        argument_rule (ArgumentRule): Arguments accepted after the symbol.
    """

    def __init__(
        self,
        aliases: tuple[str, ...],
        help_text: str,
        argument_rule: ArgumentRule | ArgumentRuleBuilder | None,
    ) -> None:
        if not isinstance(help_text, str):
            raise GrammarError(f"help_text must be a string, got {help_text!r}")
        self._aliases = aliases
        self._help_text = help_text
        self._argument_rule = _build_rule(argument_rule)

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def name(self) -> str:
        return self._aliases[0]

    @property
    def help_text(self) -> str:
        return self._help_text

    @property
    def argument_rule(self) -> ArgumentRule:
        return self._argument_rule

    @property
    def is_hidden(self) -> bool:
        return self._help_text == ""

    def has_alias(self, alias: str) -> bool:
        return alias in self._aliases

    def candidates(
        self,
        parse_result: ParseResult,
        position: int | None = None,
        include_arguments: bool = True,
    ) -> list[str]:
        """Return the raw completion candidates this symbol can offer next."""
        raise NotImplementedError

    def suggest(self, parse_result: ParseResult, position: int | None = None) -> set[str]:
        """
        Return this symbol's unfiltered suggestions.

        Unlike `ParseResult.suggestions()`, no cursor resolution or text filtering
        is applied: the symbol simply lists what it could accept next.
        """
        return set(self.candidates(parse_result, position))

    def parse(self, line_or_tokens: str | Sequence[str]) -> ParseResult:
        """Parse input against a grammar rooted on this symbol."""
        from tabwise.parser.engine import Parser

        return Parser(self).parse(line_or_tokens)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({'|'.join(self._aliases)!r})"


class Option(Symbol):
    """
    A named option such as `--region` / `-r`.

    Args:
        aliases (str | Sequence[str]): One or more aliases, unique within the
            owning command.
        help_text (str): Description; empty hides the option from suggestions.
        argument_rule (ArgumentRule | ArgumentRuleBuilder | None): Values taken by
            the option. Defaults to no values.
    """

    def __init__(
        self,
        aliases: str | Sequence[str],
        help_text: str = "",
        argument_rule: ArgumentRule | ArgumentRuleBuilder | None = None,
    ) -> None:
        if isinstance(aliases, str):
            aliases = (aliases,)
        checked = tuple(_check_alias(alias, "Option") for alias in aliases)
        if not checked:
            raise GrammarError("Option requires at least one alias")
        if len(set(checked)) != len(checked):
            raise DuplicateSymbolError(f"Option {checked} repeats an alias")
        super().__init__(checked, help_text, argument_rule)

    def candidates(
        self,
        parse_result: ParseResult,
        position: int | None = None,
        include_arguments: bool = True,
    ) -> list[str]:
        if not include_arguments:
            return []
        return self.argument_rule.suggest(parse_result, position)


class Command(Symbol):
    """
    A command with child options, child commands and an optional argument rule.

    Args:
        name (str): Command name, unique among its siblings.
        help_text (str): Description; empty hides the command from suggestions.
        *children: Any mix of `Option`, `Command`, and at most one `ArgumentRule`
            or `ArgumentRuleBuilder`.

    Raises:
        DuplicateSymbolError: If two child commands share a name or two child
            options share an alias.
        GrammarError: For invalid names, repeated argument rules, or unsupported
            children.
    """

    def __init__(
        self,
        name: str,
        help_text: str = "",
        *children: Option | Command | ArgumentRule | ArgumentRuleBuilder,
    ) -> None:
        rule: ArgumentRule | ArgumentRuleBuilder | None = None
        options: list[Option] = []
        commands: list[Command] = []
        for child in children:
            if isinstance(child, (ArgumentRule, ArgumentRuleBuilder)):
                if rule is not None:
                    raise GrammarError(f"Command '{name}' has more than one argument rule")
                rule = child
            elif isinstance(child, RootCommand):
                raise GrammarError("A root command cannot be nested")
            elif isinstance(child, Command):
                commands.append(child)
            elif isinstance(child, Option):
                options.append(child)
            else:
                raise GrammarError(
                    f"Unsupported child for command '{name}': {child!r}"
                )
        super().__init__((self._check_name(name),), help_text, rule)

        self._command_map: dict[str, Command] = {}
        for command in commands:
            if command.name in self._command_map:
                raise DuplicateSymbolError(
                    f"Command '{self.name}' already has a subcommand '{command.name}'"
                )
            self._command_map[command.name] = command

        self._option_map: dict[str, Option] = {}
        for option in options:
            for alias in option.aliases:
                if alias in self._option_map:
                    raise DuplicateSymbolError(
                        f"Command '{self.name}' already has an option '{alias}'"
                    )
                self._option_map[alias] = option

        self._commands = tuple(commands)
        self._options = tuple(options)
        logger.debug(
            "Built %r with %d option(s), %d subcommand(s), arguments=%s",
            self,
            len(self._options),
            len(self._commands),
            self.argument_rule,
        )

    @staticmethod
    def _check_name(name: str) -> str:
        return _check_alias(name, "Command")

    @property
    def is_root(self) -> bool:
        return False

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    @property
    def options(self) -> tuple[Option, ...]:
        return self._options

    @property
    def children(self) -> tuple[Symbol, ...]:
        return self._options + self._commands

    def get_command(self, name: str) -> Command | None:
        return self._command_map.get(name)

    def get_option(self, alias: str) -> Option | None:
        return self._option_map.get(alias)

    def matches_child(self, token: str) -> bool:
        """True if `token` names a child command or a child option alias."""
        return token in self._command_map or token in self._option_map

    def candidates(
        self,
        parse_result: ParseResult,
        position: int | None = None,
        include_arguments: bool = True,
    ) -> list[str]:
        candidates = [command.name for command in self._commands if not command.is_hidden]
        for option in self._options:
            if not option.is_hidden:
                candidates.extend(option.aliases)
        if include_arguments:
            candidates.extend(self.argument_rule.suggest(parse_result, position))
        return candidates


class RootCommand(Command):
    """
    The implicit, unnamed command at the top of a grammar.

    `Parser(*symbols)` wraps its symbols in a `RootCommand`, so a grammar can be a
    single command (`Command.parse("command --flag")`) or a flat set of options.
    """

    def __init__(
        self, *children: Option | Command | ArgumentRule | ArgumentRuleBuilder
    ) -> None:
        super().__init__("", "", *children)

    @staticmethod
    def _check_name(name: str) -> str:
        return name

    @property
    def is_root(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "RootCommand()"
