# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the state machine that resolves tokens against
a grammar of `Command`s, `Option`s and `ArgumentRule`s.

The engine has two states:
- `AwaitingSymbol(command)`: the next token may name a child command, a child
  option, or be an argument value for `command` itself.
- `ConsumingArgumentsFor(option, command)`: the next token is a value for
  `option`. Once the option has its minimum, a token naming a sibling symbol
  ends the option's values, unless the option's allowed values include it.

Parsing never raises on bad input. Every problem is recorded as a `ParseError`
and parsing continues with the next token, so a `ParseResult` always covers the
whole input and suggestions stay available while the user is still typing.

The `Parser` keeps no per-parse state and the grammar is immutable, so a single
parser can be shared freely between threads.

Example Usage:
    parser = Parser(
        Command("outer", "An outer command.",
                Option("--one", "Option one."),
                Command("inner", "A subcommand.")),
    )
    result = parser.parse("outer --one in")
    result.errors         → ()
    result.suggestions()  → {"inner"}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from tabwise.exceptions import GrammarError
from tabwise.grammar.argument_rule import ArgumentRule, ArgumentRuleBuilder
from tabwise.grammar.symbols import Command, Option, RootCommand, Symbol
from tabwise.logger import logger
from tabwise.parser.parse_result import ParseResult
from tabwise.parser.parser_types import (
    AwaitingSymbol,
    ConsumingArgumentsFor,
    ErrorKind,
    MatchedSymbol,
    ParseError,
    ParserState,
    SymbolState,
)
from tabwise.parser.tokenizer import Token, TokenizedInput, tokenize_input


def _display_name(symbol: Symbol) -> str:
    return symbol.name or "<root>"


@dataclass(frozen=True)
class ParseOutcome:
    """Matched symbols, errors and the proximate symbol of a single walk."""

    matches: tuple[MatchedSymbol, ...]
    errors: tuple[ParseError, ...]
    proximate: MatchedSymbol


@dataclass
class _ParseContext:
    state: ParserState
    matches: list[SymbolState]
    errors: list[ParseError] = field(default_factory=list)
    last_filled: SymbolState | None = None


class Parser:
    """
    Resolves input lines or argv-style token lists against a grammar.

    The given symbols are wrapped in an implicit `RootCommand`, so a parser can be
    built from one top-level command (the first token must then be its name) or
    from a flat set of options and commands.

    Args:
        *symbols: Top-level `Command`s and `Option`s, optionally with one
            `ArgumentRule` for bare values at the top level.
    """

    def __init__(
        self, *symbols: Command | Option | ArgumentRule | ArgumentRuleBuilder
    ) -> None:
        if not symbols:
            raise GrammarError("Parser requires at least one symbol")
        self.root: RootCommand = RootCommand(*symbols)

    def parse(self, line_or_tokens: str | Sequence[str]) -> ParseResult:
        """
        Parse a raw line or a pre-split sequence of tokens.

        Args:
            line_or_tokens (str | Sequence[str]): The input to parse.

        Returns:
            ParseResult: Matched symbols, errors, and access to suggestions.
        """
        return self.parse_input(tokenize_input(line_or_tokens))

    def parse_input(self, source: TokenizedInput) -> ParseResult:
        """Parse an already tokenized input."""
        outcome = self.walk(source.tokens, end=source.end)
        return ParseResult(parser=self, source=source, outcome=outcome)

    def walk(self, tokens: Sequence[Token], end: int | None = None) -> ParseOutcome:
        """
        Run the state machine over `tokens`.

        Args:
            tokens (Sequence[Token]): Tokens to consume, in order.
            end (int | None): Offset reported for errors found at end of input.
                Defaults to the end of the last token.

        Returns:
            ParseOutcome: The matched symbols, errors and proximate symbol.
        """
        root_state = SymbolState(self.root)
        context = _ParseContext(state=AwaitingSymbol(root_state), matches=[root_state])
        for token in tokens:
            self._handle_token(context, token)

        if end is None:
            end = tokens[-1].end if tokens else 0
        state = context.state
        active = state.owner if isinstance(state, ConsumingArgumentsFor) else state.command
        self._check_minimum(context, active, end)

        frozen = [match.freeze() for match in context.matches]
        proximate_index = next(
            index for index, match in enumerate(context.matches) if match is active
        )
        return ParseOutcome(
            matches=tuple(frozen),
            errors=tuple(context.errors),
            proximate=frozen[proximate_index],
        )

    def _handle_token(self, context: _ParseContext, token: Token) -> None:
        state = context.state
        if isinstance(state, ConsumingArgumentsFor):
            if self._ends_value_run(state, token):
                context.state = AwaitingSymbol(state.command)
            else:
                self._consume_value(context, state.owner, token)
                if not state.owner.accepts_more():
                    context.last_filled = state.owner
                    context.state = AwaitingSymbol(state.command)
                return

        assert isinstance(context.state, AwaitingSymbol)
        command_state = context.state.command
        command = context.state.symbol
        last_filled, context.last_filled = context.last_filled, None

        subcommand = command.get_command(token.text)
        if subcommand is not None:
            logger.debug("Descending into %r", subcommand)
            subcommand_state = SymbolState(subcommand, token)
            context.matches.append(subcommand_state)
            context.state = AwaitingSymbol(subcommand_state)
            return

        option = command.get_option(token.text)
        if option is not None:
            option_state = SymbolState(option, token)
            context.matches.append(option_state)
            if option_state.accepts_more():
                context.state = ConsumingArgumentsFor(option_state, command_state)
            return

        if command_state.accepts_more():
            self._consume_value(context, command_state, token)
            return

        if last_filled is None and command_state.is_full():
            last_filled = command_state
        self._reject(context, token, last_filled)

    @staticmethod
    def _ends_value_run(state: ConsumingArgumentsFor, token: Token) -> bool:
        """
        True if `token` closes the option's value run instead of being a value.

        An option below its minimum always takes the token, as does one whose
        allowed values include it. Otherwise a token naming a child of the
        enclosing command ends the run and is matched against that command.
        """
        owner = state.owner
        if not owner.is_satisfied():
            return False
        rule = owner.symbol.argument_rule
        if rule.is_constrained and rule.is_allowed(token.text):
            return False
        return state.command.symbol.matches_child(token.text)

    def _consume_value(
        self, context: _ParseContext, owner: SymbolState, token: Token
    ) -> None:
        owner.values.append(token)
        rule = owner.symbol.argument_rule
        if not rule.is_allowed(token.text):
            allowed = ", ".join(f"'{value}'" for value in rule.allowed_values or ())
            context.errors.append(
                ParseError(
                    kind=ErrorKind.VALUE_NOT_IN_ALLOWED_SET,
                    message=(
                        f"Argument '{token.text}' not recognized for "
                        f"'{_display_name(owner.symbol)}'. Must be one of: {allowed}"
                    ),
                    token=token,
                    position=token.start,
                )
            )

    def _check_minimum(self, context: _ParseContext, owner: SymbolState, position: int) -> None:
        if owner.is_satisfied():
            return
        rule = owner.symbol.argument_rule
        context.errors.append(
            ParseError(
                kind=ErrorKind.ARGUMENT_COUNT_BELOW_MINIMUM,
                message=(
                    f"Required argument missing for '{_display_name(owner.symbol)}': "
                    f"expected at least {rule.minimum}, got {owner.consumed}"
                ),
                token=owner.token,
                position=position,
            )
        )

    def _reject(
        self, context: _ParseContext, token: Token, filled: SymbolState | None
    ) -> None:
        if filled is not None:
            error = ParseError(
                kind=ErrorKind.ARGUMENT_COUNT_ABOVE_MAXIMUM,
                message=(
                    f"Unexpected argument '{token.text}': "
                    f"'{_display_name(filled.symbol)}' accepts at most "
                    f"{filled.symbol.argument_rule.maximum} value(s)"
                ),
                token=token,
                position=token.start,
            )
        else:
            error = ParseError(
                kind=ErrorKind.UNMATCHED_TOKEN,
                message=f"Unrecognized command or argument '{token.text}'",
                token=token,
                position=token.start,
            )
        logger.debug("Rejected token %r: %s", token.text, error.kind)
        context.errors.append(error)

    def __repr__(self) -> str:
        return f"Parser({', '.join(repr(child) for child in self.root.children)})"
