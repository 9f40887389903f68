# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types shared by the parser engine and `ParseResult`.

Contents:
- `ErrorKind` / `ParseError`: diagnostics collected while parsing. Parse errors are
  data, never exceptions, so a result (and its suggestions) is always available
  for invalid or partial input.
- `SymbolState`: tracks a matched symbol and the argument tokens consumed for it
  while the engine runs.
- `MatchedSymbol`: the frozen snapshot of a `SymbolState` exposed on results.
- `AwaitingSymbol` / `ConsumingArgumentsFor`: the two states of the engine.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tabwise.grammar.symbols import Command, Option, Symbol
from tabwise.parser.tokenizer import Token


class ErrorKind(Enum):
    """Kinds of diagnostics recorded by the parser."""

    UNMATCHED_TOKEN = "unmatched_token"
    ARGUMENT_COUNT_BELOW_MINIMUM = "argument_count_below_minimum"
    ARGUMENT_COUNT_ABOVE_MAXIMUM = "argument_count_above_maximum"
    VALUE_NOT_IN_ALLOWED_SET = "value_not_in_allowed_set"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseError:
    """
    A single parse diagnostic.

    Attributes:
        kind (ErrorKind): What went wrong.
        message (str): Human-readable description.
        token (Token | None): Offending token, if the error is tied to one.
        position (int): Character offset the error points at; the token start, or
            the end of input for errors raised when input runs out.
    """

    kind: ErrorKind
    message: str
    token: Token | None = None
    position: int = 0

    def __str__(self) -> str:
        return self.message


@dataclass
class SymbolState:
    """Tracks a symbol matched during a parse and the values consumed for it."""

    symbol: Symbol
    token: Token | None = None
    values: list[Token] = field(default_factory=list)

    @property
    def consumed(self) -> int:
        return len(self.values)

    def accepts_more(self) -> bool:
        return self.symbol.argument_rule.accepts_more(self.consumed)

    def is_satisfied(self) -> bool:
        return self.symbol.argument_rule.arity.is_satisfied(self.consumed)

    def is_full(self) -> bool:
        """True if the rule takes values and has reached its maximum."""
        rule = self.symbol.argument_rule
        return bool(rule.maximum) and not self.accepts_more()

    def freeze(self) -> MatchedSymbol:
        return MatchedSymbol(
            symbol=self.symbol,
            token=self.token,
            values=tuple(value.text for value in self.values),
        )


@dataclass(frozen=True)
class MatchedSymbol:
    """A symbol as matched in a `ParseResult`, with its consumed values."""

    symbol: Symbol
    token: Token | None
    values: tuple[str, ...] = ()

    @property
    def accepts_more(self) -> bool:
        return self.symbol.argument_rule.accepts_more(len(self.values))


@dataclass(frozen=True)
class AwaitingSymbol:
    """Engine state: expecting a child symbol or an argument of `command`."""

    command: SymbolState

    @property
    def symbol(self) -> Command:
        assert isinstance(self.command.symbol, Command)
        return self.command.symbol


@dataclass(frozen=True)
class ConsumingArgumentsFor:
    """Engine state: `owner` (an option) is taking values inside `command`."""

    owner: SymbolState
    command: SymbolState

    @property
    def symbol(self) -> Option:
        assert isinstance(self.owner.symbol, Option)
        return self.owner.symbol


ParserState = AwaitingSymbol | ConsumingArgumentsFor
