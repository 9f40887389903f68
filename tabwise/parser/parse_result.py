# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the read-only view over one parse.

A result is created by `Parser.parse()` and never changes afterwards. It keeps a
reference to the parser (and so the grammar) it came from, which lets
`suggestions()` re-parse the tokens before an arbitrary cursor position.

Key Attributes:
- `errors`: ordered `ParseError`s; empty for valid input.
- `resolution_path`: symbols matched from the root down.
- `proximate`: the symbol completions are computed against at end of input.

Key Methods:
- `text_to_match(position=None)`: partial text under the cursor.
- `suggestions(position=None)`: completion candidates at the cursor.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from tabwise.grammar.symbols import Command, Symbol
from tabwise.parser.parser_types import ErrorKind, MatchedSymbol, ParseError
from tabwise.parser.suggestions import suggest
from tabwise.parser.tokenizer import Token, TokenizedInput

if TYPE_CHECKING:
    from tabwise.parser.engine import ParseOutcome, Parser


class ParseResult:
    """
    Result of parsing one input against a grammar.

    Args:
        parser (Parser): The parser that produced the result.
        source (TokenizedInput): The tokenized input.
        outcome (ParseOutcome): Matched symbols, errors and proximate symbol.
    """

    def __init__(self, parser: Parser, source: TokenizedInput, outcome: ParseOutcome):
        self._parser = parser
        self._source = source
        self._matches = outcome.matches
        self._errors = outcome.errors
        self._proximate = outcome.proximate

    @property
    def parser(self) -> Parser:
        return self._parser

    @property
    def source(self) -> TokenizedInput:
        return self._source

    @property
    def tokens(self) -> tuple[Token, ...]:
        return self._source.tokens

    @property
    def errors(self) -> tuple[ParseError, ...]:
        return self._errors

    @property
    def matches(self) -> tuple[MatchedSymbol, ...]:
        """Matched symbols in input order, starting with the root command."""
        return self._matches

    @property
    def resolution_path(self) -> tuple[Symbol, ...]:
        return tuple(match.symbol for match in self._matches)

    @property
    def proximate(self) -> MatchedSymbol:
        """The option still taking values, or else the deepest command."""
        return self._proximate

    @property
    def command(self) -> Command:
        """The deepest command matched."""
        for match in reversed(self._matches):
            if isinstance(match.symbol, Command):
                return match.symbol
        return self._parser.root

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def unmatched_tokens(self) -> tuple[str, ...]:
        return tuple(
            error.token.text
            for error in self._errors
            if error.kind is ErrorKind.UNMATCHED_TOKEN and error.token is not None
        )

    def _matches_for(self, symbol: Symbol | str) -> list[MatchedSymbol]:
        if isinstance(symbol, Symbol):
            return [match for match in self._matches if match.symbol is symbol]
        return [
            match
            for match in self._matches
            if match.symbol is not self._parser.root and match.symbol.has_alias(symbol)
        ]

    def has_symbol(self, symbol: Symbol | str) -> bool:
        """True if `symbol` (or a symbol with that name or alias) was matched."""
        return bool(self._matches_for(symbol))

    def values_for(self, symbol: Symbol | str) -> tuple[str, ...]:
        """
        Return the argument values consumed for a symbol.

        Values from repeated occurrences of the same option are concatenated.
        """
        values: list[str] = []
        for match in self._matches_for(symbol):
            values.extend(match.values)
        return tuple(values)

    def text_to_match(self, position: int | None = None) -> str:
        """
        Return the text of the token under the cursor.

        Args:
            position (int | None): Cursor offset in the raw line. Defaults to the
                end of input. Ignored for pre-split input.

        Returns:
            str: The whole token the cursor touches, or "" in whitespace.
        """
        return self._source.text_to_match(position)

    def suggestions(self, position: int | None = None) -> set[str]:
        """
        Return completion candidates at the cursor.

        Args:
            position (int | None): Cursor offset in the raw line. Defaults to the
                end of input. Ignored for pre-split input.

        Returns:
            set[str]: Unordered candidates containing `text_to_match(position)`.
        """
        return suggest(self, position)

    def __repr__(self) -> str:
        path = " ".join(repr(symbol) for symbol in self.resolution_path[1:])
        return f"ParseResult(path=[{path}], errors={len(self._errors)})"
