# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits input into `Token`s and answers cursor questions about them.

Two kinds of input are supported:
- A raw line, split into maximal runs of non-whitespace. Each token remembers its
  `[start, end]` character offsets so a cursor position can be mapped back to the
  token under it.
- A pre-split sequence of strings (argv style). Offsets are synthesized and carry
  no meaning, so cursor positions are ignored and the last element is treated as
  the word being completed. A trailing empty string stands for "the cursor is
  after whitespace", which is how shells hand over an empty current word.

`TokenizedInput` bundles the tokens with enough of the source to answer
`text_to_match()` and `tokens_before()`.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

_TOKEN_PATTERN = re.compile(r"\S+")


@dataclass(frozen=True)
class Token:
    """A token and its character offsets in the source line."""

    text: str
    start: int
    end: int

    def touches(self, position: int) -> bool:
        """True if `position` is inside the token or on either edge of it."""
        return self.start <= position <= self.end

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TokenizedInput:
    """
    Tokens plus the source they came from.

    Attributes:
        tokens (tuple[Token, ...]): Parse tokens in order.
        line (str | None): The raw line, or None for pre-split input.
        trailing_blank (bool): For pre-split input, whether the caller ended the
            sequence with an empty string.
    """

    tokens: tuple[Token, ...]
    line: str | None = None
    trailing_blank: bool = False

    @property
    def is_pre_tokenized(self) -> bool:
        return self.line is None

    @property
    def end(self) -> int:
        """Offset of the end of input."""
        if self.line is not None:
            return len(self.line)
        return self.tokens[-1].end if self.tokens else 0

    def _clamp(self, position: int | None) -> int:
        if position is None or self.line is None:
            return self.end
        return max(0, min(position, len(self.line)))

    def token_at(self, position: int | None = None) -> Token | None:
        """
        Return the token under the cursor, or None if the cursor is in whitespace.

        For pre-split input this is always the last token, unless the input ended
        with an empty string.
        """
        if self.line is None:
            if self.trailing_blank or not self.tokens:
                return None
            return self.tokens[-1]
        position = self._clamp(position)
        for token in self.tokens:
            if token.touches(position):
                return token
            if token.start > position:
                break
        return None

    def text_to_match(self, position: int | None = None) -> str:
        """Return the text of the token under the cursor, or "" in whitespace."""
        token = self.token_at(position)
        return token.text if token else ""

    def tokens_before(self, position: int | None = None) -> tuple[Token, ...]:
        """Return the tokens that end strictly before the cursor."""
        if self.line is None:
            if self.trailing_blank:
                return self.tokens
            return self.tokens[:-1]
        position = self._clamp(position)
        return tuple(token for token in self.tokens if token.end < position)


def tokenize(line: str) -> TokenizedInput:
    """Split a raw line on whitespace, keeping character offsets."""
    if not isinstance(line, str):
        raise TypeError(f"line must be a string, got {type(line).__name__}")
    tokens = tuple(
        Token(match.group(), match.start(), match.end())
        for match in _TOKEN_PATTERN.finditer(line)
    )
    return TokenizedInput(tokens=tokens, line=line)


def tokenize_args(args: Sequence[str]) -> TokenizedInput:
    """
    Wrap a caller-split sequence of strings.

    Empty strings are dropped from the parse tokens; a trailing one is remembered
    as `trailing_blank`. Each token gets the zero-length offset of its index.
    """
    if isinstance(args, str):
        raise TypeError("tokenize_args() expects a sequence of strings, not a string")
    tokens = []
    for index, arg in enumerate(args):
        if not isinstance(arg, str):
            raise TypeError(f"Tokens must be strings, got {arg!r}")
        if arg:
            tokens.append(Token(arg, index, index))
    trailing_blank = bool(args) and args[-1] == ""
    return TokenizedInput(tokens=tuple(tokens), line=None, trailing_blank=trailing_blank)


def tokenize_input(line_or_tokens: str | Sequence[str]) -> TokenizedInput:
    """Dispatch to `tokenize()` or `tokenize_args()` based on the input type."""
    if isinstance(line_or_tokens, str):
        return tokenize(line_or_tokens)
    return tokenize_args(line_or_tokens)
