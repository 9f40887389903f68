"""
Tabwise CLI Grammar

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import ParseOutcome, Parser
from .parse_result import ParseResult
from .parser_types import ErrorKind, MatchedSymbol, ParseError
from .suggestions import filter_candidates, suggest
from .tokenizer import Token, TokenizedInput, tokenize, tokenize_args, tokenize_input

__all__ = [
    "ErrorKind",
    "filter_candidates",
    "MatchedSymbol",
    "ParseError",
    "ParseOutcome",
    "ParseResult",
    "Parser",
    "suggest",
    "Token",
    "TokenizedInput",
    "tokenize",
    "tokenize_args",
    "tokenize_input",
]
