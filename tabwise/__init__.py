"""
Tabwise CLI Grammar

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .grammar import (
    NO_ARGUMENTS,
    ArgumentRule,
    ArgumentRuleBuilder,
    Arity,
    Command,
    Option,
    define_arguments,
)
from .parser import ErrorKind, ParseError, ParseResult, Parser

logger = logging.getLogger("tabwise")


__all__ = [
    "ArgumentRule",
    "ArgumentRuleBuilder",
    "Arity",
    "Command",
    "define_arguments",
    "ErrorKind",
    "NO_ARGUMENTS",
    "Option",
    "ParseError",
    "ParseResult",
    "Parser",
]
