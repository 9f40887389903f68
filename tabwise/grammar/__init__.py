"""
Tabwise CLI Grammar

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument_rule import (
    NO_ARGUMENTS,
    ArgumentRule,
    ArgumentRuleBuilder,
    SuggestionSource,
    define_arguments,
)
from .arity import Arity
from .symbols import Command, Option, RootCommand, Symbol

__all__ = [
    "Arity",
    "ArgumentRule",
    "ArgumentRuleBuilder",
    "Command",
    "define_arguments",
    "NO_ARGUMENTS",
    "Option",
    "RootCommand",
    "SuggestionSource",
    "Symbol",
]
