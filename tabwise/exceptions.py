# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Tabwise.

These exceptions cover build-time failures only: a grammar that violates its
structural invariants, a misused argument rule builder, or a grammar definition
file that cannot be loaded. Problems found while parsing user input are never
raised; they are collected as `ParseError` values on the `ParseResult`.

All exceptions inherit from `TabwiseError`, the base exception for the package.

Exception Hierarchy:
- TabwiseError
    ├── GrammarError
    │   ├── DuplicateSymbolError
    │   └── ArgumentRuleError
    └── GrammarConfigError
"""


class TabwiseError(Exception):
    """Base exception for Tabwise."""


class GrammarError(TabwiseError):
    """Exception raised when a command or option cannot be built."""


class DuplicateSymbolError(GrammarError):
    """Exception raised when sibling commands or option aliases collide."""


class ArgumentRuleError(GrammarError):
    """Exception raised when an argument rule is configured incorrectly."""


class GrammarConfigError(TabwiseError):
    """Exception raised when a grammar definition file cannot be loaded."""
