# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentRule`, the frozen description of the argument tokens a command
or option accepts, and `ArgumentRuleBuilder`, the fluent interface used to
assemble one.

A rule combines three independent concerns:
- `arity`: how many tokens are accepted (see `Arity`).
- `allowed_values`: an optional closed set. When present, values outside it are
  reported as `VALUE_NOT_IN_ALLOWED_SET` errors ("constrained" mode).
- suggestions: a static list and/or a `suggestion_source` callable. These only
  feed completion and never reject input ("suggest without constrain" mode).

Example:
    rule = (
        ArgumentRuleBuilder()
        .from_among("wheat", "sourdough", "rye")
        .build()
    )
    rule.arity            → Arity.EXACTLY_ONE
    rule.is_allowed("rye") → True

    free_form = define_arguments().add_suggestions("latest", "stable").exactly_one()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

from tabwise.exceptions import ArgumentRuleError
from tabwise.grammar.arity import Arity
from tabwise.logger import logger

if TYPE_CHECKING:
    from tabwise.parser.parse_result import ParseResult

SuggestionSource = Callable[["ParseResult", "int | None"], Iterable[str]]


@dataclass(frozen=True)
class ArgumentRule:
    """
    Immutable argument rule owned by a single `Command` or `Option`.

    Attributes:
        arity (Arity): Accepted token count range.
        allowed_values (tuple[str, ...] | None): Closed value set, or None when
            any value is accepted.
        suggestions (tuple[str, ...]): Static completion candidates.
        suggestion_source (SuggestionSource | None): Callable invoked lazily with
            `(parse_result, position)` when suggestions are requested.
    """

    arity: Arity = Arity.NONE
    allowed_values: tuple[str, ...] | None = None
    suggestions: tuple[str, ...] = ()
    suggestion_source: SuggestionSource | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.arity, Arity):
            raise ArgumentRuleError(f"arity must be an Arity, got {self.arity!r}")
        if self.allowed_values is not None and not self.allowed_values:
            raise ArgumentRuleError("allowed_values cannot be empty")
        if self.suggestion_source is not None and not callable(self.suggestion_source):
            raise ArgumentRuleError("suggestion_source must be callable")

    @property
    def minimum(self) -> int:
        return self.arity.minimum

    @property
    def maximum(self) -> int | None:
        return self.arity.maximum

    @property
    def is_constrained(self) -> bool:
        """True if values are validated against `allowed_values`."""
        return self.allowed_values is not None

    def accepts_more(self, consumed: int) -> bool:
        return self.arity.accepts_more(consumed)

    def is_allowed(self, value: str) -> bool:
        """Return True if `value` passes the allowed-value check."""
        if self.allowed_values is None:
            return True
        return value in self.allowed_values

    def suggest(self, parse_result: ParseResult, position: int | None = None) -> list[str]:
        """
        Return the static suggestions followed by the suggestion source's output.

        The source is called synchronously; anything it raises propagates to the
        caller.
        """
        suggestions = list(self.suggestions)
        if self.suggestion_source is not None:
            logger.debug(
                "Calling suggestion source %r (position=%s)",
                self.suggestion_source,
                position,
            )
            suggestions.extend(
                str(value) for value in self.suggestion_source(parse_result, position)
            )
        return suggestions

    def __str__(self) -> str:
        if self.allowed_values is not None:
            return f"{self.arity}{{{','.join(self.allowed_values)}}}"
        return str(self.arity)


NO_ARGUMENTS = ArgumentRule()


class ArgumentRuleBuilder:
    """
    Fluent builder for `ArgumentRule`.

    Every configuration method returns the builder itself so calls can be chained.
    The builder is consumed by `build()`: once built, further configuration raises
    `ArgumentRuleError` and repeated `build()` calls return the same rule.

    `Command` and `Option` accept a builder directly and build it on construction.
    """

    def __init__(self) -> None:
        self._arity: Arity | None = None
        self._allowed_values: tuple[str, ...] | None = None
        self._suggestions: list[str] = []
        self._suggestion_source: SuggestionSource | None = None
        self._rule: ArgumentRule | None = None

    def _ensure_open(self) -> None:
        if self._rule is not None:
            raise ArgumentRuleError("ArgumentRuleBuilder has already been built")

    def _set_arity(self, arity: Arity) -> ArgumentRuleBuilder:
        self._ensure_open()
        self._arity = arity
        return self

    def none(self) -> ArgumentRuleBuilder:
        return self._set_arity(Arity.NONE)

    def exactly_one(self) -> ArgumentRuleBuilder:
        return self._set_arity(Arity.EXACTLY_ONE)

    def zero_or_one(self) -> ArgumentRuleBuilder:
        return self._set_arity(Arity.ZERO_OR_ONE)

    def zero_or_more(self) -> ArgumentRuleBuilder:
        return self._set_arity(Arity.ZERO_OR_MORE)

    def one_or_more(self) -> ArgumentRuleBuilder:
        return self._set_arity(Arity.ONE_OR_MORE)

    def from_among(self, *values: str) -> ArgumentRuleBuilder:
        """
        Constrain values to `values`.

        Implies `exactly_one()` unless an arity is set explicitly, and uses the
        values as suggestions unless a suggestion source is installed.
        """
        self._ensure_open()
        if not values:
            raise ArgumentRuleError("from_among() requires at least one value")
        self._allowed_values = tuple(dict.fromkeys(self._validate_values(values)))
        return self

    def add_suggestions(self, *values: str) -> ArgumentRuleBuilder:
        """Extend the static suggestion list without constraining input."""
        self._ensure_open()
        self._suggestions.extend(self._validate_values(values))
        return self

    def add_suggestion_source(self, source: SuggestionSource) -> ArgumentRuleBuilder:
        """Install a callable producing suggestions from `(parse_result, position)`."""
        self._ensure_open()
        if not callable(source):
            raise ArgumentRuleError("suggestion source must be callable")
        self._suggestion_source = source
        return self

    @staticmethod
    def _validate_values(values: Iterable[str]) -> list[str]:
        checked = []
        for value in values:
            if not isinstance(value, str):
                raise ArgumentRuleError(f"Argument values must be strings, got {value!r}")
            checked.append(value)
        return checked

    def build(self) -> ArgumentRule:
        """Freeze the builder into an `ArgumentRule`."""
        if self._rule is not None:
            return self._rule

        arity = self._arity
        if arity is None:
            arity = Arity.EXACTLY_ONE if self._allowed_values else Arity.NONE

        suggestions: list[str] = []
        if self._allowed_values and self._suggestion_source is None:
            suggestions.extend(self._allowed_values)
        suggestions.extend(self._suggestions)

        self._rule = ArgumentRule(
            arity=arity,
            allowed_values=self._allowed_values,
            suggestions=tuple(dict.fromkeys(suggestions)),
            suggestion_source=self._suggestion_source,
        )
        logger.debug("Built argument rule: %s", self._rule)
        return self._rule


def define_arguments() -> ArgumentRuleBuilder:
    """Return a new `ArgumentRuleBuilder`."""
    return ArgumentRuleBuilder()
