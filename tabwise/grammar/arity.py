# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, the enum describing how many argument tokens a command or
option accepts.

Each member maps to an inclusive `[minimum, maximum]` range of tokens, with
`maximum` set to `None` for the unbounded variants. Config-friendly aliases
mirror the familiar `nargs` spellings.

Example:
    Arity("exactly_one") → Arity.EXACTLY_ONE
    Arity("?")           → Arity.ZERO_OR_ONE (via alias)
    Arity("+")           → Arity.ONE_OR_MORE (via alias)
"""
from __future__ import annotations

from enum import Enum


class Arity(Enum):
    """
    Number of argument tokens accepted by an `ArgumentRule`.

    Members:
        NONE: No argument tokens, `[0, 0]`.
        EXACTLY_ONE: A single required token, `[1, 1]`.
        ZERO_OR_ONE: An optional token, `[0, 1]`.
        ZERO_OR_MORE: Any number of tokens, `[0, ∞)`.
        ONE_OR_MORE: At least one token, `[1, ∞)`.

    Aliases:
        - "0" → "none"
        - "1" → "exactly_one"
        - "?" → "zero_or_one"
        - "*" → "zero_or_more"
        - "+" → "one_or_more"
    """

    NONE = "none"
    EXACTLY_ONE = "exactly_one"
    ZERO_OR_ONE = "zero_or_one"
    ZERO_OR_MORE = "zero_or_more"
    ONE_OR_MORE = "one_or_more"

    @classmethod
    def choices(cls) -> list[Arity]:
        """Return a list of all arities."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "0": "none",
            "1": "exactly_one",
            "?": "zero_or_one",
            "*": "zero_or_more",
            "+": "one_or_more",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def minimum(self) -> int:
        return 1 if self in (Arity.EXACTLY_ONE, Arity.ONE_OR_MORE) else 0

    @property
    def maximum(self) -> int | None:
        """Upper bound on argument tokens, or None when unbounded."""
        if self is Arity.NONE:
            return 0
        if self in (Arity.EXACTLY_ONE, Arity.ZERO_OR_ONE):
            return 1
        return None

    def accepts_more(self, consumed: int) -> bool:
        """Return True if another token can be consumed after `consumed` tokens."""
        return self.maximum is None or consumed < self.maximum

    def is_satisfied(self, consumed: int) -> bool:
        return consumed >= self.minimum

    def __str__(self) -> str:
        """Return the string representation of the arity."""
        return self.value
