# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Cursor-aware suggestion resolution.

Given a `ParseResult` and a cursor position, `suggest()`:
1. takes the text under the cursor (`text_to_match`),
2. re-parses only the tokens that end before the cursor to find the proximate
   symbol as of the cursor, ignoring anything typed after it,
3. asks that symbol for its candidates: child command names and option aliases
   plus the command's own argument suggestions while its rule is open, or only the
   argument suggestions of an option that is still taking values,
4. keeps candidates that contain `text_to_match` anywhere (a containment filter,
   not a prefix filter) and removes duplicates.

Suggestion sources are called synchronously with the original parse result and
position; anything they raise propagates to the caller.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tabwise.logger import logger

if TYPE_CHECKING:
    from tabwise.parser.parse_result import ParseResult


def filter_candidates(candidates: Iterable[str], text_to_match: str) -> set[str]:
    """Return the distinct candidates containing `text_to_match`."""
    return {candidate for candidate in candidates if text_to_match in candidate}


def suggest(parse_result: ParseResult, position: int | None = None) -> set[str]:
    """
    Return the suggestions for `parse_result` at `position`.

    Args:
        parse_result (ParseResult): The parse to complete.
        position (int | None): Cursor offset, defaulting to the end of input.

    Returns:
        set[str]: Unordered, de-duplicated candidates.
    """
    text_to_match = parse_result.text_to_match(position)
    preceding = parse_result.source.tokens_before(position)
    proximate = parse_result.parser.walk(preceding).proximate
    logger.debug(
        "Suggesting for %r at position %s (text_to_match=%r)",
        proximate.symbol,
        position,
        text_to_match,
    )
    candidates = proximate.symbol.candidates(
        parse_result, position, include_arguments=proximate.accepts_more
    )
    return filter_candidates(candidates, text_to_match)
