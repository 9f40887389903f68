# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `TabwiseCompleter`, a Prompt Toolkit completer backed by a Tabwise
`Parser`.

The completer parses the whole buffer, asks the `ParseResult` for suggestions at
the cursor, and replaces the token being typed. Completion is only offered with
the cursor at the end of a token or in whitespace; inside a token nothing is
offered, since a completion cannot replace text after the cursor.
Because suggestions use a containment filter, a candidate does not have to start
with the typed text to be offered.

Example:
    session = PromptSession(completer=TabwiseCompleter(parser))
"""
from __future__ import annotations

import os
from typing import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from tabwise.logger import logger
from tabwise.parser.engine import Parser


class TabwiseCompleter(Completer):
    """
    Prompt Toolkit completer for input described by a Tabwise grammar.

    Args:
        parser (Parser): The parser whose grammar drives completion.
    """

    def __init__(self, parser: Parser):
        self.parser = parser

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        """
        Compute completions for the current buffer and cursor.

        Args:
            document (Document): The current Prompt Toolkit document.
            complete_event: The triggering event, not used here.

        Yields:
            Completion: Suggestions replacing the text typed so far in the
            current token.
        """
        position = document.cursor_position
        result = self.parser.parse(document.text)
        token = result.source.token_at(position)
        if token and position < token.end:
            return
        try:
            suggestions = result.suggestions(position)
        except Exception as error:
            logger.debug("Suggestion lookup failed at %d: %s", position, error)
            return

        stub = document.text[token.start : position] if token else ""
        yield from self._yield_lcp_completions(sorted(suggestions), stub)

    def _yield_lcp_completions(
        self, suggestions: list[str], stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If all matches extend the stub with a longer shared prefix → insert the
            prefix first, but also display all matches in the menu.
        - Otherwise → list all matches individually.

        Args:
            suggestions (list[str]): The filtered suggestions.
            stub (str): The text typed before the cursor in the current token.

        Yields:
            Completion: Completion objects for the Prompt Toolkit menu.
        """
        if not suggestions:
            return

        lcp = os.path.commonprefix(suggestions)
        if (
            len(suggestions) > 1
            and len(lcp) > len(stub)
            and lcp.startswith(stub)
            and not lcp.startswith("-")
        ):
            yield Completion(lcp, start_position=-len(stub), display=lcp)

        for suggestion in suggestions:
            yield Completion(suggestion, start_position=-len(stub), display=suggestion)
