# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for Prompt Toolkit sessions driven by a Tabwise grammar.

Included Validators:
- GrammarValidator: Rejects input with parse errors, pointing the cursor at the
  first error.
- grammar_validator: Callable-based variant with a fixed error message.
"""
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from tabwise.parser.engine import Parser


class GrammarValidator(Validator):
    """
    Validate the whole buffer against a grammar.

    Args:
        parser (Parser): The parser to validate with.
        allow_empty (bool): Accept an empty buffer without parsing it.
    """

    def __init__(self, parser: Parser, allow_empty: bool = True) -> None:
        self.parser = parser
        self.allow_empty = allow_empty
        super().__init__()

    def validate(self, document: Document) -> None:
        if self.allow_empty and not document.text.strip():
            return
        result = self.parser.parse(document.text)
        if result.errors:
            error = result.errors[0]
            raise ValidationError(cursor_position=error.position, message=error.message)


def grammar_validator(parser: Parser, error_message: str | None = None) -> Validator:
    """Validator accepting only input that parses without errors."""

    def validate(text: str) -> bool:
        return parser.parse(text).is_valid

    if error_message is None:
        error_message = "Invalid input."

    return Validator.from_callable(validate, error_message=error_message)
