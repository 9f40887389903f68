import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from tabwise.grammar import Command, Option, define_arguments
from tabwise.parser import Parser
from tabwise.validators import GrammarValidator, grammar_validator


@pytest.fixture
def parser():
    return Parser(
        Command(
            "brew",
            "Brew a drink.",
            Option("--size", "Cup size.", define_arguments().from_among("small", "large")),
        )
    )


def test_grammar_validator_accepts_valid_input(parser):
    validator = GrammarValidator(parser)
    validator.validate(Document("brew --size small"))
    validator.validate(Document(""))


def test_grammar_validator_points_at_first_error(parser):
    validator = GrammarValidator(parser)
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document("brew --size huge"))
    assert exc_info.value.cursor_position == len("brew --size ")
    assert "small" in exc_info.value.message


def test_grammar_validator_rejects_empty_when_disallowed():
    validator = GrammarValidator(
        Parser(define_arguments().exactly_one(), Command("brew", "Brew.")),
        allow_empty=False,
    )
    with pytest.raises(ValidationError):
        validator.validate(Document(""))


@pytest.mark.parametrize("invalid", ["tea", "brew --size", "brew extra"])
def test_grammar_validator_rejects_invalid(parser, invalid):
    validator = grammar_validator(parser)
    with pytest.raises(ValidationError) as exc_info:
        validator.validate(Document(invalid))
    assert exc_info.value.message == "Invalid input."


def test_grammar_validator_custom_message(parser):
    validator = grammar_validator(parser, error_message="Nope")
    validator.validate(Document("brew"))
    with pytest.raises(ValidationError, match="Nope"):
        validator.validate(Document("coffee"))
