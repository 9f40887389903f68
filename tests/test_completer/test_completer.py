import pytest
from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from tabwise.completer import TabwiseCompleter
from tabwise.grammar import Command, Option, define_arguments
from tabwise.parser import Parser


@pytest.fixture
def parser():
    return Parser(
        Command(
            "outer",
            "Outer command.",
            Option(
                "--planet",
                "Pick a planet.",
                define_arguments().from_among("AETHERWARP", "AETHERZOOM", "earth", "mars"),
            ),
            Option("--verbose", "Verbose output."),
            Command("inner", "Inner command."),
        ),
        Command("other", "Other command."),
    )


def texts(completions):
    return [completion.text for completion in completions]


def test_get_completions_no_input(parser):
    completer = TabwiseCompleter(parser)
    results = list(completer.get_completions(Document(""), None))
    assert all(isinstance(c, Completion) for c in results)
    assert texts(results) == ["o", "other", "outer"]


def test_get_completions_replaces_stub(parser):
    completer = TabwiseCompleter(parser)
    results = list(completer.get_completions(Document("outer --v"), None))
    assert texts(results) == ["--verbose"]
    assert results[0].start_position == -len("--v")


def test_get_completions_after_space(parser):
    completer = TabwiseCompleter(parser)
    results = list(completer.get_completions(Document("outer "), None))
    assert set(texts(results)) == {"--planet", "--verbose", "inner"}
    assert all(c.start_position == 0 for c in results)


def test_lcp_completions(parser):
    completer = TabwiseCompleter(parser)
    results = list(completer.get_completions(Document("outer --planet A"), None))
    assert texts(results) == ["AETHER", "AETHERWARP", "AETHERZOOM"]


def test_containment_match_is_offered(parser):
    completer = TabwiseCompleter(parser)
    results = list(completer.get_completions(Document("outer --planet ar"), None))
    assert texts(results) == ["earth", "mars"]
    assert all(c.start_position == -2 for c in results)


def test_cursor_at_end_of_inner_token(parser):
    completer = TabwiseCompleter(parser)
    document = Document("outer in --verbose", cursor_position=len("outer in"))
    results = list(completer.get_completions(document, None))
    assert texts(results) == ["inner"]
    assert results[0].start_position == -2


def test_cursor_inside_token_offers_nothing(parser):
    completer = TabwiseCompleter(parser)
    document = Document("outer in", cursor_position=len("outer i"))
    assert list(completer.get_completions(document, None)) == []


def test_lcp_not_offered_for_options():
    completer = TabwiseCompleter(Parser(Option("--alpha", "A."), Option("--alps", "B.")))
    completions = list(completer._yield_lcp_completions(["--alpha", "--alps"], "--a"))
    assert texts(completions) == ["--alpha", "--alps"]


def test_single_match_is_yielded_once():
    completer = TabwiseCompleter(Parser(Option("--alpha", "A.")))
    completions = list(completer._yield_lcp_completions(["--alpha"], ""))
    assert texts(completions) == ["--alpha"]


def test_failing_source_yields_nothing():
    def source(parse_result, position):
        raise RuntimeError("offline")

    parser = Parser(
        Command("cmd", "Cmd.", define_arguments().add_suggestion_source(source).exactly_one())
    )
    completer = TabwiseCompleter(parser)
    assert list(completer.get_completions(Document("cmd "), None)) == []
