import pytest

from tabwise.grammar import Command, Option, define_arguments
from tabwise.parser import Parser, filter_candidates


def test_option_suggest_returns_argument_suggestions():
    option = Option(
        "--hello",
        "",
        define_arguments().add_suggestions("one", "two", "three").exactly_one(),
    )
    assert option.suggest(option.parse("--hello")) == {"one", "two", "three"}


def test_command_suggest_returns_option_aliases():
    command = Command(
        "command",
        "a command",
        Option("--one", "option one"),
        Option("--two", "option two"),
        Option("--three", "option three"),
    )
    assert command.suggest(command.parse("command ")) == {"--one", "--two", "--three"}


def test_command_suggestions_list_option_aliases():
    command = Command(
        "command",
        "a command",
        Option("--one", "option one"),
        Option("--two", "option two"),
        Option("--three", "option three"),
    )
    assert command.parse("command ").suggestions() == {"--one", "--two", "--three"}


def test_command_suggestions_list_subcommands():
    command = Command(
        "command",
        "a command",
        Command("one", "subcommand one"),
        Command("two", "subcommand two"),
        Command("three", "subcommand three"),
    )
    assert command.parse("command ").suggestions() == {"one", "two", "three"}


def test_subcommands_options_and_argument_suggestions_are_combined():
    command = Command(
        "command",
        "a command",
        define_arguments().add_suggestions("command-argument").one_or_more(),
        Command("subcommand", "subcommand"),
        Option("--option", "option"),
    )
    assert command.parse("command ").suggestions() == {
        "subcommand",
        "--option",
        "command-argument",
    }


def test_hidden_option_is_not_suggested():
    command = Command(
        "the-command",
        "Does things.",
        Option("--hide-me", ""),
        Option("-n", "Not hidden"),
    )
    suggestions = command.parse("the-command ").suggestions()
    assert "--hide-me" not in suggestions
    assert suggestions == {"-n"}


def test_hidden_symbols_never_appear_even_when_text_matches():
    command = Command(
        "outer",
        "",
        Command("visible", "Shown."),
        Command("invisible", ""),
        Option("--visible-flag", "Shown."),
        Option("--invisible-flag", ""),
    )
    assert command.parse("outer vis").suggestions() == {"visible", "--visible-flag"}
    assert command.parse("outer invis").suggestions() == set()


def test_option_parser_suggestions_follow_the_proximate_option():
    parser = Parser(
        Option("--bread", "", define_arguments().from_among("wheat", "sourdough", "rye")),
        Option(
            "--cheese",
            "",
            define_arguments().from_among("provolone", "cheddar", "cream cheese"),
        ),
    )
    assert parser.parse("--bread ").suggestions() == {"rye", "sourdough", "wheat"}
    assert parser.parse("--bread wheat --cheese ").suggestions() == {
        "cheddar",
        "cream cheese",
        "provolone",
    }


def test_command_argument_rule_without_suggestions_offers_children():
    command = Command(
        "test",
        "",
        define_arguments().exactly_one(),
        Command("one", "Command one"),
        Command("two", "Command two"),
    )
    assert command.parse("test ").suggestions() == {"one", "two"}


def test_subcommands_and_options_with_same_stem():
    command = Command(
        "test",
        "",
        define_arguments().exactly_one(),
        Command("one", "Command one"),
        Option("--one", "Option one"),
    )
    assert command.parse("test ").suggestions() == {"one", "--one"}


def test_full_command_rule_stops_offering_argument_suggestions():
    command = Command(
        "test",
        "",
        define_arguments().add_suggestions("arg-a", "arg-b").exactly_one(),
        Option("--flag", "Flag."),
    )
    assert command.parse("test ").suggestions() == {"arg-a", "arg-b", "--flag"}
    assert command.parse("test arg-a ").suggestions() == {"--flag"}


def test_options_suggested_at_the_proximate_command():
    parser = Parser(
        Command(
            "outer",
            "",
            Option("--one", "Option one"),
            Option("--two", "Option two"),
            Option("--three", "Option three"),
        )
    )
    assert parser.parse("outer ").suggestions() == {"--one", "--two", "--three"}


def test_argument_suggestions_follow_the_proximate_option():
    parser = Parser(
        Command(
            "outer",
            "",
            Option("--one", "", define_arguments().from_among("one-a", "one-b")),
            Option("--two", "", define_arguments().from_among("two-a", "two-b")),
        )
    )
    assert parser.parse("outer --two ").suggestions() == {"two-a", "two-b"}
    assert parser.parse("outer --one ").suggestions() == {"one-a", "one-b"}


def test_subcommand_suggestions_use_partial_input():
    parser = Parser(
        Command(
            "outer",
            "",
            Command("one", "Command one"),
            Command("two", "Command two"),
            Command("three", "Command three"),
        )
    )
    assert parser.parse("outer o").suggestions() == {"one", "two"}


def test_suggestions_without_validation():
    command = Command(
        "the-command",
        "",
        Option(
            "-t",
            "",
            define_arguments()
            .add_suggestions("vegetable", "mineral", "animal")
            .exactly_one(),
        ),
    )
    assert command.parse("the-command -t m").suggestions() == {"animal", "mineral"}
    assert command.parse("the-command -t something-else").errors == ()


def test_constrained_rule_rejects_values_outside_the_list():
    command = Command(
        "the-command",
        "",
        Option("-t", "", define_arguments().from_among("vegetable", "mineral", "animal")),
    )
    assert command.parse("the-command -t mineral").errors == ()
    errors = command.parse("the-command -t something-else").errors
    assert [error.kind.value for error in errors] == ["value_not_in_allowed_set"]


def test_suggestions_from_a_source():
    command = Command(
        "the-command",
        "",
        Command(
            "one",
            "",
            define_arguments()
            .add_suggestion_source(
                lambda parse_result, position: ["vegetable", "mineral", "animal"]
            )
            .exactly_one(),
        ),
    )
    assert command.parse("the-command one m").suggestions() == {"animal", "mineral"}


def test_suggestion_source_receives_result_and_position():
    calls = []

    def source(parse_result, position):
        calls.append((parse_result, position))
        return ["alpha", "beta", "alpha"]

    command = Command(
        "cmd",
        "",
        define_arguments()
        .add_suggestions("beta", "gamma")
        .add_suggestion_source(source)
        .zero_or_more(),
    )
    result = command.parse("cmd  x")
    assert result.suggestions(4) == {"alpha", "beta", "gamma"}
    assert calls == [(result, 4)]


def test_suggestion_source_is_lazy():
    calls = []

    def source(parse_result, position):
        calls.append(position)
        return []

    command = Command(
        "cmd", "", define_arguments().add_suggestion_source(source).exactly_one()
    )
    result = command.parse("cmd ")
    assert calls == []
    result.suggestions()
    assert calls == [None]


def test_suggestion_source_errors_propagate():
    def source(parse_result, position):
        raise RuntimeError("backend unavailable")

    command = Command(
        "cmd", "", define_arguments().add_suggestion_source(source).zero_or_one()
    )
    result = command.parse("cmd ")
    assert result.errors == ()
    with pytest.raises(RuntimeError, match="backend unavailable"):
        result.suggestions()


@pytest.fixture
def outer_with_options():
    return Parser(
        Command(
            "outer",
            "",
            Option("one", "", define_arguments().from_among("one-a", "one-b", "one-c")),
            Option("two", "", define_arguments().from_among("two-a", "two-b", "two-c")),
            Option(
                "three", "", define_arguments().from_among("three-a", "three-b", "three-c")
            ),
        )
    )


@pytest.fixture
def outer_with_commands():
    return Parser(
        Command(
            "outer",
            "",
            Command("one", "", define_arguments().from_among("one-a", "one-b", "one-c")),
            Command("two", "", define_arguments().from_among("two-a", "two-b", "two-c")),
            Command(
                "three", "", define_arguments().from_among("three-a", "three-b", "three-c")
            ),
        )
    )


@pytest.mark.parametrize("line", [["outer", "two", "b"], "outer two b"])
def test_argument_suggestions_for_proximate_option(outer_with_options, line):
    assert outer_with_options.parse(line).suggestions() == {"two-b"}


@pytest.mark.parametrize("line", [["outer", "two", "b"], "outer two b"])
def test_argument_suggestions_for_proximate_command(outer_with_commands, line):
    assert outer_with_commands.parse(line).suggestions() == {"two-b"}


def test_pre_tokenized_trailing_blank(outer_with_options):
    assert outer_with_options.parse(["outer", "two", ""]).suggestions() == {
        "two-a",
        "two-b",
        "two-c",
    }


def test_suggestions_ignore_tokens_after_the_cursor():
    parser = Parser(
        Command(
            "outer",
            "",
            Option(
                "--one", "Option one.", define_arguments().from_among("one-a", "one-b")
            ),
            Option("--two", "Option two."),
            Command("inner", "Inner."),
        )
    )
    line = "outer --one  --two"
    assert parser.parse(line).suggestions(12) == {"one-a", "one-b"}
    assert parser.parse(line).suggestions(6) == {"--one"}
    assert parser.parse("outer --one one-a --tw").suggestions() == {"--two"}
    assert parser.parse("outer  --one one-a").suggestions(6) == {
        "--one",
        "--two",
        "inner",
    }
    assert parser.parse("outer inner --two").suggestions(12) == set()


def test_suggestions_at_mid_token_cursor_use_whole_token():
    parser = Parser(
        Command("outer", "", Command("install", "Install."), Command("list", "List."))
    )
    assert parser.parse("outer inst").suggestions(8) == {"install"}


def test_suggestions_on_invalid_input():
    command = Command(
        "outer",
        "",
        Option("--one", "Option one."),
        Command("inner", "Inner."),
    )
    result = command.parse("outer bogus ")
    assert result.errors != ()
    assert result.suggestions() == {"--one", "inner"}


def test_suggestions_at_start_of_input():
    parser = Parser(Command("outer", "Outer."), Command("other", "Other."), Command("hidden", ""))
    assert parser.parse("").suggestions() == {"outer", "other"}
    assert parser.parse("ot").suggestions() == {"other"}


def test_containment_filter():
    assert filter_candidates(["vegetable", "mineral", "animal"], "m") == {
        "mineral",
        "animal",
    }
    assert filter_candidates(["a", "b", "a"], "") == {"a", "b"}
    assert filter_candidates(["Mineral"], "m") == set()


def test_suggestions_are_deduplicated():
    command = Command(
        "cmd",
        "",
        define_arguments()
        .add_suggestions("same")
        .add_suggestion_source(lambda parse_result, position: ["same", "same"])
        .exactly_one(),
        Command("same", "Also same."),
    )
    assert command.parse("cmd ").suggestions() == {"same"}
