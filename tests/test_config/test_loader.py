import textwrap

import pytest
import yaml

from tabwise.config import (
    MAX_COMMAND_DEPTH,
    GrammarConfig,
    import_callable,
    load_config,
    loader,
)
from tabwise.exceptions import DuplicateSymbolError, GrammarConfigError
from tabwise.grammar import Arity
from tabwise.parser import ErrorKind

YAML_GRAMMAR = textwrap.dedent(
    """
    title: deploy tool
    commands:
      - name: deploy
        help: Deploy a service.
        arguments:
          arity: exactly_one
          suggestions: [web, api]
        options:
          - aliases: ["--region", "-r"]
            help: Target region.
            arguments:
              from_among: [us-east-1, eu-west-1]
          - aliases: --verbose
            help: Verbose output.
        commands:
          - name: status
            help: Show status.
    """
)

TOML_GRAMMAR = textwrap.dedent(
    """
    title = "brew"

    [[commands]]
    name = "brew"
    help = "Brew a drink."
    arguments = { arity = "?", suggestions = ["tea", "coffee"] }

    [[commands.options]]
    aliases = ["--size", "-s"]
    help = "Cup size."
    arguments = { from_among = ["small", "large"] }
    """
)


def write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="UTF-8")
    return path


def test_load_yaml_grammar(tmp_path):
    parser = loader(write(tmp_path, "tabwise.yaml", YAML_GRAMMAR))
    result = parser.parse("deploy web -r eu-west-1 --verbose")
    assert result.errors == ()
    assert result.values_for("--region") == ("eu-west-1",)
    assert parser.parse("deploy ").suggestions() == {
        "web",
        "api",
        "--region",
        "-r",
        "--verbose",
        "status",
    }


def test_load_yaml_grammar_keeps_constraints(tmp_path):
    parser = loader(write(tmp_path, "tabwise.yml", YAML_GRAMMAR))
    result = parser.parse("deploy web --region mars")
    assert [error.kind for error in result.errors] == [ErrorKind.VALUE_NOT_IN_ALLOWED_SET]


def test_load_toml_grammar(tmp_path):
    parser = loader(write(tmp_path, "tabwise.toml", TOML_GRAMMAR))
    assert parser.parse("brew").errors == ()
    assert parser.parse("brew tea -s large").errors == ()
    assert parser.parse("brew -s ").suggestions() == {"small", "large"}


def test_load_config_returns_model(tmp_path):
    config = load_config(write(tmp_path, "tabwise.yaml", YAML_GRAMMAR))
    assert isinstance(config, GrammarConfig)
    assert config.title == "deploy tool"
    deploy = config.commands[0]
    assert deploy.arguments.arity is Arity.EXACTLY_ONE
    assert deploy.options[1].aliases == ["--verbose"]


def test_root_level_options_and_arguments(tmp_path):
    path = write(
        tmp_path,
        "tabwise.yaml",
        textwrap.dedent(
            """
            arguments:
              arity: "*"
            options:
              - aliases: --bread
                help: Bread.
                arguments:
                  from_among: [wheat, rye]
            """
        ),
    )
    parser = loader(path)
    result = parser.parse("a --bread rye b")
    assert result.errors == ()
    assert result.values_for(parser.root) == ("a", "b")


def test_suggestion_source_by_dotted_path(tmp_path, monkeypatch):
    write(
        tmp_path,
        "grammar_sources.py",
        "def planets(parse_result, position):\n    return ['mercury', 'mars']\n",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    path = write(
        tmp_path,
        "tabwise.yaml",
        textwrap.dedent(
            """
            commands:
              - name: visit
                help: Visit a planet.
                arguments:
                  arity: exactly_one
                  suggestion_source: grammar_sources.planets
            """
        ),
    )
    assert loader(path).parse("visit m").suggestions() == {"mercury", "mars"}


@pytest.mark.parametrize(
    "dotted_path",
    ["no_dots", "tabwise_missing_module.source", "tabwise.config.missing_attr"],
)
def test_import_callable_errors(dotted_path):
    with pytest.raises(GrammarConfigError):
        import_callable(dotted_path)


def test_import_callable_rejects_non_callables():
    with pytest.raises(GrammarConfigError, match="not callable"):
        import_callable("tabwise.config.MAX_COMMAND_DEPTH")


def test_unsupported_suffix(tmp_path):
    with pytest.raises(GrammarConfigError, match="Unsupported config format"):
        load_config(write(tmp_path, "tabwise.json", "{}"))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_bad_path_type():
    with pytest.raises(TypeError):
        load_config(42)


def test_document_must_be_a_mapping(tmp_path):
    with pytest.raises(GrammarConfigError, match="must contain a mapping"):
        load_config(write(tmp_path, "tabwise.yaml", "- just\n- a list\n"))


def test_malformed_yaml(tmp_path):
    with pytest.raises(GrammarConfigError, match="Could not parse"):
        load_config(write(tmp_path, "tabwise.yaml", "commands: [unclosed\n"))


def test_malformed_toml(tmp_path):
    with pytest.raises(GrammarConfigError, match="Could not parse"):
        load_config(write(tmp_path, "tabwise.toml", "title = \n"))


def test_empty_grammar_is_invalid(tmp_path):
    with pytest.raises(GrammarConfigError, match="at least one command or option"):
        load_config(write(tmp_path, "tabwise.yaml", "title: empty\n"))


def test_unknown_arity_is_invalid(tmp_path):
    content = "commands:\n  - name: x\n    help: X.\n    arguments:\n      arity: lots\n"
    with pytest.raises(GrammarConfigError, match="Invalid grammar definition"):
        load_config(write(tmp_path, "tabwise.yaml", content))


def test_duplicate_symbols_are_reported(tmp_path):
    content = "commands:\n  - name: x\n    help: X.\n  - name: x\n    help: Again.\n"
    with pytest.raises(DuplicateSymbolError):
        loader(write(tmp_path, "tabwise.yaml", content))


def test_command_depth_limit(tmp_path):
    command = {"name": "leaf", "help": "Leaf."}
    for depth in range(MAX_COMMAND_DEPTH + 2):
        command = {"name": f"level{depth}", "help": "Level.", "commands": [command]}
    path = write(tmp_path, "tabwise.yaml", yaml.safe_dump({"commands": [command]}))
    with pytest.raises(GrammarConfigError, match="Maximum command depth"):
        loader(path)
