# Tabwise CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Grammar definition loader for Tabwise.

Builds a `Parser` from a declarative YAML or TOML document:

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

Dynamic suggestion sources are referenced by dotted import path.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from tabwise.exceptions import GrammarConfigError
from tabwise.grammar.argument_rule import ArgumentRuleBuilder, SuggestionSource
from tabwise.grammar.arity import Arity
from tabwise.grammar.symbols import Command, Option
from tabwise.logger import logger
from tabwise.parser.engine import Parser

MAX_COMMAND_DEPTH = 16


def import_callable(dotted_path: str) -> SuggestionSource:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise GrammarConfigError(f"Invalid suggestion source path: {dotted_path}")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise GrammarConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        source = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise GrammarConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(source):
        raise GrammarConfigError(f"Suggestion source '{dotted_path}' is not callable")
    return source


class RawArgumentRule(BaseModel):
    """Raw argument rule model for Tabwise grammar definitions."""

    arity: Arity | None = None
    from_among: list[str] | None = None
    suggestions: list[str] = Field(default_factory=list)
    suggestion_source: str | None = None

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> Arity | None:
        if value is None or isinstance(value, Arity):
            return value
        return Arity(str(value))

    def to_builder(self) -> ArgumentRuleBuilder:
        builder = ArgumentRuleBuilder()
        if self.from_among is not None:
            builder.from_among(*self.from_among)
        if self.suggestions:
            builder.add_suggestions(*self.suggestions)
        if self.suggestion_source:
            builder.add_suggestion_source(import_callable(self.suggestion_source))
        if self.arity is not None:
            getattr(builder, self.arity.value)()
        return builder


class RawOption(BaseModel):
    """Raw option model for Tabwise grammar definitions."""

    aliases: list[str]
    help: str = ""
    arguments: RawArgumentRule | None = None

    @field_validator("aliases", mode="before")
    @classmethod
    def validate_aliases(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    def to_option(self) -> Option:
        return Option(
            self.aliases,
            self.help,
            self.arguments.to_builder() if self.arguments else None,
        )


class RawCommand(BaseModel):
    """Raw command model for Tabwise grammar definitions."""

    name: str
    help: str = ""
    arguments: RawArgumentRule | None = None
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_command(self, depth: int = 0) -> Command:
        if depth > MAX_COMMAND_DEPTH:
            raise GrammarConfigError(
                f"Maximum command depth exceeded ({MAX_COMMAND_DEPTH} levels deep)"
            )
        children: list[Any] = [option.to_option() for option in self.options]
        children.extend(command.to_command(depth + 1) for command in self.commands)
        if self.arguments:
            children.append(self.arguments.to_builder())
        return Command(self.name, self.help, *children)


RawCommand.model_rebuild()


class GrammarConfig(BaseModel):
    """Tabwise grammar definition model."""

    title: str = "Tabwise"
    arguments: RawArgumentRule | None = None
    options: list[RawOption] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_not_empty(self) -> GrammarConfig:
        if not self.options and not self.commands:
            raise ValueError("A grammar needs at least one command or option")
        return self

    def to_parser(self) -> Parser:
        symbols: list[Any] = [option.to_option() for option in self.options]
        symbols.extend(command.to_command() for command in self.commands)
        if self.arguments:
            symbols.append(self.arguments.to_builder())
        parser = Parser(*symbols)
        logger.debug("Loaded grammar '%s': %r", self.title, parser)
        return parser


def load_config(file_path: Path | str) -> GrammarConfig:
    """
    Read and validate a grammar definition without building it.

    Raises:
        FileNotFoundError: If the file does not exist.
        GrammarConfigError: If the file format is unsupported or its content is
            not a valid grammar definition.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise GrammarConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise GrammarConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise GrammarConfigError(
            "Grammar file must contain a mapping with commands and/or options.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'deploy'\n"
            "    help: 'Deploy a service'"
        )

    try:
        return GrammarConfig.model_validate(raw_config)
    except ValidationError as error:
        raise GrammarConfigError(f"Invalid grammar definition in {path}: {error}") from error


def loader(file_path: Path | str) -> Parser:
    """
    Load a grammar definition from a YAML or TOML file and build its `Parser`.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        Parser: A parser for the defined grammar.
    """
    return load_config(file_path).to_parser()
