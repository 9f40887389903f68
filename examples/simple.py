"""simple.py"""

from tabwise import Command, Option, Parser, define_arguments

parser = Parser(
    Command(
        "brew",
        "Brew a drink.",
        define_arguments().add_suggestions("tea", "coffee").zero_or_one(),
        Option(["--size", "-s"], "Cup size.", define_arguments().from_among("small", "large")),
        Option("--iced", "Serve cold."),
    )
)

if __name__ == "__main__":
    for line in ["brew ", "brew tea --size ", "brew --size huge"]:
        result = parser.parse(line)
        print(repr(line), sorted(result.suggestions()), [str(e) for e in result.errors])
