"""config_loading.py"""

from prompt_toolkit import PromptSession

from tabwise.completer import TabwiseCompleter
from tabwise.config import loader
from tabwise.validators import GrammarValidator

parser = loader("tabwise.yaml")

if __name__ == "__main__":
    session = PromptSession(
        "deploy-tool > ",
        completer=TabwiseCompleter(parser),
        validator=GrammarValidator(parser),
        validate_while_typing=False,
    )
    line = session.prompt()
    print(parser.parse(line).resolution_path)
