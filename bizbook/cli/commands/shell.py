# bizbook/cli/commands/shell.py

from bizbook.cli.session import execute_and_echo
from bizbook.config import get_settings
from bizbook.logic.manager import LogicManager


def shell():
    """
    Starts an interactive session. Type `help` for the list of commands, `exit` to quit.
    """
    settings = get_settings()
    logic = LogicManager()

    while True:
        try:
            line = input(settings.prompt)
        except EOFError:
            break
        if not line.strip():
            continue
        result = execute_and_echo(logic, line)
        if result is not None and result.exit:
            break
