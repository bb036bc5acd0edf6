# bizbook/cli/commands/run.py

from typing import List

import typer

from bizbook.cli.session import execute_and_echo
from bizbook.logic.manager import LogicManager


def run(
    lines: List[str] = typer.Argument(..., help="Command lines to execute, in order"),
    strict: bool = typer.Option(False, "--strict", help="Stop with exit code 1 at the first failing line"),
):
    """
    Executes each argument as one line of input against a fresh, empty book.
    """
    logic = LogicManager()
    for line in lines:
        result = execute_and_echo(logic, line)
        if result is None and strict:
            raise typer.Exit(code=1)
        if result is not None and result.exit:
            break
