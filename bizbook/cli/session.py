# bizbook/cli/session.py

import logging
from pathlib import Path
from typing import Optional

import typer

from bizbook.config import LOG_FORMAT
from bizbook.errors import BizbookError
from bizbook.logic.commands.base import CommandResult
from bizbook.logic.manager import LogicManager


def configure_logging(level: str, log_file: Optional[Path] = None) -> None:
    if log_file is not None:
        logging.basicConfig(filename=str(log_file), level=level.upper(), format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def execute_and_echo(logic: LogicManager, line: str) -> Optional[CommandResult]:
    """Runs one input line and prints its feedback. Returns None if the line failed."""
    try:
        result = logic.execute(line)
    except BizbookError as e:
        typer.echo(str(e), err=True)
        return None

    typer.echo(result.feedback_to_user)
    if result.show_help:
        typer.echo(logic.help_text())
    if result.collection:
        for i, item in enumerate(logic.displayed(result.collection), start=1):
            typer.echo(f"  {i}. {item}")
    return result
