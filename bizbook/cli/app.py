# bizbook/cli/app.py

from pathlib import Path
from typing import Optional

import typer

from bizbook.cli.commands.run import run
from bizbook.cli.commands.shell import shell
from bizbook.cli.session import configure_logging
from bizbook.config import get_settings

app = typer.Typer(help="bizbook - book-keeping for a home-based service business")


@app.callback()
def setup(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides BIZBOOK_LOG_LEVEL"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Overrides BIZBOOK_LOG_FILE"),
):
    settings = get_settings()
    configure_logging(log_level or settings.log_level, log_file or settings.log_file)


app.command()(shell)
app.command()(run)


def main():
    app()


if __name__ == "__main__":
    main()
