# bizbook/logic/manager.py

import logging
from typing import List, Optional

from bizbook.errors import BizbookError
from bizbook.model.book import BusinessBook

from .commands.base import CommandResult
from .parser.dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


class LogicManager:
    """
    Runs one dispatch-then-execute cycle per line of user input against a
    BusinessBook. Errors propagate to the caller unchanged; the book is left
    as it was before the failing command.
    """

    def __init__(self, book: Optional[BusinessBook] = None, dispatcher: Optional[CommandDispatcher] = None):
        self.book = book if book is not None else BusinessBook()
        self.dispatcher = dispatcher or CommandDispatcher(lookup=self.book)

    def execute(self, command_text: str) -> CommandResult:
        logger.info(f"----------------[USER COMMAND][{command_text}]")
        try:
            command = self.dispatcher.parse_command(command_text)
            result = command.execute(self.book)
        except BizbookError as e:
            logger.info(f"Invalid command: {command_text} ({e.__class__.__name__})")
            raise
        logger.info(f"Result: {result.feedback_to_user}")
        return result

    def help_text(self) -> str:
        return "\n\n".join(self.dispatcher.usages())

    # --- Displayed lists ---

    def displayed(self, collection_name: str) -> List[str]:
        return [str(item) for item in self.book.collection(collection_name).filtered()]
