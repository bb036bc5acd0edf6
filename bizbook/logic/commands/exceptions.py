# bizbook/logic/commands/exceptions.py

from bizbook.errors import BizbookError


class CommandError(BizbookError):
    """A well-formed command that cannot be carried out against the current book."""
    pass
