# bizbook/errors.py


class BizbookError(Exception):
    """Base class for every recoverable error surfaced to the user."""
    pass
