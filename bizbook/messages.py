# bizbook/messages.py
"""User-facing messages shared across layers."""

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_INDEX = "The index provided is invalid"
MESSAGE_INDEX_OUT_OF_RANGE = "The {kind} index provided is out of range (1 to {size})"
MESSAGE_LISTED_OVERVIEW = "{count} {kind} listed!"
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."
