# bizbook/model/uniquelist/exceptions.py

from bizbook.errors import BizbookError


class UniqueListError(BizbookError):
    pass


class DuplicateItemError(UniqueListError):
    def __init__(self, message: str = "Operation would result in duplicate items"):
        super().__init__(message)


class ItemNotFoundError(UniqueListError):
    def __init__(self, message: str = "Item not found in the list"):
        super().__init__(message)
