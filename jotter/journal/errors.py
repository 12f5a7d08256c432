from typing import Optional


class JournalError(Exception):
    """
    Base class for errors which are reported to the client as {"error": message}.
    """

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(JournalError):
    """
    Raised when a request does not carry a session that resolves to a user.
    """

    status_code = 401
    message = "Unauthorized"


class InvalidInput(JournalError):
    """
    Raised when an entry is requested without a title or content.
    """

    status_code = 400
    message = "Title and content are required"


class EntryNotFound(JournalError):
    """
    Raised on actions that involve journal entries which are not present in the database
    or are owned by another user.
    """

    status_code = 404
    message = "Entry not found"


class StoreFailure(JournalError):
    """
    Raised when the entry store could not complete an operation.
    """
