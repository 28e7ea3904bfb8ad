class DwollaError(Exception):
    """Base class for errors raised by this package."""


class RequestException(DwollaError):
    """
    The API answered but rejected the call.

    The message is the server's Message field, unchanged. The decoded
    envelope is kept on ``response`` for callers that need more detail.
    """

    def __init__(self, message, response=None):
        super().__init__(message)
        self.message = message
        self.response = response


class InvalidTransaction(DwollaError, ValueError):
    """A transaction was built with arguments the API would never accept."""
