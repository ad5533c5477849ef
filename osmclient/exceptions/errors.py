class OSMClientError(Exception):
    """Base class for all errors raised by osmclient."""


class PreconditionError(OSMClientError, ValueError):
    """The call arguments are invalid. No request was made."""


class TransportError(OSMClientError):
    """The request did not produce a response."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f'{message} ({url})')
        self.url = url


class APIError(OSMClientError):
    """
    The server responded with a non-success status.

    The raw response body is kept for diagnosis; the API reports most
    failures as a plain text message.
    """

    def __init__(self, url: str, status_code: int, reason: str, body: str) -> None:
        super().__init__(f'Request failed: {status_code}-{reason} {body}'.rstrip())
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body


class ConflictError(APIError):
    """
    The server rejected the request because of a conflicting state,
    most often a stale element version or an already closed changeset.
    """


class SerializationError(OSMClientError):
    """The response body could not be decoded into the expected shape."""
