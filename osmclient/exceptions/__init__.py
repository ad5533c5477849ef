from osmclient.exceptions.changeset_mixin import ChangesetExceptionsMixin
from osmclient.exceptions.diff_mixin import DiffExceptionsMixin
from osmclient.exceptions.element_mixin import ElementExceptionsMixin
from osmclient.exceptions.errors import (
    APIError,
    ConflictError,
    OSMClientError,
    PreconditionError,
    SerializationError,
    TransportError,
)
from osmclient.exceptions.note_mixin import NoteExceptionsMixin
from osmclient.exceptions.request_mixin import RequestExceptionsMixin
from osmclient.exceptions.trace_mixin import TraceExceptionsMixin
from osmclient.exceptions.user_mixin import UserExceptionsMixin


class Exceptions(
    ChangesetExceptionsMixin,
    DiffExceptionsMixin,
    ElementExceptionsMixin,
    NoteExceptionsMixin,
    RequestExceptionsMixin,
    TraceExceptionsMixin,
    UserExceptionsMixin,
): ...


raise_for = Exceptions()

__all__ = (
    'APIError',
    'ConflictError',
    'Exceptions',
    'OSMClientError',
    'PreconditionError',
    'SerializationError',
    'TransportError',
    'raise_for',
)
