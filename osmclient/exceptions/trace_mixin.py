from typing import NoReturn

from osmclient.exceptions.errors import PreconditionError


class TraceExceptionsMixin:
    def trace_description_missing(self) -> NoReturn:
        raise PreconditionError('Trace description is required')

    def trace_id_missing(self) -> NoReturn:
        raise PreconditionError('Trace id is required to update a trace')
