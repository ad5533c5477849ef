import logging
from typing import TYPE_CHECKING, NoReturn

from httpx import codes

from osmclient.exceptions.errors import APIError, ConflictError, PreconditionError, SerializationError, TransportError

if TYPE_CHECKING:
    from osmclient.models.bounds import Bounds


class RequestExceptionsMixin:
    def transport_failed(self, url: str, exc: Exception) -> NoReturn:
        logging.error('Request to %s failed: %s', url, exc)
        raise TransportError(url, f'{type(exc).__name__}: {exc}') from exc

    def response_decoding_failed(self, url: str, exc: Exception) -> NoReturn:
        logging.error('Response from %s could not be decoded: %s', url, exc)
        raise SerializationError(f'Undecodable response body from {url}: {exc}') from exc

    def api_error(self, url: str, status_code: int, reason: str, body: str) -> NoReturn:
        logging.error('Request failed: %d-%s %s', status_code, reason, body)
        if status_code == codes.CONFLICT:
            raise ConflictError(url, status_code, reason, body)
        raise APIError(url, status_code, reason, body)

    def bad_xml(self, name: str, message: str, xml_input: bytes) -> NoReturn:
        raise SerializationError(f'Malformed {name} XML: {message} ({xml_input[:120]!r})')

    def input_too_big(self, size: int) -> NoReturn:
        raise SerializationError(f'Response body of {size} bytes exceeds the parse limit')

    def bad_response(self, message: str) -> NoReturn:
        raise SerializationError(message)

    def bad_bbox(self, bounds: 'Bounds', condition: str) -> NoReturn:
        raise PreconditionError(f'Invalid bounding box {tuple(bounds)}: {condition}')
