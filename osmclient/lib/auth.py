from base64 import b64encode
from typing import Protocol, override

from httpx import Request


class Auth(Protocol):
    """
    Request decorator invoked right before every request that requires identity.

    Implementations may only add or modify headers; the target URL and body
    must be left untouched.
    """

    def authenticate(self, method: str, url: str, request: Request) -> None: ...


class NoAuth:
    """Unauthenticated access, requests are sent as they are."""

    def authenticate(self, method: str, url: str, request: Request) -> None:
        return None

    @override
    def __repr__(self) -> str:
        return 'NoAuth()'


NO_AUTH = NoAuth()


class BasicAuth:
    __slots__ = ('_header',)

    def __init__(self, username: str, password: str) -> None:
        credentials = b64encode(f'{username}:{password}'.encode()).decode()
        self._header = f'Basic {credentials}'

    def authenticate(self, method: str, url: str, request: Request) -> None:
        request.headers['Authorization'] = self._header

    @override
    def __repr__(self) -> str:
        return 'BasicAuth(***)'


class OAuth2Auth:
    __slots__ = ('_header',)

    def __init__(self, access_token: str) -> None:
        self._header = f'Bearer {access_token}'

    def authenticate(self, method: str, url: str, request: Request) -> None:
        request.headers['Authorization'] = self._header

    @override
    def __repr__(self) -> str:
        return 'OAuth2Auth(***)'
