import pytest
import pytest_asyncio
from httpx import AsyncClient, MockTransport, Request, Response

from osmclient.client import OSMClient

API_URL = 'https://api.example.org/api'


class MockAPI:
    """Serves queued responses in order and records every request."""

    def __init__(self) -> None:
        self.requests: list[Request] = []
        self._responses: list[Response | BaseException] = []

    def add(
        self,
        status_code: int = 200,
        *,
        content: bytes | str = b'',
        headers: dict[str, str] | None = None,
    ) -> None:
        self._responses.append(Response(status_code, content=content, headers=headers))

    def add_xml(self, xml: str, status_code: int = 200) -> None:
        self.add(status_code, content=xml, headers={'Content-Type': 'application/xml; charset=utf-8'})

    def add_exception(self, exc: BaseException) -> None:
        self._responses.append(exc)

    def handler(self, request: Request) -> Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f'Unexpected request {request.method} {request.url}')

        response = self._responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    @property
    def last_request(self) -> Request:
        assert self.requests, 'No request was made'
        return self.requests[-1]


class RecordingAuth:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def authenticate(self, method: str, url: str, request: Request) -> None:
        self.calls.append((method, url))
        request.headers['Authorization'] = 'Bearer test-token'


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest_asyncio.fixture
async def client(api: MockAPI):
    async with AsyncClient(transport=MockTransport(api.handler)) as http:
        yield OSMClient(API_URL, http=http)


@pytest.fixture
def auth() -> RecordingAuth:
    return RecordingAuth()


@pytest.fixture
def auth_client(client: OSMClient, auth: RecordingAuth) -> OSMClient:
    return client.with_auth(auth)
