import logging
from collections.abc import Mapping
from typing import Any, Self

from httpx import AsyncClient, DecodingError, RequestError, Response

from osmclient.config import API_URL, API_VERSION, GENERATOR, HTTP_TIMEOUT, USER_AGENT
from osmclient.exceptions import raise_for
from osmclient.lib.auth import NO_AUTH, Auth
from osmclient.lib.decode_context import decode_context
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.bounds import Bounds
from osmclient.models.element_type import is_element_type


class ClientBase:
    """
    Request execution shared by all client operations.

    Every response becomes either a decoded payload or a classified error.
    The HTTP client is closed on exit only when it was created here.
    """

    def __init__(
        self,
        base_url: str = API_URL,
        *,
        auth: Auth = NO_AUTH,
        http: AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip('/')
        self._auth = auth
        self._owns_http = http is None
        self._http = (
            http
            if http is not None
            else AsyncClient(
                headers={'User-Agent': USER_AGENT},
                timeout=HTTP_TIMEOUT.total_seconds(),
                follow_redirects=True,
            )
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def auth(self) -> Auth:
        return self._auth

    def with_auth(self, auth: Auth) -> Self:
        """Return a new client using the given authentication, sharing the HTTP transport."""
        return type(self)(self._base_url, auth=auth, http=self._http)

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        authenticated: bool = False,
        versioned: bool = True,
        params: Mapping[str, str] | None = None,
        content: bytes | None = None,
        content_type: str | None = None,
        data: Mapping[str, str] | None = None,
        files: Mapping[str, Any] | None = None,
    ) -> Response:
        url = f'{self._base_url}/{API_VERSION}/{path}' if versioned else f'{self._base_url}/{path}'
        request = self._http.build_request(
            method,
            url,
            params=params,
            content=content,
            data=data,
            files=files,
            headers={'Content-Type': content_type} if content_type is not None else None,
        )
        request_url = str(request.url)

        if authenticated:
            self._auth.authenticate(method, request_url, request)

        logging.info('%s %s', method, request_url)
        try:
            response = await self._http.send(request)
        except DecodingError as e:
            raise_for.response_decoding_failed(request_url, e)
        except RequestError as e:
            raise_for.transport_failed(request_url, e)

        if not response.is_success:
            raise_for.api_error(request_url, response.status_code, response.reason_phrase, response.text)

        logging.debug('Request succeeded: %d-%s', response.status_code, response.reason_phrase)
        return response

    async def _get_xml(
        self,
        path: str,
        *,
        authenticated: bool = False,
        versioned: bool = True,
        params: Mapping[str, str] | None = None,
        sequence: bool = False,
        sequence_depth: int = 1,
    ) -> Any:
        """Get the XML resource and return the parsed root element content."""
        response = await self._request(
            'GET',
            path,
            authenticated=authenticated,
            versioned=versioned,
            params=params,
        )
        return parse_xml_root(response, sequence=sequence, sequence_depth=sequence_depth)

    async def _send_xml(
        self,
        method: str,
        path: str,
        body: Mapping | None = None,
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
    ) -> Response:
        """Send an authenticated write request, with an optional XML body."""
        return await self._request(
            method,
            path,
            authenticated=True,
            params=params,
            content=XMLToDict.unparse(body, binary=True) if body is not None else None,
            content_type='application/xml; charset=utf-8' if body is not None else None,
            data=data,
        )

    @staticmethod
    def _osm_document(body: Mapping) -> dict:
        """
        >>> _osm_document({'node': {...}})
        {'osm': {'@version': '0.6', '@generator': 'osmclient 0.1.0', 'node': {...}}}
        """
        return {'osm': {'@version': API_VERSION, '@generator': GENERATOR, **body}}


def parse_xml_root(response: Response, *, sequence: bool = False, sequence_depth: int = 1) -> Any:
    """Parse the XML response and return the root element content."""
    parsed = XMLToDict.parse(response.content, sequence=sequence, sequence_depth=sequence_depth)
    return next(iter(parsed.values()))


def parse_int(response: Response, name: str) -> int:
    """
    Parse the plain text number returned by create and update operations.

    >>> parse_int(Response(200, text='123\\n'), 'element id')
    123
    """
    with decode_context(name):
        return int(response.text.strip())


def check_element_type(type: str) -> None:
    if not is_element_type(type):
        raise_for.element_type_invalid(type)


def check_bounds(bounds: Bounds) -> None:
    """
    Check the bounding box is within the world and not inverted.

    >>> check_bounds(Bounds(-180, -90, 180, 90))
    >>> check_bounds(Bounds(1, 0, 0, 1))
    Traceback (most recent call last):
    PreconditionError: Invalid bounding box (1, 0, 0, 1): min_lon must not exceed max_lon
    """
    min_lon, min_lat, max_lon, max_lat = bounds
    if not (-180 <= min_lon <= 180 and -180 <= max_lon <= 180):
        raise_for.bad_bbox(bounds, 'longitude must be between -180 and 180')
    if not (-90 <= min_lat <= 90 and -90 <= max_lat <= 90):
        raise_for.bad_bbox(bounds, 'latitude must be between -90 and 90')
    if min_lon > max_lon:
        raise_for.bad_bbox(bounds, 'min_lon must not exceed max_lon')
    if min_lat > max_lat:
        raise_for.bad_bbox(bounds, 'min_lat must not exceed max_lat')
