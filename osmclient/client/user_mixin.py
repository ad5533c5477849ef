from collections.abc import Iterable, Mapping
from urllib.parse import quote

from osmclient.client.base import ClientBase
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.models.types import UserId
from osmclient.models.user import User


class UserMixin(ClientBase):
    async def get_user(self, user_id: UserId) -> User:
        osm = await self._get_xml(f'user/{user_id}')
        return _decode_user(osm)

    async def get_users(self, user_ids: Iterable[UserId]) -> list[User]:
        """Get multiple users in one request, unknown users are omitted."""
        user_ids = list(user_ids)
        if not user_ids:
            raise_for.user_ids_empty()

        osm = await self._get_xml('users', params={'users': ','.join(map(str, user_ids))})
        with decode_context('user'):
            return Format06.decode_users(_users(osm))

    async def get_user_details(self) -> User:
        """Get the authenticated user."""
        osm = await self._get_xml('user/details', authenticated=True)
        return _decode_user(osm)

    async def get_permissions(self) -> list[str]:
        """Get the permissions granted to the current authentication."""
        osm = await self._get_xml('permissions', authenticated=True)
        with decode_context('permissions'):
            return Format06.decode_permissions(osm.get('permissions') if isinstance(osm, dict) else None)

    async def get_user_preferences(self) -> dict[str, str]:
        osm = await self._get_xml('user/preferences', authenticated=True)
        with decode_context('preferences'):
            return Format06.decode_user_preferences(osm.get('preferences') if isinstance(osm, dict) else None)

    async def set_user_preferences(self, prefs: Mapping[str, str]) -> None:
        """Replace all preferences of the authenticated user."""
        await self._send_xml(
            'PUT',
            'user/preferences',
            self._osm_document(Format06.encode_user_preferences(prefs)),
        )

    async def get_user_preference(self, key: str) -> str:
        response = await self._request('GET', _preference_path(key), authenticated=True)
        return response.text

    async def set_user_preference(self, key: str, value: str) -> None:
        await self._request(
            'PUT',
            _preference_path(key),
            authenticated=True,
            content=value.encode(),
            content_type='text/plain; charset=utf-8',
        )

    async def delete_user_preference(self, key: str) -> None:
        await self._request('DELETE', _preference_path(key), authenticated=True)


def _preference_path(key: str) -> str:
    """
    >>> _preference_path('editor/theme')
    'user/preferences/editor%2Ftheme'
    """
    if not key:
        raise_for.user_preference_key_empty()
    return f'user/preferences/{quote(key, safe="")}'


def _users(osm) -> list:
    return osm.get('user', []) if isinstance(osm, dict) else []


def _decode_user(osm) -> User:
    with decode_context('user'):
        users = Format06.decode_users(_users(osm))
    if not users:
        raise_for.bad_response('Response does not contain the user')
    return users[0]
