from collections.abc import Iterable, Mapping

from pydantic import TypeAdapter

from osmclient.config import PYDANTIC_CONFIG
from osmclient.models.user import User

_UserListValidator = TypeAdapter(list[User], config=PYDANTIC_CONFIG)


class User06Mixin:
    @staticmethod
    def decode_users(users: Iterable[dict]) -> list[User]:
        """
        >>> decode_users([{'@id': 1234, '@display_name': 'userName', '@account_created': ..., ...}])
        [{'id': 1234, 'display_name': 'userName', 'created_at': ..., ...}]
        """
        return _UserListValidator.validate_python([_decode_user(user) for user in users])

    @staticmethod
    def encode_user_preferences(prefs: Mapping[str, str]) -> dict:
        """
        >>> encode_user_preferences({'key1': 'value1', 'key2': 'value2'})
        {'preferences': {'preference': [{'@k': 'key1', '@v': 'value1'}, {'@k': 'key2', '@v': 'value2'}]}}
        """
        return {'preferences': {'preference': [{'@k': k, '@v': v} for k, v in prefs.items()]}}

    @staticmethod
    def decode_user_preferences(preferences: dict | str | None) -> dict[str, str]:
        """
        >>> decode_user_preferences({'preference': [{'@k': 'key', '@v': 'value'}]})
        {'key': 'value'}
        """
        # empty <preferences/> is parsed as an empty mapping
        if not isinstance(preferences, dict):
            return {}

        result: dict[str, str] = {}
        for pref in preferences.get('preference', ()):
            key = pref['@k']
            if key in result:
                raise ValueError(f'Duplicate preference key {key!r}')
            result[key] = pref['@v']
        return result

    @staticmethod
    def decode_permissions(permissions: dict | str | None) -> list[str]:
        """
        >>> decode_permissions({'permission': [{'@name': 'allow_read_prefs'}, {'@name': 'allow_write_api'}]})
        ['allow_read_prefs', 'allow_write_api']
        """
        if not isinstance(permissions, dict):
            return []
        return [permission['@name'] for permission in permissions.get('permission', ())]


def _decode_user(data: dict) -> User:
    user: User = {
        'id': data['@id'],
        'display_name': data['@display_name'],
        'created_at': data['@account_created'],
    }

    description = data.get('description')
    if description is not None:
        user['description'] = description if isinstance(description, str) else ''
    if isinstance(changesets := data.get('changesets'), dict) and '@count' in changesets:
        user['changesets_count'] = changesets['@count']
    if isinstance(traces := data.get('traces'), dict) and '@count' in traces:
        user['traces_count'] = traces['@count']

    # roles are encoded as child element names: <roles><moderator/></roles>
    roles = data.get('roles')
    if roles is not None:
        user['roles'] = list(roles) if isinstance(roles, dict) else []

    return user
