from osmclient.client.changeset_mixin import ChangesetMixin
from osmclient.client.diff_mixin import DiffMixin
from osmclient.client.element_mixin import ElementMixin
from osmclient.client.map_mixin import MapMixin
from osmclient.client.note_mixin import NoteMixin
from osmclient.client.trace_mixin import TraceMixin
from osmclient.client.user_mixin import UserMixin


class OSMClient(
    ChangesetMixin,
    DiffMixin,
    ElementMixin,
    MapMixin,
    NoteMixin,
    TraceMixin,
    UserMixin,
):
    """
    Asynchronous OpenStreetMap API 0.6 client.

    >>> async with OSMClient(auth=OAuth2Auth(token)) as client:
    ...     changeset_id = await client.create_changeset({'comment': 'Add bench', 'created_by': 'osmclient'})
    ...     result = await client.upload_diff(changeset_id, {'create': [node]})
    ...     await client.close_changeset(changeset_id)
    """


__all__ = ('OSMClient',)
