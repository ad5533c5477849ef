import logging
from collections.abc import Iterable

from osmclient.client.base import ClientBase, check_element_type, parse_xml_root
from osmclient.config import GENERATOR
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.models.diff import DiffResult, OSMChange
from osmclient.models.element import Element, element_ref
from osmclient.models.types import ChangesetId


class DiffMixin(ClientBase):
    async def upload_diff(self, changeset_id: ChangesetId, change: OSMChange) -> DiffResult:
        """
        Upload the edits to the open changeset in one request.

        Every element is stamped with the changeset id, in place.
        The server applies creations, then modifications, then deletions;
        the result maps every submitted element to its new id and version.
        """
        create = change.get('create', ())
        modify = change.get('modify', ())
        delete = change.get('delete', ())

        for element in create:
            check_element_type(element['type'])
            if element['id'] > 0:
                raise_for.element_create_bad_id(element_ref(element))
        for element in (*modify, *delete):
            check_element_type(element['type'])
            if element.get('version') is None:
                raise_for.element_version_missing(element_ref(element))

        _stamp_changeset(changeset_id, (*create, *modify, *delete))

        logging.info(
            'Uploading diff to changeset %d: %d create, %d modify, %d delete',
            changeset_id,
            len(create),
            len(modify),
            len(delete),
        )
        response = await self._send_xml(
            'POST',
            f'changeset/{changeset_id}/upload',
            Format06.encode_osmchange(change, generator=GENERATOR),
        )

        diff_result = parse_xml_root(response, sequence=True)
        with decode_context('diffResult'):
            return Format06.decode_diff_result(diff_result)


def _stamp_changeset(changeset_id: ChangesetId, elements: Iterable[Element]) -> None:
    for element in elements:
        element['changeset_id'] = changeset_id
