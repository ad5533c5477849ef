import logging
from collections.abc import Iterable

from osmclient.client.base import ClientBase, check_element_type, parse_int
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.lib.query_format import element_path, elements_path, format_selectors
from osmclient.models.element import Element, element_ref
from osmclient.models.element_ref import ElementRef, ElementSelector
from osmclient.models.element_type import ElementType
from osmclient.models.types import ChangesetId, ElementId


class ElementMixin(ClientBase):
    async def get_element(self, type: ElementType, id: ElementId) -> Element:
        """Get the current version of the element."""
        check_element_type(type)
        elements = await self._get_elements(element_path(type, id))
        return _find_element(elements, ElementRef(type, id))

    async def get_element_history(self, type: ElementType, id: ElementId) -> list[Element]:
        """Get all versions of the element, oldest first."""
        check_element_type(type)
        return await self._get_elements(element_path(type, id, 'history'))

    async def get_element_version(self, type: ElementType, id: ElementId, version: int) -> Element:
        check_element_type(type)
        elements = await self._get_elements(element_path(type, id, version))
        return _find_element(elements, ElementRef(type, id))

    async def get_elements(
        self,
        type: ElementType,
        selectors: Iterable[int | ElementSelector | tuple[int, int | None]],
    ) -> list[Element]:
        """
        Get multiple elements of the same type in one request.

        Selectors are element ids, optionally pinned to a version.
        Elements the server could not resolve are silently omitted,
        so the result may contain fewer elements than requested.
        """
        check_element_type(type)
        selectors = list(selectors)
        if not selectors:
            raise_for.element_selectors_empty()

        path = elements_path(type)
        elements = await self._get_elements(path, params={path: format_selectors(selectors)})
        logging.debug('Fetched %d of %d requested %s', len(elements), len(selectors), path)
        return elements

    async def get_element_relations(self, type: ElementType, id: ElementId) -> list[Element]:
        """Get the relations that have the element as a member."""
        check_element_type(type)
        return await self._get_elements(element_path(type, id, 'relations'))

    async def get_node_ways(self, id: ElementId) -> list[Element]:
        """Get the ways that reference the node."""
        return await self._get_elements(element_path('node', id, 'ways'))

    async def get_element_full(self, type: ElementType, id: ElementId) -> list[Element]:
        """
        Get the way or relation together with all the elements it references,
        in the document order.
        """
        check_element_type(type)
        if type == 'node':
            raise_for.element_type_unsupported(type, 'Full element fetch')
        return await self._get_elements(element_path(type, id, 'full'))

    async def create_element(self, changeset_id: ChangesetId, element: Element) -> ElementId:
        """
        Create the element in the open changeset and return its new id.

        The changeset id is set on the element.
        """
        type = element['type']
        check_element_type(type)
        if element['id'] > 0:
            raise_for.element_create_bad_id(element_ref(element))

        element['changeset_id'] = changeset_id
        response = await self._send_xml(
            'PUT',
            f'{type}/create',
            self._osm_document(Format06.encode_element(element)),
        )
        return ElementId(parse_int(response, 'element id'))

    async def update_element(self, changeset_id: ChangesetId, element: Element) -> int:
        """
        Update the element in the open changeset and return its new version.

        The element must carry the version it is based on.
        """
        return await self._write_element('PUT', changeset_id, element)

    async def delete_element(self, changeset_id: ChangesetId, element: Element) -> int:
        """
        Delete the element in the open changeset and return its new version.

        The element must carry the version it is based on.
        """
        return await self._write_element('DELETE', changeset_id, element)

    async def _write_element(self, method: str, changeset_id: ChangesetId, element: Element) -> int:
        type = element['type']
        check_element_type(type)
        if element.get('version') is None:
            raise_for.element_version_missing(element_ref(element))

        element['changeset_id'] = changeset_id
        response = await self._send_xml(
            method,
            element_path(type, element['id']),
            self._osm_document(Format06.encode_element(element)),
        )
        return parse_int(response, 'element version')

    async def _get_elements(self, path: str, *, params: dict[str, str] | None = None) -> list[Element]:
        osm = await self._get_xml(path, params=params, sequence=True)
        with decode_context('element'):
            return Format06.decode_elements(osm)


def _find_element(elements: list[Element], ref: ElementRef) -> Element:
    for element in elements:
        if element['type'] == ref.type and element['id'] == ref.id:
            return element
    raise_for.element_not_in_response(ref)
