import logging
from collections.abc import Iterable, Sequence

from pydantic import TypeAdapter

from osmclient.config import PYDANTIC_CONFIG
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.lib.query_format import format_coordinate
from osmclient.models.diff import OSMChange
from osmclient.models.element import Element
from osmclient.models.element_member import ElementMember
from osmclient.models.element_type import ElementType, is_element_type

_ElementListValidator = TypeAdapter(list[Element], config=PYDANTIC_CONFIG)

_OSMCHANGE_ACTIONS = ('create', 'modify', 'delete')


class Element06Mixin:
    @staticmethod
    def encode_element(element: Element) -> dict:
        """
        >>> encode_element({'type': 'node', 'id': 1, 'version': 1, 'lon': 0, 'lat': 0})
        {'node': {'@id': 1, '@version': 1, '@lat': '0', '@lon': '0', 'tag': []}}
        """
        return {element['type']: _encode_element(element)}

    @staticmethod
    def decode_elements(items: Iterable[tuple[str, dict | str]]) -> list[Element]:
        """
        Decode elements from a sequence-parsed document, keeping the document order.
        Other entries (attributes, bounds) are skipped.

        >>> decode_elements([('@version', 0.6), ('node', {'@id': 1, '@version': 1, ...})])
        [{'type': 'node', 'id': 1, 'version': 1, ...}]
        """
        return _ElementListValidator.validate_python([
            _decode_element(key, data)  #
            for key, data in items
            if is_element_type(key) and isinstance(data, dict)
        ])

    @staticmethod
    def encode_osmchange(change: OSMChange, *, generator: str) -> dict:
        """
        >>> encode_osmchange({
        ...     'create': [{'type': 'node', 'id': -1, ...}],
        ...     'modify': [{'type': 'way', 'id': 2, 'version': 2, ...}],
        ... }, generator='osmclient')
        {'osmChange': {'@version': '0.6', '@generator': 'osmclient',
                       'create': [('node', {'@id': -1, ...})],
                       'modify': [('way', {'@id': 2, '@version': 2, ...})]}}
        """
        result: dict = {'@version': '0.6', '@generator': generator}

        for action in _OSMCHANGE_ACTIONS:
            elements: Sequence[Element] = change.get(action, ())  # pyright: ignore[reportAssignmentType]
            if not elements:
                continue

            section: list[tuple[str, object]] = []
            if action == 'delete' and change.get('delete_if_unused'):
                section.append(('@if-unused', True))
            section.extend((element['type'], _encode_element(element)) for element in elements)
            result[action] = section

        return {'osmChange': result}

    @staticmethod
    def decode_osmchange(items: Iterable[tuple[str, list | str]]) -> OSMChange:
        """
        Decode an osmChange document parsed with `sequence_depth=2`.
        Repeated sections of the same action are merged in document order.

        >>> decode_osmchange([
        ...     ('create', [('node', {'@id': 1, '@version': 1, ...}), ('way', {...})]),
        ...     ('modify', [('way', {'@id': 2, '@version': 2, ...})]),
        ... ])
        {'create': [{'type': 'node', ...}, {'type': 'way', ...}], 'modify': [{'type': 'way', ...}], 'delete': []}
        """
        result: OSMChange = {'create': [], 'modify': [], 'delete': []}

        for action, section in items:
            # skip osmChange attributes
            if action.startswith('@'):
                continue
            if action not in _OSMCHANGE_ACTIONS:
                logging.debug('Skipped unknown osmChange action %r', action)
                continue
            # skip text-only sections
            if not isinstance(section, list):
                continue

            result[action].extend(Element06Mixin.decode_elements(section))  # type: ignore[literal-required]

        return result


def _encode_element(element: Element) -> dict:
    """
    >>> _encode_element({'type': 'way', 'id': 1, 'version': 2, 'nodes': [1, 2]})
    {'@id': 1, '@version': 2, 'tag': [], 'nd': [{'@ref': 1}, {'@ref': 2}]}
    """
    type = element['type']
    result: dict = {'@id': element['id']}

    if (version := element.get('version')) is not None:
        result['@version'] = version
    if (changeset_id := element.get('changeset_id')) is not None:
        result['@changeset'] = changeset_id
    if type == 'node' and 'lon' in element and 'lat' in element:
        result['@lat'] = format_coordinate(element['lat'])
        result['@lon'] = format_coordinate(element['lon'])

    result['tag'] = Tag06Mixin.encode_tags(element.get('tags', {}))

    if type == 'way':
        result['nd'] = [{'@ref': node_id} for node_id in element.get('nodes', ())]
    elif type == 'relation':
        result['member'] = [
            {'@type': member.type, '@ref': member.id, '@role': member.role}  #
            for member in element.get('members', ())
        ]

    return result


def _decode_element(type: ElementType, data: dict) -> Element:
    """
    >>> _decode_element('node', {'@id': 1, '@version': 1, '@lat': 2.0, '@lon': 1.0})
    {'type': 'node', 'id': 1, 'version': 1, 'tags': {}, 'lon': 1.0, 'lat': 2.0}
    """
    element: Element = {'type': type, 'id': data['@id']}

    if (version := data.get('@version')) is not None:
        element['version'] = version
    if (changeset_id := data.get('@changeset')) is not None:
        element['changeset_id'] = changeset_id
    if (visible := data.get('@visible')) is not None:
        element['visible'] = visible
    if (timestamp := data.get('@timestamp')) is not None:
        element['created_at'] = timestamp
    if (user_id := data.get('@uid')) is not None:
        element['user_id'] = user_id
    if (user := data.get('@user')) is not None:
        element['user'] = user

    element['tags'] = Tag06Mixin.decode_tags(data.get('tag', ()))

    if type == 'node':
        # deleted node versions have no location
        if (lon := data.get('@lon')) is not None and (lat := data.get('@lat')) is not None:
            element['lon'] = lon
            element['lat'] = lat
    elif type == 'way':
        element['nodes'] = [nd['@ref'] for nd in data.get('nd', ())]
    else:
        element['members'] = [_decode_member(member) for member in data.get('member', ())]

    return element


def _decode_member(data: dict) -> ElementMember:
    """
    >>> _decode_member({'@type': 'node', '@ref': 1, '@role': 'a'})
    ElementMember(type='node', id=1, role='a')
    """
    type = data['@type']
    if not is_element_type(type):
        raise ValueError(f'Unknown member type {type!r}')
    return ElementMember(type, data['@ref'], data.get('@role', ''))
