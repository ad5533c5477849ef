import logging
from collections.abc import Mapping, Sequence
from datetime import UTC, datetime
from itertools import chain
from typing import Any, Literal, overload

import lxml.etree as ET
from sizestr import sizestr

from osmclient.config import XML_PARSE_MAX_SIZE
from osmclient.exceptions import raise_for

_parser = ET.XMLParser(
    ns_clean=True,
    resolve_entities=False,
    no_network=True,
    remove_comments=True,
    remove_pis=True,
    collect_ids=False,
    compact=False,
)


class XMLToDict:
    force_list = frozenset(
        (
            'create',
            'modify',
            'delete',
            'node',
            'way',
            'relation',
            'member',
            'tag',
            'nd',
            'changeset',
            'comment',
            'note',
            'user',
            'gpx_file',
            'preference',
            'permission',
        )
    )

    value_postprocessor = {  # noqa: RUF012
        '@account_created': datetime.fromisoformat,
        '@changes_count': int,
        '@changeset': int,
        '@closed_at': datetime.fromisoformat,
        '@comments_count': int,
        '@count': int,
        '@created_at': datetime.fromisoformat,
        '@date': datetime.fromisoformat,
        '@id': int,
        '@lat': float,
        '@lon': float,
        '@max_lat': float,
        '@max_lon': float,
        '@min_lat': float,
        '@min_lon': float,
        '@new_id': int,
        '@new_version': int,
        '@old_id': int,
        '@open': lambda x: x == 'true',
        '@pending': lambda x: x == 'true',
        '@ref': int,
        '@timestamp': datetime.fromisoformat,
        '@uid': int,
        '@version': lambda x: int(x) if x.isdigit() else float(x),
        '@visible': lambda x: x == 'true',
    }

    @staticmethod
    def parse(
        xml_bytes: bytes,
        *,
        sequence: bool = False,
        sequence_depth: int = 1,
        size_limit: int | None = XML_PARSE_MAX_SIZE,
    ) -> dict:
        """
        Parse XML string to dict.

        If `sequence` is `True`, then the root element is parsed as a sequence
        of (key, value) tuples, preserving the document order of its children.
        `sequence_depth` extends this to the given number of nesting levels,
        e.g. 2 also keeps the order within the osmChange action sections.
        """
        if size_limit is not None and len(xml_bytes) > size_limit:
            raise_for.input_too_big(len(xml_bytes))

        logging.debug('Parsing %s XML string', sizestr(len(xml_bytes)))

        try:
            root = ET.fromstring(xml_bytes, parser=_parser)  # noqa: S320
            return {_strip_namespace(root.tag): _parse_element(root, sequence_depth if sequence else 0)}
        except (ET.XMLSyntaxError, ValueError) as e:
            raise_for.bad_xml('response', str(e), xml_bytes)

    @staticmethod
    @overload
    def unparse(d: Mapping) -> str: ...
    @staticmethod
    @overload
    def unparse(d: Mapping, *, binary: Literal[True]) -> bytes: ...
    @staticmethod
    @overload
    def unparse(d: Mapping, *, binary: Literal[False]) -> str: ...
    @staticmethod
    def unparse(d: Mapping, *, binary: bool = False) -> str | bytes:
        """Unparse dict to XML string."""
        if len(d) != 1:
            raise ValueError(f'Invalid root element count {len(d)}')

        root_k, root_v = next(iter(d.items()))
        elements = _unparse_element(root_k, root_v)

        # always return root element, even if it's empty
        if not elements:
            elements = (ET.Element(root_k),)

        result: bytes = ET.tostring(elements[0], encoding='UTF-8', xml_declaration=True)
        logging.debug('Unparsed %s XML string', sizestr(len(result)))
        return result if binary else result.decode()


# read property once for performance
_force_list = XMLToDict.force_list
_value_postprocessor = XMLToDict.value_postprocessor


def _parse_element(element, sequence_depth: int) -> Any:
    parsed: list[tuple[str, Any]] = []
    for key, value in element.attrib.items():
        k = '@' + key
        parsed.append((k, _postprocessor(k, value)))

    is_sequence = sequence_depth > 0
    parsed_children: dict[str, Any] = {}

    for child in element:
        k = _strip_namespace(child.tag)
        v = _parse_element(child, sequence_depth - 1)

        # in sequence mode, keep children as ordered tuples
        if is_sequence:
            parsed.append((k, v))

        # merge with existing value
        elif (parsed_v := parsed_children.get(k)) is not None:
            if isinstance(parsed_v, list):
                parsed_v.append(v)
            else:
                # upgrade from single value to list
                parsed_children[k] = [parsed_v, v]

        # add new value
        elif k in _force_list:
            parsed_children[k] = [v]
        else:
            parsed_children[k] = v

    if parsed_children:
        parsed.extend(parsed_children.items())

    if text := (element.text.strip() if element.text else ''):
        if parsed:
            parsed.append(('#text', text))
        else:
            return text

    return parsed if is_sequence else dict(parsed)


def _strip_namespace(tag: str) -> str:
    return tag.rpartition('}')[-1]


def _postprocessor(key: str, value):
    if call := _value_postprocessor.get(key):
        return call(value)
    else:
        return value


def _unparse_element(key: str, value) -> tuple:
    if isinstance(value, Mapping):
        element = ET.Element(key)
        _unparse_items(element, value.items())
        return (element,)

    elif isinstance(value, Sequence) and not isinstance(value, str):
        if not value:
            return ()

        first = value[0]
        if isinstance(first, Mapping):
            return tuple(chain.from_iterable(_unparse_element(key, v) for v in value))
        elif isinstance(first, Sequence) and not isinstance(first, str):
            element = ET.Element(key)
            _unparse_items(element, value)
            return (element,)
        elif isinstance(first, str | int | float):
            # repeated text elements, e.g. <tag>a</tag><tag>b</tag>
            return tuple(chain.from_iterable(_unparse_element(key, v) for v in value))
        else:
            raise ValueError(f'Invalid list item type {type(first)}')

    else:
        element = ET.Element(key)
        element.text = _to_string(value)
        return (element,)


def _unparse_items(element, items) -> None:
    for k, v in items:
        if k and k[0] == '@':
            element.attrib[k[1:]] = _to_string(v)
        elif k == '#text':
            element.text = _to_string(v)
        else:
            element.extend(_unparse_element(k, v))


def _to_string(v) -> str:
    if isinstance(v, str):
        return v
    elif isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(UTC).replace(tzinfo=None)
        return v.isoformat(timespec='seconds') + 'Z'
    elif isinstance(v, bool):
        return 'true' if v else 'false'
    else:
        return str(v)
