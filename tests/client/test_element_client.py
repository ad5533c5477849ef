import pytest

from osmclient.exceptions import PreconditionError, SerializationError
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.element_ref import ElementSelector

_NODE_XML = (
    '<osm version="0.6">'
    '<node id="1" version="2" changeset="10" lat="51.5" lon="0.1" visible="true"><tag k="amenity" v="bench"/></node>'
    '</osm>'
)


async def test_get_element(client, api):
    api.add_xml(_NODE_XML)

    element = await client.get_element('node', 1)

    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/node/1'
    assert api.last_request.method == 'GET'
    assert element['id'] == 1
    assert element['version'] == 2
    assert element['tags'] == {'amenity': 'bench'}


async def test_get_element_missing_from_response(client, api):
    api.add_xml('<osm version="0.6"/>')
    with pytest.raises(SerializationError):
        await client.get_element('node', 1)


async def test_get_element_invalid_type(client, api):
    with pytest.raises(PreconditionError):
        await client.get_element('area', 1)
    assert not api.requests


async def test_get_element_history(client, api):
    api.add_xml(
        '<osm version="0.6">'
        '<way id="5" version="1"><nd ref="1"/></way>'
        '<way id="5" version="2"><nd ref="1"/><nd ref="2"/></way>'
        '</osm>'
    )

    history = await client.get_element_history('way', 5)

    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/way/5/history'
    assert [e['version'] for e in history] == [1, 2]


async def test_get_element_version(client, api):
    api.add_xml('<osm version="0.6"><relation id="7" version="3"/></osm>')

    element = await client.get_element_version('relation', 7, 3)

    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/relation/7/3'
    assert element['version'] == 3
    assert element['members'] == []


async def test_get_elements(client, api):
    api.add_xml('<osm version="0.6"><node id="12" version="1" lat="0" lon="0"/><node id="14" version="1" lat="0" lon="0"/></osm>')

    elements = await client.get_elements('node', [12, 13, ElementSelector(14, 1)])

    assert api.last_request.url.path == '/api/0.6/nodes'
    assert api.last_request.url.params['nodes'] == '12,13,14v1'
    # unresolvable ids are omitted
    assert [e['id'] for e in elements] == [12, 14]


async def test_get_elements_empty_selectors(client, api):
    with pytest.raises(PreconditionError):
        await client.get_elements('way', [])
    assert not api.requests


async def test_get_element_relations_and_node_ways(client, api):
    api.add_xml('<osm version="0.6"><relation id="3" version="1"><member type="node" ref="1" role=""/></relation></osm>')
    api.add_xml('<osm version="0.6"><way id="2" version="1"><nd ref="1"/></way></osm>')

    relations = await client.get_element_relations('node', 1)
    ways = await client.get_node_ways(1)

    assert [str(r.url) for r in api.requests] == [
        'https://api.example.org/api/0.6/node/1/relations',
        'https://api.example.org/api/0.6/node/1/ways',
    ]
    assert relations[0]['type'] == 'relation'
    assert ways[0]['nodes'] == [1]


async def test_get_element_full(client, api):
    api.add_xml(
        '<osm version="0.6">'
        '<node id="1" version="1" lat="0" lon="0"/>'
        '<node id="2" version="1" lat="1" lon="1"/>'
        '<way id="5" version="1"><nd ref="1"/><nd ref="2"/></way>'
        '</osm>'
    )

    elements = await client.get_element_full('way', 5)

    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/way/5/full'
    assert [(e['type'], e['id']) for e in elements] == [('node', 1), ('node', 2), ('way', 5)]


async def test_get_element_full_node_unsupported(client, api):
    with pytest.raises(PreconditionError):
        await client.get_element_full('node', 1)
    assert not api.requests


async def test_create_element(auth_client, api, auth):
    api.add(content='123')
    element = {'type': 'node', 'id': -1, 'lon': 0.5, 'lat': 51.25, 'tags': {'amenity': 'bench'}}

    element_id = await auth_client.create_element(42, element)

    assert element_id == 123
    assert element['changeset_id'] == 42
    request = api.last_request
    assert request.method == 'PUT'
    assert str(request.url) == 'https://api.example.org/api/0.6/node/create'
    assert request.headers['Authorization'] == 'Bearer test-token'
    assert auth.calls == [('PUT', 'https://api.example.org/api/0.6/node/create')]
    node = XMLToDict.parse(request.content)['osm']['node'][0]
    assert node['@changeset'] == 42
    assert node['@lat'] == 51.25


async def test_create_element_positive_id(auth_client, api):
    with pytest.raises(PreconditionError):
        await auth_client.create_element(42, {'type': 'node', 'id': 5, 'lon': 0, 'lat': 0})
    assert not api.requests


async def test_update_element(auth_client, api):
    api.add(content='3')
    element = {'type': 'way', 'id': 5, 'version': 2, 'changeset_id': 1, 'nodes': [1, 2]}

    version = await auth_client.update_element(42, element)

    assert version == 3
    assert element['changeset_id'] == 42
    assert api.last_request.method == 'PUT'
    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/way/5'


async def test_delete_element(auth_client, api):
    api.add(content='4')

    version = await auth_client.delete_element(42, {'type': 'node', 'id': 1, 'version': 3, 'lon': 0, 'lat': 0})

    assert version == 4
    request = api.last_request
    assert request.method == 'DELETE'
    assert str(request.url) == 'https://api.example.org/api/0.6/node/1'
    assert XMLToDict.parse(request.content)['osm']['node'][0]['@version'] == 3


@pytest.mark.parametrize('method', ['update_element', 'delete_element'])
async def test_write_element_without_version(auth_client, api, method):
    with pytest.raises(PreconditionError):
        await getattr(auth_client, method)(42, {'type': 'node', 'id': 1, 'lon': 0, 'lat': 0})
    assert not api.requests
