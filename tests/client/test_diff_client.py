import pytest

from osmclient.exceptions import ConflictError, PreconditionError
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.diff import DiffResultEntry
from osmclient.models.element_ref import ElementRef


async def test_upload_diff(auth_client, api, auth):
    api.add_xml(
        '<diffResult version="0.6">'
        '<node old_id="-1" new_id="100" new_version="1"/>'
        '<way old_id="5" new_id="5" new_version="3"/>'
        '<node old_id="7"/>'
        '</diffResult>'
    )
    created = {'type': 'node', 'id': -1, 'changeset_id': 1, 'lon': 0.1, 'lat': 51.5, 'tags': {'amenity': 'bench'}}
    modified = {'type': 'way', 'id': 5, 'version': 2, 'nodes': [-1, 3]}
    deleted = {'type': 'node', 'id': 7, 'version': 4, 'changeset_id': 999}

    result = await auth_client.upload_diff(42, {'create': [created], 'modify': [modified], 'delete': [deleted]})

    assert result == {
        ElementRef('node', -1): DiffResultEntry(100, 1),
        ElementRef('way', 5): DiffResultEntry(5, 3),
        ElementRef('node', 7): DiffResultEntry(None, None),
    }

    # every element is stamped with the target changeset, overriding existing values
    assert created['changeset_id'] == 42
    assert modified['changeset_id'] == 42
    assert deleted['changeset_id'] == 42

    request = api.last_request
    assert request.method == 'POST'
    assert str(request.url) == 'https://api.example.org/api/0.6/changeset/42/upload'
    assert auth.calls == [('POST', 'https://api.example.org/api/0.6/changeset/42/upload')]

    items = XMLToDict.parse(request.content, sequence=True)['osmChange']
    assert [key for key, _ in items if not key.startswith('@')] == ['create', 'modify', 'delete']
    for _, section in items[2:]:
        for elements in section.values():
            for element in elements:
                assert element['@changeset'] == 42


async def test_upload_diff_preserves_order_within_section(auth_client, api):
    api.add_xml('<diffResult version="0.6"/>')
    nodes = [{'type': 'node', 'id': -i, 'lon': 0, 'lat': 0} for i in (3, 1, 2)]

    await auth_client.upload_diff(42, {'create': nodes})

    items = XMLToDict.parse(api.last_request.content, sequence=True)['osmChange']
    create = dict(items)['create']
    assert [node['@id'] for node in create['node']] == [-3, -1, -2]


async def test_upload_diff_if_unused(auth_client, api):
    api.add_xml('<diffResult version="0.6"><node old_id="7"/></diffResult>')

    await auth_client.upload_diff(
        42,
        {'delete': [{'type': 'node', 'id': 7, 'version': 1}], 'delete_if_unused': True},
    )

    delete = dict(XMLToDict.parse(api.last_request.content, sequence=True)['osmChange'])['delete']
    assert delete['@if-unused'] == 'true'


@pytest.mark.parametrize(
    'change',
    [
        {'modify': [{'type': 'node', 'id': 1, 'lon': 0, 'lat': 0}]},
        {'delete': [{'type': 'way', 'id': 1}]},
        {'create': [{'type': 'node', 'id': 5, 'lon': 0, 'lat': 0}]},
        {'create': [{'type': 'area', 'id': -1}]},
    ],
)
async def test_upload_diff_invalid(auth_client, api, change):
    with pytest.raises(PreconditionError):
        await auth_client.upload_diff(42, change)
    assert not api.requests


async def test_upload_diff_conflict(auth_client, api):
    api.add(409, content='Version mismatch: Provided 1, server had: 2 of Node 7')

    with pytest.raises(ConflictError) as exc_info:
        await auth_client.upload_diff(42, {'modify': [{'type': 'node', 'id': 7, 'version': 1, 'lon': 0, 'lat': 0}]})

    assert 'Version mismatch' in exc_info.value.body
    assert len(api.requests) == 1
