import pytest

from osmclient.exceptions import PreconditionError
from osmclient.models.bounds import Bounds


async def test_get_versions(client, api):
    api.add_xml('<osm generator="test"><api><version>0.6</version></api></osm>')

    versions = await client.get_versions()

    assert str(api.last_request.url) == 'https://api.example.org/api/versions'
    assert versions == ['0.6']


async def test_get_versions_range(client, api):
    api.add_xml('<osm version="0.6"><api><version minimum="0.6" maximum="0.6"/></api></osm>')
    assert await client.get_versions() == ['0.6']


async def test_get_capabilities(client, api):
    api.add_xml(
        '<osm version="0.6">'
        '<api><version minimum="0.6" maximum="0.6"/><area maximum="0.25"/><changesets maximum_elements="10000"/></api>'
        '<policy><imagery><blacklist regex=".*\\.google(apis)?\\..*/.*"/></imagery></policy>'
        '</osm>'
    )

    capabilities = await client.get_capabilities()

    assert str(api.last_request.url) == 'https://api.example.org/api/0.6/capabilities'
    assert capabilities['api']['area'] == {'@maximum': '0.25'}
    assert capabilities['api']['changesets'] == {'@maximum_elements': '10000'}
    assert 'policy' in capabilities


async def test_get_map(client, api):
    api.add_xml(
        '<osm version="0.6">'
        '<bounds minlat="51.5" minlon="-0.1" maxlat="51.6" maxlon="0"/>'
        '<node id="1" version="1" lat="51.55" lon="-0.05"/>'
        '<way id="2" version="1"><nd ref="1"/></way>'
        '</osm>'
    )

    elements = await client.get_map(Bounds(-0.1, 51.5, 0, 51.6))

    assert api.last_request.url.path == '/api/0.6/map'
    assert api.last_request.url.params['bbox'] == '-0.1,51.5,0,51.6'
    assert [(e['type'], e['id']) for e in elements] == [('node', 1), ('way', 2)]


@pytest.mark.parametrize(
    'bounds',
    [
        Bounds(-181, 0, 0, 1),
        Bounds(0, 0, 180.5, 1),
        Bounds(0, -91, 1, 1),
        Bounds(0, 0, 1, 90.1),
        Bounds(1, 0, 0, 1),
        Bounds(0, 1, 1, 0),
    ],
)
async def test_get_map_invalid_bounds(client, api, bounds):
    with pytest.raises(PreconditionError):
        await client.get_map(bounds)
    assert not api.requests
