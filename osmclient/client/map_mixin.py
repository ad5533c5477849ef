from osmclient.client.base import ClientBase, check_bounds
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.lib.query_format import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.element import Element


class MapMixin(ClientBase):
    async def get_versions(self) -> list[str]:
        """Get the API versions supported by the server."""
        osm = await self._get_xml('versions', versioned=False)
        with decode_context('versions'):
            return Format06.decode_versions(osm.get('api') if isinstance(osm, dict) else None)

    async def get_capabilities(self) -> dict:
        """Get the server limits and policy, as parsed from the response."""
        osm = await self._get_xml('capabilities')
        with decode_context('capabilities'):
            return Format06.decode_capabilities(osm)

    async def get_map(self, bounds: Bounds) -> list[Element]:
        """Get all the elements within the bounding box, in the document order."""
        check_bounds(bounds)
        osm = await self._get_xml('map', params={'bbox': format_bbox(bounds)}, sequence=True)
        with decode_context('map'):
            return Format06.decode_elements(osm)
