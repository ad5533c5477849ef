from email.message import Message
from typing import IO

from osmclient.client.base import ClientBase, check_bounds, parse_int
from osmclient.exceptions import raise_for
from osmclient.format import Format06
from osmclient.lib.decode_context import decode_context
from osmclient.lib.query_format import format_bbox
from osmclient.models.bounds import Bounds
from osmclient.models.trace import GpxFile, TraceData
from osmclient.models.types import TraceId


class TraceMixin(ClientBase):
    async def get_track_points(self, bounds: Bounds, *, page: int = 0) -> bytes:
        """
        Get a page of the public GPS points within the bounding box.

        The result is a GPX 1.0 document.
        """
        check_bounds(bounds)
        response = await self._request(
            'GET',
            'trackpoints',
            params={'bbox': format_bbox(bounds), 'page': str(page)},
        )
        return response.content

    async def get_trace_details(self, trace_id: TraceId) -> GpxFile:
        osm = await self._get_xml(f'gpx/{trace_id}/details', authenticated=True)
        gpx_files = _decode_gpx_files(osm)
        if not gpx_files:
            raise_for.bad_response(f'Response does not contain trace {trace_id}')
        return gpx_files[0]

    async def get_trace_data(self, trace_id: TraceId) -> TraceData:
        """
        Get the trace file exactly as it was uploaded,
        which is not necessarily GPX (it may be an archive).
        """
        response = await self._request('GET', f'gpx/{trace_id}/data', authenticated=True)

        file_name = None
        if (disposition := response.headers.get('Content-Disposition')) is not None:
            message = Message()
            message['Content-Disposition'] = disposition
            file_name = message.get_filename()

        return TraceData(response.content, file_name, response.headers.get('Content-Type'))

    async def get_traces(self) -> list[GpxFile]:
        """Get the traces of the authenticated user."""
        osm = await self._get_xml('user/gpx_files', authenticated=True)
        return _decode_gpx_files(osm)

    async def create_trace(self, gpx: GpxFile, file: bytes | IO[bytes]) -> TraceId:
        """Upload a new trace file and return its id."""
        if not gpx['description']:
            raise_for.trace_description_missing()

        response = await self._request(
            'POST',
            'gpx/create',
            authenticated=True,
            data={
                'description': gpx['description'],
                'visibility': gpx['visibility'],
                'tags': ','.join(gpx.get('tags', ())),
            },
            files={'file': (gpx['name'], file)},
        )
        return TraceId(parse_int(response, 'trace id'))

    async def update_trace(self, gpx: GpxFile) -> None:
        """Update the trace metadata, the file itself cannot be changed."""
        if 'id' not in gpx:
            raise_for.trace_id_missing()
        await self._send_xml('PUT', f'gpx/{gpx["id"]}', self._osm_document(Format06.encode_gpx_file(gpx)))

    async def delete_trace(self, trace_id: TraceId) -> None:
        await self._send_xml('DELETE', f'gpx/{trace_id}')


def _decode_gpx_files(osm) -> list[GpxFile]:
    with decode_context('gpx_file'):
        return Format06.decode_gpx_files(osm.get('gpx_file', []) if isinstance(osm, dict) else [])
