from collections.abc import Iterable

from pydantic import TypeAdapter

from osmclient.config import PYDANTIC_CONFIG
from osmclient.models.trace import GpxFile

_GpxFileListValidator = TypeAdapter(list[GpxFile], config=PYDANTIC_CONFIG)


class Trace06Mixin:
    @staticmethod
    def encode_gpx_file(gpx: GpxFile) -> dict:
        """
        Encode the request body of trace metadata update.

        >>> encode_gpx_file({'id': 1, 'name': 'a.gpx', 'description': 'walk', 'visibility': 'public', 'tags': ['x']})
        {'gpx_file': {'@id': 1, '@name': 'a.gpx', '@visibility': 'public', 'description': 'walk', 'tag': ['x']}}
        """
        return {
            'gpx_file': {
                **({'@id': gpx['id']} if 'id' in gpx else {}),
                '@name': gpx['name'],
                '@visibility': gpx['visibility'],
                'description': gpx['description'],
                'tag': gpx.get('tags', []),
            }
        }

    @staticmethod
    def decode_gpx_files(gpx_files: Iterable[dict]) -> list[GpxFile]:
        """
        >>> decode_gpx_files([{'@id': 1, '@name': 'a.gpx', '@visibility': 'public', 'description': 'walk', ...}])
        [{'id': 1, 'name': 'a.gpx', 'visibility': 'public', 'description': 'walk', ...}]
        """
        return _GpxFileListValidator.validate_python([_decode_gpx_file(gpx) for gpx in gpx_files])


def _decode_gpx_file(data: dict) -> GpxFile:
    description = data.get('description')
    gpx: GpxFile = {
        'id': data['@id'],
        'name': data['@name'],
        'description': description if isinstance(description, str) else '',
        'visibility': data['@visibility'],
        'tags': [tag for tag in data.get('tag', ()) if isinstance(tag, str)],
    }

    if (user_id := data.get('@uid')) is not None:
        gpx['user_id'] = user_id
    if (user := data.get('@user')) is not None:
        gpx['user'] = user
    if (created_at := data.get('@timestamp')) is not None:
        gpx['created_at'] = created_at
    if (pending := data.get('@pending')) is not None:
        gpx['pending'] = pending
    # pending traces have no location yet
    if (lon := data.get('@lon')) is not None and (lat := data.get('@lat')) is not None:
        gpx['lon'] = lon
        gpx['lat'] = lat

    return gpx
