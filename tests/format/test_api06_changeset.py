from datetime import UTC, datetime

from osmclient.format import Format06
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.bounds import Bounds


def test_encode_changeset():
    assert Format06.encode_changeset({'comment': 'Add bench', 'created_by': 'test'}) == {
        'changeset': {
            'tag': [
                {'@k': 'comment', '@v': 'Add bench'},
                {'@k': 'created_by', '@v': 'test'},
            ]
        }
    }


def test_decode_changesets():
    osm = XMLToDict.parse(
        b'<osm version="0.6">'
        b'<changeset id="10" created_at="2020-01-01T00:00:00Z" closed_at="2020-01-01T01:00:00Z" open="false"'
        b' user="alice" uid="5" min_lat="51" min_lon="0" max_lat="52" max_lon="1"'
        b' comments_count="1" changes_count="3">'
        b'<tag k="comment" v="Add bench"/>'
        b'<discussion><comment id="1" date="2020-01-02T00:00:00Z" uid="6" user="bob"><text>Thanks</text></comment></discussion>'
        b'</changeset>'
        b'<changeset id="11" created_at="2020-01-03T00:00:00Z" open="true" comments_count="0" changes_count="0"/>'
        b'</osm>'
    )['osm']

    closed, empty = Format06.decode_changesets(osm['changeset'])

    assert closed == {
        'id': 10,
        'tags': {'comment': 'Add bench'},
        'open': False,
        'created_at': datetime(2020, 1, 1, tzinfo=UTC),
        'closed_at': datetime(2020, 1, 1, 1, tzinfo=UTC),
        'user_id': 5,
        'user': 'alice',
        'bounds': Bounds(0, 51, 1, 52),
        'comments_count': 1,
        'changes_count': 3,
        'discussion': [
            {
                'id': 1,
                'created_at': datetime(2020, 1, 2, tzinfo=UTC),
                'user_id': 6,
                'user': 'bob',
                'text': 'Thanks',
            }
        ],
    }
    assert empty['open'] is True
    assert 'bounds' not in empty
    assert 'discussion' not in empty
