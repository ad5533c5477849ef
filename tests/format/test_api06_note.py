from datetime import UTC, datetime

from osmclient.format import Format06
from osmclient.lib.xmltodict import XMLToDict

NOTE_XML = (
    b'<osm version="0.6">'
    b'<note lon="0.1" lat="51.5">'
    b'<id>7</id>'
    b'<url>https://api.example.org/api/0.6/notes/7</url>'
    b'<date_created>2019-06-15 08:26:04 UTC</date_created>'
    b'<status>closed</status>'
    b'<date_closed>2019-06-16 10:00:00 UTC</date_closed>'
    b'<comments>'
    b'<comment><date>2019-06-15 08:26:04 UTC</date><action>opened</action><text>Bench missing</text></comment>'
    b'<comment><date>2019-06-16 10:00:00 UTC</date><uid>12</uid><user>alice</user>'
    b'<action>closed</action><text/></comment>'
    b'</comments>'
    b'</note>'
    b'</osm>'
)


def test_decode_notes():
    osm = XMLToDict.parse(NOTE_XML)['osm']

    (note,) = Format06.decode_notes(osm['note'])

    assert note == {
        'id': 7,
        'lon': 0.1,
        'lat': 51.5,
        'status': 'closed',
        'created_at': datetime(2019, 6, 15, 8, 26, 4, tzinfo=UTC),
        'closed_at': datetime(2019, 6, 16, 10, tzinfo=UTC),
        'comments': [
            {
                'created_at': datetime(2019, 6, 15, 8, 26, 4, tzinfo=UTC),
                'event': 'opened',
                'text': 'Bench missing',
            },
            {
                'created_at': datetime(2019, 6, 16, 10, tzinfo=UTC),
                'user_id': 12,
                'user': 'alice',
                'event': 'closed',
                'text': '',
            },
        ],
    }
