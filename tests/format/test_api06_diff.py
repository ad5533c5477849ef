import pytest

from osmclient.exceptions import SerializationError
from osmclient.format import Format06
from osmclient.lib.xmltodict import XMLToDict
from osmclient.models.diff import DiffResultEntry
from osmclient.models.element_ref import ElementRef


def test_decode_diff_result():
    items = XMLToDict.parse(
        b'<diffResult version="0.6" generator="test">'
        b'<node old_id="-1" new_id="100" new_version="1"/>'
        b'<way old_id="2" new_id="2" new_version="3"/>'
        b'<relation old_id="4"/>'
        b'</diffResult>',
        sequence=True,
    )['diffResult']

    result = Format06.decode_diff_result(items)

    assert result == {
        ElementRef('node', -1): DiffResultEntry(100, 1),
        ElementRef('way', 2): DiffResultEntry(2, 3),
        ElementRef('relation', 4): DiffResultEntry(None, None),
    }
    assert result[ElementRef('relation', 4)].deleted
    assert not result[ElementRef('node', -1)].deleted


def test_decode_diff_result_unknown_entry():
    items = XMLToDict.parse(b'<diffResult><area old_id="1"/></diffResult>', sequence=True)['diffResult']
    with pytest.raises(SerializationError):
        Format06.decode_diff_result(items)
