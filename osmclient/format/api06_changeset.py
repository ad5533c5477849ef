from collections.abc import Iterable, Mapping

from pydantic import TypeAdapter

from osmclient.config import PYDANTIC_CONFIG
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.models.bounds import Bounds
from osmclient.models.changeset import Changeset, ChangesetComment

_ChangesetListValidator = TypeAdapter(list[Changeset], config=PYDANTIC_CONFIG)


class Changeset06Mixin:
    @staticmethod
    def encode_changeset(tags: Mapping[str, str]) -> dict:
        """
        Encode the request body of changeset creation and update.

        >>> encode_changeset({'comment': 'fix', 'created_by': 'osmclient'})
        {'changeset': {'tag': [{'@k': 'comment', '@v': 'fix'}, {'@k': 'created_by', '@v': 'osmclient'}]}}
        """
        return {'changeset': {'tag': Tag06Mixin.encode_tags(tags)}}

    @staticmethod
    def decode_changesets(changesets: Iterable[dict]) -> list[Changeset]:
        """
        >>> decode_changesets([{'@id': 1, '@open': True, '@created_at': ..., 'tag': [...]}])
        [{'id': 1, 'open': True, 'created_at': ..., 'tags': {...}, ...}]
        """
        return _ChangesetListValidator.validate_python([_decode_changeset(c) for c in changesets])


def _decode_changeset(data: dict) -> Changeset:
    changeset: Changeset = {
        'id': data['@id'],
        'tags': Tag06Mixin.decode_tags(data.get('tag', ())),
        'open': data['@open'],
        'created_at': data['@created_at'],
        'comments_count': data.get('@comments_count', 0),
        'changes_count': data.get('@changes_count', 0),
    }

    if (closed_at := data.get('@closed_at')) is not None:
        changeset['closed_at'] = closed_at
    if (user_id := data.get('@uid')) is not None:
        changeset['user_id'] = user_id
    if (user := data.get('@user')) is not None:
        changeset['user'] = user

    # empty changesets have no bounds
    if '@min_lon' in data:
        changeset['bounds'] = Bounds(data['@min_lon'], data['@min_lat'], data['@max_lon'], data['@max_lat'])

    discussion = data.get('discussion')
    if discussion is not None:
        comments = discussion.get('comment', ()) if isinstance(discussion, dict) else ()
        changeset['discussion'] = [_decode_changeset_comment(comment) for comment in comments]

    return changeset


def _decode_changeset_comment(data: dict) -> ChangesetComment:
    """
    >>> _decode_changeset_comment({'@id': 1, '@date': ..., '@uid': 1, '@user': 'alice', 'text': 'lorem ipsum'})
    {'id': 1, 'created_at': ..., 'user_id': 1, 'user': 'alice', 'text': 'lorem ipsum'}
    """
    text = data.get('text')
    comment: ChangesetComment = {
        'created_at': data['@date'],
        # empty text elements are parsed as empty mappings
        'text': text if isinstance(text, str) else '',
    }

    if (comment_id := data.get('@id')) is not None:
        comment['id'] = comment_id
    if (user_id := data.get('@uid')) is not None:
        comment['user_id'] = user_id
    if (user := data.get('@user')) is not None:
        comment['user'] = user

    return comment
