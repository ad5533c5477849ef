from typing import NewType

ElementId = NewType('ElementId', int)
ChangesetId = NewType('ChangesetId', int)
ChangesetCommentId = NewType('ChangesetCommentId', int)
UserId = NewType('UserId', int)
DisplayName = NewType('DisplayName', str)
NoteId = NewType('NoteId', int)
TraceId = NewType('TraceId', int)
