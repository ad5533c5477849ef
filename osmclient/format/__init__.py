from osmclient.format.api06_capabilities import Capabilities06Mixin
from osmclient.format.api06_changeset import Changeset06Mixin
from osmclient.format.api06_diff import Diff06Mixin
from osmclient.format.api06_element import Element06Mixin
from osmclient.format.api06_note import Note06Mixin
from osmclient.format.api06_tag import Tag06Mixin
from osmclient.format.api06_trace import Trace06Mixin
from osmclient.format.api06_user import User06Mixin


class Format06(
    Capabilities06Mixin,
    Changeset06Mixin,
    Element06Mixin,
    Note06Mixin,
    Diff06Mixin,
    Tag06Mixin,
    Trace06Mixin,
    User06Mixin,
): ...
