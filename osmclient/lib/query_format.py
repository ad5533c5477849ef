from collections.abc import Iterable
from datetime import UTC, datetime

from osmclient.config import GEO_COORDINATE_PRECISION
from osmclient.models.bounds import Bounds
from osmclient.models.element_ref import ElementSelector
from osmclient.models.element_type import ELEMENT_TYPE_PLURAL, ElementType


def element_path(type: ElementType, id: int, *suffix: str | int) -> str:
    """
    Build the path of a single element resource, relative to the API root.

    >>> element_path('node', 1)
    'node/1'
    >>> element_path('way', 5, 'history')
    'way/5/history'
    >>> element_path('relation', 7, 3)
    'relation/7/3'
    """
    return '/'.join((type, str(id), *map(str, suffix)))


def elements_path(type: ElementType) -> str:
    """
    >>> elements_path('relation')
    'relations'
    """
    return ELEMENT_TYPE_PLURAL[type]


def format_selectors(selectors: Iterable[int | ElementSelector | tuple[int, int | None]]) -> str:
    """
    Encode ids for the multi fetch endpoints, keeping the input order.

    >>> format_selectors([12, 13, ElementSelector(14, 1), (15, None)])
    '12,13,14v1,15'
    """
    return ','.join(
        str(selector) if isinstance(selector, int) else str(ElementSelector(*selector))  #
        for selector in selectors
    )


def format_coordinate(value: float) -> str:
    """
    Format a coordinate with fixed maximum precision and without exponential notation,
    which the API does not accept.

    >>> format_coordinate(0.0000001)
    '0.0000001'
    >>> format_coordinate(1e-9)
    '0'
    >>> format_coordinate(-12.5)
    '-12.5'
    """
    result = f'{value:.{GEO_COORDINATE_PRECISION}f}'.rstrip('0').rstrip('.')
    return '0' if result == '-0' else result


def format_bbox(bounds: Bounds) -> str:
    """
    >>> format_bbox(Bounds(-0.5, 51, 0.25, 51.5))
    '-0.5,51,0.25,51.5'
    """
    return ','.join(map(format_coordinate, bounds))


def format_query_date(date: datetime) -> str:
    """
    Format a date for the changeset query, naive dates are assumed to be in UTC.

    >>> format_query_date(datetime(2020, 1, 2, 3, 4, 5))
    '2020-01-02T03:04:05Z'
    """
    if date.tzinfo is not None:
        date = date.astimezone(UTC)
    return date.strftime('%Y-%m-%dT%H:%M:%SZ')


def format_note_date(date: datetime) -> str:
    """
    Notes use their own date format, naive dates are assumed to be in UTC.

    >>> format_note_date(datetime(2019, 6, 15, 8, 26, 4))
    '2019-06-15 08:26:04 UTC'
    """
    if date.tzinfo is not None:
        date = date.astimezone(UTC)
    return date.strftime('%Y-%m-%d %H:%M:%S UTC')
