from typing import Literal

ElementType = Literal['node', 'way', 'relation']

# plural resource names, used by the multi fetch endpoints
ELEMENT_TYPE_PLURAL: dict[ElementType, str] = {
    'node': 'nodes',
    'way': 'ways',
    'relation': 'relations',
}


def is_element_type(s: object) -> bool:
    """
    Check whether the value is exactly one of the element type names.

    >>> is_element_type('way')
    True
    >>> is_element_type('w')
    False
    """
    return s in ELEMENT_TYPE_PLURAL
