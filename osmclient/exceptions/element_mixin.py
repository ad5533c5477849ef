from typing import TYPE_CHECKING, NoReturn

from osmclient.exceptions.errors import PreconditionError, SerializationError

if TYPE_CHECKING:
    from osmclient.models.element_ref import ElementRef


class ElementExceptionsMixin:
    def element_type_invalid(self, type: str) -> NoReturn:
        raise PreconditionError(f'Unknown element type {type!r}, choices are node, way, relation')

    def element_type_unsupported(self, type: str, operation: str) -> NoReturn:
        raise PreconditionError(f'{operation} is not supported for {type} elements')

    def element_version_missing(self, element_ref: 'ElementRef') -> NoReturn:
        raise PreconditionError(f'{element_ref.type}/{element_ref.id} must have a version to be modified or deleted')

    def element_create_bad_id(self, element_ref: 'ElementRef') -> NoReturn:
        raise PreconditionError(
            f'{element_ref.type}/{element_ref.id} cannot be created: new elements must use a negative placeholder id'
        )

    def element_selectors_empty(self) -> NoReturn:
        raise PreconditionError('At least one element id is required')

    def element_not_in_response(self, element_ref: 'ElementRef') -> NoReturn:
        raise SerializationError(f'Response does not contain {element_ref.type}/{element_ref.id}')
