from contextlib import contextmanager

from osmclient.exceptions import raise_for


@contextmanager
def decode_context(name: str):
    """
    Context manager for decoding a response payload.

    Shape errors raised by the format codec (missing keys, unexpected types,
    failed validation) are reported as a malformed response.
    """
    try:
        yield
    except (KeyError, TypeError, ValueError) as e:
        raise_for.bad_response(f'Malformed {name} response: {type(e).__name__}: {e}')
