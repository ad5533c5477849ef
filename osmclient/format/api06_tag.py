from collections.abc import Mapping, Sequence


class Tag06Mixin:
    @staticmethod
    def encode_tags(tags: Mapping[str, str]) -> list[dict[str, str]]:
        """
        >>> encode_tags({'a': '1', 'b': '2'})
        [{'@k': 'a', '@v': '1'}, {'@k': 'b', '@v': '2'}]
        """
        return [{'@k': k, '@v': v} for k, v in tags.items()]

    @staticmethod
    def decode_tags(tags: Sequence[dict]) -> dict[str, str]:
        """
        >>> decode_tags([
        ...     {'@k': 'a', '@v': '1'},
        ...     {'@k': 'b', '@v': '2'},
        ... ])
        {'a': '1', 'b': '2'}
        """
        items = [(tag['@k'], tag['@v']) for tag in tags]
        result = dict(items)

        if len(items) != len(result):
            raise ValueError('Duplicate tags keys')

        return result
