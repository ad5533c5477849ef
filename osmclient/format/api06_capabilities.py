class Capabilities06Mixin:
    @staticmethod
    def decode_versions(api: dict | str | None) -> list[str]:
        """
        Decode the supported API versions.
        Older servers report a minimum-maximum range instead of the version list.

        >>> decode_versions({'version': '0.6'})
        ['0.6']
        >>> decode_versions({'version': {'@minimum': '0.6', '@maximum': '0.6'}})
        ['0.6']
        """
        if not isinstance(api, dict):
            return []

        versions = api.get('version', ())
        if not isinstance(versions, list):
            versions = [versions]

        result: list[str] = []
        for version in versions:
            if isinstance(version, dict):
                version = version.get('@maximum')
            if version is None:
                continue
            version = str(version)
            if version not in result:
                result.append(version)
        return result

    @staticmethod
    def decode_capabilities(osm: dict) -> dict:
        """
        Return the server limits and policy as parsed: the api and policy sections.

        >>> decode_capabilities({'@version': 0.6, 'api': {'area': {'@maximum': '0.25'}, ...}, 'policy': {...}})
        {'api': {'area': {'@maximum': '0.25'}, ...}, 'policy': {...}}
        """
        return {key: value for key, value in osm.items() if not key.startswith('@')}
