from pydantic_settings import SettingsConfigDict

from osmclient.lib.pydantic_settings_integration import pydantic_settings_integration

TEST_SETTING: str | None = None
TEST_LIMIT = 10
_TEST_PRIVATE = 'private'


def test_pydantic_settings_integration(monkeypatch):
    monkeypatch.setenv('TEST_SETTING', 'enabled')
    monkeypatch.setenv('TEST_LIMIT', '25')
    monkeypatch.setenv('_TEST_PRIVATE', 'changed')
    pydantic_settings_integration(__name__, globals())
    assert TEST_SETTING == 'enabled'
    assert TEST_LIMIT == 25
    assert _TEST_PRIVATE == 'private'


def test_pydantic_settings_integration_env_prefix(monkeypatch):
    monkeypatch.setenv('PREFIX_TEST_LIMIT', '42')
    pydantic_settings_integration(__name__, globals(), config=SettingsConfigDict(env_prefix='PREFIX_'))
    assert TEST_LIMIT == 42
