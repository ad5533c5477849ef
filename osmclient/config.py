from datetime import timedelta
from importlib.metadata import PackageNotFoundError, version
from logging.config import dictConfig
from typing import Annotated, Literal

from pydantic import BeforeValidator, ByteSize, ConfigDict
from pydantic_settings import SettingsConfigDict

from osmclient.lib.pydantic_settings_integration import pydantic_settings_integration


def _ByteSize(v: str) -> ByteSize:  # noqa: N802
    return ByteSize._validate(v, None)  # noqa: SLF001  # type: ignore


def _strip_validator(chars: str, /) -> BeforeValidator:
    """Create a validator that strips the given characters from the input text."""

    def validate(v):
        return str(v).strip(chars)

    return BeforeValidator(validate)


type _StripSlash = Annotated[str, _strip_validator('/')]

# -------------------- Connection --------------------

API_URL: _StripSlash = 'https://api.openstreetmap.org/api'
HTTP_TIMEOUT = timedelta(seconds=30)

# -------------------- Logging --------------------

# None leaves the logging configuration to the application
LOG_LEVEL: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR'] | None = None

# -------------------- Limits --------------------

XML_PARSE_MAX_SIZE = _ByteSize('50 MiB')
GEO_COORDINATE_PRECISION = 7

TAGS_LIMIT = 5000
TAGS_KEY_MAX_LENGTH = 255
TAGS_VALUE_MAX_LENGTH = 255

NOTE_QUERY_DEFAULT_LIMIT = 100
NOTE_QUERY_LIMIT_MAX = 10_000
NOTE_QUERY_DEFAULT_CLOSED_DAYS = 7

pydantic_settings_integration(
    __name__,
    globals(),
    config=SettingsConfigDict(env_prefix='OSMCLIENT_'),
)

# -------------------- Constant or derived configuration --------------------

try:
    VERSION = version('osmclient')
except PackageNotFoundError:
    VERSION = 'dev'  # pyright: ignore [reportConstantRedefinition]

NAME = 'osmclient'
WEBSITE = 'https://wiki.openstreetmap.org/wiki/API_v0.6'
USER_AGENT = f'{NAME}/{VERSION} (+{WEBSITE})'
GENERATOR = f'{NAME} {VERSION}'

API_VERSION = '0.6'
CHANGESET_REQUIRED_TAGS = ('comment', 'created_by')

PYDANTIC_CONFIG = ConfigDict(
    extra='forbid',
    allow_inf_nan=False,
    cache_strings='keys',
)

# -------------------- Logging configuration --------------------

if LOG_LEVEL is not None:
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(levelname)s | %(asctime)s | %(name)s %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'default': {
                'formatter': 'default',
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
            },
        },
        'loggers': {
            'root': {'handlers': ['default'], 'level': LOG_LEVEL},
            **{
                # reduce logging verbosity of the transport
                module: {'handlers': [], 'level': 'WARNING'}
                for module in (
                    'httpx',
                    'httpcore',
                )
            },
        },
    })
