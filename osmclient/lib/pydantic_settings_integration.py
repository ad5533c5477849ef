import logging
from collections.abc import Callable
from sys import modules
from typing import Any, get_type_hints

from pydantic import create_model
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, SettingsConfigDict


def _is_setting_name(name: str) -> bool:
    return name[:1] != '_' and name.isupper()


# noinspection PyDefaultArgument
def pydantic_settings_integration(
    caller_name: str,
    caller_globals: dict[str, Any],
    /,
    config: SettingsConfigDict = BaseSettings.model_config,
    name_filter: Callable[[str], bool] = _is_setting_name,
) -> None:
    """
    Load the calling module's upper-case globals through a generated
    pydantic BaseSettings model and write the validated values back.

    Values come from the environment (and .env files, if configured),
    falling back to the module defaults.
    """
    settings = {k: v for k, v in caller_globals.items() if name_filter(k)}
    if not settings:
        logging.warning('No settings found in %s matching the filter', caller_name)
        return

    type_hints = get_type_hints(modules[caller_name])
    fields: dict[str, tuple[type, Any]] = {
        name: (
            type_hints.get(name, Any if isinstance(value, FieldInfo) else type(value)),
            value,
        )
        for name, value in settings.items()
    }

    settings_model = create_model(
        f'{caller_name}_Settings',
        __base__=type(
            f'{caller_name}_BaseSettings',
            (BaseSettings,),
            {'model_config': config},
        ),
        **fields,  # type: ignore
    )
    instance = settings_model()

    for name in settings:
        value = getattr(instance, name)
        if value != settings[name]:
            logging.debug('Setting %s.%s overridden from environment', caller_name, name)
        caller_globals[name] = value
