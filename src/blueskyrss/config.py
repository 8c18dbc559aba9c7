"""Run configuration read from the process environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from blueskyrss.errors import ConfigError

URL_VARIABLE = "INPUT_URL"
PATH_VARIABLE = "INPUT_PATH"


@dataclass
class Settings:
    """Inputs for a single run."""

    url: str
    path: str


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read the feed URL and destination path.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Settings for the run.

    Raises:
        ConfigError: If either variable is not set.
    """
    if environ is None:
        environ = os.environ

    url = environ.get(URL_VARIABLE)
    if url is None:
        raise ConfigError("The url input is required.")

    path = environ.get(PATH_VARIABLE)
    if path is None:
        raise ConfigError("The path input is required.")

    return Settings(url=url, path=path)
