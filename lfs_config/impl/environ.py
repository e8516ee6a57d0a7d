import os
from typing import Mapping

from lfs_config.base import ConfigValues


class EnvironValues(ConfigValues):
    """
    Snapshot of the process environment taken at construction time.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        if environ is None:
            environ = os.environ
        super().__init__({name: [value] for name, value in environ.items()})


def create_environ_values(environ: Mapping[str, str] | None = None) -> ConfigValues:
    return EnvironValues(environ)
