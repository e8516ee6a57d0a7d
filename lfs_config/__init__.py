from .base import ConfigValues, Values
from .config import (
    Configuration,
    FetchPruneConfig,
    new_from,
    create_memory_configuration,
    create_git_configuration,
)
from .errors import LfsConfigError, GitCommandError, ExtensionPriorityError
from .extension import Extension
from .permissions import umask

__all__ = [
    "ConfigValues",
    "Values",
    "Configuration",
    "FetchPruneConfig",
    "new_from",
    "create_memory_configuration",
    "create_git_configuration",
    "LfsConfigError",
    "GitCommandError",
    "ExtensionPriorityError",
    "Extension",
    "umask",
]
