from lfs_config.base import ConfigValues, RawValues


class MemoryGitValues(ConfigValues):
    """
    Git namespace held in memory. Keys are matched case-insensitively, the
    way git itself treats section and variable names.
    """

    case_sensitive = False


class MemoryEnvValues(ConfigValues):
    pass


def create_memory_git_values(data: RawValues | None = None) -> ConfigValues:
    return MemoryGitValues(data)


def create_memory_env_values(data: RawValues | None = None) -> ConfigValues:
    return MemoryEnvValues(data)
