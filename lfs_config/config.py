"""
Typed, precedence-correct answers over a git config snapshot, the process
environment and the current branch.

A ``Configuration`` never changes the snapshots it wraps; every resolver is a
pure query. Absent or malformed values resolve to documented defaults instead
of raising.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Mapping

from lfs_config.base import ConfigValues, Values
from lfs_config.extension import (
    Extension,
    ExtensionTable,
    build_extensions,
    sort_extensions,
)
from lfs_config.impl.environ import create_environ_values
from lfs_config.impl.git import create_git_values, current_ref
from lfs_config.impl.memory import create_memory_env_values, create_memory_git_values
from lfs_config.lookup import first_of, parse_bool
from lfs_config.paths import clean_paths
from lfs_config.permissions import shared_repository_mode

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"
DEFAULT_CONCURRENT_TRANSFERS = 8

RefLoader = Callable[[], str | None]
Identity = tuple[str, str]

_UNSET = object()


@dataclass(frozen=True)
class FetchPruneConfig:
    fetch_recent_refs_days: int = 7
    fetch_recent_refs_include_remotes: bool = True
    fetch_recent_commits_days: int = 0
    fetch_recent_always: bool = False
    prune_offset_days: int = 3
    prune_verify_remote_always: bool = False
    prune_remote_name: str = DEFAULT_REMOTE


class Configuration:
    def __init__(
        self,
        git: ConfigValues,
        os: ConfigValues,
        ref_loader: RefLoader | None = None,
    ) -> None:
        self.git = git
        self.os = os
        self._ref_loader = ref_loader
        self._ref: Any = _UNSET

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("Configuration(...)")
        else:
            with p.group(4, "Configuration(", ")"):
                p.breakable()
                p.text("git=")
                p.pretty(self.git)
                p.text(",")
                p.breakable()
                p.text("os=")
                p.pretty(self.os)
                p.text(",")
                p.breakable()
                p.text(f"current_ref={self.current_ref!r},")
                p.breakable()

    @property
    def current_ref(self) -> str | None:
        if self._ref is _UNSET:
            self._ref = self._ref_loader() if self._ref_loader else None
        return self._ref

    @current_ref.setter
    def current_ref(self, name: str | None) -> None:
        self._ref = name

    # Lookup primitives

    def value(self, key: str) -> str | None:
        return self.git.get(key)

    def bool_value(self, key: str, default: bool) -> bool:
        return self.git.bool_value(key, default)

    def int_value(self, key: str, default: int) -> int:
        return self.git.int_value(key, default)

    def env_value(self, name: str) -> str | None:
        return self.os.get(name)

    def env_bool(self, name: str, key: str, default: bool) -> bool:
        """Boolean where the environment variable ``name`` overrides git's ``key``."""
        value = first_of(lambda: self.os.get(name), lambda: self.git.get(key))
        return parse_bool(value, default, key=name if name in self.os else key)

    # Remotes

    def _branch_value(self, field: str) -> str | None:
        ref = self.current_ref
        if not ref:
            return None
        return self.git.get(f"branch.{ref}.{field}")

    def remote(self) -> str:
        name = self._branch_value("remote")
        return DEFAULT_REMOTE if name is None else name

    def push_remote(self) -> str:
        name = first_of(
            lambda: self._branch_value("pushremote"),
            lambda: self.git.get("remote.pushdefault"),
        )
        return self.remote() if name is None else name

    def remotes(self) -> list[str]:
        names = set()
        for key in self.git.keys():
            section, _, rest = key.partition(".")
            name, _, field = rest.rpartition(".")
            if section == "remote" and name and field in ("url", "pushurl"):
                names.add(name)
        return sorted(names)

    # Feature flags

    def basic_transfers_only(self) -> bool:
        return self.bool_value("lfs.basictransfersonly", False)

    def tus_transfers_allowed(self) -> bool:
        return self.bool_value("lfs.tustransfers", False)

    def skip_download_errors(self) -> bool:
        return self.env_bool("GIT_LFS_SKIP_DOWNLOAD_ERRORS", "lfs.skipdownloaderrors", False)

    def set_lockable_files_read_only(self) -> bool:
        return self.env_bool("GIT_LFS_SET_LOCKABLE_READONLY", "lfs.setlockablereadonly", True)

    def concurrent_transfers(self) -> int:
        n = self.int_value("lfs.concurrenttransfers", DEFAULT_CONCURRENT_TRANSFERS)
        if n < 1:
            logger.debug("lfs.concurrenttransfers=%d is below 1, using default", n)
            return DEFAULT_CONCURRENT_TRANSFERS
        return n

    # Extensions

    def extensions(self) -> ExtensionTable:
        return build_extensions(self.git)

    def sorted_extensions(self) -> list[Extension]:
        return sort_extensions(self.extensions().values())

    # Paths

    def fetch_include_paths(self) -> list[str]:
        return clean_paths(self.git.get("lfs.fetchinclude"))

    def fetch_exclude_paths(self) -> list[str]:
        return clean_paths(self.git.get("lfs.fetchexclude"))

    def fetch_prune_config(self) -> FetchPruneConfig:
        return FetchPruneConfig(
            fetch_recent_refs_days=self.int_value("lfs.fetchrecentrefsdays", 7),
            fetch_recent_refs_include_remotes=self.bool_value("lfs.fetchrecentremoterefs", True),
            fetch_recent_commits_days=self.int_value("lfs.fetchrecentcommitsdays", 0),
            fetch_recent_always=self.bool_value("lfs.fetchrecentalways", False),
            prune_offset_days=self.int_value("lfs.pruneoffsetdays", 3),
            prune_verify_remote_always=self.bool_value("lfs.pruneverifyremotealways", False),
            prune_remote_name=first_of(
                lambda: self.git.get("lfs.pruneremotetocheck"), self.remote
            ),
        )

    # Identity

    def _identity(self, role: str) -> Identity:
        name = first_of(
            lambda: self.os.get(f"GIT_{role}_NAME"),
            lambda: self.git.get("user.name"),
        )
        email = first_of(
            lambda: self.os.get(f"GIT_{role}_EMAIL"),
            lambda: self.git.get("user.email"),
            lambda: self.os.get("EMAIL"),
        )
        return name or "", email or ""

    def current_committer(self) -> Identity:
        return self._identity("COMMITTER")

    def current_author(self) -> Identity:
        return self._identity("AUTHOR")

    # Permissions

    def repository_permissions(self) -> int:
        return shared_repository_mode(self.git.get("core.sharedrepository"))


def new_from(values: Values, ref: str | None = None) -> Configuration:
    cfg = Configuration(
        git=create_memory_git_values(values.git),
        os=create_memory_env_values(values.os),
    )
    cfg.current_ref = ref
    return cfg


def create_memory_configuration(
    git: Mapping[str, Any] | None = None,
    os: Mapping[str, Any] | None = None,
    ref: str | None = None,
) -> Configuration:
    return new_from(Values(git=git or {}, os=os or {}), ref=ref)


def create_git_configuration(
    repo_path: str | Path, environ: Mapping[str, str] | None = None
) -> Configuration:
    return Configuration(
        git=create_git_values(repo_path),
        os=create_environ_values(environ),
        ref_loader=lambda: current_ref(repo_path),
    )
