import logging
import subprocess
from pathlib import Path
from typing import Any

from lfs_config.base import ConfigValues
from lfs_config.errors import GitCommandError

logger = logging.getLogger(__name__)


def _run_git(cwd: Path, args: list[str]) -> str:
    logger.debug("running git %s in %s", " ".join(args), cwd)
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


def parse_config_listing(listing: str) -> dict[str, list[str]]:
    """
    Split the output of ``git config --list -z`` into ordered values per key.

    Entries are NUL-terminated and hold ``key\\nvalue``; a key configured
    without ``=`` has no newline and is recorded with an empty value.
    """
    data: dict[str, list[str]] = {}
    for entry in listing.split("\0"):
        if not entry:
            continue
        key, _, value = entry.partition("\n")
        data.setdefault(key.lower(), []).append(value)
    return data


class GitConfigValues(ConfigValues):
    case_sensitive = False

    def __init__(self, repo_path: str | Path):
        self.repo_path = Path(repo_path).absolute()
        try:
            listing = _run_git(self.repo_path, ["config", "--list", "-z"])
        except subprocess.CalledProcessError as e:
            raise GitCommandError(["config", "--list", "-z"], e.stderr) from e

        super().__init__(parse_config_listing(listing))

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text("GitConfigValues(...)")
        else:
            p.text(f"GitConfigValues(path={self.repo_path}, keys={len(self)})")


def current_ref(repo_path: str | Path) -> str | None:
    """
    Short name of the checked out branch, or None for a detached HEAD or an
    unborn branch.
    """
    try:
        name = _run_git(Path(repo_path), ["rev-parse", "--abbrev-ref", "HEAD"]).strip()
    except subprocess.CalledProcessError:
        logger.debug("no current ref in %s", repo_path)
        return None

    if not name or name == "HEAD":
        return None
    return name


def create_git_values(repo_path: str | Path) -> ConfigValues:
    return GitConfigValues(repo_path)
