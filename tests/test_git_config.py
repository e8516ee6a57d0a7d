import subprocess
from pathlib import Path

import pytest

from lfs_config import GitCommandError, create_git_configuration
from lfs_config.impl.environ import create_environ_values
from lfs_config.impl.git import current_ref, parse_config_listing


def git_commit(repo_path: Path) -> None:
    subprocess.run(
        ["git", "commit", "--allow-empty", "-m", "Init"],
        cwd=repo_path,
        check=True,
        capture_output=True,
    )


def test_parse_config_listing():
    listing = "core.bare\nfalse\0remote.origin.url\nhttps://a\0remote.origin.url\nhttps://b\0lfs.flag\0user.name\nPat\nDoe\0"

    assert parse_config_listing(listing) == {
        "core.bare": ["false"],
        "remote.origin.url": ["https://a", "https://b"],
        "lfs.flag": [""],
        "user.name": ["Pat\nDoe"],
    }


def test_current_ref_on_branch(git_repo: Path):
    git_commit(git_repo)
    assert current_ref(git_repo) == "master"


def test_current_ref_unborn(git_repo: Path):
    assert current_ref(git_repo) is None


def test_current_ref_detached(git_repo: Path):
    git_commit(git_repo)
    subprocess.run(
        ["git", "checkout", "--detach"], cwd=git_repo, check=True, capture_output=True
    )
    assert current_ref(git_repo) is None


def test_git_configuration_resolves_branch_remote(git_repo: Path):
    git_commit(git_repo)
    subprocess.run(
        ["git", "config", "branch.master.remote", "upstream"], cwd=git_repo, check=True
    )
    subprocess.run(
        ["git", "config", "remote.pushDefault", "fork"], cwd=git_repo, check=True
    )

    cfg = create_git_configuration(git_repo, environ={})

    assert cfg.current_ref == "master"
    assert cfg.remote() == "upstream"
    assert cfg.push_remote() == "fork"


def test_git_configuration_reads_environment(git_repo: Path):
    cfg = create_git_configuration(
        git_repo, environ={"GIT_AUTHOR_NAME": "Sam Roe", "EMAIL": "sam@example.com"}
    )

    assert cfg.current_author() == ("Sam Roe", "test@test")
    assert cfg.current_committer() == ("Test", "test@test")


def test_git_configuration_scope_order(git_repo: Path, isolated_git: Path):
    subprocess.run(
        ["git", "config", "--global", "lfs.tustransfers", "false"],
        cwd=git_repo,
        check=True,
    )
    subprocess.run(
        ["git", "config", "lfs.tustransfers", "true"], cwd=git_repo, check=True
    )

    cfg = create_git_configuration(git_repo, environ={})

    assert cfg.git.get_all("lfs.tustransfers") == ("false", "true")
    assert cfg.tus_transfers_allowed() is True


def test_git_configuration_broken_config(git_repo: Path):
    (git_repo / ".git" / "config").write_text("[core\nthis is not config\n")

    with pytest.raises(GitCommandError) as exc_info:
        create_git_configuration(git_repo, environ={})

    assert exc_info.value.git_args == ["config", "--list", "-z"]


def test_environ_values_are_case_sensitive(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("EMAIL", "pdoe@example.com")
    values = create_environ_values()

    assert values.get("EMAIL") == "pdoe@example.com"
    assert values.get("email") is None


def test_environ_values_snapshot(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Pat Doe")
    values = create_environ_values()
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Sam Roe")

    assert values.get("GIT_AUTHOR_NAME") == "Pat Doe"
