import os

import pytest

from lfs_config.permissions import shared_repository_mode, umask


@pytest.fixture
def fixed_umask():
    old = os.umask(0o027)
    yield 0o027
    os.umask(old)


def test_umask_is_restored(fixed_umask):
    assert umask() == fixed_umask
    assert umask() == fixed_umask


def test_default_mode_applies_umask(fixed_umask):
    assert shared_repository_mode(None) == 0o640
    assert shared_repository_mode("umask") == 0o640
    assert shared_repository_mode("garbage") == 0o640


@pytest.mark.parametrize("raw", ["0999", "644", "00644", "0x64"])
def test_malformed_octal_falls_back(fixed_umask, raw):
    assert shared_repository_mode(raw) == 0o640


@pytest.mark.parametrize(
    "raw,expected",
    [("Group", 0o660), ("EVERYBODY", 0o664), ("0600", 0o600)],
)
def test_known_tokens_ignore_umask(fixed_umask, raw, expected):
    assert shared_repository_mode(raw) == expected
