import logging
import os
import re

logger = logging.getLogger(__name__)

DEFAULT_MODE = 0o666
GROUP_MODE = 0o660
WORLD_MODE = 0o664

GROUP_TOKENS = frozenset({"group", "true", "1", "yes"})
WORLD_TOKENS = frozenset({"all", "world", "everybody", "2"})

_OCTAL_RE = re.compile(r"^0[0-7]{3}$")


def umask() -> int:
    """Current process umask. Reading it requires setting it, so it is restored."""
    mask = os.umask(0)
    os.umask(mask)
    return mask


def shared_repository_mode(value: str | None) -> int:
    """
    File mode for objects written to a repository whose core.sharedRepository
    is set to ``value``.
    """
    token = (value or "").strip().lower()

    if token in GROUP_TOKENS:
        return GROUP_MODE
    if token in WORLD_TOKENS:
        return WORLD_MODE
    if _OCTAL_RE.match(token):
        return int(token, 8)

    if token not in ("", "false", "umask", "0", "no"):
        logger.debug("unrecognized core.sharedrepository value %r", value)
    return DEFAULT_MODE & ~umask()
