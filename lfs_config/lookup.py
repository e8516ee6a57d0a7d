"""
Coercion helpers shared by every configuration namespace.

Malformed values never raise: they are logged and replaced by the caller's
default.
"""

import logging
import re
from typing import Callable

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"true", "1", "yes", "on", "t"})
FALSE_VALUES = frozenset({"false", "0", "no", "off", "f"})

_INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_bool(value: str | None, default: bool, key: str = "") -> bool:
    if value is None:
        return default

    token = value.strip().lower()
    if not token:
        return default
    if token in TRUE_VALUES:
        return True
    if token in FALSE_VALUES:
        return False

    logger.debug("ignoring non-boolean value %r for %s", value, key or "<value>")
    return default


def parse_int(value: str | None, default: int, key: str = "") -> int:
    if value is None:
        return default

    token = value.strip()
    if not _INT_RE.match(token):
        logger.debug("ignoring non-integer value %r for %s", value, key or "<value>")
        return default

    try:
        return int(token)
    except ValueError:
        logger.debug("ignoring out-of-range integer for %s", key or "<value>")
        return default


def first_of(*lookups: Callable[[], str | None]) -> str | None:
    """
    Walk a fallback chain and return the first value that is set.

    A value that is present but empty still wins; only ``None`` falls through.
    """
    for lookup in lookups:
        value = lookup()
        if value is not None:
            return value
    return None
