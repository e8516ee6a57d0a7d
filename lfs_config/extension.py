import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from lfs_config.base import ConfigValues
from lfs_config.errors import ExtensionPriorityError
from lfs_config.lookup import parse_int

logger = logging.getLogger(__name__)

EXTENSION_PREFIX = "lfs.extension."
EXTENSION_FIELDS = ("clean", "smudge", "priority")


@dataclass(frozen=True)
class Extension:
    """
    A named pair of clean/smudge filter commands. Extensions run in order of
    ascending priority.
    """

    name: str = ""
    clean: str = ""
    smudge: str = ""
    priority: int = 0


class ExtensionTable(dict[str, Extension]):
    """
    Extensions keyed by name. Unknown names resolve to an empty extension so
    callers can look them up unconditionally.
    """

    def __missing__(self, name: str) -> Extension:
        return Extension()


def _split_key(key: str) -> tuple[str, str] | None:
    if not key.startswith(EXTENSION_PREFIX):
        return None
    name, _, attr = key[len(EXTENSION_PREFIX) :].rpartition(".")
    if not name or attr not in EXTENSION_FIELDS:
        return None
    return name, attr


def build_extensions(values: ConfigValues) -> ExtensionTable:
    fields: dict[str, dict[str, str]] = defaultdict(dict)
    for key in values.keys():
        parts = _split_key(key)
        if parts is None:
            continue
        name, attr = parts
        value = values.get(key)
        if value is not None:
            fields[name][attr] = value

    table = ExtensionTable()
    for name, attrs in fields.items():
        table[name] = Extension(
            name=name,
            clean=attrs.get("clean", ""),
            smudge=attrs.get("smudge", ""),
            priority=parse_int(
                attrs.get("priority"), 0, key=f"{EXTENSION_PREFIX}{name}.priority"
            ),
        )
    return table


def sort_extensions(extensions: Iterable[Extension]) -> list[Extension]:
    by_priority: dict[int, list[Extension]] = defaultdict(list)
    for ext in extensions:
        by_priority[ext.priority].append(ext)

    for priority, group in by_priority.items():
        if len(group) > 1:
            raise ExtensionPriorityError(priority, sorted(e.name for e in group))

    return [by_priority[p][0] for p in sorted(by_priority)]
