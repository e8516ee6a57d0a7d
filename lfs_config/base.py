from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping

from lfs_config.lookup import parse_bool, parse_int

RawValues = Mapping[str, Iterable[str]]
SnapshotData = dict[str, tuple[str, ...]]


@dataclass
class Values:
    """
    Raw input for a configuration: the git namespace and the environment
    namespace, each mapping a key to the ordered values set for it.
    """

    git: RawValues = field(default_factory=dict)
    os: RawValues = field(default_factory=dict)


class ConfigValues:
    """
    Immutable snapshot of one configuration namespace.

    Every key holds an ordered tuple of values; later entries come from more
    specific scopes, so the current value of a key is always the last one.
    """

    case_sensitive = True

    def __init__(self, data: RawValues | None = None) -> None:
        self._data: SnapshotData = {}
        for key, values in (data or {}).items():
            if isinstance(values, str):
                values = [values]
            entries = tuple(values)
            if not entries:
                continue
            normalized = self._normalize(key)
            self._data[normalized] = self._data.get(normalized, ()) + entries

    def _normalize(self, key: str) -> str:
        if self.case_sensitive:
            return key
        return key.lower()

    def _repr_pretty_(self, p: Any, cycle: bool) -> None:
        if cycle:
            p.text(f"{type(self).__name__}(...)")
        else:
            with p.group(4, f"{type(self).__name__}(", ")"):
                p.breakable()
                p.text(f"data={self._data},")
                p.breakable()

    def __contains__(self, key: str) -> bool:
        return self._normalize(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def keys(self) -> list[str]:
        return list(self._data)

    def get(self, key: str) -> str | None:
        values = self._data.get(self._normalize(key))
        if not values:
            return None
        return values[-1]

    def get_all(self, key: str) -> tuple[str, ...]:
        return self._data.get(self._normalize(key), ())

    def bool_value(self, key: str, default: bool) -> bool:
        return parse_bool(self.get(key), default, key=key)

    def int_value(self, key: str, default: int) -> int:
        return parse_int(self.get(key), default, key=key)
