"""Persistent grouped key/value storage and stored settings built on it."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

DEFAULT_GROUP = "GlobalValues"

PathLike = Union[str, "os.PathLike[str]"]

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


class SettingsStore:
    """Values kept per group and key, saved as JSON when a path is given.

    Without a path the store lives in memory only.
    """

    def __init__(self, path: Optional[PathLike] = None) -> None:
        self.path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, Any]] = {}
        if self.path is not None and self.path.is_file():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
            except (ValueError, OSError):
                loaded = {}
            if isinstance(loaded, dict):
                self._data = {
                    str(group): dict(values)
                    for group, values in loaded.items()
                    if isinstance(values, dict)
                }

    def value(self, group: str, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` when there is none."""
        with self._lock:
            return self._data.get(group, {}).get(key, default)

    def set_value(self, group: str, key: str, value: Any) -> None:
        with self._lock:
            self._data.setdefault(group, {})[key] = value

    def contains(self, group: str, key: str) -> bool:
        with self._lock:
            return key in self._data.get(group, {})

    def sync(self) -> None:
        """Write the values to the file, if the store has one."""
        if self.path is None:
            return
        with self._lock:
            text = json.dumps(self._data, indent=2, sort_keys=True)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise


def _convert_like(default: Any, raw: Any) -> Any:
    if default is None or raw is None:
        return raw if raw is not None else default
    if isinstance(default, bool):
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            return default
        return bool(raw)
    if isinstance(default, int):
        try:
            return int(raw)
        except (TypeError, ValueError):
            return default
    if isinstance(default, float):
        try:
            return float(raw)
        except (TypeError, ValueError):
            return default
    if isinstance(default, str):
        return str(raw)
    return raw


class Setting:
    """A value cached in memory and kept in a :class:`SettingsStore`.

    Values live under ``<group>/sub_<n>``; switching the subgroup copies the current
    value over when the new subgroup has none yet. ``listeners`` are called with the
    setting whenever its value changes.
    """

    def __init__(
        self,
        key: str,
        default: Any,
        text: str = "",
        hint: str = "",
        store: Optional[SettingsStore] = None,
        group: str = DEFAULT_GROUP,
    ) -> None:
        self.key = key
        self.default = default
        self.text = text
        self.hint = hint
        self.store = store if store is not None else SettingsStore()
        self.group = group
        self.subgroup = 0
        self.listeners: List[Callable[["Setting"], None]] = []
        self.value: Any = default
        self._load(default)

    def _convert(self, raw: Any) -> Any:
        return _convert_like(self.default, raw)

    @property
    def _path(self) -> str:
        return f"{self.group}/sub_{self.subgroup}"

    def _load(self, default: Any) -> None:
        self.value = self._convert(self.store.value(self._path, self.key, default))

    def _changed(self) -> None:
        for listener in list(self.listeners):
            listener(self)

    def flush(self) -> None:
        """Save the cached value to the store."""
        self.store.set_value(self._path, self.key, self.value)
        self.store.sync()

    def reload(self) -> None:
        """Read the value again from the store, falling back to the default."""
        self._load(self.default)
        self._changed()

    def switch_subgroup(self, subgroup_id: int) -> None:
        exists = self.store.contains(self._path, self.key)
        if exists:
            self.flush()
        fallback = self.value if exists else self.default
        self.subgroup = subgroup_id
        self._load(fallback)
        self.flush()
        self._changed()

    def set(self, value: Any) -> None:
        self.value = self._convert(value)
        self._changed()

    def set_default(self) -> None:
        self.set(self.default)

    def set_group(self, group: str) -> None:
        """Change the group; call :meth:`reload` afterwards to read from it."""
        self.group = group

    def __enter__(self) -> "Setting":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r}, value={self.value!r})"