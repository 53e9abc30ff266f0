"""Typed stored settings and a keyed collection of them."""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from edhighway.settings_store import DEFAULT_GROUP, Setting, SettingsStore

Item = Union[str, Sequence[Any]]
ItemsSupplier = Callable[[], Iterable[Item]]


class BoolSetting(Setting):
    """A stored on/off flag."""

    def __bool__(self) -> bool:
        return bool(self.value)


class IntSetting(Setting):
    """A stored integer with an allowed range and an editing step.

    As in the settings editor, the stored default is ``default / step``
    (truncated toward zero); edited values are multiples of ``step``.
    """

    def __init__(
        self,
        key: str,
        default: int,
        text: str,
        hint: str,
        minimum: int,
        maximum: int,
        step: int = 1,
        store: Optional[SettingsStore] = None,
        group: str = DEFAULT_GROUP,
    ) -> None:
        if step == 0:
            raise ValueError("step must not be zero")
        if minimum > maximum:
            raise ValueError("minimum must not exceed maximum")
        self.minimum = minimum
        self.maximum = maximum
        self.step = step
        super().__init__(key, int(default / step), text, hint, store, group)

    def hint_text(self) -> str:
        """The hint followed by the allowed range."""
        return f"{self.hint}\nRange: {self.minimum}-{self.maximum}"

    def __int__(self) -> int:
        return int(self.value)


class StringSetting(Setting):
    """A stored text value."""

    def __str__(self) -> str:
        return str(self.value)


class HotkeySetting(StringSetting):
    """A stored global hotkey such as ``"Ctrl+Alt+M"``."""


class FileSetting(StringSetting):
    """A stored folder path; ``exec_text`` titles the folder chooser."""

    def __init__(
        self,
        key: str,
        default: str,
        text: str,
        hint: str,
        exec_text: str,
        store: Optional[SettingsStore] = None,
        group: str = DEFAULT_GROUP,
    ) -> None:
        self.exec_text = exec_text
        super().__init__(key, default, text, hint, store, group)


class ComboSetting(Setting):
    """Stores the index chosen from a list of items.

    ``items_supplier`` returns the current items, each a text or a
    ``(text, data)`` pair; it is asked again every time the items are needed.
    """

    def __init__(
        self,
        key: str,
        default: int,
        text: str,
        hint: str,
        items_supplier: ItemsSupplier,
        store: Optional[SettingsStore] = None,
        group: str = DEFAULT_GROUP,
    ) -> None:
        self._items_supplier = items_supplier
        super().__init__(key, default, text, hint, store, group)

    def items(self) -> List[Tuple[str, Any]]:
        """Current ``(text, data)`` pairs; data is None where none was supplied."""
        result: List[Tuple[str, Any]] = []
        for item in self._items_supplier():
            if isinstance(item, str):
                result.append((item, None))
            else:
                text, *rest = item
                result.append((text, rest[0] if rest else None))
        return result

    def stored_selection(self, count: Optional[int] = None) -> int:
        """The stored index, or -1 when it is past the ``count`` available items."""
        selection = int(self.value)
        if count is not None and selection >= count:
            return -1
        return selection

    def user_data(self) -> Any:
        """Data of the selected item, or None when nothing valid is selected."""
        items = self.items()
        index = self.stored_selection(len(items))
        if index > -1:
            return items[index][1]
        return None


class SettingsMap(Mapping[str, Setting]):
    """Settings by key, iterated in key order; notifies subscribers of stores."""

    def __init__(self, settings: Union[Mapping[str, Setting], Iterable[Setting]]) -> None:
        if isinstance(settings, Mapping):
            pairs = list(settings.items())
        else:
            pairs = [(setting.key, setting) for setting in settings]
        self._settings: Dict[str, Setting] = dict(sorted(pairs, key=lambda pair: pair[0]))
        self._subscribers: List[Callable[[str], None]] = []

    def __getitem__(self, name: str) -> Setting:
        return self._settings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)

    def __len__(self) -> int:
        return len(self._settings)

    def keys(self) -> List[str]:  # type: ignore[override]
        """Setting keys in sorted order."""
        return list(self._settings)

    def subscribe(self, callback: Callable[[str], None]) -> None:
        """Call ``callback(name)`` after every :meth:`store_value` of a known setting."""
        self._subscribers.append(callback)

    def read_value(self, name: str, default: Any = None) -> Any:
        setting = self._settings.get(name)
        return setting.value if setting is not None else default

    def store_value(self, name: str, value: Any) -> None:
        """Set a setting's value; unknown names are ignored."""
        setting = self._settings.get(name)
        if setting is None:
            return
        setting.set(value)
        for callback in list(self._subscribers):
            callback(name)

    def read_bool(self, name: str) -> bool:
        value = self.read_value(name)
        return value if isinstance(value, bool) else False

    def read_int(self, name: str) -> int:
        value = self.read_value(name)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return 0

    def read_string(self, name: str) -> str:
        value = self.read_value(name)
        return value if isinstance(value, str) else ""