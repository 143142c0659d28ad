"""
Typed QSettings-backed attributes for settings subsystems.

A subsystem class declares its stored values as class attributes:

    class LoggingSettings:
        file_logging = BoolOption("logging/file_enabled", False)

and keeps the QSettings instance in `self.settings`. Every write is synced
immediately.
"""

import logging
from typing import Any, Callable, Generic, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_bool(value: Any, default: bool) -> bool:
    """Interpret a stored value as a boolean.

    INI files hand back "true"/"false" strings while the in-memory cache
    keeps real booleans; both are accepted.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


class Option(Generic[T]):
    """Base descriptor mapping an attribute onto one settings key."""

    def __init__(self, key: str, default: T):
        self.key = key
        self.default = default
        self.name = key

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def convert(self, raw: Any) -> T:
        raise NotImplementedError

    def accepts(self, value: T) -> bool:
        return True

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return self.convert(obj.settings.value(self.key, self.default))

    def __set__(self, obj: Any, value: T) -> None:
        if not self.accepts(value):
            logger.warning(
                f"Invalid {self.name}: {value!r}, keeping current: {self.__get__(obj)!r}"
            )
            return
        obj.settings.setValue(self.key, value)
        obj.settings.sync()


class StrOption(Option[str]):
    """String setting, optionally normalized on write."""

    def __init__(
        self,
        key: str,
        default: str,
        choices: Optional[Sequence[str]] = None,
        normalize: Optional[Callable[[str], str]] = None,
    ):
        super().__init__(key, default)
        self.choices = choices
        self.normalize = normalize

    def convert(self, raw: Any) -> str:
        return self.default if raw is None else str(raw)

    def accepts(self, value: str) -> bool:
        return self.choices is None or value in self.choices

    def __set__(self, obj: Any, value: str) -> None:
        if self.normalize is not None:
            value = self.normalize(value)
        super().__set__(obj, value)


class BoolOption(Option[bool]):
    def convert(self, raw: Any) -> bool:
        return read_bool(raw, self.default)

    def __set__(self, obj: Any, value: bool) -> None:
        super().__set__(obj, bool(value))
