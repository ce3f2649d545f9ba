"""
Status codes: a numeric value paired with the category that interprets it.

An ErrorCode is falsy when its value is 0 (ok) and truthy otherwise, so
``if code:`` reads as "if this signals a failure". The category gives the code
a name and turns the number into a human-readable message.

Features:
    - **ErrorCode:** frozen (value, category) pair, ``ErrorCode.ok()`` for success
    - **system_category / generic_category:** OS error strings via os.strerror
    - **EnumCategory:** turn any IntEnum into a status category
    - **make_error_code:** IntEnum member -> ErrorCode
    - **ErrorCode.from_exception:** OSError errno -> ErrorCode

Examples:
    >>> import errno
    >>> code = ErrorCode(errno.ENOENT, system_category())
    >>> bool(code)
    True
    >>> code.category.name
    'system'
    >>> bool(ErrorCode.ok())
    False

Tags:
    status-code, errno, error-category, handle-failure
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache


class StatusCategory(ABC):
    """Names a family of status values and renders their messages."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def message(self, value: int) -> str:
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class _OSCategory(StatusCategory):
    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def message(self, value: int) -> str:
        return os.strerror(value)


@lru_cache(maxsize=None)
def system_category() -> StatusCategory:
    """Category for operating-system error numbers."""
    return _OSCategory("system")


@lru_cache(maxsize=None)
def generic_category() -> StatusCategory:
    """Category for portable errno values."""
    return _OSCategory("generic")


class EnumCategory(StatusCategory):
    """
    Status category backed by an IntEnum.

    Messages come from the member name with underscores replaced by spaces
    unless a ``messages`` mapping provides an explicit text.
    """

    def __init__(
        self,
        enum_type: type[IntEnum],
        name: str | None = None,
        messages: dict[int, str] | None = None,
    ):
        self.enum_type = enum_type
        self._name = name or enum_type.__name__
        self._messages = dict(messages or {})

    @property
    def name(self) -> str:
        return self._name

    def message(self, value: int) -> str:
        if value in self._messages:
            return self._messages[value]
        try:
            member = self.enum_type(value)
        except ValueError:
            return f"unknown {self._name} value {value}"
        return member.name.replace("_", " ").lower()


_ENUM_CATEGORIES: dict[type[IntEnum], EnumCategory] = {}


def make_error_code(member: IntEnum) -> ErrorCode:
    """Build an ErrorCode from an IntEnum member, one category per enum type."""
    enum_type = type(member)
    category = _ENUM_CATEGORIES.get(enum_type)
    if category is None:
        category = _ENUM_CATEGORIES.setdefault(enum_type, EnumCategory(enum_type))
    return ErrorCode(int(member), category)


@dataclass(frozen=True, slots=True)
class ErrorCode:
    """A status value; zero means success."""

    value: int = 0
    category: StatusCategory = field(default_factory=system_category)

    @classmethod
    def ok(cls) -> ErrorCode:
        return cls(0, system_category())

    @classmethod
    def from_exception(cls, exc: OSError) -> ErrorCode:
        """Map an OSError's errno into the system category (0 if it has none)."""
        return cls(exc.errno or 0, system_category())

    def __bool__(self) -> bool:
        return self.value != 0

    def message(self) -> str:
        return self.category.message(self.value)

    def __str__(self) -> str:
        return f"{self.category.name}:{self.value}"


__all__ = [
    "StatusCategory",
    "EnumCategory",
    "ErrorCode",
    "system_category",
    "generic_category",
    "make_error_code",
]
