"""
Tri-state patch values.

An update payload field is either absent (leave the attribute alone),
explicitly null (clear it) or explicitly set. ``Optional[T]`` cannot tell
the first two apart, so update requests expose each field as a ``Patch``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Patch(Generic[T]):
    """One field of a partial update: ``Absent``, ``Explicit(None)`` or ``Explicit(value)``."""

    __slots__ = ("_present", "_value")

    def __init__(self, value: T | None = None, *, present: bool) -> None:
        if not present and value is not None:
            raise ValueError("an absent patch cannot carry a value")
        self._present = present
        self._value = value

    @classmethod
    def absent(cls) -> Patch[Any]:
        return _ABSENT

    @classmethod
    def of(cls, value: T | None) -> Patch[T]:
        return cls(value, present=True)

    @property
    def is_absent(self) -> bool:
        return not self._present

    @property
    def is_explicit(self) -> bool:
        """True for both ``Explicit(None)`` and ``Explicit(value)``."""
        return self._present

    @property
    def is_null(self) -> bool:
        return self._present and self._value is None

    @property
    def is_set(self) -> bool:
        return self._present and self._value is not None

    @property
    def value(self) -> T | None:
        if not self._present:
            raise LookupError("absent patch has no value")
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Patch):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        if not self._present:
            return "Patch.absent()"
        return f"Patch.of({self._value!r})"


_ABSENT: Patch[Any] = Patch(present=False)


class PatchRequest(BaseModel):
    """
    Base class for PATCH/PUT request bodies.

    Every field is declared ``X | None = None``; whether the client sent the
    key at all is recovered from ``model_fields_set``. Field constraints only
    ever run on non-null values, so an explicit null is never a format error.
    """

    def patch(self, field: str) -> Patch[Any]:
        if field not in type(self).model_fields:
            raise KeyError(f"{type(self).__name__} has no field {field!r}")
        if field not in self.model_fields_set:
            return Patch.absent()
        return Patch.of(getattr(self, field))

    def cleared(self, fields: Iterable[str]) -> list[str]:
        """Names among ``fields`` that were sent as explicit null."""
        return [name for name in fields if self.patch(name).is_null]

    @property
    def is_empty(self) -> bool:
        return not self.model_fields_set
