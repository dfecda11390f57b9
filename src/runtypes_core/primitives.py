"""Atomic runtypes: Unknown, Number, String, Boolean."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .result import Failcode, failure, success
from .runtype import BaseRuntype

if TYPE_CHECKING:
    from .guard import CycleGuard
    from .result import Result


@dataclass(frozen=True)
class UnknownRuntype(BaseRuntype):
    """Accepts any value."""

    tag: ClassVar[str] = "unknown"

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        return success(value)


@dataclass(frozen=True)
class NumberRuntype(BaseRuntype):
    """Accepts ``int`` and ``float``, but not ``bool``."""

    tag: ClassVar[str] = "number"

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        if isinstance(value, bool) or not isinstance(value, int | float):
            return failure(Failcode.TYPE_INCORRECT, self, value)
        return success(value)


@dataclass(frozen=True)
class StringRuntype(BaseRuntype):
    tag: ClassVar[str] = "string"

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        if not isinstance(value, str):
            return failure(Failcode.TYPE_INCORRECT, self, value)
        return success(value)


@dataclass(frozen=True)
class BooleanRuntype(BaseRuntype):
    tag: ClassVar[str] = "boolean"

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        if not isinstance(value, bool):
            return failure(Failcode.TYPE_INCORRECT, self, value)
        return success(value)


Unknown = UnknownRuntype()
Number = NumberRuntype()
String = StringRuntype()
Boolean = BooleanRuntype()
