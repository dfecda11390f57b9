"""Result algebra: Success / Failure outcomes of a validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar, Union

from .utils import show, type_of

if TYPE_CHECKING:
    from collections.abc import Callable

    from .runtype import IRuntype

T = TypeVar("T")

Details = dict[Union[int, str], Union[str, "Details"]]


class Failcode(str, Enum):
    """Reasons a value can fail validation."""

    TYPE_INCORRECT = "TYPE_INCORRECT"
    CONSTRAINT_FAILED = "CONSTRAINT_FAILED"
    CONTENT_INCORRECT = "CONTENT_INCORRECT"


@dataclass(frozen=True)
class Success(Generic[T]):
    """The value conformed. ``value`` is the validated object itself."""

    value: T
    success: ClassVar[bool] = True


@dataclass(frozen=True)
class Failure:
    """
    The value did not conform.

    Attributes:
        code: Which kind of check failed.
        message: Human-readable summary.
        details: For ``CONTENT_INCORRECT`` only, a tree keyed like the
            validated value (indices for tuples) whose leaves are messages.
    """

    code: Failcode
    message: str
    details: Details | None = None
    success: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


Result = Union[Success[T], Failure]


def success(value: T) -> Success[T]:
    return Success(value)


def _type_incorrect(runtype: IRuntype, value: Any) -> Failure:
    return Failure(
        Failcode.TYPE_INCORRECT,
        f"Expected {show(runtype)}, but was {type_of(value)}",
    )


def _constraint_failed(runtype: IRuntype, message: str) -> Failure:
    return Failure(Failcode.CONSTRAINT_FAILED, message)


def _content_incorrect(runtype: IRuntype, details: Details) -> Failure:
    return Failure(
        Failcode.CONTENT_INCORRECT,
        f"Expected {show(runtype)}, but was incompatible",
        details,
    )


_BUILDERS: dict[Failcode, Callable[[IRuntype, Any], Failure]] = {
    Failcode.TYPE_INCORRECT: _type_incorrect,
    Failcode.CONSTRAINT_FAILED: _constraint_failed,
    Failcode.CONTENT_INCORRECT: _content_incorrect,
}


def failure(code: Failcode, runtype: IRuntype, extra: Any = None) -> Failure:
    """
    Build a :class:`Failure` for *runtype*.

    ``extra`` depends on *code*: the offending value for ``TYPE_INCORRECT``,
    the constraint message for ``CONSTRAINT_FAILED`` and the details mapping
    for ``CONTENT_INCORRECT``.
    """
    return _BUILDERS[code](runtype, extra)
