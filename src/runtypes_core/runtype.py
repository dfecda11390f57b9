"""Runtype contract: the IRuntype protocol and the BaseRuntype mixin."""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import partial
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from .exceptions import ValidationError
from .guard import CycleGuard
from .result import Failure

if TYPE_CHECKING:
    from .result import Result


@runtime_checkable
class IRuntype(Protocol):
    """
    Protocol every runtype satisfies, atomic or composite.

    ``tag`` names the kind of runtype (``"tuple"``, ``"number"``...) for
    consumers that introspect runtypes.  ``validate`` classifies a value and
    never raises for a non-conforming one.
    """

    tag: str

    def validate(self, value: Any, guard: CycleGuard | None = None) -> Result[Any]:
        """
        Validate *value*.

        *guard* is ``None`` for a top-level call.  Composites pass their
        own guard down to every component so the whole validation tree
        shares one.
        """
        ...


class BaseRuntype(ABC):
    """
    Shared behaviour for the built-in runtypes.

    Subclasses set ``tag`` and implement ``_validate``.
    """

    tag: str

    def validate(self, value: Any, guard: CycleGuard | None = None) -> Result[Any]:
        if guard is None:
            guard = CycleGuard()
        return guard.visit(self, value, partial(self._validate, value, guard))

    @abstractmethod
    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]: ...

    def check(self, value: Any) -> Any:
        """Return *value* unchanged if it conforms, else raise ``ValidationError``."""
        result = self.validate(value)
        if isinstance(result, Failure):
            raise ValidationError(result)
        return value

    def is_valid(self, value: Any) -> bool:
        return self.validate(value).success

    # -- reflection ----------------------------------------------------------

    def show(self, seen: frozenset[int] = frozenset()) -> str:
        return self.tag

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag}

    def __str__(self) -> str:
        return self.show()
