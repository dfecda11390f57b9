"""Lazy runtype — defers construction so a definition can refer to itself."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any, ClassVar

from .exceptions import DefinitionError
from .runtype import BaseRuntype, IRuntype
from .utils import show

if TYPE_CHECKING:
    from collections.abc import Callable

    from .guard import CycleGuard
    from .result import Result


@dataclass(frozen=True)
class LazyRuntype(BaseRuntype):
    """
    Runtype resolved from ``delegate()`` on first use.

    Usage::

        Node = Lazy(lambda: Tuple(Number, Node))

        cyclic = [1, None]
        cyclic[1] = cyclic
        Node.validate(cyclic)  # Success; the revisit is cut short by the guard
    """

    delegate: Callable[[], IRuntype]
    tag: ClassVar[str] = "lazy"

    @cached_property
    def underlying(self) -> IRuntype:
        runtype = self.delegate()
        if not isinstance(runtype, IRuntype):
            raise DefinitionError(
                f"Lazy delegate must return a runtype, got {type(runtype).__name__}"
            )
        return runtype

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        return self.underlying.validate(value, guard)

    def show(self, seen: frozenset[int] = frozenset()) -> str:
        if id(self) in seen:
            return f"CIRCULAR {self.underlying.tag}"
        return show(self.underlying, seen | {id(self)})


def Lazy(delegate: Callable[[], IRuntype]) -> LazyRuntype:  # noqa: N802
    """Construct a runtype defined by *delegate*, called when first needed."""
    return LazyRuntype(delegate)
