"""
Tuple runtype: a fixed-length sequence checked position by position.

Example::

    Point = Tuple(Number, Number)
    Point.validate([1, 2])        # Success([1, 2])
    Point.validate([1])           # Failure(CONSTRAINT_FAILED, ...)
    Point.validate([1, "a"])      # Failure(CONTENT_INCORRECT, details={1: "..."})
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from .exceptions import DefinitionError
from .result import Failcode, Failure, failure, success
from .runtype import BaseRuntype, IRuntype
from .utils import show

if TYPE_CHECKING:
    from .guard import CycleGuard
    from .result import Details, Result

# Text and binary buffers are not positional containers.
_TEXT_TYPES = (str, bytes, bytearray, memoryview)


@dataclass(frozen=True)
class TupleRuntype(BaseRuntype):
    """
    Runtype for an ordered sequence of exactly ``len(components)`` elements.

    ``is_readonly`` only appears in ``to_dict()``.  Validation is the same
    for both flag states.
    """

    components: tuple[IRuntype, ...]
    is_readonly: bool = False
    tag: ClassVar[str] = "tuple"

    def _validate(self, value: Any, guard: CycleGuard) -> Result[Any]:
        if not isinstance(value, Sequence) or isinstance(value, _TEXT_TYPES):
            return failure(Failcode.TYPE_INCORRECT, self, value)

        if len(value) != len(self.components):
            return failure(
                Failcode.CONSTRAINT_FAILED,
                self,
                f"Expected length {len(self.components)}, but was {len(value)}",
            )

        details: Details = {}
        for index, component in enumerate(self.components):
            result = component.validate(value[index], guard)
            if isinstance(result, Failure):
                details[index] = result.details or result.message

        if details:
            return failure(Failcode.CONTENT_INCORRECT, self, details)
        return success(value)

    # -- variants ------------------------------------------------------------

    def as_readonly(self) -> TupleRuntype:
        """Return a read-only flagged copy sharing the same components."""
        return dataclasses.replace(self, is_readonly=True)

    # -- reflection ----------------------------------------------------------

    def show(self, seen: frozenset[int] = frozenset()) -> str:
        inner = ", ".join(show(component, seen) for component in self.components)
        return f"[{inner}]"

    def to_dict(self) -> dict[str, Any]:
        return {
            "tag": self.tag,
            "is_readonly": self.is_readonly,
            "components": [_component_to_dict(c) for c in self.components],
        }


def _component_to_dict(component: IRuntype) -> dict[str, Any]:
    to_dict = getattr(component, "to_dict", None)
    if to_dict is None:
        return {"tag": component.tag}
    result: dict[str, Any] = to_dict()
    return result


def Tuple(*components: IRuntype) -> TupleRuntype:  # noqa: N802
    """
    Construct a tuple runtype from runtypes for each of its elements.

    Raises:
        DefinitionError: If a component does not implement ``IRuntype``.
    """
    for index, component in enumerate(components):
        if not isinstance(component, IRuntype):
            raise DefinitionError(
                f"Tuple component must be a runtype, got {type(component).__name__}",
                path=f"components.{index}",
            )
    return TupleRuntype(components=tuple(components))
