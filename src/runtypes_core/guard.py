"""CycleGuard — stops a runtype from re-validating a value it is already checking."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .result import success

if TYPE_CHECKING:
    from collections.abc import Callable

    from .result import Result
    from .runtype import IRuntype

logger = logging.getLogger("runtypes.guard")

# Values of these types cannot contain themselves.
_UNTRACKED = (type(None), bool, int, float, complex, str, bytes)


class CycleGuard:
    """
    Identity-keyed record of ``(runtype, value)`` pairs in progress.

    One guard is created per top-level ``validate`` call and handed down to
    every nested call of that validation tree.  When a recursive runtype
    reaches a value it is already validating (a cyclic object graph), the
    guard answers with a success instead of recursing again.

    Usage::

        guard = CycleGuard()
        result = guard.visit(runtype, value, lambda: check(value, guard))
    """

    def __init__(self) -> None:
        # Entries keep both objects alive so their ids stay unique.
        self._in_progress: dict[tuple[int, int], tuple[IRuntype, Any]] = {}

    def visit(
        self,
        runtype: IRuntype,
        value: Any,
        on_first_visit: Callable[[], Result[Any]],
    ) -> Result[Any]:
        """Run *on_first_visit* unless this pair is already being validated."""
        if isinstance(value, _UNTRACKED):
            return on_first_visit()

        key = (id(runtype), id(value))
        if key in self._in_progress:
            logger.debug(
                "Cycle detected for %s runtype on %s; skipping revisit",
                runtype.tag,
                type(value).__name__,
            )
            return success(value)

        self._in_progress[key] = (runtype, value)
        try:
            return on_first_visit()
        finally:
            del self._in_progress[key]

    def is_visiting(self, runtype: IRuntype, value: Any) -> bool:
        return (id(runtype), id(value)) in self._in_progress

    def __len__(self) -> int:
        return len(self._in_progress)
