"""Formatting helpers shared by results, runtypes and exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .runtype import IRuntype


def type_of(value: Any) -> str:
    """Coarse type name of *value* for failure messages."""
    if value is None:
        return "None"
    return type(value).__name__


def show(runtype: IRuntype, seen: frozenset[int] = frozenset()) -> str:
    """
    Describe *runtype* for humans.

    Runtypes without a ``show`` method (foreign implementations of the
    protocol) are described by their tag.
    """
    describe = getattr(runtype, "show", None)
    if describe is None:
        return str(runtype.tag)
    return str(describe(seen))


def render_details(details: Mapping[Any, Any], path: str = "") -> list[str]:
    """
    Flatten a details tree into ``"[0][1]: message"`` lines.

    Keys are rendered in insertion order, which for tuples is index order.
    """
    lines: list[str] = []
    for key, entry in details.items():
        key_path = f"{path}[{key}]"
        if isinstance(entry, dict):
            lines.extend(render_details(entry, key_path))
        else:
            lines.append(f"{key_path}: {entry}")
    return lines
