"""
Factory for building runtypes from dictionary / JSON definitions.

Example::

    pair = RuntypeFactory.from_dict(
        {
            "tag": "tuple",
            "components": [{"tag": "number"}, {"tag": "string"}],
        }
    )
    pair.validate([1, "a"])  # Success([1, "a"])
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import DefinitionError, UnknownTagError
from .schema import DEFINITION_ADAPTER, SERIALIZABLE_TAGS, TupleDefinition

if TYPE_CHECKING:
    from collections.abc import Collection

    from pydantic_core import ErrorDetails

    from .runtype import IRuntype
    from .schema import RuntypeDefinition

logger = logging.getLogger("runtypes.factory")

_ROOT = "<root>"


class RuntypeFactory:
    """
    Builds runtypes from their serialized form (the output of ``to_dict()``).

    Supports:
    - ``from_dict(data)`` — check and build a nested definition
    - ``from_json(text)`` — parse a JSON string, then ``from_dict``
    - ``validate(data)``  — list every problem without building
    """

    # ------------------------------------------------------------------ #
    # Public API                                                          #
    # ------------------------------------------------------------------ #

    @staticmethod
    def from_dict(
        data: dict[str, Any],
        *,
        allowed_tags: Collection[str] | None = None,
    ) -> IRuntype:
        """
        Build a runtype from a definition dictionary.

        Parameters
        ----------
        data:
            The definition (potentially nested).
        allowed_tags:
            Optional whitelist of runtype tags.  Any other tag in the
            definition raises :class:`DefinitionError`.

        Raises
        ------
        UnknownTagError:
            A ``tag`` names no serializable runtype.
        DefinitionError:
            Any other structural problem.
        """
        try:
            definition = DEFINITION_ADAPTER.validate_python(data)
        except PydanticValidationError as exc:
            raise _to_definition_error(exc.errors()[0]) from exc

        if allowed_tags is not None:
            errors = _disallowed_tags(definition, allowed_tags)
            if errors:
                path, message = errors[0]
                raise DefinitionError(message, path=path)

        runtype = definition.build()
        logger.debug("Built %s runtype from definition", runtype.tag)
        return runtype

    @staticmethod
    def from_json(
        text: str,
        *,
        allowed_tags: Collection[str] | None = None,
    ) -> IRuntype:
        """Parse a JSON string and build a runtype."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DefinitionError(f"Invalid JSON: {exc}", path=_ROOT) from exc

        if not isinstance(data, dict):
            raise DefinitionError(
                "Top-level JSON value must be an object",
                path=_ROOT,
            )

        return RuntypeFactory.from_dict(data, allowed_tags=allowed_tags)

    @staticmethod
    def validate(
        data: Any,
        *,
        allowed_tags: Collection[str] | None = None,
    ) -> list[str]:
        """
        Check a definition and return a list of error messages.

        Returns an empty list when the definition is valid.
        """
        try:
            definition = DEFINITION_ADAPTER.validate_python(data)
        except PydanticValidationError as exc:
            return [
                f"{err.path}: {err.message}"
                for err in map(_to_definition_error, exc.errors())
            ]

        if allowed_tags is None:
            return []
        return [
            f"{path}: {message}"
            for path, message in _disallowed_tags(definition, allowed_tags)
        ]


# ---------------------------------------------------------------------- #
# Internal                                                               #
# ---------------------------------------------------------------------- #


def _path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or _ROOT


def _strip_union_tags(loc: tuple[int | str, ...]) -> tuple[int | str, ...]:
    """
    Drop the discriminator entries pydantic inserts into error locations.

    A union member is entered at the root and at every component index, so
    ``("tuple", "components", 1, "number", "x")`` becomes
    ``("components", 1, "x")``.
    """
    stripped: list[int | str] = []
    for position, part in enumerate(loc):
        entering_union = position == 0 or isinstance(loc[position - 1], int)
        if entering_union and part in SERIALIZABLE_TAGS:
            continue
        stripped.append(part)
    return tuple(stripped)


def _to_definition_error(error: ErrorDetails) -> DefinitionError:
    path = _path(_strip_union_tags(error["loc"]))
    if error["type"] == "union_tag_invalid":
        tag = str(error.get("ctx", {}).get("tag", ""))
        return UnknownTagError(tag, list(SERIALIZABLE_TAGS), path=path)
    return DefinitionError(error["msg"], path=path)


def _disallowed_tags(
    definition: RuntypeDefinition,
    allowed_tags: Collection[str],
    loc: tuple[int | str, ...] = (),
) -> list[tuple[str, str]]:
    errors: list[tuple[str, str]] = []
    if definition.tag not in allowed_tags:
        errors.append((_path(loc), f"Runtype tag '{definition.tag}' is not allowed"))
    if isinstance(definition, TupleDefinition):
        for index, component in enumerate(definition.components):
            errors.extend(
                _disallowed_tags(component, allowed_tags, (*loc, "components", index))
            )
    return errors
