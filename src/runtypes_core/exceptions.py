"""
Runtype exception hierarchy.

Validation outcomes are returned as data; these exceptions cover caller
errors and the explicit ``check()`` API.  All inherit from ``RuntypeError``
and provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

from .utils import render_details

if TYPE_CHECKING:
    from .result import Failure


class RuntypeError(Exception):
    """Base exception for all runtype errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(RuntypeError):
    """
    Raised by ``check()`` when a value does not conform.

    The full detail tree is rendered into the message, one line per
    offending position::

        Expected [number, string], but was incompatible
          [1]: Expected string, but was int
    """

    def __init__(self, failure: Failure) -> None:
        self.failure = failure
        self.code = failure.code
        self.details = failure.details
        lines = [failure.message]
        if failure.details:
            lines.extend(f"  {line}" for line in render_details(failure.details))
        super().__init__("\n".join(lines))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            **self.failure.to_dict(),
        }


class DefinitionError(RuntypeError):
    """A runtype or a serialized runtype definition is malformed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "DEFINITION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class UnknownTagError(DefinitionError):
    """
    Unknown runtype tag in a definition.

    Provides fuzzy-matched suggestions for likely intended tags.
    """

    def __init__(
        self,
        tag: str,
        valid_tags: list[str],
        path: str | None = None,
    ) -> None:
        self.tag = tag
        self.valid_tags = valid_tags
        self.suggestions = get_close_matches(tag, valid_tags, n=3, cutoff=0.6)

        message = f"Unknown runtype tag: '{tag}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid tags: {', '.join(sorted(valid_tags))}"
        super().__init__(message, path=path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_TAG",
            "tag": self.tag,
            "path": self.path,
            "suggestions": self.suggestions,
            "valid_tags": sorted(self.valid_tags),
        }
