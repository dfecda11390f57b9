"""
Serialized runtype definitions.

Each serializable runtype kind has a frozen pydantic model mirroring the
output of its ``to_dict()``.  The models form a discriminated union on
``tag`` so a nested definition is checked in one pass, and ``build()``
turns a checked definition into the runtype it describes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .primitives import Boolean, Number, String, Unknown
from .tuples import Tuple

if TYPE_CHECKING:
    from .runtype import IRuntype
    from .tuples import TupleRuntype


class _Definition(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class UnknownDefinition(_Definition):
    tag: Literal["unknown"]

    def build(self) -> IRuntype:
        return Unknown


class NumberDefinition(_Definition):
    tag: Literal["number"]

    def build(self) -> IRuntype:
        return Number


class StringDefinition(_Definition):
    tag: Literal["string"]

    def build(self) -> IRuntype:
        return String


class BooleanDefinition(_Definition):
    tag: Literal["boolean"]

    def build(self) -> IRuntype:
        return Boolean


class TupleDefinition(_Definition):
    tag: Literal["tuple"]
    components: list[RuntypeDefinition] = Field(default_factory=list)
    is_readonly: bool = False

    def build(self) -> TupleRuntype:
        runtype = Tuple(*(component.build() for component in self.components))
        return runtype.as_readonly() if self.is_readonly else runtype


RuntypeDefinition = Annotated[
    Union[
        UnknownDefinition,
        NumberDefinition,
        StringDefinition,
        BooleanDefinition,
        TupleDefinition,
    ],
    Field(discriminator="tag"),
]

TupleDefinition.model_rebuild()

DEFINITION_ADAPTER: TypeAdapter[RuntypeDefinition] = TypeAdapter(RuntypeDefinition)

SERIALIZABLE_TAGS: tuple[str, ...] = (
    "unknown",
    "number",
    "string",
    "boolean",
    "tuple",
)
