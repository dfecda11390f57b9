"""runtypes-core — composable runtime type validation.

Runtypes classify values as conforming or not and report where a value went
wrong.  They never coerce or transform what they check.
"""

from __future__ import annotations

from .exceptions import (
    DefinitionError,
    RuntypeError,
    UnknownTagError,
    ValidationError,
)
from .factory import RuntypeFactory
from .guard import CycleGuard
from .lazy import Lazy, LazyRuntype
from .primitives import (
    Boolean,
    BooleanRuntype,
    Number,
    NumberRuntype,
    String,
    StringRuntype,
    Unknown,
    UnknownRuntype,
)
from .result import Details, Failcode, Failure, Result, Success, failure, success
from .runtype import BaseRuntype, IRuntype
from .tuples import Tuple, TupleRuntype
from .utils import render_details

__all__ = [
    # Contract
    "IRuntype",
    "BaseRuntype",
    "CycleGuard",
    # Results
    "Result",
    "Success",
    "Failure",
    "Failcode",
    "Details",
    "success",
    "failure",
    # Runtypes
    "Tuple",
    "TupleRuntype",
    "Lazy",
    "LazyRuntype",
    "Unknown",
    "UnknownRuntype",
    "Number",
    "NumberRuntype",
    "String",
    "StringRuntype",
    "Boolean",
    "BooleanRuntype",
    # Definitions
    "RuntypeFactory",
    # Exceptions
    "RuntypeError",
    "ValidationError",
    "DefinitionError",
    "UnknownTagError",
    # Utilities
    "render_details",
]
