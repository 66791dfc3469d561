"""chronotypes — date/time type constraints and coercions.

Named types for datetimes, durations, time zones and locales, each with an
ordered table of coercions from numbers, strings, string-keyed mappings and
language-tagged objects::

    >>> from chronotypes import TypeName, coerce
    >>> coerce(TypeName.DATETIME, 0).isoformat()
    '1970-01-01T00:00:00+00:00'
"""

from chronotypes.domain.errors import (
    ChronoTypesError,
    CoercionError,
    ConversionFailedError,
    NoApplicableRuleError,
    UnknownTypeError,
)
from chronotypes.domain.rules import CoercionRule, TypeDescriptor
from chronotypes.domain.shapes import classify_shape
from chronotypes.domain.types import CoercionReason, Shape, TypeName
from chronotypes.services.registry import (
    REGISTRY,
    TypeRegistry,
    add_coercion,
    coerce,
    describe,
    is_registered,
    register_alias,
    register_type,
    try_coerce,
)
from chronotypes.services.result import CoercionFailure, CoercionResult

__version__ = "0.2.0"

__all__ = [
    "REGISTRY",
    "ChronoTypesError",
    "CoercionError",
    "CoercionFailure",
    "CoercionReason",
    "CoercionResult",
    "CoercionRule",
    "ConversionFailedError",
    "NoApplicableRuleError",
    "Shape",
    "TypeDescriptor",
    "TypeName",
    "TypeRegistry",
    "UnknownTypeError",
    "__version__",
    "add_coercion",
    "classify_shape",
    "coerce",
    "describe",
    "is_registered",
    "register_alias",
    "register_type",
    "try_coerce",
]
