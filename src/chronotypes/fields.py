"""Pydantic field types backed by the type registry.

Annotate a model field with :class:`Coerce` (or use one of the ready-made
aliases) and pydantic runs the registry's coercion when the model is
validated::

    class Meeting(BaseModel):
        starts: CoercedDateTime
        length: CoercedDuration
        zone: CoercedTimeZone

    Meeting(starts="now", length=1800, zone="Africa/Timbuktu")

Coercion failures are reported as an ordinary ``ValidationError`` with the
error type ``chronotypes_coercion``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import TYPE_CHECKING, Annotated, Any

from babel import Locale
from pydantic_core import PydanticCustomError, core_schema

from chronotypes.domain.errors import CoercionError, UnknownTypeError
from chronotypes.domain.types import TypeName
from chronotypes.infrastructure.adapters import serialize_value

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

    from chronotypes.services.registry import TypeRegistry


@dataclass(frozen=True)
class Coerce:
    """Annotation marker: validate a field through ``registry.coerce(type_name, ...)``.

    Attributes:
        type_name: Registered type name or alias.
        registry: Registry to use; the process-wide one when None.
    """

    type_name: str
    registry: TypeRegistry | None = None

    def _resolve_registry(self) -> TypeRegistry:
        if self.registry is not None:
            return self.registry
        from chronotypes.services.registry import REGISTRY

        return REGISTRY

    def validate(self, value: Any) -> Any:
        try:
            return self._resolve_registry().coerce(self.type_name, value)
        except (CoercionError, UnknownTypeError) as exc:
            raise PydanticCustomError(
                "chronotypes_coercion",
                "Cannot coerce to {type_name}: {reason}",
                {"type_name": str(self.type_name), "reason": str(exc)},
            ) from exc

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            self.validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize_value, when_used="json"
            ),
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"description": f"Value coercible to {self.type_name}"}


CoercedDateTime = Annotated[datetime, Coerce(TypeName.DATETIME)]
CoercedDuration = Annotated[timedelta, Coerce(TypeName.DURATION)]
CoercedTimeZone = Annotated[tzinfo, Coerce(TypeName.TIMEZONE)]
CoercedLocale = Annotated[Locale, Coerce(TypeName.LOCALE)]
NowLiteralStr = Annotated[str, Coerce(TypeName.NOW_LITERAL)]
