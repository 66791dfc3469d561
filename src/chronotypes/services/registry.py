"""TypeRegistry — named types and their ordered coercion rules.

The process-wide :data:`REGISTRY` is populated with the built-in date/time
types when this module is imported. The module-level functions
(:func:`register_type`, :func:`add_coercion`, :func:`coerce`, ...) operate on
it; construct a separate :class:`TypeRegistry` for isolated use.

INVARIANT: Writers are serialized by a lock. Descriptors are frozen and
replaced whole, so lock-free readers observe either the old or the new
rule tuple, never a partial one.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from chronotypes.domain.errors import (
    CoercionError,
    ConversionFailedError,
    NoApplicableRuleError,
    UnknownTypeError,
)
from chronotypes.domain.rules import CoercionRule, ConvertFn, ShapePredicate, TypeDescriptor
from chronotypes.services.result import CoercionFailure, CoercionResult

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Mapping of type name to :class:`TypeDescriptor`, plus coercion dispatch.

    Usage::

        registry = TypeRegistry()
        registry.register_type("Weekday", is_target=lambda v: isinstance(v, int))
        registry.add_coercion("Weekday", is_string, parse_weekday, source="string")
        registry.coerce("Weekday", "tue")
    """

    def __init__(self) -> None:
        self._descriptors: dict[str, TypeDescriptor] = {}
        self._aliases: dict[str, str] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_type(
        self,
        name: str,
        *,
        is_target: ShapePredicate | None = None,
        description: str = "",
    ) -> TypeDescriptor:
        """Register *name*, or return its descriptor if already registered.

        A type registered without *is_target* has no "already of this type"
        short-circuit; only its rules can produce a value.
        """
        name = str(name)
        with self._lock:
            existing = self._lookup(name)
            if existing is not None:
                return existing
            kwargs: dict[str, Any] = {"name": name, "description": description}
            if is_target is not None:
                kwargs["is_target"] = is_target
            descriptor = TypeDescriptor(**kwargs)
            self._descriptors[name] = descriptor
        logger.debug("Registered type: %s", name)
        return descriptor

    def add_coercion(
        self,
        name: str,
        matches: ShapePredicate,
        convert: ConvertFn,
        *,
        source: str = "",
    ) -> TypeDescriptor:
        """Append a coercion rule to *name*'s rule list.

        *source* labels the input shape the rule accepts; enum members are
        stored as their plain string value.

        Raises:
            UnknownTypeError: *name* was never registered. The registry is
                left unchanged.
        """
        with self._lock:
            descriptor = self._require(name)
            updated = descriptor.with_rule(CoercionRule(matches, convert, str(source)))
            self._descriptors[descriptor.name] = updated
        logger.debug("Added coercion to %s from %s", updated.name, updated.rules[-1].label)
        return updated

    def register_alias(self, alias: str, name: str) -> TypeDescriptor:
        """Make *alias* resolve to the descriptor registered as *name*.

        Raises:
            UnknownTypeError: *name* was never registered.
            ValueError: *alias* already names a different type.
        """
        alias = str(alias)
        with self._lock:
            descriptor = self._require(name)
            current = self._lookup(alias)
            if current is not None and current.name != descriptor.name:
                msg = f"Alias {alias!r} already refers to type {current.name!r}"
                raise ValueError(msg)
            if alias == descriptor.name:
                return descriptor
            updated = descriptor.with_alias(alias)
            self._descriptors[descriptor.name] = updated
            self._aliases[alias] = descriptor.name
        logger.debug("Registered alias %s -> %s", alias, updated.name)
        return updated

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_registered(self, name: str) -> bool:
        return self._lookup(str(name)) is not None

    def describe(self, name: str) -> TypeDescriptor:
        """Return the descriptor for *name* (canonical name or alias)."""
        return self._require(name)

    def names(self) -> list[str]:
        """Canonical type names in registration order."""
        return list(self._descriptors)

    def is_valid(self, name: str, value: Any) -> bool:
        """Whether *value* already satisfies *name*'s target predicate."""
        return bool(self._require(name).is_target(value))

    # ------------------------------------------------------------------
    # Coercion
    # ------------------------------------------------------------------

    def coerce(self, name: str, value: Any) -> Any:
        """Coerce *value* to the type registered as *name*.

        Values already of the target type are returned unchanged. Otherwise
        the first rule whose predicate matches converts the value.

        Raises:
            UnknownTypeError: *name* was never registered.
            NoApplicableRuleError: no rule matches the input's shape.
            ConversionFailedError: the matching rule's converter raised.
        """
        descriptor = self._require(name)
        if descriptor.is_target(value):
            return value
        rule = descriptor.find_rule(value)
        if rule is None:
            raise NoApplicableRuleError(descriptor.name, value)
        try:
            return rule.convert(value)
        except Exception as exc:
            raise ConversionFailedError(descriptor.name, value, exc) from exc

    def try_coerce(self, name: str, value: Any) -> CoercionResult:
        """Like :meth:`coerce`, but report failures as an explicit result."""
        type_name = str(name)
        try:
            coerced = self.coerce(type_name, value)
        except UnknownTypeError as exc:
            return CoercionResult(
                ok=False, type_name=type_name, error=CoercionFailure.unknown_type(exc)
            )
        except CoercionError as exc:
            return CoercionResult(
                ok=False,
                type_name=type_name,
                error=CoercionFailure(
                    code=str(exc.reason),
                    message=exc.message,
                    detail=exc.to_detail(),
                ),
            )
        return CoercionResult(ok=True, type_name=type_name, value=coerced)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lookup(self, name: str) -> TypeDescriptor | None:
        canonical = self._aliases.get(name, name)
        return self._descriptors.get(canonical)

    def _require(self, name: str) -> TypeDescriptor:
        descriptor = self._lookup(str(name))
        if descriptor is None:
            raise UnknownTypeError(name)
        return descriptor


REGISTRY = TypeRegistry()


def register_type(
    name: str,
    *,
    is_target: ShapePredicate | None = None,
    description: str = "",
) -> TypeDescriptor:
    """Register *name* on the process-wide registry."""
    return REGISTRY.register_type(name, is_target=is_target, description=description)


def add_coercion(
    name: str,
    matches: ShapePredicate,
    convert: ConvertFn,
    *,
    source: str = "",
) -> TypeDescriptor:
    return REGISTRY.add_coercion(name, matches, convert, source=source)


def register_alias(alias: str, name: str) -> TypeDescriptor:
    return REGISTRY.register_alias(alias, name)


def coerce(name: str, value: Any) -> Any:
    """Coerce *value* using the process-wide registry."""
    return REGISTRY.coerce(name, value)


def try_coerce(name: str, value: Any) -> CoercionResult:
    return REGISTRY.try_coerce(name, value)


def is_registered(name: str) -> bool:
    return REGISTRY.is_registered(name)


def describe(name: str) -> TypeDescriptor:
    return REGISTRY.describe(name)


def _install_builtins() -> None:
    """Populate :data:`REGISTRY` with the built-in date/time types."""
    from chronotypes.services.datetime_types import install_datetime_types

    install_datetime_types(REGISTRY)


_install_builtins()
