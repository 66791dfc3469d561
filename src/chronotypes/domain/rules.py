"""Coercion rules and type descriptors.

Both are frozen. A descriptor's ``rules`` is a tuple; appending a rule
produces a new descriptor via :meth:`TypeDescriptor.with_rule`, so a reader
holding a descriptor never sees it change underneath.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any

ShapePredicate = Callable[[Any], bool]
ConvertFn = Callable[[Any], Any]


def _never(value: object) -> bool:
    return False


@dataclass(frozen=True)
class CoercionRule:
    """A shape predicate paired with the function that converts matching input."""

    matches: ShapePredicate
    convert: ConvertFn
    source: str = ""

    @property
    def label(self) -> str:
        """Source label for display, falling back to the predicate's name."""
        return self.source or getattr(self.matches, "__name__", repr(self.matches))


@dataclass(frozen=True)
class TypeDescriptor:
    """Registry entry for one type name.

    Attributes:
        name: Canonical type name.
        is_target: Predicate for "already of this type". Defaults to a
            predicate that accepts nothing.
        rules: Ordered coercion rules, tried first to last.
        description: Free-form human description.
        aliases: Additional lookup names resolving to this descriptor.
    """

    name: str
    is_target: ShapePredicate = _never
    rules: tuple[CoercionRule, ...] = ()
    description: str = ""
    aliases: tuple[str, ...] = field(default=())

    def with_rule(self, rule: CoercionRule) -> TypeDescriptor:
        return replace(self, rules=(*self.rules, rule))

    def with_alias(self, alias: str) -> TypeDescriptor:
        if alias in self.aliases:
            return self
        return replace(self, aliases=(*self.aliases, alias))

    def find_rule(self, value: Any) -> CoercionRule | None:
        """First rule whose predicate matches *value*, or None."""
        for rule in self.rules:
            if rule.matches(value):
                return rule
        return None

    def summary(self) -> dict[str, Any]:
        """JSON-friendly view used by the CLI."""
        return {
            "name": self.name,
            "description": self.description,
            "aliases": list(self.aliases),
            "coercions": [rule.label for rule in self.rules],
        }
