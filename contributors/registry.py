"""
Alias registry: maps any known spelling of a contributor to its canonical name.

The reverse index is built once from the static alias table and never
mutated afterwards, so a registry can be shared by any number of readers.
Rebuilding produces a new registry which is published in a single
assignment.
"""

import hashlib
import json
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Set, Tuple

from .aliases import SEEN_ALSO_AS
from .logger import get_logger
from .normalize import sanitize_name
from .schema import AliasConflictError, alias_list, validate_alias_table


class AliasRegistry:
    """Immutable alias table plus its reverse index."""

    def __init__(self, table: Mapping[str, Tuple[str, ...]], reverse_index: Mapping[str, str]):
        self._table = MappingProxyType(dict(table))
        self._reverse = MappingProxyType(dict(reverse_index))
        self.version = _table_digest(self._table)

    @classmethod
    def build(cls, table: Dict[str, Any], strict: bool = True) -> "AliasRegistry":
        """
        Invert an alias table into a registry.

        Args:
            table: canonical name => alias or list of aliases
            strict: raise on invalid tables instead of logging them

        Raises:
            AliasConflictError: the table is invalid and strict is set.
                When not strict, a reused alias goes to the later entry.
        """
        errors = validate_alias_table(table)
        if errors:
            if strict:
                raise AliasConflictError(errors)
            for error in errors:
                get_logger().warning("Alias table problem", error=error)

        normalized = {}
        reverse = {}
        for canonical, also_as in table.items():
            aliases = tuple(alias_list(also_as))
            normalized[canonical] = aliases
            for alt in aliases:
                reverse[alt] = canonical

        get_logger().debug(
            "Alias registry built",
            canonical_names=len(normalized),
            aliases=len(reverse),
        )
        return cls(normalized, reverse)

    def canonical_name_for(self, name: str) -> str:
        """
        Returns the canonical name for name.

        Email addresses in angles are removed and surrounding whitespace is
        ignored. If no equivalence is known the sanitized string is the
        canonical name by definition.
        """
        name = sanitize_name(name)
        return self._reverse.get(name, name)

    def is_alias(self, name: str) -> bool:
        return sanitize_name(name) in self._reverse

    def aliases_for(self, canonical: str) -> Tuple[str, ...]:
        return self._table.get(canonical, ())

    def canonical_names(self) -> Set[str]:
        return set(self._table)

    def __len__(self) -> int:
        return len(self._reverse)


def _table_digest(table: Mapping[str, Tuple[str, ...]]) -> str:
    payload = json.dumps(
        {k: list(v) for k, v in table.items()},
        sort_keys=True,
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


# Process-wide registry built from SEEN_ALSO_AS
_registry: Optional[AliasRegistry] = None


def get_registry() -> AliasRegistry:
    """Get or build the shared registry."""
    global _registry

    if _registry is None:
        _registry = AliasRegistry.build(SEEN_ALSO_AS)

    return _registry


def reload_registry(table: Optional[Dict[str, Any]] = None, strict: bool = True) -> AliasRegistry:
    """
    Rebuild the shared registry and publish it.

    The new registry is complete before it replaces the old one, so readers
    see either the previous index or the new one. If the build fails the
    previous registry stays in place.
    """
    global _registry

    registry = AliasRegistry.build(SEEN_ALSO_AS if table is None else table, strict=strict)
    _registry = registry
    get_logger().info("Alias registry reloaded", version=registry.version[:12])
    return registry


def canonical_name_for(name: str) -> str:
    return get_registry().canonical_name_for(name)
