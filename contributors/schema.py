"""
Validation of the static name configuration.

A broken alias table is a configuration defect, so problems are collected
and reported together at build time rather than surfacing per lookup.
"""

from typing import Any, Dict, List

from .normalize import sanitize_name


class ConfigurationError(Exception):
    """Raised when the static name configuration is inconsistent."""
    pass


class AliasConflictError(ConfigurationError):
    """Raised when the alias table violates its invariants."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid alias table: " + "; ".join(self.errors))


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def alias_list(also_as: Any) -> List[Any]:
    """A single alias may be given as a bare string."""
    if isinstance(also_as, (list, tuple)):
        return list(also_as)
    return [also_as]


def validate_alias_table(table: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    """
    errors: List[str] = []
    owner: Dict[str, str] = {}

    for canonical, also_as in table.items():
        if not _is_non_empty_str(canonical):
            errors.append(f"Canonical name {canonical!r} must be a non-empty string")
            continue
        if sanitize_name(canonical) != canonical:
            errors.append(f"Canonical name {canonical!r} is not sanitized")

        for alias in alias_list(also_as):
            if not _is_non_empty_str(alias):
                errors.append(f"Alias {alias!r} of {canonical!r} must be a non-empty string")
                continue
            if sanitize_name(alias) != alias:
                errors.append(f"Alias {alias!r} of {canonical!r} can never match a sanitized name")
            if alias in owner and owner[alias] != canonical:
                errors.append(
                    f"Alias {alias!r} is listed under both {owner[alias]!r} and {canonical!r}"
                )
            owner[alias] = canonical

    # An alias that is also a canonical name would break idempotence
    for alias, canonical in owner.items():
        if alias in table and alias != canonical:
            errors.append(f"Alias {alias!r} of {canonical!r} is itself a canonical name")

    return errors
