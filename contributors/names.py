"""
Name resolution: raw log string -> set of canonical contributor names.

Each raw string goes through the special cases first, then every extracted
name is canonicalized independently.
"""

import hashlib
from typing import Dict, Iterable, Optional, Sequence, Set

from .logger import get_logger
from .registry import AliasRegistry, get_registry
from .rules import FALLBACK, LITERAL, SPECIAL_CASES, Rule, evaluate


def resolve_names(
    raw: str,
    fallback: Optional[str] = None,
    registry: Optional[AliasRegistry] = None,
    rules: Sequence[Rule] = SPECIAL_CASES,
) -> Set[str]:
    """
    Resolve one raw author string.

    Args:
        raw: String as found in the log
        fallback: Returned by the special cases when raw has no author
            (defaults to raw itself)
        registry: Alias registry (default: the shared one)
        rules: Special cases table

    Returns:
        Set of canonical names; blanks are dropped
    """
    if registry is None:
        registry = get_registry()
    return _resolve(raw, raw if fallback is None else fallback, registry, rules)


def resolve_all(
    raws: Iterable[str],
    fallback: Optional[str] = None,
    registry: Optional[AliasRegistry] = None,
    rules: Sequence[Rule] = SPECIAL_CASES,
) -> Dict[str, Set[str]]:
    """Resolve many raw strings, recording metrics on the shared logger."""
    if registry is None:
        registry = get_registry()
    logger = get_logger()

    resolved = {}
    for raw in raws:
        if raw in resolved:
            continue
        resolved[raw] = _resolve(raw, raw if fallback is None else fallback, registry, rules, logger)

    logger.debug("Resolved raw names", raws=len(resolved))
    return resolved


def _resolve(raw, fallback, registry, rules, logger=None) -> Set[str]:
    rule, extracted = evaluate(raw, fallback, rules)
    if not isinstance(extracted, list):
        extracted = [extracted]

    if logger is not None:
        logger.record_name(rule.label if rule else None)
        if rule is not None and rule.action == FALLBACK:
            logger.record_fallback()
        if len(extracted) > 1:
            logger.record_split()

    names = set()
    for name in extracted:
        canonical = registry.canonical_name_for(name)
        if logger is not None and registry.is_alias(name):
            logger.record_alias()
        if canonical:
            names.add(canonical)
    return names


def config_version(registry: Optional[AliasRegistry] = None, rules: Sequence[Rule] = SPECIAL_CASES) -> str:
    """
    Content-version marker of the name configuration.

    Changes whenever the alias table or the special cases (including their
    order and regex flags) change.
    """
    if registry is None:
        registry = get_registry()
    digest = hashlib.sha256(registry.version.encode("utf-8"))
    for rule in rules:
        digest.update(b"\n")
        digest.update(rule.describe().encode("utf-8"))
        if rule.kind != LITERAL:
            digest.update(f"/{rule.pattern.flags}".encode("utf-8"))
    return digest.hexdigest()


def mapping_updated_since(marker: Optional[str], registry: Optional[AliasRegistry] = None) -> bool:
    """Whether the alias table or special cases changed since marker was taken."""
    return marker is None or marker != config_version(registry)
