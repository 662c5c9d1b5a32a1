"""
Special cases in raw author strings.

Author names are sometimes extracted from commit messages, and what sits
between the brackets there is not always a name. The rules below know about
those exceptions: they discard noise, fix typos and split multi-author
bylines. Canonicalization is done elsewhere.

Rules are evaluated in order and the first one that matches wins. Exact
literals are preferred over patterns because over-general patterns tend to
capture real names by accident.
"""

import re
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple, Union

from .aliases import email
from .normalize import CONNECTORS_RE, split_connectors

# Pattern kinds
LITERAL = "literal"
REGEX = "regex"
CONNECTORS = "connectors"

# Actions
FALLBACK = "fallback"
REPLACE = "replace"
GROUP = "group"
SPLIT = "split"

Resolution = Union[str, List[str]]

FLAG_LETTERS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
    (re.ASCII, "a"),
)


@dataclass(frozen=True)
class Rule:
    """One entry of the special cases table."""

    label: str
    kind: str
    pattern: Any
    action: str
    result: Any = None

    def match(self, name: str):
        """Returns a truthy match object, or None if the rule does not apply."""
        if self.kind == LITERAL:
            return name if name == self.pattern else None
        return self.pattern.search(name)

    def apply(self, name: str, fallback: str, match) -> Resolution:
        if self.action == FALLBACK:
            return fallback
        if self.action == REPLACE:
            return list(self.result) if isinstance(self.result, tuple) else self.result
        if self.action == GROUP:
            return match.group(self.result)
        return split_connectors(name)

    def flags(self) -> str:
        """Regex flags as letters, e.g. "im"; empty for literals."""
        if self.kind == LITERAL:
            return ""
        return "".join(letter for flag, letter in FLAG_LETTERS if self.pattern.flags & flag)

    def describe(self) -> str:
        if self.kind == LITERAL:
            pattern = repr(self.pattern)
        else:
            pattern = repr(self.pattern.pattern)
            if self.flags():
                pattern += "/" + self.flags()
        if self.action == REPLACE:
            outcome = repr(list(self.result) if isinstance(self.result, tuple) else self.result)
        elif self.action == GROUP:
            outcome = f"group {self.result}"
        else:
            outcome = self.action
        return f"{self.label}: {self.kind} {pattern} -> {outcome}"


def _regex(label: str, pattern: str, action: str, result: Any = None, flags: int = 0) -> Rule:
    return Rule(label, REGEX, re.compile(pattern, flags), action, result)


# Exact strings that carry no author
NOISE_LITERALS = [
    "update from Trac",
]

# Exact strings with a typo or extra words, and what they should read
NAME_OVERRIDES = {
    "Marcel Mollina Jr.": "Marcel Molina Jr.",  # there are two ls
    "Thanks to Austin Ziegler for Transaction::Simple": "Austin Ziegler",
    "Hongli Lai (Phusion": "Hongli Lai (Phusion)",
    "Leon Bredt": "Leon Breedt",
    "After much pestering from Dave Thomas": "Dave Thomas",
    "=?utf-8?q?Adam=20Cig=C3=A1nek?=": "Adam Cigánek",
}

# Exact bylines naming several authors
MULTI_AUTHOR_LITERALS = {
    "nik.wakelin Koz": ("nik.wakelin", "Koz"),
    "Jim Remsik and Tim Pope": ("Jim Remsik", "Tim Pope"),
    "Jeremy Hopple and Kevin Clark": ("Jeremy Hopple", "Kevin Clark"),
    "Yehuda Katz and Carl Lerche": ("Yehuda Katz", "Carl Lerche"),
    "Ross Kaffenburger and Bryan Helmkamp": ("Ross Kaffenberger", "Bryan Helmkamp"),  # Kaffenberger is correct
    f"{email('me', 'jonnii.com')} {email('rails', 'jeffcole.net')} Marcel Molina Jr.": (
        email("me", "jonnii.com"),
        email("rails", "jeffcole.net"),
        "Marcel Molina Jr.",
    ),
    f"{email('jeremy', 'planetargon.com')} Marcel Molina Jr.": (
        email("jeremy", "planetargon.com"),
        "Marcel Molina Jr.",
    ),
    f"{email('matt', 'mattmargolis.net')} Marcel Molina Jr.": (
        email("matt", "mattmargolis.net"),
        "Marcel Molina Jr.",
    ),
    f"{email('doppler', 'gmail.com')} {email('phil.ross', 'gmail.com')}": (
        email("doppler", "gmail.com"),
        email("phil.ross", "gmail.com"),
    ),
    "Aredridel/earlier work by Michael Neumann": ("Aredridel", "Michael Neumann"),
}

SPECIAL_CASES: Sequence[Rule] = (
    # Side effects of bracketed revision numbers, e.g. [5684]
    _regex("digits", r"\A\d+\Z", FALLBACK, flags=re.ASCII),
    _regex("blank", r"\A\s*\Z", FALLBACK),
    _regex("mailing-list", r"^See rails ML", FALLBACK, flags=re.MULTILINE),
    _regex("env-var", r"RAILS_ENV", FALLBACK),
    # RubyConf '05
    _regex("conference", r"RubyConf", FALLBACK),
    # Includes duplicates of changes from 1.1.4 - 1.2.3
    _regex("duplicates", r"^Includes duplicates of changes", FALLBACK, flags=re.MULTILINE),
    *(Rule("noise", LITERAL, s, FALLBACK) for s in NOISE_LITERALS),
    *(Rule("override", LITERAL, s, REPLACE, fixed) for s, fixed in NAME_OVERRIDES.items()),
    *(Rule("multi-author", LITERAL, s, REPLACE, names) for s, names in MULTI_AUTHOR_LITERALS.items()),
    # Spotted by Kevin Bullock
    # Aggregated by schoenm ~ at ~ earthlink.net
    _regex(
        "attribution",
        r"\A(Spotted|Suggested|Investigation|earlier work|Aggregated)\s+by\s+(.*)",
        GROUP,
        2,
        flags=re.IGNORECASE,
    ),
    # via Tim Bray
    _regex("via", r"\Avia\s+(.*)", GROUP, 1, flags=re.IGNORECASE),
    # [Adam Milligan, Pratik], [Rick Olson/Nicholas Seckar], Yehuda Katz + Carl Lerche
    Rule("connectors", CONNECTORS, CONNECTORS_RE, SPLIT),
)


def match_rule(name: str, rules: Sequence[Rule] = SPECIAL_CASES) -> Optional[Rule]:
    """Returns the first rule that applies to name, or None."""
    for rule in rules:
        if rule.match(name) is not None:
            return rule
    return None


def evaluate(
    name: str, fallback: str, rules: Sequence[Rule] = SPECIAL_CASES
) -> Tuple[Optional[Rule], Resolution]:
    """Returns the deciding rule and its result. The rule is None when nothing matched."""
    for rule in rules:
        match = rule.match(name)
        if match is not None:
            return rule, rule.apply(name, fallback, match)
    return None, name


def handle_special_cases(name: str, fallback: str, rules: Sequence[Rule] = SPECIAL_CASES) -> Resolution:
    """
    Extract the author name(s) in name as they appear in the log, correcting
    known typos. Returns a string or an ordered list of strings; fallback is
    returned when name carries no author, and name itself when no rule applies.
    """
    return evaluate(name, fallback, rules)[1]


def extract_names(name: str, fallback: str, rules: Sequence[Rule] = SPECIAL_CASES) -> List[str]:
    """Like handle_special_cases, but a single name comes back as a one-element list."""
    result = handle_special_cases(name, fallback, rules)
    if isinstance(result, list):
        return result
    return [result]


def describe_special_cases(rules: Sequence[Rule] = SPECIAL_CASES) -> List[str]:
    return [f"{i}. {rule.describe()}" for i, rule in enumerate(rules, 1)]
