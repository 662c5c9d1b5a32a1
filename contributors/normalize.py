import re
from typing import List

EMAIL_MARKUP_RE = re.compile(r"<[^>]+>")
CONNECTORS_RE = re.compile(r"[,/&+]+")

# Pieces of a multi-author byline that are not names
SPLIT_NOISE = {"others", "?"}


def strip_email(s: str) -> str:
    # Only the first <...> span is removed
    return EMAIL_MARKUP_RE.sub("", s, count=1)


def sanitize_name(s: str) -> str:
    return strip_email(s).strip()


def split_connectors(s: str) -> List[str]:
    """
    Split a byline such as "Rick Olson/Nicholas Seckar" on any run of
    connector characters. Empty pieces and noise tokens are dropped and the
    order of appearance is kept.
    """
    parts = [p.strip() for p in CONNECTORS_RE.split(s)]
    return [p for p in parts if p and p not in SPLIT_NOISE]
