"""
Hand-made alias table for contributor names.

Some people appear in commit logs under different names: nicks, typos,
email addresses, shortenings, etc. This table maps them to a canonical
name so commits from the same real author can be aggregated.

The mapping uses exact strings, not patterns. Keep it strict.
"""


def email(user: str, domain: str) -> str:
    """Build an address from its parts so this file stays readable."""
    return user + "@" + domain


# canonical name => handles, emails, typos, etc. (a string or a list)
SEEN_ALSO_AS = {
    "Tom Robinson": ["Thomas Robinson", "tlrobinson"],
    "Francisco Ryan Tolmasky I": ["Francisco Ryan Tolmasky", "Francisco Tolmasky", "tolmasky"],
    "Nicholas Small": "nciagra",
}
