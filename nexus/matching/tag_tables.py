"""Static tag reference tables used by the compatibility scorer"""

from collections.abc import Iterable
from types import MappingProxyType
from typing import Optional


# HOST tag -> candidate tags that rule it out, scanned in declared order.
# Only the forward direction is consulted; the table is not guaranteed symmetric.
TAG_CONFLICTS = MappingProxyType({
    "Dominant": ("Submissive",),
    "Submissive": ("Dominant",),
    "Monogamy": ("Polyamory", "Open", "ENM"),
    "Polyamory": ("Monogamy",),
    "Vanilla": ("Kink-curious", "Power Exchange", "Primal", "Impact", "CNC", "Degradation"),
    "Asexual": ("High Libido",),
    "High Libido": ("Low Libido", "Asexual"),
    "Low Libido": ("High Libido",),
})

# Candidate tags that earn partial credit toward unmet HOST requirements
FLEXIBLE_TAGS = frozenset({"Switch", "Casual", "Playful", "Curious", "Open"})

TAG_CATEGORIES = MappingProxyType({
    "orientation": (
        "Straight", "Gay", "Lesbian", "Bisexual", "Pansexual", "Queer", "Asexual", "Demisexual",
    ),
    "relationship": (
        "Monogamy", "Polyamory", "Open", "Casual", "Long-term", "Marriage-minded", "ENM",
    ),
    "dynamic": (
        "Dominant", "Submissive", "Switch", "Vanilla", "Kink-curious", "Power Exchange",
        "Service", "Primal",
    ),
    "intensity": (
        "High Libido", "Low Libido", "Cuddly", "Touch-focused", "Sensual",
    ),
})

UNCATEGORIZED = "other"


def category_of(tag: str) -> Optional[str]:
    """Return the first category listing ``tag``, or None"""
    for category, members in TAG_CATEGORIES.items():
        if tag in members:
            return category
    return None


def categorize_tags(tags: Iterable[str]) -> dict[str, list[str]]:
    """Group tags by category, keeping input order within each group"""
    grouped: dict[str, list[str]] = {}
    for tag in tags:
        grouped.setdefault(category_of(tag) or UNCATEGORIZED, []).append(tag)
    return grouped
