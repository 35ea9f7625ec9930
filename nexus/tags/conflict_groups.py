"""Profile-level tag conflict warnings

Tags inside one group are usually alternatives to each other. Holding two of
them is allowed (people can be fluid or questioning), so conflicts here only
produce warnings, unlike the hard conflicts used when scoring HOSTs.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from loguru import logger


TAG_CONFLICT_GROUPS = MappingProxyType({
    "relationship_structure_exclusive": (
        "Monogamy", "Polyamory", "Relationship Anarchy", "Solo Polyamory",
    ),
    "sexual_orientation": (
        "Heterosexual", "Homosexual/Gay/Lesbian", "Bisexual", "Pansexual", "Asexual",
    ),
    "libido_level": ("High Libido", "Low Libido"),
    "desire_type": ("Spontaneous Desire", "Responsive Desire"),
    "intimacy_pace": ("Tantric/Slow Intimacy", "Quickie Enthusiast"),
    "social_energy": ("Introvert", "Extrovert"),  # Ambivert fits both
    "children_preference": ("Childfree", "Wants Children"),
    "experience_level": ("Sexually Experienced", "Sexually Inexperienced"),
    "kink_level": ("Vanilla/Traditional", "Kink Experienced"),
    "religious_stance": ("Spiritual/Religious", "Atheist/Agnostic"),
    "political_stance": ("Politically Progressive", "Politically Conservative"),
})


@dataclass(frozen=True)
class TagConflictWarning:
    """Two alternative tags held together"""
    key: str            # "A|B", sorted, stable across both orderings
    new_tag: str
    existing_tag: str
    group: str


def conflict_key(tag_a: str, tag_b: str) -> str:
    return "|".join(sorted((tag_a, tag_b)))


def check_tag_conflicts(
    new_tag: str,
    existing_tags: Iterable[str],
    dismissed: Iterable[str] = ()
) -> list[TagConflictWarning]:
    """
    Warn when a tag being added is an alternative to one already held

    Args:
        new_tag: Tag name about to be added
        existing_tags: Tag names the user already holds
        dismissed: Conflict keys the user has already acknowledged

    Returns:
        One warning per (group, existing tag) pair, in group declaration order
    """
    held = set(existing_tags)
    dismissed = set(dismissed)
    warnings = []

    for group, members in TAG_CONFLICT_GROUPS.items():
        if new_tag not in members:
            continue
        for existing in members:
            if existing == new_tag or existing not in held:
                continue
            key = conflict_key(new_tag, existing)
            if key in dismissed:
                continue
            warnings.append(TagConflictWarning(
                key=key,
                new_tag=new_tag,
                existing_tag=existing,
                group=group,
            ))

    if warnings:
        logger.debug(f"Tag {new_tag!r} conflicts with {[w.existing_tag for w in warnings]}")
    return warnings
