"""Compatibility Scorer - Decide whether a persona can fill a HOST role"""

from collections.abc import Mapping, Set
from typing import Any

from loguru import logger

from nexus.data.schema import (
    CompatibilityLevel,
    CompatibilityResult,
    ConflictSeverity,
    MissingTag,
    Suggestion,
    SuggestionKind,
    TagConflict,
    TaggedEntity,
    coerce_entity,
)
from nexus.matching.tag_tables import FLEXIBLE_TAGS, TAG_CONFLICTS


class CompatibilityScorer:
    """
    Score a candidate (persona) against the tag requirements of a HOST

    Per HOST tag, in HOST order:
    - Verbatim match on the candidate: +10
    - Candidate holds a tag that conflicts with it: -5, hard conflict
    - Candidate holds any flexible tag: +3, missing but adaptable
    - Otherwise: 0, missing

    Each distinct candidate tag that is neither a HOST tag nor the tag behind
    a conflict adds a +1 bonus. The raw score is clamped to [0, 10 * n_host_tags]
    and scaled to 0-100.
    """

    MATCH_POINTS = 10
    CONFLICT_PENALTY = 5
    ADAPT_POINTS = 3
    BONUS_POINTS = 1

    # Level thresholds (checked after hard conflicts)
    EXCELLENT_THRESHOLD = 80
    GOOD_THRESHOLD = 60
    PARTIAL_THRESHOLD = 40

    MESSAGES = {
        CompatibilityLevel.INCOMPATIBLE: "{candidate} conflicts with HOST {host}",
        CompatibilityLevel.EXCELLENT: "{candidate} is a perfect fit for HOST {host}!",
        CompatibilityLevel.GOOD: "{candidate} can adapt to HOST {host}",
        CompatibilityLevel.PARTIAL: "{candidate} may struggle with some aspects of HOST {host}",
        CompatibilityLevel.POOR: "{candidate} isn't suited for HOST {host}",
    }

    def __init__(self,
                 conflicts: Mapping[str, tuple[str, ...]] = TAG_CONFLICTS,
                 flexible_tags: Set[str] = FLEXIBLE_TAGS):
        """
        Initialize compatibility scorer

        Args:
            conflicts: HOST tag -> conflicting candidate tags, in scan order
            flexible_tags: Candidate tags that earn partial credit
        """
        self.conflicts = conflicts
        self.flexible_tags = flexible_tags

    def score(self, host: Any, candidate: Any) -> CompatibilityResult:
        """
        Compute the compatibility verdict for one HOST/candidate pair

        Args:
            host: HOST record (TaggedEntity, mapping or object with ``tags``)
            candidate: Persona record, same forms as ``host``

        Returns:
            CompatibilityResult with score, level, tag breakdown and suggestions

        Raises:
            InvalidEntityError: if either record has no valid tags list
        """
        host = coerce_entity(host)
        candidate = coerce_entity(candidate)

        host_tags = host.tags
        candidate_tags = candidate.tag_set
        is_flexible = not candidate_tags.isdisjoint(self.flexible_tags)

        raw_score = 0
        matches: list[str] = []
        conflicts: list[TagConflict] = []
        missing: list[MissingTag] = []

        for host_tag in host_tags:
            if host_tag in candidate_tags:
                raw_score += self.MATCH_POINTS
                matches.append(host_tag)
                continue

            conflicting_tag = self._first_conflict(host_tag, candidate_tags)
            if conflicting_tag is not None:
                raw_score -= self.CONFLICT_PENALTY
                conflicts.append(TagConflict(
                    host_requirement=host_tag,
                    candidate_tag=conflicting_tag,
                    severity=ConflictSeverity.HARD,
                ))
                continue

            if is_flexible:
                raw_score += self.ADAPT_POINTS
                missing.append(MissingTag(tag=host_tag, can_adapt=True))
            else:
                missing.append(MissingTag(tag=host_tag, can_adapt=False))

        # Bonus for extra, non-conflicting candidate traits
        host_tag_set = frozenset(host_tags)
        conflicting_tags = {c.candidate_tag for c in conflicts}
        for tag in dict.fromkeys(candidate.tags):
            if tag not in host_tag_set and tag not in conflicting_tags:
                raw_score += self.BONUS_POINTS

        max_score = len(host_tags) * self.MATCH_POINTS
        final_score = self.normalize(raw_score, max_score)

        level = self.assign_level(final_score, conflicts)
        message = self.MESSAGES[level].format(
            candidate=candidate.display_name,
            host=host.identifier,
        )

        logger.debug(
            f"Scored candidate={candidate.identifier!r} against host={host.identifier!r}: "
            f"raw={raw_score}/{max_score}, final={final_score}, level={level.value}"
        )

        return CompatibilityResult(
            score=final_score,
            level=level,
            compatible=self.is_compatible(level),
            message=message,
            matches=matches,
            conflicts=conflicts,
            missing=missing,
            suggestions=self.generate_suggestions(host, candidate, conflicts, missing),
        )

    def _first_conflict(self, host_tag: str, candidate_tags: frozenset[str]) -> str | None:
        # First hit in declared order wins
        for conflicting_tag in self.conflicts.get(host_tag, ()):
            if conflicting_tag in candidate_tags:
                return conflicting_tag
        return None

    @staticmethod
    def normalize(raw_score: int, max_score: int) -> int:
        """
        Scale a raw score to 0-100, rounding halves up

        A HOST without tags has max_score 0 and always normalizes to 0.
        """
        if max_score <= 0:
            return 0
        clamped = min(max(raw_score, 0), max_score)
        # Integer round-half-up of 100 * clamped / max_score
        return (200 * clamped + max_score) // (2 * max_score)

    def assign_level(self, final_score: int, conflicts: list[TagConflict]) -> CompatibilityLevel:
        """Map a normalized score to a level; any hard conflict wins outright"""
        if any(c.severity == ConflictSeverity.HARD for c in conflicts):
            return CompatibilityLevel.INCOMPATIBLE
        if final_score >= self.EXCELLENT_THRESHOLD:
            return CompatibilityLevel.EXCELLENT
        if final_score >= self.GOOD_THRESHOLD:
            return CompatibilityLevel.GOOD
        if final_score >= self.PARTIAL_THRESHOLD:
            return CompatibilityLevel.PARTIAL
        return CompatibilityLevel.POOR

    @staticmethod
    def is_compatible(level: CompatibilityLevel) -> bool:
        """Partial fits still count as viable"""
        return level not in (CompatibilityLevel.INCOMPATIBLE, CompatibilityLevel.POOR)

    def generate_suggestions(
        self,
        host: TaggedEntity,
        candidate: TaggedEntity,
        conflicts: list[TagConflict],
        missing: list[MissingTag]
    ) -> list[Suggestion]:
        """
        Build follow-up suggestions for a verdict

        Args:
            host: HOST being filled
            candidate: Persona that was scored
            conflicts: Conflicts found during scoring
            missing: Unmatched HOST requirements

        Returns:
            Suggestions sorted ascending by priority
        """
        suggestions = []

        if conflicts:
            suggestions.append(Suggestion(
                kind=SuggestionKind.BROWSE_CANDIDATES,
                text=f"Browse personas that fit {host.identifier}",
                action="showCompatiblePersonas",
                priority=1,
            ))

        if any(not m.can_adapt for m in missing):
            suggestions.append(Suggestion(
                kind=SuggestionKind.EXPAND_CANDIDATE,
                text=f"Expand {candidate.display_name}'s capabilities",
                action="showUpgradeOptions",
                priority=2,
            ))

        suggestions.append(Suggestion(
            kind=SuggestionKind.DIFFERENT_HOST,
            text=f"Find HOSTs that fit {candidate.display_name}",
            action="showCompatibleHosts",
            priority=3,
        ))

        return sorted(suggestions, key=lambda s: s.priority)
