"""Matching Engine - Rank personas for HOSTs and HOSTs for personas"""

from collections.abc import Iterable
from typing import Any, Optional

from loguru import logger

from nexus.data.schema import CompatibilityLevel, RankedMatch, coerce_entity
from nexus.matching.badges import get_badge
from nexus.matching.compatibility_scorer import CompatibilityScorer
from nexus.matching.tag_tables import categorize_tags


class MatchingEngine:
    """
    Batch matching on top of CompatibilityScorer

    Features:
    - Rank every persona against one HOST
    - Keep only viable pairings (partial, good, excellent)
    - Find HOSTs a persona can fill
    - Explain a single pairing in readable text
    """

    def __init__(self, scorer: Optional[CompatibilityScorer] = None):
        """
        Initialize matching engine

        Args:
            scorer: Custom CompatibilityScorer (if None, uses default tables)
        """
        self.scorer = scorer if scorer is not None else CompatibilityScorer()

    def rank_all(self, host: Any, candidates: Iterable[Any]) -> list[RankedMatch]:
        """
        Score every candidate against a HOST, best first

        Args:
            host: HOST record
            candidates: Persona records

        Returns:
            RankedMatch list sorted by score descending (ties keep input order)
        """
        host = coerce_entity(host)
        candidates = [coerce_entity(c) for c in candidates]

        if not candidates:
            logger.warning(f"No candidates provided for host {host.identifier!r}")
            return []

        ranked = [
            RankedMatch(entity=candidate, result=self.scorer.score(host, candidate))
            for candidate in candidates
        ]
        # list.sort is stable, so equal scores keep their input order
        ranked.sort(key=lambda m: m.result.score, reverse=True)
        return ranked

    def find_compatible_candidates(self, host: Any, candidates: Iterable[Any]) -> list[RankedMatch]:
        """
        Find personas that can fill a HOST role

        Args:
            host: HOST record
            candidates: Persona records

        Returns:
            Compatible personas sorted by score descending
        """
        host = coerce_entity(host)
        compatible = [m for m in self.rank_all(host, candidates) if m.result.compatible]

        logger.info(
            f"Found {len(compatible)} compatible personas for host "
            f"{host.identifier!r}: "
            f"{[(m.entity.identifier, m.result.score) for m in compatible[:5]]}"
        )
        return compatible

    def find_compatible_hosts(self, candidate: Any, hosts: Iterable[Any]) -> list[RankedMatch]:
        """
        Find HOST roles a persona can fill

        Args:
            candidate: Persona record
            hosts: HOST records

        Returns:
            Compatible HOSTs (as RankedMatch.entity) sorted by score descending
        """
        candidate = coerce_entity(candidate)
        hosts = [coerce_entity(h) for h in hosts]

        if not hosts:
            logger.warning(f"No hosts provided for persona {candidate.identifier!r}")
            return []

        ranked = [
            RankedMatch(entity=host, result=self.scorer.score(host, candidate))
            for host in hosts
        ]
        compatible = [m for m in ranked if m.result.compatible]
        compatible.sort(key=lambda m: m.result.score, reverse=True)

        logger.info(
            f"Found {len(compatible)}/{len(hosts)} compatible hosts for persona "
            f"{candidate.identifier!r}"
        )
        return compatible

    def explain_match(self, host: Any, candidate: Any) -> str:
        """
        Generate human-readable explanation of a HOST/persona pairing

        Args:
            host: HOST record
            candidate: Persona record

        Returns:
            Explanation string
        """
        result = self.scorer.score(host, candidate)
        badge = get_badge(result.level)

        explanation_parts = [f"{badge.glyph} **{badge.label}: {result.score}%** - {result.message}"]

        if result.matches:
            grouped = categorize_tags(result.matches)
            lines = [f"- {category}: {', '.join(tags)}" for category, tags in grouped.items()]
            explanation_parts.append("**Shared tags**\n" + "\n".join(lines))

        if result.conflicts:
            lines = [
                f"- HOST needs {c.host_requirement}, persona is {c.candidate_tag}"
                for c in result.conflicts
            ]
            explanation_parts.append("**Conflicts**\n" + "\n".join(lines))

        adaptable = [m.tag for m in result.missing if m.can_adapt]
        lacking = [m.tag for m in result.missing if not m.can_adapt]
        if adaptable:
            explanation_parts.append(f"**Can adapt to:** {', '.join(adaptable)}")
        if lacking:
            explanation_parts.append(f"**Missing:** {', '.join(lacking)}")

        if result.level != CompatibilityLevel.EXCELLENT:
            explanation_parts.append(
                "**Next steps**\n" + "\n".join(f"- {s.text}" for s in result.suggestions)
            )

        return "\n\n".join(explanation_parts)
