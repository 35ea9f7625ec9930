"""Matching engine modules"""

from nexus.matching.compatibility_scorer import CompatibilityScorer
from nexus.matching.matching_engine import MatchingEngine
from nexus.matching.badges import Badge, get_badge

__all__ = ["CompatibilityScorer", "MatchingEngine", "Badge", "get_badge"]
