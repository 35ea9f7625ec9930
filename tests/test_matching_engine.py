"""Unit tests for batch matching and badges"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nexus.data.schema import CompatibilityLevel
from nexus.matching import MatchingEngine, get_badge
from nexus.matching.badges import BADGES
from nexus.matching.tag_tables import FLEXIBLE_TAGS, TAG_CONFLICTS, categorize_tags, category_of


@pytest.fixture
def engine():
    return MatchingEngine()


@pytest.fixture
def host():
    return {"id": "host_1", "name": "Evening Host", "tags": ["Dominant", "Monogamy"]}


@pytest.fixture
def personas():
    return [
        {"id": "p_partial_a", "name": "Bea", "tags": ["Dominant"]},              # 10/20 -> 50
        {"id": "p_perfect", "name": "Ava", "tags": ["Dominant", "Monogamy"]},    # 100
        {"id": "p_conflict", "name": "Cai", "tags": ["Submissive"]},             # incompatible
        {"id": "p_good", "name": "Dee", "tags": ["Dominant", "Switch"]},         # 14/20 -> 70
        {"id": "p_partial_b", "name": "Eli", "tags": ["Monogamy"]},              # 10/20 -> 50
        {"id": "p_empty", "name": "Fox", "tags": []},                            # 0
    ]


class TestFindCompatibleCandidates:
    """Ranking personas for one HOST"""

    def test_filters_and_sorts(self, engine, host, personas):
        ranked = engine.find_compatible_candidates(host, personas)

        assert [m.entity.identifier for m in ranked] == [
            "p_perfect", "p_good", "p_partial_a", "p_partial_b"
        ]
        assert [m.result.score for m in ranked] == [100, 70, 50, 50]
        assert all(m.result.compatible for m in ranked)

    def test_ties_keep_input_order(self, engine, host, personas):
        reordered = [personas[4], personas[0]]

        ranked = engine.find_compatible_candidates(host, reordered)

        assert [m.entity.identifier for m in ranked] == ["p_partial_b", "p_partial_a"]

    def test_sorted_descending(self, engine, host, personas):
        scores = [m.result.score for m in engine.find_compatible_candidates(host, personas)]

        assert scores == sorted(scores, reverse=True)

    def test_empty_candidates(self, engine, host):
        assert engine.find_compatible_candidates(host, []) == []

    def test_rank_all_keeps_incompatible(self, engine, host, personas):
        ranked = engine.rank_all(host, personas)

        assert [m.entity.identifier for m in ranked] == [
            "p_perfect", "p_good", "p_partial_a", "p_partial_b", "p_conflict", "p_empty"
        ]
        assert ranked[4].result.level == CompatibilityLevel.INCOMPATIBLE


class TestFindCompatibleHosts:
    """Ranking HOSTs for one persona"""

    def test_filters_and_sorts(self, engine):
        persona = {"id": "p_1", "name": "Ava", "tags": ["Dominant", "Monogamy"]}
        hosts = [
            {"id": "h_partial", "tags": ["Dominant", "Monogamy", "Vanilla", "Cuddly"]},  # 20/40 -> 50
            {"id": "h_conflict", "tags": ["Submissive"]},
            {"id": "h_perfect", "tags": ["Dominant"]},                                   # 11/10 -> 100
            {"id": "h_poly", "tags": ["Polyamory"]},
        ]

        ranked = engine.find_compatible_hosts(persona, hosts)

        assert [m.entity.identifier for m in ranked] == ["h_perfect", "h_partial"]
        assert [m.result.level for m in ranked] == [
            CompatibilityLevel.EXCELLENT, CompatibilityLevel.PARTIAL
        ]

    def test_empty_hosts(self, engine):
        assert engine.find_compatible_hosts({"tags": ["Dominant"]}, []) == []


class TestExplainMatch:
    """Readable match explanations"""

    def test_perfect_match(self, engine, host):
        text = engine.explain_match(host, {"name": "Ava", "tags": ["Dominant", "Monogamy"]})

        assert "Perfect Match: 100%" in text
        assert "- dynamic: Dominant" in text
        assert "- relationship: Monogamy" in text
        assert "Next steps" not in text

    def test_conflict(self, engine, host):
        text = engine.explain_match(host, {"name": "Cai", "tags": ["Submissive"]})

        assert "Incompatible" in text
        assert "HOST needs Dominant, persona is Submissive" in text
        assert "Browse personas that fit host_1" in text
        assert "**Missing:** Monogamy" in text

    def test_adaptable(self, engine, host):
        text = engine.explain_match(host, {"name": "Dee", "tags": ["Dominant", "Switch"]})

        assert "**Can adapt to:** Monogamy" in text


class TestBadges:
    """Badge lookup"""

    @pytest.mark.parametrize("level, label", [
        (CompatibilityLevel.EXCELLENT, "Perfect Match"),
        (CompatibilityLevel.GOOD, "Good Fit"),
        (CompatibilityLevel.PARTIAL, "Partial Fit"),
        (CompatibilityLevel.POOR, "Poor Fit"),
        (CompatibilityLevel.INCOMPATIBLE, "Incompatible"),
    ])
    def test_every_level_has_badge(self, level, label):
        assert get_badge(level).label == label

    def test_accepts_string_level(self):
        assert get_badge("good").color == "#3498db"

    def test_unknown_level_falls_back_to_poor(self):
        assert get_badge("legendary") == BADGES[CompatibilityLevel.POOR]


class TestTagTables:
    """Static reference tables"""

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            TAG_CONFLICTS["Switch"] = ("Vanilla",)
        with pytest.raises(AttributeError):
            FLEXIBLE_TAGS.add("Dominant")

    def test_conflict_table_is_not_symmetric(self):
        assert "ENM" in TAG_CONFLICTS["Monogamy"]
        assert "ENM" not in TAG_CONFLICTS

    def test_category_of(self):
        assert category_of("Switch") == "dynamic"
        assert category_of("Unknown Tag") is None

    def test_categorize_tags(self):
        grouped = categorize_tags(["Monogamy", "Cuddly", "Unknown Tag", "Open"])

        assert grouped == {
            "relationship": ["Monogamy", "Open"],
            "intensity": ["Cuddly"],
            "other": ["Unknown Tag"],
        }
