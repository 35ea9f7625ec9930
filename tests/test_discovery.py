"""Unit tests for the discovery interview session"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from nexus.data.schema import CompatibilityLevel
from nexus.discovery import QUESTIONS, DiscoverySession
from nexus.discovery.questions import get_question
from nexus.matching import CompatibilityScorer
from nexus.tags import Tag, TagCatalog


@pytest.fixture
def catalog():
    return TagCatalog([
        Tag(id="t1", tag_name="Monogamy", category="relationship_structure"),
        Tag(id="t2", tag_name="Polyamory", category="relationship_structure"),
        Tag(id="t3", tag_name="Sapiosexual", category="arousal_pattern"),
        Tag(id="t4", tag_name="No Drama", category="boundaries"),
        Tag(id="t5", tag_name="Homebody"),
    ])


@pytest.fixture
def session(catalog):
    return DiscoverySession(catalog)


class TestQuestions:
    """Interview definition"""

    def test_six_steps(self):
        assert [q.id for q in QUESTIONS] == [
            "attraction", "communication", "relationship", "connection", "lifestyle", "boundaries"
        ]

    def test_only_boundaries_are_negative(self):
        assert [q.id for q in QUESTIONS if q.is_negative] == ["boundaries"]

    def test_every_step_has_six_picks(self):
        assert all(len(q.quick_picks) == 6 for q in QUESTIONS)

    def test_get_question(self):
        assert get_question("relationship").category == "relationship_structure"
        with pytest.raises(KeyError):
            get_question("astrology")


class TestDiscoverySession:
    """Selecting tags through the interview"""

    def test_select_case_insensitive(self, session):
        warnings = session.select("monogamy")

        assert warnings == []
        assert session.selected_ids == ["t1"]
        assert session.is_complete

    def test_select_unknown_tag(self, session):
        assert session.select("Voice Arousal") is None
        assert session.selected_ids == []
        assert not session.is_complete

    def test_select_warns_on_alternatives(self, session):
        session.select("Monogamy")
        warnings = session.select("Polyamory")

        assert [w.key for w in warnings] == ["Monogamy|Polyamory"]
        # Warnings never block the selection
        assert session.selected_ids == ["t1", "t2"]

    def test_reselecting_does_not_warn_against_itself(self, session):
        session.select("Monogamy")

        assert session.select("Monogamy") == []
        assert session.selected_ids == ["t1"]

    def test_answer(self, session):
        warnings = session.answer("relationship", ["Monogamy", "Polyamory"])

        assert len(warnings) == 1
        assert session.selected_ids == ["t1", "t2"]

    def test_answer_unknown_question(self, session):
        with pytest.raises(KeyError):
            session.answer("astrology", ["Monogamy"])

    def test_add_many_and_deselect(self, session):
        session.select("Monogamy")

        assert session.add_many(["t1", "t3", "t5"]) == 2
        assert session.deselect("t3") is True
        assert session.deselect("t3") is False
        assert session.selected_ids == ["t1", "t5"]

    def test_existing_tags_seed_session(self, catalog):
        session = DiscoverySession(catalog, existing_tag_ids=["t4"])

        assert session.is_complete
        assert [t.tag_name for t in session.selected_tags()] == ["No Drama"]

    def test_unknown_ids_are_skipped_when_resolving(self, session):
        session.add_many(["t1", "gone"])

        assert [t.id for t in session.selected_tags()] == ["t1"]

    def test_preview_groups_by_category(self, session):
        session.add_many(["t3", "t5", "t1"])

        preview = session.preview()

        assert list(preview) == ["Other", "arousal_pattern", "relationship_structure"]
        assert [t.tag_name for t in preview["relationship_structure"]] == ["Monogamy"]

    def test_clear(self, session):
        session.add_many(["t1", "t2"])
        session.clear()

        assert not session.is_complete

    @pytest.mark.parametrize("step, expected", [
        (0, 0.0),
        (len(QUESTIONS) + 1, 100.0),
        (99, 100.0),
        (-1, 0.0),
    ])
    def test_progress(self, step, expected):
        assert DiscoverySession.progress(step) == pytest.approx(expected)

    def test_progress_midway(self):
        assert DiscoverySession.progress(3) == pytest.approx(300 / 7)

    def test_to_entity_feeds_scorer(self, session):
        session.answer("relationship", ["Monogamy"])
        session.answer("attraction", ["Sapiosexual"])

        persona = session.to_entity(identifier="user_1", display_name="Ava")
        result = CompatibilityScorer().score({"id": "host_1", "tags": ["Monogamy"]}, persona)

        assert persona.tags == ("Monogamy", "Sapiosexual")
        assert result.level == CompatibilityLevel.EXCELLENT
