"""Discovery session - collect a user's tags through the structured interview"""

from collections.abc import Iterable
from typing import Optional

from loguru import logger

from nexus.data.schema import TaggedEntity
from nexus.discovery.questions import QUESTIONS, get_question
from nexus.tags.catalog import Tag, TagCatalog
from nexus.tags.conflict_groups import TagConflictWarning, check_tag_conflicts


class DiscoverySession:
    """
    Tag selection state for one pass through the discovery interview

    Selections are tag ids from the catalog, kept in the order they were
    chosen. A session seeded with existing tags counts as complete already.
    """

    def __init__(self, catalog: TagCatalog, existing_tag_ids: Iterable[str] = ()):
        self.catalog = catalog
        self._selected: dict[str, None] = {}
        self.add_many(existing_tag_ids)

    @property
    def selected_ids(self) -> list[str]:
        return list(self._selected)

    @property
    def is_complete(self) -> bool:
        return bool(self._selected)

    def select(self, tag_name: str) -> Optional[list[TagConflictWarning]]:
        """
        Select a quick-pick tag by name (case-insensitive)

        Returns:
            Advisory conflict warnings for the new tag, or None if the name is
            not in the catalog
        """
        tag = self.catalog.find_by_name(tag_name)
        if tag is None:
            logger.warning(f"Discovery pick {tag_name!r} not found in tag catalog, ignoring")
            return None

        held = [t.tag_name for t in self.selected_tags() if t.id != tag.id]
        warnings = check_tag_conflicts(tag.tag_name, held)
        self._selected[tag.id] = None
        return warnings

    def answer(self, question_id: str, tag_names: Iterable[str]) -> list[TagConflictWarning]:
        """
        Record the picks for one interview step

        Raises:
            KeyError: if the question id is unknown
        """
        question = get_question(question_id)
        quick_pick_tags = {p.tag.lower() for p in question.quick_picks}

        warnings = []
        for name in tag_names:
            if name.lower() not in quick_pick_tags:
                logger.debug(f"{name!r} picked on step {question.id!r} from the wider catalog")
            warnings.extend(self.select(name) or [])
        return warnings

    def deselect(self, tag_id: str) -> bool:
        """Drop a selected tag; returns whether it was selected"""
        if tag_id not in self._selected:
            return False
        del self._selected[tag_id]
        return True

    def add_many(self, tag_ids: Iterable[str]) -> int:
        """Add tag ids (e.g. from the category browser); returns how many were new"""
        before = len(self._selected)
        for tag_id in tag_ids:
            self._selected.setdefault(tag_id, None)
        return len(self._selected) - before

    def clear(self):
        self._selected.clear()

    def selected_tags(self) -> list[Tag]:
        """Selected tags resolved through the catalog (unknown ids are skipped)"""
        tags = (self.catalog.get(tag_id) for tag_id in self._selected)
        return [tag for tag in tags if tag is not None]

    def preview(self) -> dict[str, list[Tag]]:
        """Selected tags grouped by category, for the profile review step"""
        return self.catalog.group_by_category(self.selected_tags())

    @staticmethod
    def progress(step: int) -> float:
        """Progress percentage for an interview step (intro = 0, review = last)"""
        total = len(QUESTIONS) + 1
        step = min(max(step, 0), total)
        return step / total * 100

    def to_entity(self, identifier: str = "", display_name: str = "") -> TaggedEntity:
        """Package the selection as a TaggedEntity ready for compatibility scoring"""
        return TaggedEntity(
            identifier=identifier,
            display_name=display_name,
            tags=tuple(t.tag_name for t in self.selected_tags()),
        )
