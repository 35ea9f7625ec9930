"""Tag catalog - lookup, search and grouping over the tag vocabulary"""

from collections.abc import Iterable
from typing import Optional

from pydantic import BaseModel, ConfigDict


OTHER_CATEGORY = "Other"


class Tag(BaseModel):
    """A tag as stored in the tag vocabulary"""

    model_config = ConfigDict(frozen=True)

    id: str
    tag_name: str
    category: Optional[str] = None  # e.g. "relationship_structure"
    definition: Optional[str] = None


def format_friendly_text(text: Optional[str]) -> str:
    """Turn a snake_case category key into a title, e.g. 'Relationship Structure'"""
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.split("_"))


class TagCatalog:
    """In-memory view over the tag vocabulary"""

    def __init__(self, tags: Iterable[Tag]):
        self._tags: list[Tag] = list(tags)
        self._by_id: dict[str, Tag] = {t.id: t for t in self._tags}
        self._by_name: dict[str, Tag] = {}
        for tag in self._tags:
            # First spelling wins when two entries differ only by case
            self._by_name.setdefault(tag.tag_name.lower(), tag)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self):
        return iter(self._tags)

    def get(self, tag_id: str) -> Optional[Tag]:
        return self._by_id.get(tag_id)

    def find_by_name(self, name: str) -> Optional[Tag]:
        """Case-insensitive lookup by tag name"""
        return self._by_name.get(name.lower())

    def filter(self, search: str = "", category: str = "") -> list[Tag]:
        """
        Filter tags by category and free-text search

        Args:
            search: Case-insensitive substring matched against name and definition
            category: Exact category key (empty = all categories)

        Returns:
            Matching tags in catalog order
        """
        needle = search.lower()
        matched = []
        for tag in self._tags:
            if category and tag.category != category:
                continue
            if needle and needle not in tag.tag_name.lower() and needle not in (tag.definition or "").lower():
                continue
            matched.append(tag)
        return matched

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order"""
        return list(dict.fromkeys(t.category for t in self._tags if t.category))

    @staticmethod
    def group_by_category(tags: Iterable[Tag]) -> dict[str, list[Tag]]:
        """Group tags by category (uncategorized under 'Other'), keys sorted"""
        grouped: dict[str, list[Tag]] = {}
        for tag in tags:
            grouped.setdefault(tag.category or OTHER_CATEGORY, []).append(tag)
        return {category: grouped[category] for category in sorted(grouped)}
