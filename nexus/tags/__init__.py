"""Tag catalog and profile-level conflict warnings"""

from nexus.tags.catalog import Tag, TagCatalog, format_friendly_text
from nexus.tags.conflict_groups import TAG_CONFLICT_GROUPS, TagConflictWarning, check_tag_conflicts

__all__ = [
    "Tag", "TagCatalog", "format_friendly_text",
    "TAG_CONFLICT_GROUPS", "TagConflictWarning", "check_tag_conflicts",
]
