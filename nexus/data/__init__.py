"""Entity and result data models"""

from nexus.data.schema import (
    TaggedEntity,
    CompatibilityLevel,
    ConflictSeverity,
    TagConflict,
    MissingTag,
    SuggestionKind,
    Suggestion,
    CompatibilityResult,
    RankedMatch,
    InvalidEntityError,
    coerce_entity,
)
from nexus.data.loader import load_entities

__all__ = [
    "TaggedEntity", "CompatibilityLevel", "ConflictSeverity", "TagConflict",
    "MissingTag", "SuggestionKind", "Suggestion", "CompatibilityResult",
    "RankedMatch", "InvalidEntityError", "coerce_entity", "load_entities",
]
