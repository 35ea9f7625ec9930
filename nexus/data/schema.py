"""Data schema definitions for tagged entities and compatibility results"""

from collections.abc import Mapping, Set
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class InvalidEntityError(ValueError):
    """Raised when a record cannot be interpreted as a tagged entity"""


class TaggedEntity(BaseModel):
    """A HOST role or a Persona, described by an ordered list of tags"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str = Field("", alias="id")
    display_name: str = Field("", alias="name")
    tags: tuple[str, ...]

    @field_validator("identifier", "display_name", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # Store rows may carry numeric or UUID ids
        return "" if value is None else str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _reject_unordered(cls, value: Any) -> Any:
        if isinstance(value, Set):
            raise ValueError("tags must be an ordered sequence, not a set")
        return value

    @property
    def tag_set(self) -> frozenset[str]:
        return frozenset(self.tags)


class ConflictSeverity(str, Enum):
    """How strongly a conflict rules out a pairing"""
    HARD = "hard"
    SOFT = "soft"  # reserved, no rule currently produces it


class CompatibilityLevel(str, Enum):
    """Qualitative verdict, ordered from worst to best"""
    INCOMPATIBLE = "incompatible"
    POOR = "poor"
    PARTIAL = "partial"
    GOOD = "good"
    EXCELLENT = "excellent"


class TagConflict(BaseModel):
    """A HOST requirement contradicted by one of the candidate's tags"""

    model_config = ConfigDict(frozen=True)

    host_requirement: str
    candidate_tag: str
    severity: ConflictSeverity = ConflictSeverity.HARD


class MissingTag(BaseModel):
    """A HOST requirement the candidate neither matches nor contradicts"""

    model_config = ConfigDict(frozen=True)

    tag: str
    can_adapt: bool


class SuggestionKind(str, Enum):
    BROWSE_CANDIDATES = "browse_candidates"
    EXPAND_CANDIDATE = "expand_candidate"
    DIFFERENT_HOST = "different_host"


class Suggestion(BaseModel):
    """Follow-up action offered alongside a verdict (lower priority first)"""

    model_config = ConfigDict(frozen=True)

    kind: SuggestionKind
    text: str
    action: str
    priority: int


class CompatibilityResult(BaseModel):
    """Outcome of comparing one candidate against one HOST"""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    level: CompatibilityLevel
    compatible: bool
    message: str
    matches: list[str] = Field(default_factory=list)
    conflicts: list[TagConflict] = Field(default_factory=list)
    missing: list[MissingTag] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)


class RankedMatch(BaseModel):
    """An entity paired with its compatibility result, as returned by ranking"""

    model_config = ConfigDict(frozen=True)

    entity: TaggedEntity
    result: CompatibilityResult


def _first_attr(record: Any, *names: str) -> Any:
    for name in names:
        value = getattr(record, name, None)
        if value is not None:
            return value
    return None


def coerce_entity(record: Any) -> TaggedEntity:
    """
    Interpret a loosely-typed record as a TaggedEntity

    Accepts a TaggedEntity, a mapping (``{"id", "name", "tags"}`` or the field
    names), or any object exposing a ``tags`` attribute.

    Raises:
        InvalidEntityError: if ``tags`` is absent or not a sequence of strings
    """
    if isinstance(record, TaggedEntity):
        return record

    if isinstance(record, Mapping):
        data = dict(record)
    elif hasattr(record, "tags"):
        data = {
            "identifier": _first_attr(record, "identifier", "id"),
            "display_name": _first_attr(record, "display_name", "name"),
            "tags": record.tags,
        }
    else:
        raise InvalidEntityError(f"Record of type {type(record).__name__} has no tags")

    if data.get("tags") is None:
        raise InvalidEntityError("Record is missing a tags list")

    try:
        return TaggedEntity.model_validate(data)
    except ValidationError as e:
        raise InvalidEntityError(f"Invalid tagged entity: {e}") from e
