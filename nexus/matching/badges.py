"""Display badges for compatibility levels"""

from types import MappingProxyType
from typing import NamedTuple, Union

from nexus.data.schema import CompatibilityLevel


class Badge(NamedTuple):
    glyph: str
    color: str
    label: str


BADGES = MappingProxyType({
    CompatibilityLevel.EXCELLENT: Badge("✨", "#2ecc71", "Perfect Match"),
    CompatibilityLevel.GOOD: Badge("👍", "#3498db", "Good Fit"),
    CompatibilityLevel.PARTIAL: Badge("⚡", "#f39c12", "Partial Fit"),
    CompatibilityLevel.POOR: Badge("⚠️", "#e74c3c", "Poor Fit"),
    CompatibilityLevel.INCOMPATIBLE: Badge("❌", "#c0392b", "Incompatible"),
})


def get_badge(level: Union[CompatibilityLevel, str]) -> Badge:
    """Look up the badge for a level; unknown levels get the poor badge"""
    try:
        return BADGES[CompatibilityLevel(level)]
    except ValueError:
        return BADGES[CompatibilityLevel.POOR]
