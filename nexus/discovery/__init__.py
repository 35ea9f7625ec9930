"""Structured discovery interview"""

from nexus.discovery.questions import QUESTIONS, DiscoveryQuestion, QuickPick
from nexus.discovery.session import DiscoverySession

__all__ = ["QUESTIONS", "DiscoveryQuestion", "QuickPick", "DiscoverySession"]
