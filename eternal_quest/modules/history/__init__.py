"""
History module - persisted log of scoring events.
"""
from .models import ScoreEvent

__all__ = ["ScoreEvent"]
