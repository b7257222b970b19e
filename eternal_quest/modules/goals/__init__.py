"""
Goals module - goal variants, the ledger and the goal file codec.
"""
from .models import Goal, GoalVariant, ScoringRule, SCORING_RULES, create_goal
from .ledger import GoalLedger
from .codec import LoadReport, SkippedLine

__all__ = [
    "Goal",
    "GoalVariant",
    "ScoringRule",
    "SCORING_RULES",
    "create_goal",
    "GoalLedger",
    "LoadReport",
    "SkippedLine",
]
