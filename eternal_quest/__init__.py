"""
Eternal Quest - goal tracking ledger with quest and experience scoring.
"""
from eternal_quest.modules.goals import Goal, GoalLedger, GoalVariant, create_goal
from eternal_quest.modules.quests import Quest, User, default_quest_catalog
from eternal_quest.schemas import ErrorKind, OperationResult
from eternal_quest.services import GoalService, QuestService

__version__ = "0.1.0"

__all__ = [
    "Goal",
    "GoalLedger",
    "GoalVariant",
    "create_goal",
    "Quest",
    "User",
    "default_quest_catalog",
    "ErrorKind",
    "OperationResult",
    "GoalService",
    "QuestService",
]
