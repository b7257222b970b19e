from .goal_service import GoalService
from .quest_service import QuestService

__all__ = ["GoalService", "QuestService"]
