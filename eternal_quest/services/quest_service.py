"""
Quest and experience service.
Drives one user's quests, experience, levels and avatar.
"""
import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eternal_quest.constants import HISTORY_SOURCE_QUEST
from eternal_quest.exceptions import ValidationException, QuestIndexOutOfRangeException
from eternal_quest.modules.history.models import ScoreEvent
from eternal_quest.modules.quests.catalog import default_quest_catalog
from eternal_quest.modules.quests.models import Quest, User
from eternal_quest.repositories.history_repository import ScoreEventRepository
from eternal_quest.schemas import (
    ErrorKind,
    ExperienceAwardResponse,
    OperationResult,
    QuestCompletionResponse,
    QuestResponse,
    ScoreEventResponse,
    UserResponse,
)
from eternal_quest.services.results import HANDLED_EXCEPTIONS, failure_from

logger = logging.getLogger("eternal_quest.quests")


def _pick(quests: List[Quest], index: int) -> Quest:
    """1-based lookup"""
    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationException("quest_index", f"'{index}' is not an integer")
    if index < 1 or index > len(quests):
        raise QuestIndexOutOfRangeException(index, len(quests))
    return quests[index - 1]


class QuestService:
    """Service for one user's quests and experience"""

    def __init__(
        self,
        user: User,
        catalog: Optional[List[Quest]] = None,
        db: Optional[Session] = None
    ):
        self.user = user
        self.catalog = catalog if catalog is not None else default_quest_catalog()
        self.db = db
        self.history_repo = ScoreEventRepository()

    @classmethod
    def for_username(cls, username: str, db: Optional[Session] = None) -> "QuestService":
        """
        Build a service for a new user with the default catalog.

        Raises:
            ValidationException: empty username
        """
        return cls(User(username), db=db)

    def list_catalog(self) -> OperationResult:
        return OperationResult.success([
            QuestResponse.from_quest(q, i)
            for i, q in enumerate(self.catalog, start=1)
        ])

    def list_active_quests(self) -> OperationResult:
        return OperationResult.success([
            QuestResponse.from_quest(q, i)
            for i, q in enumerate(self.user.active_quests, start=1)
        ])

    def start_quest(self, quest_index: int) -> OperationResult:
        """Start the catalog quest at a 1-based index (no duplicate check)"""
        try:
            quest = _pick(self.catalog, quest_index)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)

        self.user.start_quest(quest)
        return OperationResult.success(
            QuestResponse.from_quest(quest, len(self.user.active_quests)),
            message=f"Quest started: {quest.name}"
        )

    def complete_quest(self, active_index: int) -> OperationResult:
        """Complete the active quest at a 1-based index and award its reward"""
        try:
            quest = _pick(self.user.active_quests, active_index)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)

        level_before = self.user.level
        self.user.complete_quest(quest)
        levels_gained = self.user.level - level_before
        diagnostics = self._record_history(quest.name, quest.reward_points)

        return OperationResult.success(
            QuestCompletionResponse(
                quest=QuestResponse.from_quest(quest),
                levels_gained=levels_gained,
                level=self.user.level,
                experience_points=self.user.experience_points,
            ),
            message=f"Congratulations! You completed the quest: {quest.name}",
            diagnostics=diagnostics
        )

    def earn_experience_points(self, points: int) -> OperationResult:
        try:
            if isinstance(points, bool) or not isinstance(points, int):
                raise ValidationException("points", f"'{points}' is not an integer")
            levels_gained = self.user.earn_experience_points(points)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)

        return OperationResult.success(
            ExperienceAwardResponse(
                points=points,
                levels_gained=levels_gained,
                level=self.user.level,
                experience_points=self.user.experience_points,
            ),
            message=f"You've earned {points} experience points!"
        )

    def customize_avatar_appearance(self, appearance: str) -> OperationResult:
        try:
            self.user.avatar.customize_appearance(appearance)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)
        return OperationResult.success(appearance, message="Avatar appearance updated!")

    def add_avatar_accessory(self, accessory: str) -> OperationResult:
        try:
            self.user.avatar.add_accessory(accessory)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)
        return OperationResult.success(
            list(self.user.avatar.accessories),
            message="New accessory added to avatar!"
        )

    def get_user_details(self) -> OperationResult:
        return OperationResult.success(UserResponse.from_user(self.user))

    def get_history(self, limit: int = 50) -> OperationResult:
        """Most recent quest completions first; empty when no history database is attached"""
        if self.db is None:
            return OperationResult.success([])
        try:
            events = self.history_repo.get_recent(self.db, limit, HISTORY_SOURCE_QUEST)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read quest history: {e}")
            return OperationResult.failure(ErrorKind.IO_FAILURE, str(e))
        return OperationResult.success(
            [ScoreEventResponse.model_validate(event) for event in events]
        )

    def get_total_quest_rewards(self) -> OperationResult:
        """Experience awarded by all recorded quest completions"""
        if self.db is None:
            return OperationResult.success(0)
        try:
            total = self.history_repo.sum_deltas(self.db, HISTORY_SOURCE_QUEST)
        except SQLAlchemyError as e:
            logger.error(f"Failed to sum quest rewards: {e}")
            return OperationResult.failure(ErrorKind.IO_FAILURE, str(e))
        return OperationResult.success(total)

    def _record_history(self, quest_name: str, reward: int) -> List[str]:
        if self.db is None:
            return []
        event = ScoreEvent(
            source=HISTORY_SOURCE_QUEST,
            name=quest_name,
            delta=reward,
            total_after=self.user.experience_points,
            level_after=self.user.level,
        )
        try:
            self.history_repo.create(self.db, event)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to record history for quest '{quest_name}': {e}")
            return [f"History not recorded: {e}"]
        return []
