from enum import Enum
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from eternal_quest.modules.goals.models import Goal, GoalVariant
from eternal_quest.modules.quests.models import Quest, User


class ErrorKind(str, Enum):
    VALIDATION_ERROR = "validation_error"
    IO_FAILURE = "io_failure"
    NOT_FOUND = "not_found"
    UNKNOWN_VARIANT = "unknown_variant"


# Goal schemas
class GoalCreate(BaseModel):
    variant: GoalVariant
    name: str = Field(..., min_length=1)
    initial_points: int = Field(default=0, strict=True)
    target_count: Optional[int] = Field(default=None, ge=1)


class GoalResponse(BaseModel):
    index: int  # 1-based position in the ledger
    variant: GoalVariant
    name: str
    points: int
    is_complete: bool
    status: str
    target_count: Optional[int] = None
    completed_count: Optional[int] = None

    @classmethod
    def from_goal(cls, goal: Goal, index: int) -> "GoalResponse":
        is_checklist = goal.variant is GoalVariant.CHECKLIST
        return cls(
            index=index,
            variant=goal.variant,
            name=goal.name,
            points=goal.points,
            is_complete=goal.is_complete(),
            status=goal.display_status(),
            target_count=goal.target_count,
            completed_count=goal.completed_count if is_checklist else None,
        )


class GoalEventResponse(BaseModel):
    goal: GoalResponse
    delta: int
    total_score: int


# Quest / user schemas
class QuestResponse(BaseModel):
    index: Optional[int] = None  # 1-based position in the listing it came from
    name: str
    description: str
    reward_points: int
    is_completed: bool

    @classmethod
    def from_quest(cls, quest: Quest, index: Optional[int] = None) -> "QuestResponse":
        return cls(
            index=index,
            name=quest.name,
            description=quest.description,
            reward_points=quest.reward_points,
            is_completed=quest.is_completed,
        )


class AvatarResponse(BaseModel):
    appearance: str
    accessories: List[str] = []


class UserResponse(BaseModel):
    username: str
    level: int
    experience_points: int
    achievement_badges: List[str] = []
    avatar: AvatarResponse
    active_quests: List[QuestResponse] = []

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            username=user.username,
            level=user.level,
            experience_points=user.experience_points,
            achievement_badges=list(user.achievement_badges),
            avatar=AvatarResponse(
                appearance=user.avatar.appearance,
                accessories=list(user.avatar.accessories),
            ),
            active_quests=[
                QuestResponse.from_quest(q, i)
                for i, q in enumerate(user.active_quests, start=1)
            ],
        )


class QuestCompletionResponse(BaseModel):
    quest: QuestResponse
    levels_gained: int
    level: int
    experience_points: int


class ExperienceAwardResponse(BaseModel):
    points: int
    levels_gained: int
    level: int
    experience_points: int


# History schemas
class ScoreEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    source: str
    name: str
    variant: Optional[str] = None
    delta: int
    total_after: int
    level_after: Optional[int] = None
    created_at: datetime


# Result envelope returned by every service operation
class OperationResult(BaseModel):
    ok: bool
    value: Any = None
    error: Optional[ErrorKind] = None
    message: str = ""
    diagnostics: List[str] = []

    @classmethod
    def success(cls, value: Any = None, message: str = "", diagnostics: Optional[List[str]] = None) -> "OperationResult":
        return cls(ok=True, value=value, message=message, diagnostics=diagnostics or [])

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        message: str,
        value: Any = None,
        diagnostics: Optional[List[str]] = None
    ) -> "OperationResult":
        return cls(ok=False, value=value, error=error, message=message, diagnostics=diagnostics or [])
