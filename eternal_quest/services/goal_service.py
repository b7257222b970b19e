"""
Goal management service.
Caller-facing operations on the goal ledger: creation, events, scoring,
save and load. Every operation returns an OperationResult.
"""
import logging
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from eternal_quest.config import GOALS_FILE
from eternal_quest.constants import HISTORY_SOURCE_GOAL
from eternal_quest.exceptions import (
    ValidationException,
    GoalFileNotFoundException,
)
from eternal_quest.modules.goals import codec
from eternal_quest.modules.goals.ledger import GoalLedger
from eternal_quest.modules.goals.models import Goal, GoalVariant, create_goal
from eternal_quest.modules.history.models import ScoreEvent
from eternal_quest.repositories.history_repository import ScoreEventRepository
from eternal_quest.schemas import (
    ErrorKind,
    GoalCreate,
    GoalEventResponse,
    GoalResponse,
    OperationResult,
    ScoreEventResponse,
)
from eternal_quest.services.results import HANDLED_EXCEPTIONS, failure_from

logger = logging.getLogger("eternal_quest.goals")


class GoalService:
    """Service for managing a goal ledger"""

    def __init__(
        self,
        db: Optional[Session] = None,
        goals_file: Optional[str] = None,
        ledger: Optional[GoalLedger] = None
    ):
        self.db = db
        self.goals_file = goals_file or GOALS_FILE
        self.ledger = ledger if ledger is not None else GoalLedger()
        self.history_repo = ScoreEventRepository()

    def _responses(self) -> List[GoalResponse]:
        return [
            GoalResponse.from_goal(goal, i)
            for i, goal in enumerate(self.ledger, start=1)
        ]

    def create_goal(
        self,
        variant: Union[str, GoalVariant],
        name: str,
        initial_points: int = 0,
        target_count: Optional[int] = None
    ) -> OperationResult:
        """Create a goal and append it to the ledger"""
        try:
            goal_data = GoalCreate(
                variant=variant,
                name=name,
                initial_points=initial_points,
                target_count=target_count,
            )
            goal = create_goal(
                goal_data.variant,
                goal_data.name,
                goal_data.initial_points,
                goal_data.target_count,
            )
            self.ledger.add(goal)
        except HANDLED_EXCEPTIONS as e:
            logger.info(f"Goal not created: {e}")
            return failure_from(e)

        logger.info(f"New goal '{goal.name}' created ({goal.variant.value})")
        return OperationResult.success(
            GoalResponse.from_goal(goal, len(self.ledger)),
            message=f"New goal '{goal.name}' created successfully."
        )

    def add_penalty_goal(self, name: str) -> OperationResult:
        """Create a penalty goal starting at 0 points"""
        return self.create_goal(GoalVariant.PENALTY, name)

    def record_event(self, index: int) -> OperationResult:
        """Record an event on the goal at a 1-based index"""
        try:
            if isinstance(index, bool) or not isinstance(index, int):
                raise ValidationException("index", f"'{index}' is not an integer")
            goal, delta = self.ledger.record_event_at(index)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)

        total = self.ledger.total_score()
        diagnostics = self._record_history(goal, delta, total)
        return OperationResult.success(
            GoalEventResponse(
                goal=GoalResponse.from_goal(goal, index),
                delta=delta,
                total_score=total,
            ),
            message="Event recorded successfully.",
            diagnostics=diagnostics
        )

    def display_goals(self) -> OperationResult:
        """Status lines for every goal, 1-based"""
        return OperationResult.success(self.ledger.display_all())

    def get_goals(self) -> OperationResult:
        return OperationResult.success(self._responses())

    def total_score(self) -> OperationResult:
        return OperationResult.success(self.ledger.total_score())

    def save_goals(self, path: Optional[str] = None) -> OperationResult:
        """Write the ledger to path (default: configured goals file), overwriting it"""
        path = path or self.goals_file
        try:
            count = codec.save(self.ledger.goals, path)
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)
        return OperationResult.success(count, message="Goals saved successfully.")

    def load_goals(self, path: Optional[str] = None) -> OperationResult:
        """
        Replace the ledger with the goals stored at path.

        The ledger is cleared first, so any failure leaves it empty. A missing
        file yields NOT_FOUND with an empty list, which callers treat as a
        fresh start.
        """
        path = path or self.goals_file
        self.ledger.clear()

        try:
            report = codec.load(path)
        except GoalFileNotFoundException as e:
            return failure_from(e, value=[])
        except HANDLED_EXCEPTIONS as e:
            return failure_from(e)

        self.ledger.replace(report.goals)
        diagnostics = [
            f"Skipped line {s.line_number}: {s.reason}" for s in report.skipped
        ]
        return OperationResult.success(
            self._responses(),
            message="Goals loaded successfully.",
            diagnostics=diagnostics
        )

    def get_history(self, limit: int = 50) -> OperationResult:
        """Most recent goal events first; empty when no history database is attached"""
        if self.db is None:
            return OperationResult.success([])
        try:
            events = self.history_repo.get_recent(self.db, limit, HISTORY_SOURCE_GOAL)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read goal history: {e}")
            return OperationResult.failure(ErrorKind.IO_FAILURE, str(e))
        return OperationResult.success(
            [ScoreEventResponse.model_validate(event) for event in events]
        )

    def get_goal_history(self, name: str) -> OperationResult:
        """Every recorded event for goals with this name, oldest first"""
        if self.db is None:
            return OperationResult.success([])
        try:
            events = self.history_repo.get_for_name(self.db, name)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read history for '{name}': {e}")
            return OperationResult.failure(ErrorKind.IO_FAILURE, str(e))
        return OperationResult.success([
            ScoreEventResponse.model_validate(event)
            for event in events
            if event.source == HISTORY_SOURCE_GOAL
        ])

    def _record_history(self, goal: Goal, delta: int, total: int) -> List[str]:
        """Append the event to the history table; failures are diagnostics, not errors"""
        if self.db is None:
            return []
        event = ScoreEvent(
            source=HISTORY_SOURCE_GOAL,
            name=goal.name,
            variant=goal.variant.value,
            delta=delta,
            total_after=total,
        )
        try:
            self.history_repo.create(self.db, event)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to record history for '{goal.name}': {e}")
            return [f"History not recorded: {e}"]
        return []
