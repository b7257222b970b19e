"""
Goal ledger - the ordered, append-only collection of goals for one session.
Callers address goals by 1-based index in insertion order.
"""
import logging
from typing import Iterable, Iterator, List, Tuple

from eternal_quest.exceptions import ValidationException, GoalIndexOutOfRangeException
from .models import Goal

logger = logging.getLogger("eternal_quest.goals")


class GoalLedger:
    """Ordered collection of goals"""

    def __init__(self, goals: Iterable[Goal] = ()):
        self._goals: List[Goal] = []
        for goal in goals:
            self.add(goal)

    def add(self, goal: Goal) -> None:
        """Append a goal"""
        if goal is None:
            raise ValidationException("goal", "must not be None")
        self._goals.append(goal)
        logger.debug(f"Goal added: {goal.name} ({goal.variant.value})")

    def get(self, index: int) -> Goal:
        """Get goal by 1-based index"""
        if index < 1 or index > len(self._goals):
            raise GoalIndexOutOfRangeException(index, len(self._goals))
        return self._goals[index - 1]

    def record_event_at(self, index: int) -> Tuple[Goal, int]:
        """
        Record an event on the goal at a 1-based index.

        Returns:
            (goal, points delta applied)

        Raises:
            GoalIndexOutOfRangeException: index outside [1, len]; ledger unchanged
        """
        goal = self.get(index)
        delta = goal.record_event()
        logger.info(f"Event recorded for '{goal.name}': {delta:+d} points")
        return goal, delta

    def total_score(self) -> int:
        """Sum of points over all goals"""
        return sum(goal.get_points() for goal in self._goals)

    def display_all(self) -> List[str]:
        """Status line for every goal, prefixed with its 1-based index"""
        return [
            f"{i}. {goal.display_status()}"
            for i, goal in enumerate(self._goals, start=1)
        ]

    def clear(self) -> None:
        self._goals.clear()

    def replace(self, goals: Iterable[Goal]) -> None:
        """Swap the whole content, e.g. after a load"""
        self.clear()
        for goal in goals:
            self.add(goal)

    @property
    def goals(self) -> List[Goal]:
        """Snapshot of the goals in order"""
        return list(self._goals)

    def __len__(self) -> int:
        return len(self._goals)

    def __iter__(self) -> Iterator[Goal]:
        return iter(list(self._goals))
