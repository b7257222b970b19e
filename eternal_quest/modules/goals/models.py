"""
Goal domain model.

A goal is one of a closed set of variants. Each variant's scoring law lives
in SCORING_RULES rather than in a subclass, so the ledger and the codec treat
every goal the same way and only this table knows the rules.
"""
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple, Union

from eternal_quest.constants import (
    SIMPLE_EVENT_POINTS,
    ETERNAL_EVENT_POINTS,
    CHECKLIST_EVENT_POINTS,
    CHECKLIST_COMPLETION_BONUS,
    PENALTY_EVENT_POINTS,
    DEFAULT_CHECKLIST_TARGET,
)
from eternal_quest.exceptions import ValidationException


class GoalVariant(Enum):
    """Goal kinds"""
    SIMPLE = "Simple"
    ETERNAL = "Eternal"
    CHECKLIST = "Checklist"
    PENALTY = "Penalty"

    @property
    def record_tag(self) -> str:
        """Type tag written to the goal file, e.g. ``ChecklistGoal``"""
        return f"{self.value}Goal"

    @classmethod
    def from_record_tag(cls, tag: str) -> Optional["GoalVariant"]:
        """Exact match of a persisted type tag, None if unknown"""
        for variant in cls:
            if variant.record_tag == tag:
                return variant
        return None

    @classmethod
    def parse(cls, value: Union[str, "GoalVariant"]) -> "GoalVariant":
        """Resolve a variant from its enum member or its name ("Eternal")"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            allowed = ", ".join(v.value for v in cls)
            raise ValidationException(
                "variant", f"'{value}' is not one of {allowed}"
            )


class ScoringRule(NamedTuple):
    """
    Scoring law of one variant.

    record(completed_count, target_count) -> (points_delta, new_completed_count)
    is_complete(completed_count, target_count) -> bool
    """
    record: Callable[[int, Optional[int]], Tuple[int, int]]
    is_complete: Callable[[int, Optional[int]], bool]


def _simple_event(completed: int, target: Optional[int]) -> Tuple[int, int]:
    return SIMPLE_EVENT_POINTS, completed


def _eternal_event(completed: int, target: Optional[int]) -> Tuple[int, int]:
    return ETERNAL_EVENT_POINTS, completed


def _checklist_event(completed: int, target: Optional[int]) -> Tuple[int, int]:
    completed += 1
    delta = CHECKLIST_EVENT_POINTS
    # Bonus only on the event that reaches the target exactly
    if completed == target:
        delta += CHECKLIST_COMPLETION_BONUS
    return delta, completed


def _penalty_event(completed: int, target: Optional[int]) -> Tuple[int, int]:
    return PENALTY_EVENT_POINTS, completed


def _always_complete(completed: int, target: Optional[int]) -> bool:
    return True


def _never_complete(completed: int, target: Optional[int]) -> bool:
    return False


def _checklist_complete(completed: int, target: Optional[int]) -> bool:
    return completed == target


SCORING_RULES: Dict[GoalVariant, ScoringRule] = {
    GoalVariant.SIMPLE: ScoringRule(_simple_event, _always_complete),
    GoalVariant.ETERNAL: ScoringRule(_eternal_event, _never_complete),
    GoalVariant.CHECKLIST: ScoringRule(_checklist_event, _checklist_complete),
    GoalVariant.PENALTY: ScoringRule(_penalty_event, _never_complete),
}


class Goal:
    """A trackable objective with a variant-specific scoring rule"""

    def __init__(
        self,
        variant: GoalVariant,
        name: str,
        points: int = 0,
        target_count: Optional[int] = None,
    ):
        if not name or not name.strip():
            raise ValidationException("name", "must not be empty")
        # A record is one line, so a line break would split it on save
        if "\n" in name or "\r" in name:
            raise ValidationException("name", "must not contain line breaks")
        if isinstance(points, bool) or not isinstance(points, int):
            raise ValidationException("points", f"'{points}' is not an integer")
        if points < 0 and variant is not GoalVariant.PENALTY:
            raise ValidationException(
                "points", "only penalty goals may hold negative points"
            )

        if variant is GoalVariant.CHECKLIST:
            if target_count is None:
                target_count = DEFAULT_CHECKLIST_TARGET
            if target_count < 1:
                raise ValidationException("target_count", "must be at least 1")
        elif target_count is not None:
            raise ValidationException(
                "target_count", f"only checklist goals take a target, not {variant.value}"
            )

        self._variant = variant
        self._name = name
        self._points = points
        self._target_count = target_count
        self._completed_count = 0

    @property
    def variant(self) -> GoalVariant:
        return self._variant

    @property
    def name(self) -> str:
        return self._name

    @property
    def points(self) -> int:
        return self._points

    @property
    def target_count(self) -> Optional[int]:
        return self._target_count

    @property
    def completed_count(self) -> int:
        return self._completed_count

    def get_points(self) -> int:
        return self._points

    def record_event(self) -> int:
        """
        Apply one event to this goal.

        Returns:
            Points delta applied by this event
        """
        rule = SCORING_RULES[self._variant]
        delta, self._completed_count = rule.record(
            self._completed_count, self._target_count
        )
        self._points += delta
        return delta

    def is_complete(self) -> bool:
        rule = SCORING_RULES[self._variant]
        return rule.is_complete(self._completed_count, self._target_count)

    def display_status(self) -> str:
        """Human-readable status line, e.g. ``[ ] Read (Completed 2/10 times)``"""
        mark = "X" if self.is_complete() else " "
        status = f"[{mark}] {self._name}"
        if self._variant is GoalVariant.CHECKLIST:
            status += f" (Completed {self._completed_count}/{self._target_count} times)"
        return status

    def __repr__(self) -> str:
        return (
            f"Goal(variant={self._variant.value!r}, name={self._name!r}, "
            f"points={self._points})"
        )


def create_goal(
    variant: Union[str, GoalVariant],
    name: str,
    initial_points: int = 0,
    target_count: Optional[int] = None,
) -> Goal:
    """Build a goal from a variant name or member; checklists default to a target of 10"""
    return Goal(GoalVariant.parse(variant), name, initial_points, target_count)
