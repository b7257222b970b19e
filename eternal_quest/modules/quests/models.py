"""
Quest, avatar and user models for the experience subsystem.
Independent of the goal ledger.
"""
import logging
from typing import List

from eternal_quest.constants import (
    EXPERIENCE_PER_LEVEL,
    STARTING_LEVEL,
    DEFAULT_AVATAR_APPEARANCE,
)
from eternal_quest.exceptions import ValidationException

logger = logging.getLogger("eternal_quest.quests")


class Quest:
    """A one-shot rewarded task"""

    def __init__(self, name: str, reward_points: int, description: str = ""):
        if not name or not name.strip():
            raise ValidationException("name", "must not be empty")
        if reward_points < 0:
            raise ValidationException("reward_points", "must not be negative")
        self._name = name
        self._description = description
        self._reward_points = reward_points
        self._is_completed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def reward_points(self) -> int:
        return self._reward_points

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    def complete(self) -> None:
        """Mark as completed (one-way)"""
        self._is_completed = True
        logger.info(f"Quest completed: {self._name}")

    def __repr__(self) -> str:
        return f"Quest(name={self._name!r}, reward_points={self._reward_points})"


class Avatar:
    """Cosmetic user avatar"""

    def __init__(self):
        self.appearance = DEFAULT_AVATAR_APPEARANCE
        self.accessories: List[str] = []

    def customize_appearance(self, appearance: str) -> None:
        if not appearance or not appearance.strip():
            raise ValidationException("appearance", "must not be empty")
        self.appearance = appearance

    def add_accessory(self, accessory: str) -> None:
        if not accessory or not accessory.strip():
            raise ValidationException("accessory", "must not be empty")
        self.accessories.append(accessory)


class User:
    """Player profile: level, experience and quests"""

    def __init__(self, username: str):
        if not username or not username.strip():
            raise ValidationException("username", "must not be empty")
        self.username = username
        self._level = STARTING_LEVEL
        self._experience_points = 0
        self.active_quests: List[Quest] = []
        self.achievement_badges: List[str] = []  # Placeholder, nothing awards badges yet
        self.avatar = Avatar()

    @property
    def level(self) -> int:
        return self._level

    @property
    def experience_points(self) -> int:
        return self._experience_points

    def start_quest(self, quest: Quest) -> None:
        """Add quest to the active list. Starting the same quest twice adds it twice."""
        self.active_quests.append(quest)
        logger.info(f"{self.username} started quest: {quest.name}")

    def complete_quest(self, quest: Quest) -> bool:
        """
        Complete an active quest and award its reward.

        Returns:
            False (no-op) if the quest is not active, True otherwise
        """
        for i, active in enumerate(self.active_quests):
            if active is quest:
                quest.complete()
                del self.active_quests[i]
                self.earn_experience_points(quest.reward_points)
                return True
        return False

    def earn_experience_points(self, points: int) -> int:
        """
        Add experience; every full 1000 points rolls over into a level.

        Returns:
            Number of levels gained by this award
        """
        if points < 0:
            raise ValidationException("points", "experience awards must not be negative")

        self._experience_points += points
        levels_gained = 0
        while self._experience_points >= EXPERIENCE_PER_LEVEL:
            self._level += 1
            self._experience_points -= EXPERIENCE_PER_LEVEL
            levels_gained += 1
            logger.info(f"{self.username} leveled up to level {self._level}")
        return levels_gained
