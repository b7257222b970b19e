"""
Quests module - users, quests, avatars and the built-in quest catalog.
"""
from .models import Quest, Avatar, User
from .catalog import default_quest_catalog

__all__ = ["Quest", "Avatar", "User", "default_quest_catalog"]
