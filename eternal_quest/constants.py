"""
Scoring constants and record format values.
"""

# Goal scoring
SIMPLE_EVENT_POINTS = 1000
ETERNAL_EVENT_POINTS = 100
CHECKLIST_EVENT_POINTS = 50
CHECKLIST_COMPLETION_BONUS = 500
PENALTY_EVENT_POINTS = -50

# Checklist target used by the console flow and by every reload
DEFAULT_CHECKLIST_TARGET = 10

# Persisted record layout: Tag|name|points
RECORD_SEPARATOR = "|"
RECORD_FIELD_COUNT = 3
RECORD_ENCODING = "utf-8"

# Experience / levels
EXPERIENCE_PER_LEVEL = 1000
STARTING_LEVEL = 1

# Avatar
DEFAULT_AVATAR_APPEARANCE = "Default"

# Score history sources
HISTORY_SOURCE_GOAL = "goal"
HISTORY_SOURCE_QUEST = "quest"
