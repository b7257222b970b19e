"""
Built-in quest catalog offered to new users.
"""
from typing import List

from .models import Quest

# (name, description, reward)
DEFAULT_QUESTS = [
    ("Learn a New Skill", "", 200),
    ("Complete a Fitness Challenge", "", 500),
    ("Volunteer for a Cause", "", 1000),
    ("Read a Book", "Read a book on a topic of interest or personal development.", 300),
    ("Start a Savings Plan", "Begin a savings plan to achieve a financial goal.", 800),
    ("Improve Time Management", "Implement strategies to improve time management.", 400),
    ("Complete a DIY Project", "Undertake a do-it-yourself project.", 600),
    ("Attend a Workshop or Seminar", "Participate in a workshop or seminar.", 700),
    ("Practice Mindfulness", "Incorporate mindfulness practices into your daily routine.", 300),
    ("Learn a New Recipe", "Discover and prepare a new recipe from a cuisine you're not familiar with.", 250),
    ("Complete a Home Organization Project", "Tackle a home organization project.", 400),
    ("Explore Nature", "Spend time outdoors exploring nature.", 350),
    ("Start a Journal", "Begin journaling to reflect on your thoughts, feelings, and experiences.", 200),
    ("Attend a Networking Event", "Attend a networking event or professional meetup.", 500),
    ("Learn a New Instrument", "Challenge yourself to learn to play a musical instrument.", 600),
    ("Complete a Physical Challenge", "Set and achieve a physical challenge.", 1000),
    ("Start a Garden", "Start a garden at home and nurture it over time.", 450),
    ("Improve Communication Skills", "Work on improving your communication skills.", 400),
]


def default_quest_catalog() -> List[Quest]:
    """Fresh Quest instances for the built-in catalog"""
    return [
        Quest(name, reward, description)
        for name, description, reward in DEFAULT_QUESTS
    ]
