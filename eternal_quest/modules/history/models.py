"""
ScoreEvent database model.
"""
from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime

from eternal_quest.database import Base


class ScoreEvent(Base):
    __tablename__ = "score_events"

    id = Column(Integer, primary_key=True, index=True)
    source = Column(String, nullable=False, index=True)  # "goal" or "quest"
    name = Column(String, nullable=False)  # Goal or quest name
    variant = Column(String, nullable=True)  # Goal variant, None for quests
    delta = Column(Integer, nullable=False)  # Points applied by this event
    total_after = Column(Integer, nullable=False)  # Ledger score or user XP after the event
    level_after = Column(Integer, nullable=True)  # Quests only
    created_at = Column(DateTime, default=datetime.now)
