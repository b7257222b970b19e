"""
History repository - Data access layer for ScoreEvent.
"""
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from eternal_quest.modules.history.models import ScoreEvent


class ScoreEventRepository:
    """Repository for ScoreEvent data access"""

    @staticmethod
    def create(db: Session, event: ScoreEvent) -> ScoreEvent:
        """Create new score event"""
        db.add(event)
        db.commit()
        db.refresh(event)
        return event

    @staticmethod
    def get_recent(db: Session, limit: int = 50, source: Optional[str] = None) -> List[ScoreEvent]:
        """Get most recent events first, optionally for one source"""
        query = db.query(ScoreEvent)
        if source:
            query = query.filter(ScoreEvent.source == source)
        return query.order_by(ScoreEvent.id.desc()).limit(limit).all()

    @staticmethod
    def get_for_name(db: Session, name: str) -> List[ScoreEvent]:
        """Get all events for a goal or quest name, oldest first"""
        return db.query(ScoreEvent).filter(
            ScoreEvent.name == name
        ).order_by(ScoreEvent.id).all()

    @staticmethod
    def sum_deltas(db: Session, source: str) -> int:
        """Total points applied by events of one source"""
        total = db.query(func.sum(ScoreEvent.delta)).filter(
            ScoreEvent.source == source
        ).scalar()
        return total or 0
