# /app/services/database_helpers/topic_repository_sql.py

from typing import Dict, Optional
from sqlalchemy.orm import Session
from app.db.models.topic_models import Topic

class TopicRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_topic(self, record: Dict) -> Topic:
        new_topic = Topic(**record)
        self.db.add(new_topic)
        self.db.commit()
        self.db.refresh(new_topic)
        return new_topic

    def get_topic_by_id(self, topic_id: str) -> Optional[Topic]:
        return self.db.query(Topic).filter(Topic.id == topic_id).first()

    def get_topic_by_title(self, title: str) -> Optional[Topic]:
        # Oldest row wins if a race ever produced duplicates.
        return (
            self.db.query(Topic)
            .filter(Topic.title == title)
            .order_by(Topic.created_at.asc())
            .first()
        )
