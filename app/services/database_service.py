# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.user_repository_sql import UserRepositorySQL
from .database_helpers.topic_repository_sql import TopicRepositorySQL
from .database_helpers.generation_repository_sql import GenerationRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Thin facade over the SQL repositories. Services talk to this class
        only, which keeps them trivially mockable in tests.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.user_repo = UserRepositorySQL(db_session)
        self.topic_repo = TopicRepositorySQL(db_session)
        self.generation_repo = GenerationRepositorySQL(db_session)

    # --- USER METHODS (DELEGATED) ---
    def add_user(self, user_record: Dict): return self.user_repo.add_user(user_record)
    def get_user_by_id(self, user_id: str): return self.user_repo.get_user_by_id(user_id)
    def get_user_by_email(self, email: str): return self.user_repo.get_user_by_email(email)

    # --- TOPIC METHODS (DELEGATED) ---
    def add_topic(self, topic_record: Dict): return self.topic_repo.add_topic(topic_record)
    def get_topic_by_id(self, topic_id: str): return self.topic_repo.get_topic_by_id(topic_id)
    def get_topic_by_title(self, title: str): return self.topic_repo.get_topic_by_title(title)

    # --- GENERATION HISTORY METHODS (DELEGATED) ---
    def add_generation_record(self, generation_record: Dict): return self.generation_repo.add_generation_record(generation_record)
    def get_generation_by_id(self, generation_id: str): return self.generation_repo.get_generation_by_id(generation_id)
    def get_generations_by_user_id(self, user_id: str) -> List: return self.generation_repo.get_generations_by_user_id(user_id)
    def delete_generation_record(self, generation_id: str) -> bool: return self.generation_repo.delete_generation_record(generation_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
