# /app/services/database_helpers/generation_repository_sql.py

from typing import List, Dict, Optional
from sqlalchemy.orm import Session, joinedload
from app.db.models.generation_models import Generation

class GenerationRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def add_generation_record(self, record: Dict) -> Generation:
        """Creates a new Generation record in the database from a dictionary."""
        new_generation = Generation(**record)
        self.db.add(new_generation)
        self.db.commit()
        self.db.refresh(new_generation)
        return new_generation

    def get_generation_by_id(self, generation_id: str) -> Optional[Generation]:
        return (
            self.db.query(Generation)
            .options(joinedload(Generation.topic))
            .filter(Generation.id == generation_id)
            .first()
        )

    def get_generations_by_user_id(self, user_id: str) -> List[Generation]:
        """Retrieves one user's generation records, most recent first."""
        return (
            self.db.query(Generation)
            .options(joinedload(Generation.topic))
            .filter(Generation.user_id == user_id)
            .order_by(Generation.created_at.desc())
            .all()
        )

    def delete_generation_record(self, generation_id: str) -> bool:
        """Deletes a single generation record by its ID."""
        record = self.db.query(Generation).filter(Generation.id == generation_id).first()
        if record:
            self.db.delete(record)
            self.db.commit()
            return True
        return False
