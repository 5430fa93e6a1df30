# /app/models/generation_model.py

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from app.db.models.generation_models import GenerationType
from .topic_model import TopicRecord, TopicSummary


# --- Generation requests ---

class GenerateRequest(BaseModel):
    """
    Shared request body for the three /api/generate endpoints.
    `topicTitle` is optional here so that its absence is reported as
    "Topic title is required" by the service instead of a schema error.
    """
    topicTitle: Optional[str] = None
    topicDescription: Optional[str] = None


class GenerationSaveRequest(BaseModel):
    """Request body for POST /api/generations/save."""
    type: Optional[GenerationType] = None
    content: Optional[str] = None
    imageData: Optional[str] = None
    imageMime: Optional[str] = None
    topicId: Optional[str] = None


# --- Generation results ---

class ScriptSection(BaseModel):
    emoji: str
    title: str
    content: str


class ScriptResult(BaseModel):
    script: str
    wordCount: int
    speakingMinutes: int
    sections: List[ScriptSection] = []


class ImageResult(BaseModel):
    imageUrl: str
    imageMime: str


class BlogBundle(BaseModel):
    """The document persisted as a BLOG generation's content."""
    title: str
    metaDescription: str
    readTime: str
    body: str
    htmlBody: str
    imageData: str = ""
    imageMime: str = ""


class BlogResult(BlogBundle):
    generationId: str


# --- Persisted records ---

class GenerationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    type: GenerationType
    content: Optional[str] = None
    imageData: Optional[str] = Field(None, validation_alias="image_data")
    imageMime: Optional[str] = Field(None, validation_alias="image_mime")
    topicId: str = Field(..., validation_alias="topic_id")
    userId: str = Field(..., validation_alias="user_id")
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")


class SavedGeneration(GenerationRecord):
    generationId: str


class HistoryItem(GenerationRecord):
    topic: Optional[TopicSummary] = None


class GenerationDetail(GenerationRecord):
    topic: Optional[TopicRecord] = None
