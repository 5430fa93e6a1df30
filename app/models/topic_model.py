# /app/models/topic_model.py

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TrendingTopic(BaseModel):
    """One entry of the trending feed, as returned by GET /api/trending."""
    title: str
    traffic: str = ""
    picture: str = ""
    pictureSource: str = ""
    newsTitle: str = ""
    description: str = ""
    newsUrl: str = ""


class TopicSaveRequest(BaseModel):
    """Request body for POST /api/topics/save. Emptiness is checked by the service."""
    title: Optional[str] = None
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    traffic: Optional[str] = None
    source: Optional[str] = None


class TopicSummary(BaseModel):
    """The slice of a topic shown next to each history entry."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    title: str
    imageUrl: Optional[str] = Field(None, validation_alias="image_url")


class TopicRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str
    description: str
    imageUrl: Optional[str] = Field(None, validation_alias="image_url")
    traffic: Optional[str] = None
    source: Optional[str] = None
    createdAt: Optional[datetime] = Field(None, validation_alias="created_at")


class SavedTopic(TopicRecord):
    """TopicRecord plus the `topicId` key the frontend reads after saving."""
    topicId: str
