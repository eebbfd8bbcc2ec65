"""
Schémas Pydantic pour l'agenda.
"""

import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from academy.models.enums import ClassType
from academy.schemas.schedule import _valid_time


class EventCreate(BaseModel):
    title: str
    description: Optional[str] = None
    event_date: date
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    class_type: Optional[ClassType] = None  # None = toutes les classes

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le titre ne peut pas être vide.")
        return v.strip()

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: Optional[str]) -> Optional[str]:
        return _valid_time(v)


class EventUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    class_type: Optional[ClassType] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le titre ne peut pas être vide.")
        return v.strip() if v else v

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: Optional[str]) -> Optional[str]:
        return _valid_time(v)


class EventResponse(BaseModel):
    id: uuid.UUID
    title: str
    description: Optional[str]
    event_date: date
    start_time: Optional[str]
    end_time: Optional[str]
    class_type: Optional[ClassType]
    created_by: Optional[uuid.UUID]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
