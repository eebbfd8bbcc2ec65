"""
Schémas Pydantic pour les horaires de cours.
"""

import re
import uuid
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from academy.models.enums import ClassType

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def _valid_time(v: Optional[str]) -> Optional[str]:
    if v is not None and not TIME_PATTERN.match(v):
        raise ValueError("Heure invalide, format HH:MM attendu.")
    return v


class ScheduleCreate(BaseModel):
    class_type: ClassType
    day_of_week: int = Field(ge=0, le=6)
    start_time: str
    end_time: str
    max_students: Optional[int] = Field(default=None, gt=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: str) -> str:
        return _valid_time(v)

    @model_validator(mode="after")
    def end_after_start(self):
        if self.end_time <= self.start_time:
            raise ValueError("L'heure de fin doit être postérieure à l'heure de début.")
        return self


class ScheduleUpdate(BaseModel):
    class_type: Optional[ClassType] = None
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    max_students: Optional[int] = Field(default=None, gt=0)

    @field_validator("start_time", "end_time")
    @classmethod
    def valid_time(cls, v: Optional[str]) -> Optional[str]:
        return _valid_time(v)


class ScheduleResponse(BaseModel):
    id: uuid.UUID
    class_type: ClassType
    day_of_week: int
    start_time: str
    end_time: str
    max_students: Optional[int]
    is_active: bool

    model_config = {"from_attributes": True}
