"""
Schémas Pydantic pour le check-in géolocalisé.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from academy.schemas.student import StudentResponse


class CheckinRequest(BaseModel):
    """Position déclarée par l'appareil. student_id absent = check-in pour soi-même."""
    student_id: Optional[uuid.UUID] = None
    latitude: Decimal = Field(ge=-90, le=90, max_digits=12, decimal_places=8)
    longitude: Decimal = Field(ge=-180, le=180, max_digits=12, decimal_places=8)


class CheckinResponse(BaseModel):
    id: uuid.UUID
    student_id: uuid.UUID
    checked_in_by_id: Optional[uuid.UUID]
    latitude: str
    longitude: str
    checkin_date: date
    checkin_time: datetime

    model_config = {"from_attributes": True}


class CheckinResult(BaseModel):
    message: str
    checkin: CheckinResponse


class CheckinWithStudent(CheckinResponse):
    """Check-in du jour avec la fiche élève (vue admin)."""
    student: StudentResponse
