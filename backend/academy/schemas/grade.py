"""
Schémas Pydantic pour les exigences de graduation.
"""

import uuid
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from academy.models.enums import Belt
from academy.schemas.student import StudentResponse


class GradeRequirementCreate(BaseModel):
    belt: Belt
    degree: int = Field(ge=0, le=10)
    required_classes: int = Field(gt=0)


class GradeRequirementUpdate(BaseModel):
    required_classes: Optional[int] = Field(default=None, gt=0)


class GradeRequirementResponse(BaseModel):
    id: uuid.UUID
    belt: Belt
    degree: int
    required_classes: int

    model_config = {"from_attributes": True}


class EligibleStudent(BaseModel):
    student: StudentResponse
    attended_classes: int
    required_classes: int


class GradeEligibilityResponse(BaseModel):
    """Élèves ayant atteint le nombre de cours requis, par classe."""
    by_class: Dict[str, List[EligibleStudent]]
    total: int
