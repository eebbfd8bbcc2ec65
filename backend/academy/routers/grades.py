"""
Router pour les exigences de graduation (équipe).
GET  /api/admin/grade-requirements
POST /api/admin/grade-requirements
PUT  /api/admin/grade-requirements/{id}
GET  /api/admin/grade-eligible
"""

import uuid
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.grade import (
    GradeEligibilityResponse,
    GradeRequirementCreate,
    GradeRequirementResponse,
    GradeRequirementUpdate,
)
from academy.services import grade_service

router = APIRouter(prefix="/api/admin", tags=["Graduation"])


@router.get("/grade-requirements", response_model=List[GradeRequirementResponse],
            summary="Lister les exigences par faixa/grau")
def list_requirements(
    user: User = Depends(require_capability(Capability.MANAGE_GRADES)),
    db: Session = Depends(get_db),
):
    return grade_service.get_requirements(db)


@router.post("/grade-requirements", response_model=GradeRequirementResponse, status_code=201,
             summary="Créer une exigence")
def create_requirement(
    data: GradeRequirementCreate,
    user: User = Depends(require_capability(Capability.MANAGE_GRADES)),
    db: Session = Depends(get_db),
):
    """Retourne 409 si une exigence existe déjà pour cette faixa et ce grau."""
    return grade_service.create_requirement(db, data)


@router.put("/grade-requirements/{requirement_id}", response_model=GradeRequirementResponse,
            summary="Modifier une exigence")
def update_requirement(
    requirement_id: uuid.UUID,
    data: GradeRequirementUpdate,
    user: User = Depends(require_capability(Capability.MANAGE_GRADES)),
    db: Session = Depends(get_db),
):
    return grade_service.update_requirement(db, requirement_id, data)


@router.get("/grade-eligible", response_model=GradeEligibilityResponse,
            summary="Élèves éligibles au prochain grau")
def get_eligible(
    user: User = Depends(require_capability(Capability.MANAGE_GRADES)),
    db: Session = Depends(get_db),
):
    return grade_service.get_eligible_students(db)
