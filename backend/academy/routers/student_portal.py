"""
Router de l'espace élève (rôle student uniquement).
GET  /api/student/profile
POST /api/student/checkin
GET  /api/student/attendance
GET  /api/student/family
GET  /api/student/schedules
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.checkin import CheckinRequest, CheckinResponse, CheckinResult
from academy.schemas.schedule import ScheduleResponse
from academy.schemas.student import StudentResponse
from academy.services import checkin_service, schedule_service, student_service

router = APIRouter(prefix="/api/student", tags=["Espace élève"])


@router.get("/profile", response_model=StudentResponse, summary="Ma fiche élève")
def get_profile(
    user: User = Depends(require_capability(Capability.VIEW_OWN_PROFILE)),
    db: Session = Depends(get_db),
):
    return student_service.get_own_student(db, user)


@router.post("/checkin", response_model=CheckinResult, status_code=201, summary="Pointer ma présence")
def checkin(
    data: CheckinRequest,
    user: User = Depends(require_capability(Capability.CHECKIN)),
    db: Session = Depends(get_db),
):
    """
    Enregistre la présence du jour à partir de la position de l'appareil.

    - student_id absent : check-in pour soi-même ; sinon pour un dépendant du groupe familial
    - 400 si déjà pointé aujourd'hui ou hors du périmètre de l'académie
    - 403 si l'élève ciblé n'est pas un dépendant
    """
    record = checkin_service.checkin(
        db, user, data.latitude, data.longitude, student_id=data.student_id,
    )
    return CheckinResult(message="Check-in réalisé.", checkin=CheckinResponse.model_validate(record))


@router.get("/attendance", response_model=List[CheckinResponse], summary="Mon historique de présence")
def get_attendance(
    user: User = Depends(require_capability(Capability.VIEW_OWN_ATTENDANCE)),
    db: Session = Depends(get_db),
):
    student = student_service.get_own_student(db, user)
    return checkin_service.get_attendance(db, student.id)


@router.get("/family", response_model=List[StudentResponse], summary="Mon groupe familial")
def get_family(
    user: User = Depends(require_capability(Capability.MANAGE_FAMILY)),
    db: Session = Depends(get_db),
):
    """Dépendants de l'élève connecté. 403 si l'élève a moins de 18 ans."""
    return student_service.get_family_members(db, user)


@router.get("/schedules", response_model=List[ScheduleResponse], summary="Horaires de ma classe")
def get_schedules(
    user: User = Depends(require_capability(Capability.VIEW_OWN_SCHEDULES)),
    db: Session = Depends(get_db),
):
    student = student_service.get_own_student(db, user)
    return schedule_service.get_schedules(db, student.class_type)
