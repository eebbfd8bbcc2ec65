"""
Router d'administration (professor, administrative, coordinator approuvés).
GET    /api/admin/dashboard
GET    /api/admin/students
POST   /api/admin/students
PUT    /api/admin/students/{id}
DELETE /api/admin/students/{id}
GET    /api/admin/checkins/today
GET    /api/admin/pending-admins
POST   /api/admin/approve/{id}
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.config import settings
from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.enums import ClassType
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.admin import AdminResponse
from academy.schemas.checkin import CheckinWithStudent
from academy.schemas.dashboard import DashboardResponse
from academy.schemas.student import AdminStudentCreate, StudentResponse, StudentUpdate
from academy.services import admin_service, checkin_service, dashboard_service, student_service

router = APIRouter(prefix="/api/admin", tags=["Administration"])


@router.get("/dashboard", response_model=DashboardResponse, summary="Tableau de bord")
def get_dashboard(
    user: User = Depends(require_capability(Capability.VIEW_DASHBOARD)),
    db: Session = Depends(get_db),
):
    """Effectifs actifs par classe, check-ins du jour par classe et anniversaires du mois."""
    return dashboard_service.get_dashboard(db)


@router.get("/students", response_model=List[StudentResponse], summary="Lister les élèves actifs")
def list_students(
    class_type: Optional[ClassType] = None,
    user: User = Depends(require_capability(Capability.MANAGE_STUDENTS)),
    db: Session = Depends(get_db),
):
    return student_service.list_students(db, class_type)


@router.post("/students", response_model=StudentResponse, status_code=201, summary="Créer un élève")
def create_student(
    data: AdminStudentCreate,
    user: User = Depends(require_capability(Capability.MANAGE_STUDENTS)),
    db: Session = Depends(get_db),
):
    password = data.password or settings.DEFAULT_STUDENT_PASSWORD
    return student_service.create_student_account(db, data.email, password, data.student)


@router.put("/students/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(
    student_id: uuid.UUID,
    data: StudentUpdate,
    user: User = Depends(require_capability(Capability.MANAGE_STUDENTS)),
    db: Session = Depends(get_db),
):
    """Met à jour les champs fournis d'un élève. Les champs absents ne sont pas modifiés."""
    return student_service.update_student(db, student_id, data)


@router.delete("/students/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(
    student_id: uuid.UUID,
    user: User = Depends(require_capability(Capability.MANAGE_STUDENTS)),
    db: Session = Depends(get_db),
):
    """Supprime définitivement l'élève, son compte et ses check-ins."""
    student_service.delete_student(db, student_id)


@router.get("/checkins/today", response_model=List[CheckinWithStudent], summary="Check-ins du jour")
def get_checkins_today(
    user: User = Depends(require_capability(Capability.VIEW_TODAY_CHECKINS)),
    db: Session = Depends(get_db),
):
    return checkin_service.get_checkins_today(db)


@router.get("/pending-admins", response_model=List[AdminResponse], summary="Demandes d'accès en attente")
def get_pending_admins(
    user: User = Depends(require_capability(Capability.APPROVE_ADMINS)),
    db: Session = Depends(get_db),
):
    return admin_service.get_pending_admins(db)


@router.post("/approve/{admin_id}", response_model=AdminResponse, summary="Approuver un compte équipe")
def approve_admin(
    admin_id: uuid.UUID,
    user: User = Depends(require_capability(Capability.APPROVE_ADMINS)),
    db: Session = Depends(get_db),
):
    return admin_service.approve_admin(db, admin_id, approved_by=user.id)
