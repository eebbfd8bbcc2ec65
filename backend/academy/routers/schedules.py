"""
Router pour les horaires de cours.
GET    /api/schedules                : tout utilisateur connecté
POST   /api/admin/schedules          : équipe
PUT    /api/admin/schedules/{id}     : équipe
DELETE /api/admin/schedules/{id}     : équipe (suppression logique)
"""

import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.enums import ClassType
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from academy.services import schedule_service

router = APIRouter(tags=["Horaires"])


@router.get("/api/schedules", response_model=List[ScheduleResponse], summary="Lister les horaires actifs")
def list_schedules(
    class_type: Optional[ClassType] = None,
    user: User = Depends(require_capability(Capability.VIEW_SCHEDULES)),
    db: Session = Depends(get_db),
):
    return schedule_service.get_schedules(db, class_type)


@router.post("/api/admin/schedules", response_model=ScheduleResponse, status_code=201,
             summary="Créer un horaire")
def create_schedule(
    data: ScheduleCreate,
    user: User = Depends(require_capability(Capability.MANAGE_SCHEDULES)),
    db: Session = Depends(get_db),
):
    return schedule_service.create_schedule(db, data)


@router.put("/api/admin/schedules/{schedule_id}", response_model=ScheduleResponse,
            summary="Modifier un horaire")
def update_schedule(
    schedule_id: uuid.UUID,
    data: ScheduleUpdate,
    user: User = Depends(require_capability(Capability.MANAGE_SCHEDULES)),
    db: Session = Depends(get_db),
):
    return schedule_service.update_schedule(db, schedule_id, data)


@router.delete("/api/admin/schedules/{schedule_id}", status_code=204, summary="Désactiver un horaire")
def delete_schedule(
    schedule_id: uuid.UUID,
    user: User = Depends(require_capability(Capability.MANAGE_SCHEDULES)),
    db: Session = Depends(get_db),
):
    schedule_service.delete_schedule(db, schedule_id)
