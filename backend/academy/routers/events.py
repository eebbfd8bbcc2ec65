"""
Router pour l'agenda.
GET    /api/events        : tout utilisateur connecté (filtre optionnel ?event_date=YYYY-MM-DD)
POST   /api/events        : équipe
PUT    /api/events/{id}   : équipe
DELETE /api/events/{id}   : équipe
"""

import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.event import EventCreate, EventResponse, EventUpdate
from academy.services import event_service

router = APIRouter(prefix="/api/events", tags=["Agenda"])


@router.get("", response_model=List[EventResponse], summary="Lister les événements")
def list_events(
    event_date: Optional[date] = None,
    user: User = Depends(require_capability(Capability.VIEW_EVENTS)),
    db: Session = Depends(get_db),
):
    return event_service.get_events(db, event_date)


@router.post("", response_model=EventResponse, status_code=201, summary="Créer un événement")
def create_event(
    data: EventCreate,
    user: User = Depends(require_capability(Capability.MANAGE_EVENTS)),
    db: Session = Depends(get_db),
):
    return event_service.create_event(db, data, created_by=user.id)


@router.put("/{event_id}", response_model=EventResponse, summary="Modifier un événement")
def update_event(
    event_id: uuid.UUID,
    data: EventUpdate,
    user: User = Depends(require_capability(Capability.MANAGE_EVENTS)),
    db: Session = Depends(get_db),
):
    return event_service.update_event(db, event_id, data)


@router.delete("/{event_id}", status_code=204, summary="Supprimer un événement")
def delete_event(
    event_id: uuid.UUID,
    user: User = Depends(require_capability(Capability.MANAGE_EVENTS)),
    db: Session = Depends(get_db),
):
    event_service.delete_event(db, event_id)
