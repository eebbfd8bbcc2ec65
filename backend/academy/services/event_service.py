"""
Service pour l'agenda de l'académie.
"""

import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.exceptions import NotFound
from academy.models.event import Event
from academy.schemas.event import EventCreate, EventUpdate


def get_events(db: Session, event_date: Optional[date] = None) -> List[Event]:
    """Événements du plus récent au plus ancien, ou ceux d'une date précise."""
    query = select(Event)
    if event_date is not None:
        query = query.where(Event.event_date == event_date)
    return db.execute(query.order_by(Event.event_date.desc())).scalars().all()


def create_event(db: Session, data: EventCreate, created_by: uuid.UUID) -> Event:
    event = Event(created_by=created_by, **data.model_dump())
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def update_event(db: Session, event_id: uuid.UUID, data: EventUpdate) -> Event:
    event = _get_or_404(db, event_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(event, field, value)
    db.commit()
    db.refresh(event)
    return event


def delete_event(db: Session, event_id: uuid.UUID) -> None:
    event = _get_or_404(db, event_id)
    db.delete(event)
    db.commit()


def _get_or_404(db: Session, event_id: uuid.UUID) -> Event:
    event = db.get(Event, event_id)
    if event is None:
        raise NotFound("Événement introuvable.")
    return event
