"""
Service pour les horaires de cours hebdomadaires.
"""

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.exceptions import NotFound, ValidationError
from academy.models.enums import ClassType
from academy.models.schedule import ClassSchedule
from academy.schemas.schedule import ScheduleCreate, ScheduleUpdate


def get_schedules(db: Session, class_type: Optional[ClassType] = None) -> List[ClassSchedule]:
    """Horaires actifs, triés par jour puis heure de début."""
    query = select(ClassSchedule).where(ClassSchedule.is_active.is_(True))
    if class_type is not None:
        query = query.where(ClassSchedule.class_type == class_type)
    return db.execute(
        query.order_by(ClassSchedule.day_of_week, ClassSchedule.start_time)
    ).scalars().all()


def create_schedule(db: Session, data: ScheduleCreate) -> ClassSchedule:
    schedule = ClassSchedule(**data.model_dump())
    db.add(schedule)
    db.commit()
    db.refresh(schedule)
    return schedule


def update_schedule(db: Session, schedule_id: uuid.UUID, data: ScheduleUpdate) -> ClassSchedule:
    schedule = _get_or_404(db, schedule_id)

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(schedule, field, value)

    if schedule.end_time <= schedule.start_time:
        db.rollback()
        raise ValidationError("L'heure de fin doit être postérieure à l'heure de début.")

    db.commit()
    db.refresh(schedule)
    return schedule


def delete_schedule(db: Session, schedule_id: uuid.UUID) -> None:
    """Suppression logique : l'horaire est désactivé, pas effacé."""
    schedule = _get_or_404(db, schedule_id)
    schedule.is_active = False
    db.commit()


def _get_or_404(db: Session, schedule_id: uuid.UUID) -> ClassSchedule:
    schedule = db.get(ClassSchedule, schedule_id)
    if schedule is None or not schedule.is_active:
        raise NotFound("Horaire introuvable.")
    return schedule
