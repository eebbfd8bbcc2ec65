"""
Service de check-in géolocalisé.

Règles :
- un élève ne peut pointer que pour lui-même ou pour un dépendant (parent_id = son id)
- au plus un check-in par élève et par jour calendaire (fuseau de l'académie)
- la position déclarée doit être à moins de CHECKIN_RADIUS_METERS des coordonnées
  enregistrées dans les réglages ; sans coordonnées, le contrôle est désactivé

La vérification "déjà pointé" est doublée par la contrainte unique
(student_id, checkin_date) : deux requêtes concurrentes qui passent toutes
deux la lecture se résolvent à l'INSERT, la seconde recevant AlreadyCheckedIn.
"""

import logging
import math
import uuid
from datetime import datetime
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from academy.config import settings
from academy.exceptions import AlreadyCheckedIn, Forbidden, NotFound, OutOfRange
from academy.models.checkin import Checkin
from academy.models.setting import ACADEMY_LATITUDE, ACADEMY_LONGITUDE
from academy.models.student import Student
from academy.models.user import User
from academy.services import settings_service
from academy.services.student_service import ensure_family_manager, get_own_student
from academy.timeutils import academy_now, academy_today

logger = logging.getLogger(__name__)

EARTH_RADIUS_METERS = 6_371_000


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance orthodromique en mètres entre deux points (degrés décimaux)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def get_academy_location(db: Session) -> Optional[Tuple[float, float]]:
    """Coordonnées de l'académie, ou None si l'une des deux n'est pas configurée."""
    latitude = settings_service.get_setting_value(db, ACADEMY_LATITUDE)
    longitude = settings_service.get_setting_value(db, ACADEMY_LONGITUDE)
    if latitude is None or longitude is None:
        return None
    return float(latitude), float(longitude)


def has_checked_in(db: Session, student_id: uuid.UUID, day) -> bool:
    count = db.execute(
        select(func.count())
        .select_from(Checkin)
        .where(Checkin.student_id == student_id, Checkin.checkin_date == day)
    ).scalar() or 0
    return count > 0


def checkin(
    db: Session,
    acting_user: User,
    latitude: Decimal,
    longitude: Decimal,
    student_id: Optional[uuid.UUID] = None,
    now: Optional[datetime] = None,
) -> Checkin:
    """
    Enregistre la présence du jour pour l'élève ciblé.

    Étapes :
    1. Résoudre l'élève connecté et vérifier le lien familial si la cible est un autre élève
    2. Refuser un second check-in le même jour
    3. Contrôler la distance à l'académie
    4. Insérer ; un conflit sur la contrainte unique devient AlreadyCheckedIn
    """
    now = now or academy_now()
    today = now.date()

    # 1. Élève connecté et cible
    acting_student = get_own_student(db, acting_user)
    target = _resolve_target(db, acting_student, student_id, today)

    # 2. Un seul check-in par jour
    if has_checked_in(db, target.id, today):
        raise AlreadyCheckedIn()

    # 3. Géofence
    location = get_academy_location(db)
    if location is None:
        logger.warning("Coordonnées de l'académie non configurées : contrôle de distance désactivé.")
    else:
        distance = haversine_distance(float(latitude), float(longitude), location[0], location[1])
        if distance > settings.CHECKIN_RADIUS_METERS:
            logger.info(
                "Check-in refusé pour %s : %.1f m de l'académie (max %.1f m)",
                target.id, distance, settings.CHECKIN_RADIUS_METERS,
            )
            raise OutOfRange(
                f"Vous devez être à moins de {settings.CHECKIN_RADIUS_METERS:g} mètres "
                f"de l'académie pour pointer."
            )

    # 4. Insertion protégée par uq_checkins_student_date
    record = Checkin(
        student_id=target.id,
        checked_in_by_id=acting_user.id,
        latitude=str(latitude),
        longitude=str(longitude),
        checkin_date=today,
        checkin_time=now,
    )
    db.add(record)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.info("Check-in concurrent détecté pour %s le %s", target.id, today)
        raise AlreadyCheckedIn()
    db.refresh(record)

    logger.info(
        "Check-in : élève %s par utilisateur %s le %s",
        target.id, acting_user.id, today,
    )
    return record


def get_attendance(db: Session, student_id: uuid.UUID) -> List[Checkin]:
    """Historique des check-ins d'un élève, du plus récent au plus ancien."""
    return db.execute(
        select(Checkin)
        .where(Checkin.student_id == student_id)
        .order_by(Checkin.checkin_time.desc())
    ).scalars().all()


def get_checkins_today(db: Session) -> List[Checkin]:
    """Check-ins du jour avec la fiche élève (vue admin)."""
    return db.execute(
        select(Checkin)
        .join(Student, Checkin.student_id == Student.id)
        .options(joinedload(Checkin.student))
        .where(Checkin.checkin_date == academy_today())
        .order_by(Checkin.checkin_time.desc())
    ).scalars().all()


def _resolve_target(db: Session, acting_student: Student, student_id: Optional[uuid.UUID], today) -> Student:
    """L'élève lui-même, ou un dépendant dont il est le responsable majeur."""
    if student_id is None or student_id == acting_student.id:
        return acting_student

    target = db.get(Student, student_id)
    if target is None:
        raise NotFound("Élève introuvable.")
    if target.parent_id != acting_student.id:
        raise Forbidden("Vous ne pouvez pointer que pour vous-même ou vos dépendants.")
    ensure_family_manager(acting_student, today)
    return target
