"""
Service métier pour les élèves : fiche, roster admin, groupe familial.
"""

import logging
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academy.exceptions import Forbidden, NotFound, ValidationError
from academy.models.enums import ClassType, Role
from academy.models.student import Student
from academy.models.user import User
from academy.schemas.student import StudentCreate, StudentUpdate
from academy.services.auth_service import create_user, get_student_by_user_id
from academy.timeutils import compute_age

logger = logging.getLogger(__name__)

FAMILY_MANAGER_MIN_AGE = 18


def create_student_account(db: Session, email: str, password: str, data: StudentCreate) -> Student:
    """
    Crée le User (rôle student) et la fiche élève dans une même transaction.
    Lève Conflict si l'email est déjà utilisé, NotFound si parent_id est inconnu.
    """
    if data.parent_id is not None:
        _get_or_404(db, data.parent_id, "Responsable familial introuvable.")

    user = create_user(db, email, password, Role.STUDENT)
    student = Student(user_id=user.id, **data.model_dump())
    db.add(student)
    db.commit()
    db.refresh(student)
    return student


def list_students(db: Session, class_type: Optional[ClassType] = None) -> List[Student]:
    """Élèves actifs, filtrés par classe si demandé, triés par nom."""
    query = select(Student).where(Student.is_active.is_(True))
    if class_type is not None:
        query = query.where(Student.class_type == class_type)
    return db.execute(query.order_by(Student.full_name)).scalars().all()


def get_own_student(db: Session, user: User) -> Student:
    """Fiche élève de l'utilisateur connecté."""
    student = get_student_by_user_id(db, user.id)
    if student is None:
        raise NotFound("Fiche élève introuvable.")
    return student


def update_student(db: Session, student_id: uuid.UUID, data: StudentUpdate) -> Student:
    """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
    student = _get_or_404(db, student_id)

    update_data = data.model_dump(exclude_unset=True)
    parent_id = update_data.get("parent_id")
    if parent_id is not None:
        if parent_id == student.id:
            raise ValidationError("Un élève ne peut pas être son propre responsable.")
        _get_or_404(db, parent_id, "Responsable familial introuvable.")

    for field, value in update_data.items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: uuid.UUID) -> None:
    """
    Supprime définitivement un élève et son compte utilisateur.
    Les check-ins de l'élève suivent en cascade ; ses dépendants perdent leur parent_id.
    """
    student = _get_or_404(db, student_id)
    user = db.get(User, student.user_id)

    db.delete(student)
    if user is not None:
        db.delete(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ValidationError("Impossible de supprimer cet élève : des données y font encore référence.")
    logger.info("Élève supprimé : %s", student_id)


def get_family_members(db: Session, user: User, today: Optional[date] = None) -> List[Student]:
    """
    Dépendants de l'élève connecté (parent_id = son id).
    Réservé aux élèves majeurs : âge révolu calculé sur la date du jour.
    """
    student = get_own_student(db, user)
    ensure_family_manager(student, today)

    return db.execute(
        select(Student)
        .where(Student.parent_id == student.id)
        .order_by(Student.full_name)
    ).scalars().all()


def ensure_family_manager(student: Student, today: Optional[date] = None) -> None:
    """Seul un élève majeur (âge révolu) gère un groupe familial."""
    if compute_age(student.date_of_birth, today) < FAMILY_MANAGER_MIN_AGE:
        raise Forbidden("Il faut avoir 18 ans ou plus pour gérer un groupe familial.")


def _get_or_404(db: Session, student_id: uuid.UUID, message: str = "Élève introuvable.") -> Student:
    student = db.get(Student, student_id)
    if student is None:
        raise NotFound(message)
    return student
