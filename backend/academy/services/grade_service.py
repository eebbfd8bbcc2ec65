"""
Service pour les exigences de graduation et l'éligibilité des élèves.

Un élève est éligible lorsqu'il peut recevoir un grau (can_receive_grade)
et que son nombre total de check-ins atteint l'exigence de sa faixa/grau actuels.
"""

import uuid
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academy.exceptions import Conflict, NotFound
from academy.models.checkin import Checkin
from academy.models.enums import Belt, ClassType
from academy.models.grade_requirement import GradeRequirement
from academy.models.student import Student
from academy.schemas.grade import (
    EligibleStudent,
    GradeEligibilityResponse,
    GradeRequirementCreate,
    GradeRequirementUpdate,
)
from academy.schemas.student import StudentResponse

BELT_ORDER = {belt: index for index, belt in enumerate(Belt)}


def get_requirements(db: Session) -> List[GradeRequirement]:
    requirements = db.execute(select(GradeRequirement)).scalars().all()
    return sorted(requirements, key=lambda r: (BELT_ORDER[Belt(r.belt)], r.degree))


def create_requirement(db: Session, data: GradeRequirementCreate) -> GradeRequirement:
    requirement = GradeRequirement(**data.model_dump())
    db.add(requirement)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict(f"Une exigence existe déjà pour {data.belt.value} grau {data.degree}.")
    db.refresh(requirement)
    return requirement


def update_requirement(db: Session, requirement_id: uuid.UUID, data: GradeRequirementUpdate) -> GradeRequirement:
    requirement = db.get(GradeRequirement, requirement_id)
    if requirement is None:
        raise NotFound("Exigence de graduation introuvable.")

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(requirement, field, value)
    db.commit()
    db.refresh(requirement)
    return requirement


def get_eligible_students(db: Session) -> GradeEligibilityResponse:
    """Élèves actifs ayant atteint le nombre de cours requis, groupés par classe."""
    required = {
        (Belt(r.belt), r.degree): r.required_classes
        for r in db.execute(select(GradeRequirement)).scalars().all()
    }

    attendance = (
        select(Checkin.student_id, func.count().label("attended"))
        .group_by(Checkin.student_id)
        .subquery()
    )
    rows = db.execute(
        select(Student, func.coalesce(attendance.c.attended, 0))
        .outerjoin(attendance, attendance.c.student_id == Student.id)
        .where(Student.is_active.is_(True), Student.can_receive_grade.is_(True))
        .order_by(Student.full_name)
    ).all()

    by_class = {class_type.value: [] for class_type in ClassType}
    for student, attended in rows:
        needed = required.get((Belt(student.belt), student.degree))
        if needed is None or attended < needed:
            continue
        by_class[ClassType(student.class_type).value].append(EligibleStudent(
            student=StudentResponse.model_validate(student),
            attended_classes=attended,
            required_classes=needed,
        ))

    return GradeEligibilityResponse(
        by_class=by_class,
        total=sum(len(students) for students in by_class.values()),
    )
