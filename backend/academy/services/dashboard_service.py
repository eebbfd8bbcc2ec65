"""
Agrégats du tableau de bord admin : effectifs, présences du jour, anniversaires du mois.
Lecture seule.
"""

from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import extract, func, select
from sqlalchemy.orm import Session

from academy.models.checkin import Checkin
from academy.models.enums import ClassType
from academy.models.student import Student
from academy.schemas.dashboard import DashboardResponse
from academy.schemas.student import StudentResponse
from academy.timeutils import academy_today


def student_counts(db: Session) -> Dict[str, int]:
    """Nombre d'élèves actifs par classe (0 pour une classe vide)."""
    rows = db.execute(
        select(Student.class_type, func.count())
        .where(Student.is_active.is_(True))
        .group_by(Student.class_type)
    ).all()

    counts = {class_type.value: 0 for class_type in ClassType}
    for class_type, count in rows:
        counts[ClassType(class_type).value] = count
    return counts


def checkins_today(db: Session, class_type: ClassType, today: Optional[date] = None) -> int:
    """Check-ins du jour des élèves actifs d'une classe."""
    today = today or academy_today()
    return db.execute(
        select(func.count())
        .select_from(Checkin)
        .join(Student, Checkin.student_id == Student.id)
        .where(
            Checkin.checkin_date == today,
            Student.class_type == class_type,
            Student.is_active.is_(True),
        )
    ).scalar() or 0


def birthdays_this_month(db: Session, today: Optional[date] = None) -> Dict[str, List[Student]]:
    """Élèves actifs nés le mois courant (toutes années confondues), groupés par classe."""
    today = today or academy_today()
    students = db.execute(
        select(Student)
        .where(
            Student.is_active.is_(True),
            extract("month", Student.date_of_birth) == today.month,
        )
        .order_by(extract("day", Student.date_of_birth), Student.full_name)
    ).scalars().all()

    by_class: Dict[str, List[Student]] = {class_type.value: [] for class_type in ClassType}
    for student in students:
        by_class[ClassType(student.class_type).value].append(student)
    return by_class


def birthdays_today(db: Session, today: Optional[date] = None) -> List[Student]:
    """Élèves actifs dont c'est l'anniversaire aujourd'hui (rappel quotidien)."""
    today = today or academy_today()
    return [
        student
        for students in birthdays_this_month(db, today).values()
        for student in students
        if student.date_of_birth.day == today.day
    ]


def get_dashboard(db: Session) -> DashboardResponse:
    today = academy_today()
    counts = student_counts(db)
    checkins = {class_type.value: checkins_today(db, class_type, today) for class_type in ClassType}
    birthdays = {
        class_type: [StudentResponse.model_validate(s) for s in students]
        for class_type, students in birthdays_this_month(db, today).items()
    }

    return DashboardResponse(
        student_counts=counts,
        checkins_today=checkins,
        birthday_students=birthdays,
        total_students=sum(counts.values()),
        total_checkins_today=sum(checkins.values()),
    )
