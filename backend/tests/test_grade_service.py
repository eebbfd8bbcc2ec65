"""
Tests pour grade_service sur une base SQLite en mémoire.
"""

import uuid
from datetime import date, datetime, timedelta

import pytest

from academy.exceptions import Conflict, NotFound
from academy.models.checkin import Checkin
from academy.models.enums import Belt, ClassType
from academy.schemas.grade import GradeRequirementCreate, GradeRequirementUpdate
from academy.services import grade_service
from conftest import add_student


def add_checkins(db, student, count):
    start = date(2026, 1, 1)
    for offset in range(count):
        day = start + timedelta(days=offset)
        db.add(Checkin(
            student_id=student.id,
            checked_in_by_id=student.user_id,
            latitude="-25.4284",
            longitude="-49.2733",
            checkin_date=day,
            checkin_time=datetime.combine(day, datetime.min.time()),
        ))
    db.commit()


def test_requirements_tries_par_progression(sqlite_db):
    for belt, degree in [(Belt.AZUL, 0), (Belt.BRANCA, 2), (Belt.BRANCA, 1)]:
        grade_service.create_requirement(
            sqlite_db, GradeRequirementCreate(belt=belt, degree=degree, required_classes=20),
        )

    ordered = [(r.belt, r.degree) for r in grade_service.get_requirements(sqlite_db)]
    assert ordered == [(Belt.BRANCA, 1), (Belt.BRANCA, 2), (Belt.AZUL, 0)]


def test_requirement_duplique(sqlite_db):
    data = GradeRequirementCreate(belt=Belt.BRANCA, degree=1, required_classes=20)
    grade_service.create_requirement(sqlite_db, data)
    with pytest.raises(Conflict):
        grade_service.create_requirement(sqlite_db, data)


def test_update_requirement(sqlite_db):
    requirement = grade_service.create_requirement(
        sqlite_db, GradeRequirementCreate(belt=Belt.BRANCA, degree=1, required_classes=20),
    )
    updated = grade_service.update_requirement(
        sqlite_db, requirement.id, GradeRequirementUpdate(required_classes=30),
    )
    assert updated.required_classes == 30


def test_update_requirement_introuvable(sqlite_db):
    with pytest.raises(NotFound):
        grade_service.update_requirement(sqlite_db, uuid.uuid4(), GradeRequirementUpdate(required_classes=5))


def test_eligibilite(sqlite_db):
    grade_service.create_requirement(
        sqlite_db, GradeRequirementCreate(belt=Belt.BRANCA, degree=1, required_classes=3),
    )
    ready = add_student(sqlite_db, "ana@academia.com", "Ana")
    short = add_student(sqlite_db, "bia@academia.com", "Bia")
    blocked = add_student(sqlite_db, "caio@academia.com", "Caio", can_receive_grade=False)
    other_level = add_student(sqlite_db, "dani@academia.com", "Dani", belt=Belt.AZUL, degree=0,
                              class_type=ClassType.FEMININA)
    add_checkins(sqlite_db, ready, 3)
    add_checkins(sqlite_db, short, 2)
    add_checkins(sqlite_db, blocked, 5)
    add_checkins(sqlite_db, other_level, 10)

    result = grade_service.get_eligible_students(sqlite_db)

    assert result.total == 1
    eligible = result.by_class["MISTA"][0]
    assert eligible.student.full_name == "Ana"
    assert eligible.attended_classes == 3
    assert eligible.required_classes == 3
    assert result.by_class["FEMININA"] == []


def test_eligibilite_sans_check_in(sqlite_db):
    add_student(sqlite_db, "ana@academia.com", "Ana")
    assert grade_service.get_eligible_students(sqlite_db).total == 0
