"""
Tests d'intégration du check-in sur une base SQLite en mémoire.
Vérifient l'invariant "un check-in par élève et par jour" au niveau du schéma,
et le scénario complet : premier check-in, doublon le même jour, check-in le lendemain.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from academy.exceptions import AlreadyCheckedIn, OutOfRange
from academy.models.checkin import Checkin
from academy.models.setting import ACADEMY_LATITUDE, ACADEMY_LONGITUDE
from academy.services import settings_service
from academy.services.checkin_service import checkin
from conftest import add_student

NOW = datetime(2026, 3, 10, 19, 30)


@pytest.fixture
def db(sqlite_db):
    return sqlite_db


@pytest.fixture
def student(db):
    return add_student(db, "joao@academia.com")


@pytest.fixture
def academy_location(db):
    settings_service.set_setting(db, ACADEMY_LATITUDE, "-25.4284")
    settings_service.set_setting(db, ACADEMY_LONGITUDE, "-49.2733")


def count_checkins(db, student_id):
    return db.execute(
        select(func.count()).select_from(Checkin).where(Checkin.student_id == student_id)
    ).scalar()


def test_scenario_jour_doublon_lendemain(db, student, academy_location):
    user = student.user
    lat, lon = Decimal("-25.4284"), Decimal("-49.2733")

    first = checkin(db, user, lat, lon, now=NOW)
    assert first.checkin_date == NOW.date()

    with pytest.raises(AlreadyCheckedIn):
        checkin(db, user, lat, lon, now=NOW + timedelta(hours=1))

    next_day = checkin(db, user, lat, lon, now=NOW + timedelta(days=1))
    assert next_day.checkin_date == NOW.date() + timedelta(days=1)
    assert count_checkins(db, student.id) == 2


def test_hors_perimetre_rien_n_est_enregistre(db, student, academy_location):
    with pytest.raises(OutOfRange):
        checkin(db, student.user, Decimal("-25.4286"), Decimal("-49.2733"), now=NOW)
    assert count_checkins(db, student.id) == 0


def test_contrainte_unique_eleve_jour(db, student):
    """Deux lignes pour le même (élève, jour) sont rejetées par la base elle-même."""
    for _ in range(2):
        db.add(Checkin(
            student_id=student.id,
            checked_in_by_id=student.user_id,
            latitude="-25.4284",
            longitude="-49.2733",
            checkin_date=NOW.date(),
            checkin_time=NOW,
        ))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert count_checkins(db, student.id) == 0


def test_course_lecture_passee_insert_en_conflit(db, student, academy_location):
    """
    Simule deux requêtes concurrentes : la seconde passe la vérification
    "déjà pointé" (lecture forcée à False) mais son INSERT entre en conflit.
    """
    lat, lon = Decimal("-25.4284"), Decimal("-49.2733")
    checkin(db, student.user, lat, lon, now=NOW)

    with patch("academy.services.checkin_service.has_checked_in", return_value=False):
        with pytest.raises(AlreadyCheckedIn):
            checkin(db, student.user, lat, lon, now=NOW)

    assert count_checkins(db, student.id) == 1
