"""
Tests unitaires pour student_service.
Groupe familial (âge révolu), mise à jour partielle et suppression d'un élève.
"""

import uuid
from datetime import date, datetime
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from academy.exceptions import Conflict, Forbidden, NotFound, ValidationError
from academy.models.checkin import Checkin
from academy.models.enums import Belt, ClassType
from academy.models.student import Student
from academy.models.user import User
from academy.schemas.student import StudentCreate, StudentUpdate
from academy.services import student_service
from conftest import add_student, make_student, make_user


# ============================================================
# Groupe familial
# ============================================================

class TestFamilyMembers:

    def _call(self, birth, today):
        db = MagicMock()
        user = make_user()
        dependants = [make_student(full_name="Lia")]
        db.execute.return_value.scalars.return_value.all.return_value = dependants
        with patch.object(student_service, "get_own_student", return_value=make_student(date_of_birth=birth)):
            return student_service.get_family_members(db, user, today=today)

    def test_majeur_voit_ses_dependants(self):
        result = self._call(date(1990, 5, 17), date(2026, 3, 10))
        assert result[0].full_name == "Lia"

    def test_mineur_refuse(self):
        with pytest.raises(Forbidden):
            self._call(date(2010, 1, 1), date(2026, 3, 10))

    def test_dix_huit_ans_la_veille_de_l_anniversaire(self):
        """Né le 11/03/2008 : encore 17 ans le 10/03/2026."""
        with pytest.raises(Forbidden):
            self._call(date(2008, 3, 11), date(2026, 3, 10))

    def test_dix_huit_ans_le_jour_de_l_anniversaire(self):
        assert self._call(date(2008, 3, 10), date(2026, 3, 10))


# ============================================================
# Date de naissance
# ============================================================

def test_date_de_naissance_comparee_au_jour_de_l_academie():
    """Le "jour même" est celui du fuseau de l'académie, pas celui du serveur."""
    with patch("academy.schemas.student.academy_today", return_value=date(2026, 3, 10)):
        assert make_create(date_of_birth=date(2026, 3, 10)).date_of_birth == date(2026, 3, 10)
        with pytest.raises(PydanticValidationError):
            make_create(date_of_birth=date(2026, 3, 11))


# ============================================================
# Mise à jour
# ============================================================

class TestUpdateStudent:

    def test_champs_absents_inchanges(self):
        db = MagicMock()
        student = make_student(belt=Belt.BRANCA, degree=1)
        db.get.return_value = student

        student_service.update_student(db, student.id, StudentUpdate(degree=2))

        assert student.degree == 2
        assert student.belt == Belt.BRANCA
        db.commit.assert_called_once()

    def test_propre_responsable_refuse(self):
        db = MagicMock()
        student = make_student()
        db.get.return_value = student

        with pytest.raises(ValidationError):
            student_service.update_student(db, student.id, StudentUpdate(parent_id=student.id))
        db.commit.assert_not_called()

    def test_eleve_introuvable(self):
        db = MagicMock()
        db.get.return_value = None
        with pytest.raises(NotFound):
            student_service.update_student(db, uuid.uuid4(), StudentUpdate(degree=2))


# ============================================================
# Base SQLite : création, suppression, dépendants
# ============================================================

def make_create(**kwargs) -> StudentCreate:
    data = dict(
        full_name="Rafa Lima",
        whatsapp="(41) 97777-0000",
        date_of_birth=date(1995, 8, 2),
        class_type=ClassType.FEMININA,
    )
    data.update(kwargs)
    return StudentCreate(**data)


def test_create_student_account(sqlite_db):
    student = student_service.create_student_account(
        sqlite_db, "rafa@academia.com", "senha123", make_create(),
    )
    assert student.email == "rafa@academia.com"
    assert student.belt == Belt.BRANCA
    assert student.is_active is True


def test_create_student_email_duplique(sqlite_db):
    student_service.create_student_account(sqlite_db, "rafa@academia.com", "senha123", make_create())
    with pytest.raises(Conflict):
        student_service.create_student_account(sqlite_db, "rafa@academia.com", "senha123", make_create())


def test_create_student_responsable_inconnu(sqlite_db):
    with pytest.raises(NotFound):
        student_service.create_student_account(
            sqlite_db, "lia@academia.com", "senha123", make_create(parent_id=uuid.uuid4()),
        )


def test_list_students_actifs_par_classe(sqlite_db):
    add_student(sqlite_db, "a@academia.com", "Bruna", class_type=ClassType.FEMININA)
    add_student(sqlite_db, "b@academia.com", "Ana", class_type=ClassType.FEMININA)
    add_student(sqlite_db, "c@academia.com", "Caio", class_type=ClassType.MISTA)
    add_student(sqlite_db, "d@academia.com", "Dani", class_type=ClassType.FEMININA, is_active=False)

    names = [s.full_name for s in student_service.list_students(sqlite_db, ClassType.FEMININA)]
    assert names == ["Ana", "Bruna"]
    assert len(student_service.list_students(sqlite_db)) == 3


def test_delete_student_supprime_compte_et_checkins(sqlite_db):
    parent = add_student(sqlite_db, "joao@academia.com")
    child = add_student(sqlite_db, "lia@academia.com", "Lia", parent_id=parent.id)
    sqlite_db.add(Checkin(
        student_id=parent.id,
        checked_in_by_id=parent.user_id,
        latitude="-25.4284",
        longitude="-49.2733",
        checkin_date=date(2026, 3, 10),
        checkin_time=datetime(2026, 3, 10, 19, 0),
    ))
    sqlite_db.commit()
    parent_id, user_id, child_id = parent.id, parent.user_id, child.id

    student_service.delete_student(sqlite_db, parent_id)
    sqlite_db.expire_all()

    assert sqlite_db.get(Student, parent_id) is None
    assert sqlite_db.get(User, user_id) is None
    assert sqlite_db.execute(select(func.count()).select_from(Checkin)).scalar() == 0
    assert sqlite_db.get(Student, child_id).parent_id is None


def test_delete_student_integrite_rompue():
    db = MagicMock()
    db.get.side_effect = [make_student(), None]
    db.commit.side_effect = IntegrityError("DELETE", {}, Exception("fk"))

    with pytest.raises(ValidationError):
        student_service.delete_student(db, uuid.uuid4())
    db.rollback.assert_called_once()
