"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL,
et get_current_user pour simuler un utilisateur connecté.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

import uuid  # noqa: E402
from datetime import date, datetime  # noqa: E402
from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, event  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import academy.models  # noqa: E402,F401
from academy.database import Base, get_db  # noqa: E402
from academy.dependencies import get_current_user  # noqa: E402
from academy.main import app  # noqa: E402
from academy.models.admin import Admin  # noqa: E402
from academy.models.enums import Belt, ClassType, Role  # noqa: E402
from academy.models.student import Student  # noqa: E402
from academy.models.user import User  # noqa: E402


def make_user(role=Role.STUDENT, **kwargs) -> User:
    """Crée un mock d'utilisateur SQLAlchemy."""
    u = MagicMock(spec=User)
    u.id = kwargs.get("id", uuid.uuid4())
    u.email = kwargs.get("email", "aluno@academia.com")
    u.password_hash = kwargs.get("password_hash", "hash")
    u.role = role
    return u


def make_student(**kwargs) -> Student:
    """Crée un mock d'élève SQLAlchemy."""
    s = MagicMock(spec=Student)
    s.id = kwargs.get("id", uuid.uuid4())
    s.user_id = kwargs.get("user_id", uuid.uuid4())
    s.email = kwargs.get("email", "aluno@academia.com")
    s.full_name = kwargs.get("full_name", "João Silva")
    s.whatsapp = kwargs.get("whatsapp", "(41) 99999-0000")
    s.date_of_birth = kwargs.get("date_of_birth", date(1990, 5, 17))
    s.class_type = kwargs.get("class_type", ClassType.MISTA)
    s.belt = kwargs.get("belt", Belt.BRANCA)
    s.degree = kwargs.get("degree", 1)
    s.can_receive_grade = kwargs.get("can_receive_grade", True)
    s.parent_id = kwargs.get("parent_id", None)
    s.is_active = kwargs.get("is_active", True)
    s.created_at = kwargs.get("created_at", datetime.now())
    return s


def make_admin(approved=True, role=Role.PROFESSOR, **kwargs) -> Admin:
    """Crée un mock de fiche équipe SQLAlchemy."""
    a = MagicMock(spec=Admin)
    a.id = kwargs.get("id", uuid.uuid4())
    a.user_id = kwargs.get("user_id", uuid.uuid4())
    a.email = kwargs.get("email", "professor@academia.com")
    a.full_name = kwargs.get("full_name", "Mestre Carlos")
    a.whatsapp = kwargs.get("whatsapp", "(41) 98888-0000")
    a.role = role
    a.is_approved = approved
    a.created_at = kwargs.get("created_at", datetime.now())
    return a


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def client(mock_db):
    """Client HTTP de test avec la BDD mockée."""
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def login_as(mock_db):
    """
    Simule un utilisateur connecté du rôle demandé.
    Pour un rôle équipe, la fiche Admin retournée par la BDD mockée porte `approved`.
    """
    def _login(role=Role.STUDENT, approved=True):
        user = make_user(role=role)
        app.dependency_overrides[get_current_user] = lambda: user
        mock_db.execute.return_value.scalar.return_value = make_admin(
            approved=approved, role=role, user_id=user.id,
        )
        return user
    return _login


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite n'applique ON DELETE CASCADE / SET NULL que si les clés étrangères sont activées
    dbapi_connection.execute("PRAGMA foreign_keys=ON")


@pytest.fixture
def sqlite_db():
    """Session sur une base SQLite en mémoire, schéma créé depuis les modèles."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_foreign_keys)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


def add_student(db, email, full_name="João Silva", **kwargs) -> Student:
    """Insère un User élève et sa fiche dans la base de test."""
    user = User(email=email, password_hash="x", role=Role.STUDENT)
    db.add(user)
    db.flush()
    fields = dict(
        whatsapp="(41) 99999-0000",
        date_of_birth=date(1990, 5, 17),
        class_type=ClassType.MISTA,
    )
    fields.update(kwargs)
    student = Student(user_id=user.id, full_name=full_name, **fields)
    db.add(student)
    db.commit()
    return student
