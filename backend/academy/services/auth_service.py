"""
Service d'authentification : émission de jetons, résolution et contrôle d'accès,
inscription des élèves et demandes d'accès équipe.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from academy.exceptions import Conflict, Forbidden, InvalidCredentials, InvalidToken
from academy.models.admin import Admin
from academy.models.enums import Role
from academy.models.student import Student
from academy.models.user import User
from academy.permissions import is_admin_role
from academy.schemas.admin import AdminResponse
from academy.schemas.auth import (
    AdminAccessRequest,
    LoginResponse,
    RegistrationResponse,
    StudentRegistration,
    UserProfile,
)
from academy.schemas.student import StudentResponse
from academy.security import create_access_token, decode_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: str, password: str) -> LoginResponse:
    """
    Vérifie les identifiants et émet un jeton valable 24h.
    Email inconnu et mot de passe erroné lèvent la même InvalidCredentials.
    """
    user = get_user_by_email(db, email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Échec de connexion pour %s", email)
        raise InvalidCredentials()

    token = create_access_token(user.id)
    logger.info("Connexion réussie : utilisateur %s (%s)", user.id, user.role)
    return LoginResponse(token=token, user=build_profile(db, user))


def resolve_token(db: Session, token: str) -> User:
    """Retourne l'utilisateur porté par le jeton, ou lève InvalidToken."""
    user_id = decode_access_token(token)
    user = db.get(User, user_id)
    if user is None:
        raise InvalidToken()
    return user


def ensure_admin_approved(db: Session, user: User) -> Admin:
    """
    Un compte équipe n'est autorisé que si sa fiche Admin existe et est approuvée.
    """
    admin = get_admin_by_user_id(db, user.id)
    if admin is None or not admin.is_approved:
        logger.info("Accès équipe refusé : utilisateur %s non approuvé", user.id)
        raise Forbidden("Compte en attente d'approbation par la coordination.")
    return admin


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(select(User).where(User.email == email)).scalar()


def get_admin_by_user_id(db: Session, user_id: uuid.UUID) -> Optional[Admin]:
    return db.execute(select(Admin).where(Admin.user_id == user_id)).scalar()


def get_student_by_user_id(db: Session, user_id: uuid.UUID) -> Optional[Student]:
    return db.execute(select(Student).where(Student.user_id == user_id)).scalar()


def create_user(db: Session, email: str, password: str, role: Role) -> User:
    """Ajoute un User à la session (flush pour obtenir l'ID, sans commit)."""
    user = User(email=email, password_hash=hash_password(password), role=role)
    db.add(user)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise Conflict(f"Un compte existe déjà pour l'email '{email}'.")
    return user


def register_student(db: Session, data: StudentRegistration) -> RegistrationResponse:
    """Inscription publique d'un élève : le rôle est toujours student."""
    # Import local pour éviter l'import circulaire avec student_service (qui utilise create_user)
    from academy.services.student_service import create_student_account

    student = create_student_account(db, data.user.email, data.user.password, data.student)
    logger.info("Élève inscrit : %s (%s)", student.full_name, data.user.email)
    return RegistrationResponse(user=build_profile(db, student.user), message="Inscription réalisée.")


def request_admin_access(db: Session, data: AdminAccessRequest) -> RegistrationResponse:
    """Crée un compte équipe non approuvé ; il reste bloqué jusqu'à approbation."""
    user = create_user(db, data.user.email, data.user.password, data.admin.role)
    admin = Admin(user_id=user.id, is_approved=False, **data.admin.model_dump())
    db.add(admin)
    db.commit()
    db.refresh(user)
    logger.info("Demande d'accès équipe : %s (%s)", user.email, admin.role)
    return RegistrationResponse(
        user=build_profile(db, user),
        message="Demande d'accès envoyée pour approbation.",
    )


def build_profile(db: Session, user: User) -> UserProfile:
    """Profil utilisateur sans le hash, avec la fiche élève ou admin associée."""
    profile = UserProfile(id=user.id, email=user.email, role=user.role)
    if user.role == Role.STUDENT:
        student = get_student_by_user_id(db, user.id)
        if student is not None:
            profile.student = StudentResponse.model_validate(student)
    elif is_admin_role(user.role):
        admin = get_admin_by_user_id(db, user.id)
        if admin is not None:
            profile.admin = AdminResponse.model_validate(admin)
    return profile
