"""
Router d'authentification.
POST /api/auth/login                : connexion, émission du jeton
POST /api/auth/register-student     : inscription publique d'un élève
POST /api/auth/request-admin-access : demande d'accès équipe (à approuver)
GET  /api/auth/me                   : profil de l'utilisateur connecté
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import get_current_user
from academy.models.user import User
from academy.schemas.auth import (
    AdminAccessRequest,
    LoginRequest,
    LoginResponse,
    RegistrationResponse,
    StudentRegistration,
    UserProfile,
)
from academy.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["Authentification"])


@router.post("/login", response_model=LoginResponse, summary="Se connecter")
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """
    Vérifie email et mot de passe et retourne un jeton valable 24h.
    Retourne 401 si les identifiants sont invalides (aucun jeton émis).
    """
    return auth_service.authenticate(db, data.email, data.password)


@router.post("/register-student", response_model=RegistrationResponse, status_code=201,
             summary="Inscription d'un élève")
def register_student(data: StudentRegistration, db: Session = Depends(get_db)):
    """Crée le compte et la fiche élève. Retourne 409 si l'email est déjà utilisé."""
    return auth_service.register_student(db, data)


@router.post("/request-admin-access", response_model=RegistrationResponse, status_code=201,
             summary="Demander un accès équipe")
def request_admin_access(data: AdminAccessRequest, db: Session = Depends(get_db)):
    """
    Crée un compte professor, administrative ou coordinator non approuvé.
    Les endpoints d'administration restent refusés (403) jusqu'à l'approbation.
    """
    return auth_service.request_admin_access(db, data)


@router.get("/me", response_model=UserProfile, summary="Profil de l'utilisateur connecté")
def me(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return auth_service.build_profile(db, user)
