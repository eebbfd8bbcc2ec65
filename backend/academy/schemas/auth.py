"""
Schémas Pydantic pour l'authentification et l'inscription.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, field_validator

from academy.models.enums import Role
from academy.schemas.admin import AdminCreate, AdminResponse
from academy.schemas.student import StudentCreate, StudentResponse, check_email

MIN_PASSWORD_LENGTH = 6


class LoginRequest(BaseModel):
    email: str          # comparaison exacte, pas de normalisation
    password: str


class UserCredentials(BaseModel):
    """Identifiants du compte créé à l'inscription."""
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return check_email(v)

    @field_validator("password")
    @classmethod
    def password_long_enough(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Le mot de passe doit contenir au moins {MIN_PASSWORD_LENGTH} caractères.")
        return v


class StudentRegistration(BaseModel):
    """Corps de POST /auth/register-student."""
    user: UserCredentials
    student: StudentCreate


class AdminAccessRequest(BaseModel):
    """Corps de POST /auth/request-admin-access."""
    user: UserCredentials
    admin: AdminCreate


class UserProfile(BaseModel):
    """Utilisateur connecté, enrichi de sa fiche élève ou admin selon le rôle."""
    id: uuid.UUID
    email: str
    role: Role
    student: Optional[StudentResponse] = None
    admin: Optional[AdminResponse] = None


class LoginResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    user: UserProfile


class RegistrationResponse(BaseModel):
    user: UserProfile
    message: str
