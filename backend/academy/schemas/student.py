"""
Schémas Pydantic pour les élèves.
"""

import re
import uuid
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, TypeAdapter, field_validator

from academy.models.enums import Belt, ClassType
from academy.timeutils import academy_today

WHATSAPP_PATTERN = re.compile(r"^[0-9()+\-\s]{8,20}$")
_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def _clean_name(v: str) -> str:
    if not v.strip():
        raise ValueError("Le champ ne peut pas être vide.")
    return v.strip()


def check_email(v: str) -> str:
    """
    Vérifie le format sans le normaliser : l'email est stocké tel que saisi,
    la connexion compare la chaîne exacte.
    """
    try:
        _EMAIL_ADAPTER.validate_python(v)
    except ValueError:
        raise ValueError("Adresse email invalide.")
    return v


def _clean_whatsapp(v: str) -> str:
    v = v.strip()
    if not WHATSAPP_PATTERN.match(v):
        raise ValueError("Numéro WhatsApp invalide.")
    return v


class StudentBase(BaseModel):
    full_name: str
    whatsapp: str
    date_of_birth: date
    class_type: ClassType
    belt: Belt = Belt.BRANCA
    degree: int = Field(default=1, ge=0, le=10)
    can_receive_grade: bool = True
    parent_id: Optional[uuid.UUID] = None

    @field_validator("full_name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        return _clean_name(v)

    @field_validator("whatsapp")
    @classmethod
    def valid_whatsapp(cls, v: str) -> str:
        return _clean_whatsapp(v)

    @field_validator("date_of_birth")
    @classmethod
    def not_in_future(cls, v: date) -> date:
        if v > academy_today():
            raise ValueError("La date de naissance ne peut pas être dans le futur.")
        return v


class StudentCreate(StudentBase):
    """Données élève à la création (inscription publique ou par un admin)."""


class StudentUpdate(BaseModel):
    """Schéma de mise à jour d'un élève (PUT /admin/students/{id}). Champs absents = inchangés."""
    full_name: Optional[str] = None
    whatsapp: Optional[str] = None
    date_of_birth: Optional[date] = None
    class_type: Optional[ClassType] = None
    belt: Optional[Belt] = None
    degree: Optional[int] = Field(default=None, ge=0, le=10)
    can_receive_grade: Optional[bool] = None
    parent_id: Optional[uuid.UUID] = None
    is_active: Optional[bool] = None

    @field_validator("full_name")
    @classmethod
    def name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return _clean_name(v) if v is not None else v

    @field_validator("whatsapp")
    @classmethod
    def valid_whatsapp(cls, v: Optional[str]) -> Optional[str]:
        return _clean_whatsapp(v) if v is not None else v


class StudentResponse(BaseModel):
    """Schéma de réponse pour un élève, avec l'email de son compte."""
    id: uuid.UUID
    user_id: uuid.UUID
    email: Optional[str]
    full_name: str
    whatsapp: str
    date_of_birth: date
    class_type: ClassType
    belt: Belt
    degree: int
    can_receive_grade: bool
    parent_id: Optional[uuid.UUID]
    is_active: bool
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}


class AdminStudentCreate(BaseModel):
    """Création d'un élève par l'équipe ; sans mot de passe, le mot de passe par défaut est appliqué."""
    email: str
    password: Optional[str] = None
    student: StudentCreate

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        return check_email(v)
