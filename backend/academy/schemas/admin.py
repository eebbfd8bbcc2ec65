"""
Schémas Pydantic pour les membres de l'équipe.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator

from academy.models.enums import Role
from academy.permissions import ADMIN_ROLES


class AdminCreate(BaseModel):
    full_name: str
    whatsapp: str
    role: Role

    @field_validator("full_name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom ne peut pas être vide.")
        return v.strip()

    @field_validator("role")
    @classmethod
    def staff_role(cls, v: Role) -> Role:
        if v not in ADMIN_ROLES:
            raise ValueError("Rôle invalide : professor, administrative ou coordinator attendu.")
        return v


class AdminResponse(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    email: Optional[str]
    full_name: str
    whatsapp: str
    role: Role
    is_approved: bool
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
