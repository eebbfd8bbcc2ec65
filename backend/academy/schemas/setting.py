"""
Schémas Pydantic pour les réglages clé/valeur.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, field_validator


class SettingUpdate(BaseModel):
    key: str
    value: str

    @field_validator("key")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("La clé ne peut pas être vide.")
        return v.strip()


class SettingResponse(BaseModel):
    key: str
    value: str
    updated_at: Optional[datetime]

    model_config = {"from_attributes": True}
