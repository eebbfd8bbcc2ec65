"""
Modèle SQLAlchemy pour les utilisateurs (identifiants de connexion).
"""

import uuid
from sqlalchemy import Column, DateTime, Enum, String, func
from sqlalchemy.dialects.postgresql import UUID

from academy.database import Base
from academy.models.enums import Role, enum_values


class User(Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=enum_values),
        nullable=False,
        default=Role.STUDENT,
    )
    created_at = Column(DateTime, server_default=func.now())
