"""
Modèle SQLAlchemy pour les membres de l'équipe (professeurs, administratifs, coordination).
Un compte admin n'ouvre les endpoints d'administration qu'une fois approuvé.
"""

import uuid
from sqlalchemy import Boolean, Column, DateTime, Enum, ForeignKey, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from academy.database import Base
from academy.models.enums import Role, enum_values


class Admin(Base):
    __tablename__ = "admins"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    full_name = Column(String(200), nullable=False)
    whatsapp = Column(String(30), nullable=False)
    role = Column(Enum(Role, name="user_role", values_callable=enum_values), nullable=False)
    is_approved = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", lazy="joined")

    @property
    def email(self):
        return self.user.email if self.user is not None else None
