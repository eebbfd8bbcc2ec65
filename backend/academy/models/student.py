"""
Modèle SQLAlchemy pour la table students.
Un élève possède exactement un User ; parent_id regroupe les familles.
"""

import uuid
from sqlalchemy import Boolean, Column, Date, DateTime, Enum, ForeignKey, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from academy.database import Base
from academy.models.enums import Belt, ClassType, enum_values


class Student(Base):
    __tablename__ = "students"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    full_name = Column(String(200), nullable=False)
    whatsapp = Column(String(30), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    class_type = Column(Enum(ClassType, name="class_type", values_callable=enum_values), nullable=False)
    belt = Column(Enum(Belt, name="belt", values_callable=enum_values), nullable=False, default=Belt.BRANCA)
    degree = Column(Integer, nullable=False, default=1)
    can_receive_grade = Column(Boolean, nullable=False, default=True)
    parent_id = Column(UUID(as_uuid=True), ForeignKey("students.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", lazy="joined")

    @property
    def email(self):
        return self.user.email if self.user is not None else None
