"""
Modèle SQLAlchemy pour les horaires de cours hebdomadaires.
"""

import uuid
from sqlalchemy import Boolean, Column, Enum, Integer, String
from sqlalchemy.dialects.postgresql import UUID

from academy.database import Base
from academy.models.enums import ClassType, enum_values


class ClassSchedule(Base):
    __tablename__ = "class_schedules"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    class_type = Column(Enum(ClassType, name="class_type", values_callable=enum_values), nullable=False)
    day_of_week = Column(Integer, nullable=False)   # 0 = dimanche, 1 = lundi, ...
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)    # HH:MM
    max_students = Column(Integer, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
