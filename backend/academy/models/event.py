"""
Modèle SQLAlchemy pour l'agenda (événements, stages, passages de grade).
"""

import uuid
from sqlalchemy import Column, Date, DateTime, Enum, ForeignKey, String, Text, func
from sqlalchemy.dialects.postgresql import UUID

from academy.database import Base
from academy.models.enums import ClassType, enum_values


class Event(Base):
    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    event_date = Column(Date, nullable=False)
    start_time = Column(String(5), nullable=True)
    end_time = Column(String(5), nullable=True)
    class_type = Column(Enum(ClassType, name="class_type", values_callable=enum_values), nullable=True)  # NULL = toutes les classes
    created_by = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
