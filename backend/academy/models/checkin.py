"""
Modèle SQLAlchemy pour les check-ins de présence.

Invariant : au plus un check-in par élève et par jour calendaire,
garanti par la contrainte uq_checkins_student_date (et non par une simple lecture préalable).
"""

import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from academy.database import Base


class Checkin(Base):
    __tablename__ = "checkins"
    __table_args__ = (
        UniqueConstraint("student_id", "checkin_date", name="uq_checkins_student_date"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    student_id = Column(UUID(as_uuid=True), ForeignKey("students.id", ondelete="CASCADE"), nullable=False)
    checked_in_by_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    latitude = Column(String(32), nullable=False)   # Chaîne décimale telle que reçue
    longitude = Column(String(32), nullable=False)
    checkin_date = Column(Date, nullable=False)     # Jour calendaire côté serveur (fuseau de l'académie)
    checkin_time = Column(DateTime, nullable=False)

    student = relationship("Student")
