"""
Modèle SQLAlchemy pour le nombre de cours requis par faixa/grau.
"""

import uuid
from sqlalchemy import Column, Enum, Integer, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID

from academy.database import Base
from academy.models.enums import Belt, enum_values


class GradeRequirement(Base):
    __tablename__ = "grade_requirements"
    __table_args__ = (
        UniqueConstraint("belt", "degree", name="uq_grade_requirements_belt_degree"),
    )

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    belt = Column(Enum(Belt, name="belt", values_callable=enum_values), nullable=False)
    degree = Column(Integer, nullable=False)
    required_classes = Column(Integer, nullable=False)
