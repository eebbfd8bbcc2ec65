"""
Modèle SQLAlchemy pour les réglages clé/valeur (clé PIX, texte "sobre", coordonnées).
"""

import uuid
from sqlalchemy import Column, DateTime, String, Text, func
from sqlalchemy.dialects.postgresql import UUID

from academy.database import Base

PIX_KEY = "pixKey"
ABOUT_TEXT = "aboutText"
ACADEMY_LATITUDE = "academyLatitude"
ACADEMY_LONGITUDE = "academyLongitude"


class Setting(Base):
    __tablename__ = "settings"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    key = Column(String(100), unique=True, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
