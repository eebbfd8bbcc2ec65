"""
Router pour les réglages de l'académie.
GET  /api/settings : public (clé PIX, texte "sobre", coordonnées)
POST /api/settings : équipe
"""

from typing import Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from academy.database import get_db
from academy.dependencies import require_capability
from academy.models.user import User
from academy.permissions import Capability
from academy.schemas.setting import SettingResponse, SettingUpdate
from academy.services import settings_service

router = APIRouter(prefix="/api/settings", tags=["Réglages"])


@router.get("", response_model=Dict[str, str], summary="Lire les réglages")
def get_settings(db: Session = Depends(get_db)):
    return settings_service.get_settings(db)


@router.post("", response_model=SettingResponse, summary="Créer ou modifier un réglage")
def set_setting(
    data: SettingUpdate,
    user: User = Depends(require_capability(Capability.MANAGE_SETTINGS)),
    db: Session = Depends(get_db),
):
    """Retourne 400 si academyLatitude / academyLongitude ne sont pas des coordonnées valides."""
    return settings_service.set_setting(db, data.key, data.value)
