"""
Service pour les réglages clé/valeur de l'académie.
"""

import logging
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from academy.exceptions import ValidationError
from academy.models.setting import ACADEMY_LATITUDE, ACADEMY_LONGITUDE, Setting

logger = logging.getLogger(__name__)

# Bornes des réglages numériques
COORDINATE_BOUNDS = {
    ACADEMY_LATITUDE: (-90.0, 90.0),
    ACADEMY_LONGITUDE: (-180.0, 180.0),
}


def get_settings(db: Session) -> Dict[str, str]:
    """Tous les réglages sous forme d'objet {clé: valeur}."""
    rows = db.execute(select(Setting).order_by(Setting.key)).scalars().all()
    return {row.key: row.value for row in rows}


def get_setting_value(db: Session, key: str) -> Optional[str]:
    setting = db.execute(select(Setting).where(Setting.key == key)).scalar()
    return setting.value if setting is not None else None


def set_setting(db: Session, key: str, value: str) -> Setting:
    """Crée ou met à jour un réglage. Les coordonnées doivent être numériques et dans leurs bornes."""
    if key in COORDINATE_BOUNDS:
        _check_coordinate(key, value)

    setting = db.execute(select(Setting).where(Setting.key == key)).scalar()
    if setting is None:
        setting = Setting(key=key, value=value)
        db.add(setting)
    else:
        setting.value = value

    db.commit()
    db.refresh(setting)
    logger.info("Réglage mis à jour : %s", key)
    return setting


def _check_coordinate(key: str, value: str) -> None:
    low, high = COORDINATE_BOUNDS[key]
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"Le réglage '{key}' doit être un nombre décimal.")
    if not low <= number <= high:
        raise ValidationError(f"Le réglage '{key}' doit être compris entre {low:g} et {high:g}.")
