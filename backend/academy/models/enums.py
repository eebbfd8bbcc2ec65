"""
Énumérations fermées partagées par les modèles et les schémas.
Les valeurs correspondent aux libellés stockés en base.
"""

import enum


class Role(str, enum.Enum):
    STUDENT = "student"
    PROFESSOR = "professor"
    ADMINISTRATIVE = "administrative"
    COORDINATOR = "coordinator"


class ClassType(str, enum.Enum):
    KIDS = "KIDS"
    FEMININA = "FEMININA"
    MISTA = "MISTA"


class Belt(str, enum.Enum):
    """Faixas, dans l'ordre de progression."""
    BRANCA = "branca"
    CINZA = "cinza"
    AMARELA = "amarela"
    LARANJA = "laranja"
    VERDE = "verde"
    AZUL = "azul"
    ROXA = "roxa"
    MARROM = "marrom"
    PRETA = "preta"


def enum_values(enum_cls):
    """Persiste la valeur de l'enum (ex. "student") plutôt que son nom."""
    return [member.value for member in enum_cls]
