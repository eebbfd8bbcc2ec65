"""
Schémas Pydantic pour le tableau de bord admin.
"""

from typing import Dict, List

from pydantic import BaseModel

from academy.schemas.student import StudentResponse


class DashboardResponse(BaseModel):
    student_counts: Dict[str, int]                     # élèves actifs par classe
    checkins_today: Dict[str, int]                     # check-ins du jour par classe
    birthday_students: Dict[str, List[StudentResponse]]  # anniversaires du mois par classe
    total_students: int
    total_checkins_today: int
