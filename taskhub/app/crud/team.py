"""
Team CRUD operations.
Members are always loaded because TeamRead embeds them.
"""
from __future__ import annotations

from sqlalchemy.orm import selectinload

from app.crud.base import CRUDBase
from app.models.team import Team


class CRUDTeam(CRUDBase[Team]):
    load_options = (selectinload(Team.members),)


crud_team = CRUDTeam(Team)
