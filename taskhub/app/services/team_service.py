"""
Team service.
Membership is managed through the members id list on create and update.
"""
from __future__ import annotations

from app.core.cache import CacheGateway
from app.crud.team import crud_team
from app.models.team import Team
from app.schemas.team import TeamRead
from app.services.base import EntityService


class TeamService(EntityService[Team]):
    entity_name = "Team"
    namespace = "teams"
    read_schema = TeamRead
    relation_fields = ("members",)

    def __init__(self, cache: CacheGateway) -> None:
        super().__init__(crud_team, cache)
