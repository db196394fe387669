"""
ORM model package. Import all models here so Alembic autogenerate
can discover every table through the shared Base metadata.
"""
from app.models.associations import (  # noqa: F401
    comment_mentions,
    organization_teams,
    project_teams,
    task_tags,
    team_members,
)
from app.models.user import User  # noqa: F401
from app.models.organization import Organization  # noqa: F401
from app.models.project import Project  # noqa: F401
from app.models.team import Team  # noqa: F401
from app.models.task import Task  # noqa: F401
from app.models.attachment import Attachment  # noqa: F401
from app.models.comment import Comment  # noqa: F401
from app.models.activity import Activity  # noqa: F401
from app.models.tag import Tag  # noqa: F401
