"""
Team ORM model.
Teams group users together and are attached to organizations and projects.
"""
from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from app.models.associations import organization_teams, project_teams, team_members


class Team(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # ── Relationships ─────────────────────────────────────────────────────────
    members: Mapped[list["User"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "User",
        secondary=team_members,
        back_populates="teams",
    )
    organizations: Mapped[list["Organization"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Organization",
        secondary=organization_teams,
        back_populates="teams",
    )
    projects: Mapped[list["Project"]] = relationship(  # type: ignore[name-defined]  # noqa: F821
        "Project",
        secondary=project_teams,
        back_populates="teams",
    )

    def __repr__(self) -> str:
        return f"<Team id={self.id} name={self.name}>"
