"""
Task CRUD operations.
Tags are always loaded because TaskRead embeds them.
"""
from __future__ import annotations

from sqlalchemy.orm import selectinload

from app.crud.base import CRUDBase
from app.models.task import Task


class CRUDTask(CRUDBase[Task]):
    load_options = (selectinload(Task.tags),)


crud_task = CRUDTask(Task)
