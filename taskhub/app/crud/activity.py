"""
Activity CRUD operations.
"""
from __future__ import annotations

from app.crud.base import CRUDBase
from app.models.activity import Activity

crud_activity = CRUDBase(Activity)
