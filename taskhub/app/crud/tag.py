"""
Tag CRUD operations.
"""
from __future__ import annotations

from app.crud.base import CRUDBase
from app.models.tag import Tag

crud_tag = CRUDBase(Tag)
