from __future__ import annotations

import uuid
from typing import List, Optional

from ..domain.models import Role
from . import db


def list_roles() -> List[Role]:
    rows = db.query_all("SELECT id, name FROM roles ORDER BY name")
    return [Role(id=row["id"], name=row["name"]) for row in rows]


def get_role(role_id: str) -> Optional[Role]:
    row = db.query_one("SELECT id, name FROM roles WHERE id = ?", (role_id,))
    if not row:
        return None
    return Role(id=row["id"], name=row["name"])


def create_role(name: str) -> str:
    role_id = uuid.uuid4().hex
    db.execute("INSERT INTO roles(id, name) VALUES (?, ?)", (role_id, name))
    return role_id
