from __future__ import annotations

from pathlib import Path

import pytest

from shiftboard import create_app


@pytest.fixture()
def app(tmp_path: Path):
    db_path = tmp_path / "test.sqlite"
    app = create_app({
        "TESTING": True,
        "DATABASE": str(db_path),
        "AUTO_INIT_DB": True,
    })
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def make_staff(client):
    def _make(full_name: str = "Ana Souza", role_id: str = "nurse", hours: int = 36) -> str:
        resp = client.post(
            "/api/staff",
            json={
                "full_name": full_name,
                "cpf": "12345678901",
                "role_id": role_id,
                "weekly_contracted_hours": hours,
            },
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()["id"]

    return _make
