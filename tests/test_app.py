from __future__ import annotations

MONTH = "2026-04"


def _row_for(board: dict, staff_id: str) -> dict:
    return next(row for row in board["rows"] if row["staff"]["id"] == staff_id)


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.data == b"OK"


def test_root_redirects_to_board(client):
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/board")


def test_roles_are_seeded(client):
    roles = client.get("/api/roles").get_json()["roles"]
    assert {role["name"] for role in roles} == {"Doctor", "Nurse", "Driver"}


def test_empty_board_shape(client):
    resp = client.get(f"/api/board?month={MONTH}")
    assert resp.status_code == 200
    board = resp.get_json()
    assert board["month"] == MONTH
    assert board["prev_month"] == "2026-03"
    assert board["next_month"] == "2026-05"
    assert len(board["days"]) == 30
    assert [len(week) for week in board["weeks"]] == [4, 7, 7, 7, 5]
    assert board["rows"] == []
    assert len(board["occupancy"]) == 30


def test_board_rejects_malformed_month(client):
    resp = client.get("/api/board?month=04-2026")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_save_single_day_and_reload(client, make_staff):
    staff_id = make_staff()
    resp = client.post(
        "/api/board/shifts",
        json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["13-19", "07-13"], "is_extra": False},
    )
    assert resp.status_code == 200
    payload = resp.get_json()
    assert payload["dates"] == ["2026-04-08"]

    row = _row_for(payload["board"], staff_id)
    assert row["cells"]["2026-04-08"] == {
        "day_hours": 12,
        "night_hours": 0,
        "is_extra": False,
        "slots": ["07-13", "13-19"],
    }
    assert row["stats"]["total_contractual_hours"] == 12
    assert row["stats"]["monthly_target"] == 144
    assert row["stats"]["remaining_monthly"] == 132
    day_entry = next(entry for entry in payload["board"]["occupancy"] if entry["date"] == "2026-04-08")
    assert (day_entry["day_count"], day_entry["night_count"]) == (1, 0)


def test_save_replaces_previous_slots(client, make_staff):
    staff_id = make_staff()
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13", "13-19"]})
    resp = client.post(
        "/api/board/shifts",
        json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["19-00"], "is_extra": True},
    )
    row = _row_for(resp.get_json()["board"], staff_id)
    assert row["cells"]["2026-04-08"]["slots"] == ["19-00"]
    assert row["stats"]["total_contractual_hours"] == 0
    assert row["stats"]["total_extra_hours"] == 6


def test_clear_day_is_idempotent(client, make_staff):
    staff_id = make_staff()
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"]})
    for _ in range(2):
        resp = client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": []})
        assert resp.status_code == 200
        row = _row_for(resp.get_json()["board"], staff_id)
        assert row["cells"] == {}
        assert row["stats"]["total_contractual_hours"] == 0


def test_replicate_to_weekdays(client, make_staff):
    staff_id = make_staff()
    resp = client.post(
        "/api/board/shifts",
        json={
            "staff_id": staff_id,
            "date": "2026-04-06",
            "slots": ["07-13", "13-19"],
            "replicate_weekdays": [1],
        },
    )
    assert resp.status_code == 200
    payload = resp.get_json()
    assert payload["dates"] == ["2026-04-06", "2026-04-13", "2026-04-20", "2026-04-27"]
    stats = _row_for(payload["board"], staff_id)["stats"]
    assert stats["total_contractual_hours"] == 48
    assert [week["contractual_hours"] for week in stats["weekly"]] == [0, 12, 12, 12, 12]
    assert all(week["is_under_limit"] for week in stats["weekly"])


def test_weekly_classification_over_and_exact(client, make_staff):
    staff_id = make_staff(hours=12)
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-06", "slots": ["07-13", "13-19"]})
    client.post(
        "/api/board/shifts",
        json={"staff_id": staff_id, "date": "2026-04-13", "slots": ["07-13", "13-19", "19-00"]},
    )
    board = client.get(f"/api/board?month={MONTH}").get_json()
    weekly = _row_for(board, staff_id)["stats"]["weekly"]
    assert weekly[1]["is_exact"] and not weekly[1]["is_over_limit"]
    assert weekly[2]["is_over_limit"] and not weekly[2]["is_exact"]


def test_save_validation_errors(client, make_staff):
    staff_id = make_staff()
    bad_slot = client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-19"]})
    assert bad_slot.status_code == 400
    bad_weekday = client.post(
        "/api/board/shifts",
        json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"], "replicate_weekdays": [7]},
    )
    assert bad_weekday.status_code == 400
    bad_date = client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "08/04/2026", "slots": []})
    assert bad_date.status_code == 400
    missing_staff = client.post("/api/board/shifts", json={"date": "2026-04-08", "slots": []})
    assert missing_staff.status_code == 400
    unknown_staff = client.post("/api/board/shifts", json={"staff_id": "nobody", "date": "2026-04-08", "slots": []})
    assert unknown_staff.status_code == 404


def test_save_rejects_malformed_payload_shapes(client, make_staff):
    staff_id = make_staff()
    bodies = [
        {"staff_id": staff_id, "date": "2026-04-08", "slots": 5},
        {"staff_id": staff_id, "date": "2026-04-08", "slots": "07-13"},
        {"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"], "replicate_weekdays": 3},
        {"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"], "replicate_weekdays": [2.7]},
        {"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"], "replicate_weekdays": [True]},
        {"staff_id": ["x"], "date": "2026-04-08", "slots": []},
        [1, 2],
    ]
    for body in bodies:
        resp = client.post("/api/board/shifts", json=body)
        assert resp.status_code == 400, body
        assert "error" in resp.get_json()

    board = client.get(f"/api/board?month={MONTH}").get_json()
    assert _row_for(board, staff_id)["cells"] == {}


def test_replicate_accepts_weekday_digit_strings(client, make_staff):
    staff_id = make_staff()
    resp = client.post(
        "/api/board/shifts",
        json={"staff_id": staff_id, "date": "2026-04-06", "slots": ["07-13"], "replicate_weekdays": ["1"]},
    )
    assert resp.status_code == 200
    assert resp.get_json()["dates"] == ["2026-04-06", "2026-04-13", "2026-04-20", "2026-04-27"]


def test_role_filter_and_day_detail(client, make_staff):
    nurse = make_staff("Ana", role_id="nurse")
    doctor = make_staff("Bruno", role_id="doctor")
    for staff_id, slots in ((nurse, ["07-13", "13-19"]), (doctor, ["07-13"])):
        client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": slots})

    board = client.get(f"/api/board?month={MONTH}&role=Nurse").get_json()
    assert [row["staff"]["id"] for row in board["rows"]] == [nurse]
    assert sorted(board["roles"]) == ["Doctor", "Nurse"]
    day_entry = next(entry for entry in board["occupancy"] if entry["date"] == "2026-04-08")
    assert day_entry["day_count"] == 1

    detail = client.get("/api/board/day?date=2026-04-08&period=day").get_json()
    assert [entry["staff_id"] for entry in detail["entries"]] == [nurse, doctor]
    assert detail["total_hours"] == 18

    bad_period = client.get("/api/board/day?date=2026-04-08&period=evening")
    assert bad_period.status_code == 400


def test_staff_validation_and_deletion(client, make_staff):
    no_role = client.post("/api/staff", json={"full_name": "Ana", "cpf": "1"})
    assert no_role.status_code == 400
    for path in ("/api/staff", "/api/vehicles", "/api/roles"):
        not_an_object = client.post(path, json=["x"])
        assert not_an_object.status_code == 400, path
        assert "error" in not_an_object.get_json()
    assert client.get("/api/staff").get_json()["staff"] == []

    staff_id = make_staff()
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"]})
    listed = client.get("/api/staff").get_json()["staff"]
    assert listed[0]["role_name"] == "Nurse"
    assert listed[0]["cpf"] == "123.456.789-01"

    deleted = client.delete(f"/api/staff/{staff_id}").get_json()
    assert deleted == {"deleted": 1}
    board = client.get(f"/api/board?month={MONTH}").get_json()
    assert board["rows"] == []
    assert all(entry["day_count"] == 0 for entry in board["occupancy"])


def test_vehicles(client):
    resp = client.post("/api/vehicles", json={"name": "USA 01", "plate": "abc1d23", "year": "2019"})
    assert resp.status_code == 201
    vehicle_id = resp.get_json()["id"]

    duplicate = client.post("/api/vehicles", json={"name": "USA 02", "plate": "ABC1D23"})
    assert duplicate.status_code == 409

    vehicles = client.get("/api/vehicles").get_json()["vehicles"]
    assert [(v["plate"], v["year"]) for v in vehicles] == [("ABC1D23", 2019)]
    assert client.delete(f"/api/vehicles/{vehicle_id}").get_json() == {"deleted": 1}


def test_html_pages_render(client, make_staff):
    staff_id = make_staff("Ana")
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["19-00"]})
    for path in (f"/board?month={MONTH}", "/board?month=bad", "/resources", f"/reports?month={MONTH}"):
        resp = client.get(path)
        assert resp.status_code == 200, path
        assert b"Ana" in resp.data or path == "/board?month=bad"


def test_reports_and_exports(client, make_staff):
    staff_id = make_staff("Ana")
    client.post("/api/board/shifts", json={"staff_id": staff_id, "date": "2026-04-08", "slots": ["07-13"], "is_extra": True})

    report = client.get(f"/api/reports/hours?month={MONTH}").get_json()
    assert report["staff"][0]["extra_hours"] == 6
    assert report["totals"] == {"contractual_hours": 0, "extra_hours": 6}

    resp_csv = client.get(f"/api/reports/hours.csv?month={MONTH}")
    assert resp_csv.status_code == 200
    lines = resp_csv.data.decode("utf-8").splitlines()
    assert lines[0].startswith("staff_id,staff,role")
    assert lines[1].endswith(",144,0,6,144")

    resp_export = client.get(f"/api/export/xlsx?month={MONTH}")
    assert resp_export.status_code == 200
    assert "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet" in resp_export.headers["Content-Type"]
    assert "board_2026-04.xlsx" in resp_export.headers["Content-Disposition"]
