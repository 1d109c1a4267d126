from datetime import date

import pytest

from shiftboard.dao import db, schedules_dao, staff_dao

DAY = date(2026, 4, 8)


@pytest.fixture()
def staff_id(app):
    with app.app_context():
        return staff_dao.create_staff(
            {"full_name": "Ana", "cpf": "1", "weekly_contracted_hours": 36, "role_id": "nurse"}
        )


def test_replace_assignments_overwrites_previous_rows(app, staff_id):
    with app.app_context():
        schedules_dao.replace_assignments(staff_id, DAY, ["07-13", "13-19"], False)
        schedules_dao.replace_assignments(staff_id, DAY, ["19-00"], True)
        rows = schedules_dao.list_for_staff_day(staff_id, DAY)
    assert [(row.slot, row.is_extra) for row in rows] == [("19-00", True)]


def test_clearing_a_day_is_idempotent(app, staff_id):
    with app.app_context():
        schedules_dao.replace_assignments(staff_id, DAY, ["07-13"], False)
        assert schedules_dao.replace_assignments(staff_id, DAY, [], False) == 0
        assert schedules_dao.list_for_staff_day(staff_id, DAY) == []
        schedules_dao.replace_assignments(staff_id, DAY, [], False)
        assert schedules_dao.list_for_staff_day(staff_id, DAY) == []


def test_list_schedules_range_is_inclusive(app, staff_id):
    with app.app_context():
        for day in (date(2026, 3, 31), date(2026, 4, 1), date(2026, 4, 30), date(2026, 5, 1)):
            schedules_dao.replace_assignments(staff_id, day, ["07-13"], False)
        rows = schedules_dao.list_schedules(date(2026, 4, 1), date(2026, 4, 30))
    assert [row.date for row in rows] == [date(2026, 4, 1), date(2026, 4, 30)]


def test_bulk_replace_rolls_back_on_rejected_write(app, staff_id):
    days = [date(2026, 4, 6), date(2026, 4, 13)]
    with app.app_context():
        schedules_dao.replace_assignments_many(staff_id, days, ["07-13"], False)
        with pytest.raises(db.WriteError):
            schedules_dao.replace_assignments_many(staff_id, days, ["07-19"], False)
        rows = schedules_dao.list_schedules(days[0], days[-1])
    assert [(row.date, row.slot) for row in rows] == [(days[0], "07-13"), (days[1], "07-13")]


def test_deleting_staff_cascades_to_schedules(app, staff_id):
    with app.app_context():
        schedules_dao.replace_assignments(staff_id, DAY, ["07-13"], False)
        assert staff_dao.delete_staff(staff_id) == 1
        assert schedules_dao.list_schedules(DAY, DAY) == []


def test_staff_without_role_has_no_role_name(app):
    with app.app_context():
        staff_id = staff_dao.create_staff({"full_name": "Bia", "cpf": "2", "weekly_contracted_hours": 30})
        member = staff_dao.get_staff(staff_id)
    assert member.role_id is None
    assert member.role_name is None
