from __future__ import annotations

from datetime import date, datetime

from src.hr_portal.hr_portal.core.enums import AttendanceStatus, Collection


def test_auto_mark_creates_record_for_today(make_container, make_store):
    store = make_store()
    container = make_container(store, now=datetime(2025, 8, 30, 8, 7))
    container.session_manager.bootstrap_session()

    record = container.attendance_service.auto_mark(2)

    assert record is not None
    assert store.data[Collection.ATTENDANCE] == [
        {"userId": 2, "date": "2025-08-30", "status": "present", "checkIn": "08:07", "checkOut": "-", "id": record.record_id}
    ]
    assert container.snapshot.attendance == (record,)


def test_auto_mark_is_idempotent_within_a_day(make_container, make_store):
    store = make_store()
    container = make_container(store)
    container.session_manager.bootstrap_session()
    service = container.attendance_service

    service.auto_mark(2)
    assert service.auto_mark(2) is None

    assert len(container.snapshot.attendance) == 1
    assert store.count("create", Collection.ATTENDANCE) == 1


def test_auto_mark_next_day_creates_new_record(container):
    service = container.attendance_service

    service.auto_mark(2, now=datetime(2025, 8, 30, 9, 0))
    service.auto_mark(2, now=datetime(2025, 8, 31, 9, 0))

    days = sorted(r.work_date for r in service.records_for(2))
    assert days == [date(2025, 8, 29), date(2025, 8, 30), date(2025, 8, 31)]


def test_today_status_defaults_to_absent(container):
    service = container.attendance_service

    assert service.today_status(2) == AttendanceStatus.ABSENT
    service.auto_mark(2)
    assert service.today_status(2) == AttendanceStatus.PRESENT


def test_history_ui_includes_working_hours(container):
    container.attendance_service.auto_mark(2)

    rows = container.attendance_service.get_history_ui(2)

    assert [(r["date"], r["workingHours"]) for r in rows] == [("2025-08-29", "8h 30m"), ("2025-08-30", "-")]
    assert rows[0]["name"] == "Jane Doe"
