from datetime import date

import pytest

from app.core import session_calendar
from app.core.exceptions import (
    DateNotInScheduleError,
    InvalidScheduleError,
    SessionNumberOutOfRangeError,
)
from app.schemas.class_schedule import ClassSchedule


def make_schedule(days, start, duration_weeks=None, end=None):
    return ClassSchedule(
        days=days,
        start_time="19:00",
        end_time="20:30",
        start_date=start,
        end_date=end,
        duration_weeks=duration_weeks,
    )


MON_WED = make_schedule(["Monday", "Wednesday"], date(2025, 1, 6), duration_weeks=2)


def test_two_week_monday_wednesday_calendar():
    assert session_calendar.sorted_session_dates(MON_WED) == [
        date(2025, 1, 6),
        date(2025, 1, 8),
        date(2025, 1, 13),
        date(2025, 1, 15),
    ]


def test_date_to_session_number():
    assert session_calendar.date_to_session_number(MON_WED, date(2025, 1, 13)) == 3
    assert session_calendar.date_to_session_number(MON_WED, date(2025, 1, 6)) == 1


def test_session_number_past_the_end_is_rejected():
    with pytest.raises(SessionNumberOutOfRangeError):
        session_calendar.session_number_to_date(MON_WED, 5)
    with pytest.raises(SessionNumberOutOfRangeError):
        session_calendar.session_number_to_date(MON_WED, 0)


def test_date_that_is_not_a_class_day():
    with pytest.raises(DateNotInScheduleError):
        session_calendar.date_to_session_number(MON_WED, date(2025, 1, 7))
    # следующий понедельник уже за пределами курса
    with pytest.raises(DateNotInScheduleError):
        session_calendar.date_to_session_number(MON_WED, date(2025, 1, 20))


def test_derived_end_date():
    assert session_calendar.effective_end_date(MON_WED) == date(2025, 1, 19)


def test_explicit_end_date_wins_over_duration():
    schedule = make_schedule(["Monday"], date(2025, 1, 6), duration_weeks=10, end=date(2025, 1, 13))
    assert session_calendar.sorted_session_dates(schedule) == [date(2025, 1, 6), date(2025, 1, 13)]


def test_weekday_input_order_does_not_matter():
    reversed_days = make_schedule(["Wednesday", "Monday"], date(2025, 1, 6), duration_weeks=2)
    assert list(session_calendar.generate_session_dates(reversed_days)) == list(
        session_calendar.generate_session_dates(MON_WED)
    )


def test_first_partial_week_skips_days_before_start():
    # старт в среду: понедельник 6-го не попадает
    schedule = make_schedule(["Monday", "Wednesday"], date(2025, 1, 8), duration_weeks=1)
    assert session_calendar.sorted_session_dates(schedule) == [date(2025, 1, 8), date(2025, 1, 13)]


def test_first_week_without_any_class_day():
    # старт в четверг, занятия только по понедельникам
    schedule = make_schedule(["Monday"], date(2025, 1, 9), end=date(2025, 1, 20))
    assert session_calendar.sorted_session_dates(schedule) == [date(2025, 1, 13), date(2025, 1, 20)]


def test_weeks_are_aligned_to_sunday():
    schedule = make_schedule(["Saturday", "Sunday"], date(2025, 1, 4), end=date(2025, 1, 12))
    assert session_calendar.sorted_session_dates(schedule) == [
        date(2025, 1, 4),
        date(2025, 1, 5),
        date(2025, 1, 11),
        date(2025, 1, 12),
    ]


def test_single_day_course():
    schedule = make_schedule(["Monday"], date(2025, 1, 6), end=date(2025, 1, 6))
    assert session_calendar.sorted_session_dates(schedule) == [date(2025, 1, 6)]
    assert session_calendar.date_to_session_number(schedule, date(2025, 1, 6)) == 1


def test_single_day_course_on_other_weekday_is_empty():
    schedule = make_schedule(["Tuesday"], date(2025, 1, 6), end=date(2025, 1, 6))
    assert session_calendar.sorted_session_dates(schedule) == []
    assert session_calendar.count_sessions(schedule) == 0


def test_generation_is_repeatable():
    first = session_calendar.generate_session_dates(MON_WED)
    second = session_calendar.generate_session_dates(MON_WED)
    assert list(first) == list(second)
    # исчерпанный генератор не влияет на новый вызов
    assert list(first) == []
    assert len(list(session_calendar.generate_session_dates(MON_WED))) == 4


@pytest.mark.parametrize(
    "schedule",
    [
        MON_WED,
        make_schedule(["Tuesday", "Thursday", "Saturday"], date(2025, 2, 27), duration_weeks=6),
        make_schedule(["Sunday"], date(2024, 12, 31), end=date(2025, 3, 1)),
        make_schedule(
            ["Friday", "Monday", "Sunday", "Wednesday"], date(2025, 1, 1), end=date(2025, 12, 31)
        ),
    ],
)
def test_generated_dates_respect_schedule(schedule):
    end = session_calendar.effective_end_date(schedule)
    dates = session_calendar.sorted_session_dates(schedule)

    assert len(dates) == len(set(dates))
    assert dates == sorted(dates)
    for d in dates:
        assert schedule.start_date <= d <= end
        assert session_calendar.day_label(d) in schedule.days

    for n in range(1, len(dates) + 1):
        d = session_calendar.session_number_to_date(schedule, n)
        assert session_calendar.date_to_session_number(schedule, d) == n


@pytest.mark.parametrize(
    "schedule",
    [
        make_schedule([], date(2025, 1, 6), duration_weeks=2),
        make_schedule(["Funday"], date(2025, 1, 6), duration_weeks=2),
        make_schedule(["Monday"], date(2025, 1, 6)),
        make_schedule(["Monday"], date(2025, 1, 6), end=date(2025, 1, 5)),
        make_schedule(["Monday"], date(2025, 1, 6), duration_weeks=0),
    ],
)
def test_invalid_schedule(schedule):
    with pytest.raises(InvalidScheduleError):
        session_calendar.generate_session_dates(schedule)


def test_ensure_session_date_explains_wrong_weekday():
    with pytest.raises(DateNotInScheduleError) as exc:
        session_calendar.ensure_session_date(MON_WED, date(2025, 1, 7))
    assert "Tuesday" in exc.value.detail


def test_ensure_session_date_outside_course():
    with pytest.raises(DateNotInScheduleError):
        session_calendar.ensure_session_date(MON_WED, date(2024, 12, 30))
    with pytest.raises(DateNotInScheduleError):
        session_calendar.ensure_session_date(MON_WED, date(2025, 1, 20))
    assert session_calendar.ensure_session_date(MON_WED, date(2025, 1, 15)) == 4


def test_day_label_and_week_start():
    assert session_calendar.day_label(date(2025, 1, 5)) == "Sunday"
    assert session_calendar.day_label(date(2025, 1, 6)) == "Monday"
    assert session_calendar.week_start(date(2025, 1, 8)) == date(2025, 1, 5)
    assert session_calendar.week_start(date(2025, 1, 5)) == date(2025, 1, 5)


def test_is_finished():
    assert not session_calendar.is_finished(MON_WED, today=date(2025, 1, 19))
    assert session_calendar.is_finished(MON_WED, today=date(2025, 1, 20))
