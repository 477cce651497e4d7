# app/core/session_calendar.py
"""
Календарь занятий класса.

Все даты здесь обычные datetime.date без времени и часового пояса.
Генерация, номера занятий и сравнения с «сегодня» работают только с ними.
"""
from datetime import date, timedelta
from typing import Iterator, List, Optional

from app.core.exceptions import (
    DateNotInScheduleError,
    InvalidScheduleError,
    SessionNumberOutOfRangeError,
)
from app.schemas.class_schedule import ClassSchedule

# Неделя начинается с воскресенья; индекс = смещение от начала недели
WEEKDAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def day_label(day: date) -> str:
    # date.weekday(): 0 = Monday ... 6 = Sunday
    return WEEKDAYS[(day.weekday() + 1) % 7]


def week_start(day: date) -> date:
    return day - timedelta(days=(day.weekday() + 1) % 7)


def effective_end_date(schedule: ClassSchedule) -> date:
    """Явная дата окончания или start_date + duration_weeks*7 - 1 день."""
    if schedule.end_date is not None:
        end = schedule.end_date
    elif schedule.duration_weeks is not None:
        if schedule.duration_weeks < 1:
            raise InvalidScheduleError("Длительность курса должна быть не меньше одной недели")
        end = schedule.start_date + timedelta(days=schedule.duration_weeks * 7 - 1)
    else:
        raise InvalidScheduleError("В расписании нет ни end_date, ни duration_weeks")

    if end < schedule.start_date:
        raise InvalidScheduleError(
            f"Дата окончания ({end.isoformat()}) раньше даты начала ({schedule.start_date.isoformat()})"
        )
    return end


def validate_schedule(schedule: ClassSchedule) -> date:
    if not schedule.days:
        raise InvalidScheduleError("В расписании не выбраны дни недели")
    unknown = [d for d in schedule.days if d not in WEEKDAYS]
    if unknown:
        raise InvalidScheduleError(f"Неизвестные дни недели: {', '.join(map(str, unknown))}")
    return effective_end_date(schedule)


def generate_session_dates(schedule: ClassSchedule) -> Iterator[date]:
    """
    Лениво выдаёт даты занятий в диапазоне [start_date, effective_end].

    Расписание проверяется сразу при вызове, а не при первой итерации.
    Каждый вызов возвращает новый генератор.
    """
    end = validate_schedule(schedule)
    selected = set(schedule.days)
    offsets = [i for i, name in enumerate(WEEKDAYS) if name in selected]
    return _iter_dates(schedule.start_date, end, offsets)


def _iter_dates(start: date, end: date, offsets: List[int]) -> Iterator[date]:
    current_week = week_start(start)
    while current_week <= end:
        for offset in offsets:
            day = current_week + timedelta(days=offset)
            if start <= day <= end:
                yield day
        current_week += timedelta(days=7)


def sorted_session_dates(schedule: ClassSchedule) -> List[date]:
    return sorted(generate_session_dates(schedule))


def count_sessions(schedule: ClassSchedule) -> int:
    return sum(1 for _ in generate_session_dates(schedule))


def date_to_session_number(schedule: ClassSchedule, target: date) -> int:
    dates = sorted_session_dates(schedule)
    try:
        return dates.index(target) + 1
    except ValueError:
        raise DateNotInScheduleError(
            f"Дата {target.isoformat()} не входит в расписание занятий класса"
        ) from None


def session_number_to_date(schedule: ClassSchedule, session_number: int) -> date:
    dates = sorted_session_dates(schedule)
    if session_number < 1 or session_number > len(dates):
        raise SessionNumberOutOfRangeError(
            f"Занятия №{session_number} нет: в расписании {len(dates)} занятий"
        )
    return dates[session_number - 1]


def ensure_session_date(schedule: ClassSchedule, target: date) -> int:
    """
    Проверяет, что в эту дату у класса есть занятие, и возвращает его номер.

    В отличие от date_to_session_number объясняет причину отказа:
    не тот день недели, до начала курса или после окончания.
    """
    end = validate_schedule(schedule)
    label = day_label(target)
    if label not in schedule.days:
        days = ", ".join(d for d in WEEKDAYS if d in schedule.days)
        raise DateNotInScheduleError(
            f"У класса нет занятий по дню {label}. Дни занятий: {days}"
        )
    if target < schedule.start_date:
        raise DateNotInScheduleError(
            f"Дата {target.isoformat()} раньше начала курса ({schedule.start_date.isoformat()})"
        )
    if target > end:
        raise DateNotInScheduleError(
            f"Дата {target.isoformat()} позже окончания курса ({end.isoformat()})"
        )
    return date_to_session_number(schedule, target)


def is_finished(schedule: ClassSchedule, today: Optional[date] = None) -> bool:
    today = today or date.today()
    return effective_end_date(schedule) < today
