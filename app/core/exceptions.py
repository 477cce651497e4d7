# app/core/exceptions.py
"""
Доменные ошибки расписания, посещаемости и отработок.

Ядро бросает только эти исключения; перевод в HTTP-ответ делает
обработчик в app/main.py по полю status_code.
"""


class AppError(Exception):
    status_code: int = 400

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidScheduleError(AppError):
    status_code = 422


class DateNotInScheduleError(AppError):
    status_code = 400


class SessionNumberOutOfRangeError(AppError):
    status_code = 400


class NotEnrolledError(AppError):
    status_code = 403


class ClassNotActiveError(AppError):
    status_code = 409


class ClassNotFoundError(AppError):
    status_code = 404


class CourseNotFoundError(AppError):
    status_code = 404


class ClassFullError(AppError):
    status_code = 409


class AlreadyEnrolledError(AppError):
    status_code = 409


class MakeupQuotaExceededError(AppError):
    status_code = 409


class MakeupSlotUnavailableError(AppError):
    status_code = 409


class MakeupRequestNotFoundError(AppError):
    status_code = 404
