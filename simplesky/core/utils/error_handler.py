# -*- coding: utf-8 -*-
"""
Исключения клиента и утилиты для централизованной обработки ошибок.

Иерархия:
    SimpleSkyError
    ├── ConnectionError          : сетевой сбой при обращении к сервису
    ├── ResolverError            : геокодер вернул неожиданный статус
    │   └── NotFoundError        : ZERO_RESULTS
    ├── InvalidArgumentsError    : неполные или неверные входные параметры
    └── MissingFieldError        : в ответе прогноза нет нужного блока
        └── UnsupportedLocationError: нет поминутных данных для локации
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class SimpleSkyError(Exception):
    """Базовое исключение библиотеки."""


class ConnectionError(SimpleSkyError):
    """Не удалось связаться с геокодером или сервисом прогнозов."""

    def __init__(self, message: str, service: Optional[str] = None):
        super().__init__(message)
        self.service = service


class ResolverError(SimpleSkyError):
    """Геокодер ответил, но координаты получить нельзя."""

    def __init__(self, message: str, status: Optional[str] = None):
        super().__init__(message)
        self.status = status


class NotFoundError(ResolverError):
    pass


class InvalidArgumentsError(SimpleSkyError, ValueError):
    pass


class MissingFieldError(SimpleSkyError, KeyError):
    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"forecast response has no '{field}' block")
        self.field = field

    def __str__(self):
        # KeyError.__str__ оборачивает сообщение в кавычки
        return str(self.args[0])


class UnsupportedLocationError(MissingFieldError):
    pass


def log_and_raise(message: str, exception: Exception, context: Optional[dict] = None,
                  cause: Optional[BaseException] = None):
    """
    Логирует ошибку и выбрасывает её дальше.

    Args:
        message (str): Описание того, что пошло не так
        exception (Exception): Исключение, которое нужно выбросить
        context (dict): Дополнительный контекст (например, lat, lon, location)
        cause (BaseException): Исходное исключение, сохраняется в __cause__
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=cause is not None)
    raise exception from cause
