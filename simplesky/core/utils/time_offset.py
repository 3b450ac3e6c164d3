# -*- coding: utf-8 -*-
"""
Разбор временного смещения для запросов "time machine".

Примеры:
>>> parse_time_offset("-1 day")     # сутки назад, unix-время с точностью до минуты
>>> parse_time_offset("+3 hours")   # через три часа
>>> parse_time_offset(None)         # сейчас
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from simplesky.core.utils.error_handler import InvalidArgumentsError

logger = logging.getLogger("time_offset")

# === ЕДИНИЦЫ СМЕЩЕНИЯ ===
UNITS = {
    "second": timedelta(seconds=1),
    "minute": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "day": timedelta(days=1),
    "week": timedelta(weeks=1),
}


def _unit_delta(token: str) -> timedelta:
    unit = token.lower()
    if unit not in UNITS and unit.endswith("s"):
        unit = unit[:-1]
    if unit not in UNITS:
        raise InvalidArgumentsError(f"unknown time unit: {token!r}")
    return UNITS[unit]


def _truncate_to_minute(moment: datetime) -> int:
    return int(moment.replace(second=0, microsecond=0).timestamp())


def parse_time_offset(offset: Union[str, int, datetime, None], now: Optional[datetime] = None) -> int:
    """
    Переводит смещение в абсолютное unix-время.

    Args:
        offset: строка вида "<±число> <единица>", готовый unix timestamp (int),
            datetime или None (означает "сейчас")
        now (datetime): точка отсчёта, по умолчанию текущее время UTC

    Returns:
        int: unix-время, округлённое вниз до минуты (кроме явного int)

    Raises:
        InvalidArgumentsError: если строку нельзя разобрать
    """
    if isinstance(offset, bool):
        raise InvalidArgumentsError(f"invalid time offset: {offset!r}")
    if isinstance(offset, int):
        return offset
    if isinstance(offset, datetime):
        if offset.tzinfo is None:
            offset = offset.replace(tzinfo=timezone.utc)
        return _truncate_to_minute(offset)

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if offset is None:
        return _truncate_to_minute(now)

    parts = str(offset).split()
    if len(parts) != 2:
        raise InvalidArgumentsError(f"invalid time offset: {offset!r}, expected e.g. '-1 day'")
    amount_token, unit_token = parts
    try:
        amount = int(amount_token)
    except ValueError:
        raise InvalidArgumentsError(f"invalid time offset amount: {amount_token!r}")

    delta = _unit_delta(unit_token)
    try:
        timestamp = _truncate_to_minute(now + amount * delta)
    except OverflowError:
        raise InvalidArgumentsError(f"time offset out of range: {offset!r}")
    logger.debug(f"🕰️ Смещение {offset!r} → {timestamp}")
    return timestamp
