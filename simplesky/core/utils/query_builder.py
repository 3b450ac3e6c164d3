# -*- coding: utf-8 -*-
"""
Сборка строки запроса к сервису прогнозов.

Порядок полей фиксирован: lang, units, exclude, extend.
"""

from typing import Iterable, Tuple

from simplesky.core.utils.error_handler import InvalidArgumentsError

# Блоки ответа в каноническом порядке
BLOCKS = ("currently", "minutely", "hourly", "daily", "alerts", "flags")


def normalize_exclude(exclude: Iterable[str] = ()) -> Tuple[str, ...]:
    """
    Приводит набор исключаемых блоков к кортежу в каноническом порядке.

    Raises:
        InvalidArgumentsError: если встретился неизвестный блок
    """
    if isinstance(exclude, str):
        exclude = [part for part in exclude.split(",") if part]
    requested = {str(block).strip().lower() for block in exclude or ()}
    unknown = requested.difference(BLOCKS)
    if unknown:
        raise InvalidArgumentsError(f"unknown forecast blocks: {', '.join(sorted(unknown))}")
    return tuple(block for block in BLOCKS if block in requested)


def build_query_string(language: str, units: str, exclude: Iterable[str] = (), extend: bool = False) -> str:
    """
    Собирает строку запроса без ведущего '?'.

    Args:
        language (str): Код языка, пропускается если пустой
        units (str): Система единиц, пропускается если пустая
        exclude: Блоки, которые сервис не должен возвращать
        extend (bool): Запросить 168 часов почасовых данных вместо 48

    Returns:
        str: например 'lang=en&units=auto&exclude=minutely,flags&extend=hourly'
    """
    parts = []
    if language:
        parts.append(f"lang={language}")
    if units:
        parts.append(f"units={units}")
    blocks = normalize_exclude(exclude)
    if blocks:
        parts.append(f"exclude={','.join(blocks)}")
    if extend:
        parts.append("extend=hourly")
    return "&".join(parts)
